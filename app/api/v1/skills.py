import asyncio
from typing import Annotated

from fastapi import APIRouter, File, HTTPException, Path, Request, Response, UploadFile, status

from app.core.config import settings
from app.core.rate_limit import rate_limit
from app.core.skill_profile_store import list_user_skills, merge_user_skills, remove_user_skill, upsert_user_skill
from app.features.skill_inference import infer_user_skills
from app.parsing.parse import (
    DocumentProcessingError,
    parse_document_bytes,
    read_upload_bytes,
    resolve_source_type,
)
from app.schemas.skills import SkillCatalogResponse, UserSkill, UserSkillInput
from app.services.analysis_service import EmptyInputError, validate_input_text
from app.taxonomy import get_default_skill_catalog

router = APIRouter()

SessionId = Annotated[str, Path(min_length=8, max_length=200)]


@router.get("/skills/catalog", response_model=SkillCatalogResponse)
async def skills_catalog():
    catalog = get_default_skill_catalog()
    return SkillCatalogResponse(skills=list(catalog.names), count=len(catalog.names))


@router.get("/sessions/{session_id}/skills", response_model=list[UserSkill])
async def session_skills(session_id: SessionId):
    return list_user_skills(session_id)


@router.post("/sessions/{session_id}/skills", response_model=UserSkill)
@rate_limit()
async def session_add_skill(request: Request, payload: UserSkillInput, session_id: SessionId):
    _ = request
    return upsert_user_skill(session_id, payload)


@router.delete("/sessions/{session_id}/skills/{skill_id}", status_code=status.HTTP_204_NO_CONTENT)
async def session_remove_skill(skill_id: str, session_id: SessionId):
    if not remove_user_skill(session_id, skill_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Skill not found.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/sessions/{session_id}/skills/import", response_model=list[UserSkill])
@rate_limit()
async def session_import_skills(request: Request, session_id: SessionId, file: UploadFile = File(...)):
    _ = request
    filename = file.filename or "uploaded-file"
    try:
        source_type = resolve_source_type(file.content_type, filename)
        content = await read_upload_bytes(file, settings.max_upload_bytes)
        parsed = await asyncio.to_thread(
            parse_document_bytes, content, source_type=source_type, filename=filename
        )
        text = validate_input_text(parsed.text)
    except (EmptyInputError, DocumentProcessingError) as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc

    return merge_user_skills(session_id, infer_user_skills(text))
