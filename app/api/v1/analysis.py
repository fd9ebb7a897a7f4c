import asyncio

from fastapi import APIRouter, File, HTTPException, Request, UploadFile

from app.core.config import settings
from app.core.rate_limit import rate_limit
from app.parsing.parse import (
    DocumentProcessingError,
    parse_document_bytes,
    read_upload_bytes,
    resolve_source_type,
)
from app.schemas.analysis import AnalysisResult, AnalyzeTextRequest, DocumentAnalysisResponse
from app.services.analysis_service import EmptyInputError, analyze

router = APIRouter()


def _raise_http_error(exc: EmptyInputError | DocumentProcessingError) -> None:
    raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc


@router.post("/analysis/text", response_model=AnalysisResult)
@rate_limit()
async def analysis_text(request: Request, payload: AnalyzeTextRequest):
    _ = request
    try:
        return await analyze(payload.text)
    except EmptyInputError as exc:
        _raise_http_error(exc)


@router.post("/analysis/upload", response_model=DocumentAnalysisResponse)
@rate_limit()
async def analysis_upload(request: Request, file: UploadFile = File(...)):
    _ = request
    filename = file.filename or "uploaded-file"
    try:
        source_type = resolve_source_type(file.content_type, filename)
        content = await read_upload_bytes(file, settings.max_upload_bytes)
        parsed = await asyncio.to_thread(
            parse_document_bytes, content, source_type=source_type, filename=filename
        )
        result = await analyze(parsed.text)
    except (EmptyInputError, DocumentProcessingError) as exc:
        _raise_http_error(exc)

    return DocumentAnalysisResponse(
        filename=filename,
        source_type=parsed.source_type,
        characters=parsed.characters,
        warnings=parsed.parsing_warnings,
        analysis=result,
    )
