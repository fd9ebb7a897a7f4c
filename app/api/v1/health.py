from fastapi import APIRouter

from app.taxonomy import get_default_skill_catalog

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the health status of the application.")
async def health_check():
    return {"status": "healthy", "catalog_skills": len(get_default_skill_catalog().names)}
