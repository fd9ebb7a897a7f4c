from typing import Annotated

from fastapi import APIRouter, Path, Query, Request

from app.core.rate_limit import rate_limit
from app.core.skill_profile_store import get_cached_listings, list_user_skills, set_cached_listings
from app.features.job_matcher import search_listings
from app.schemas.jobs import JobSearchResponse, SortDirection
from app.services.job_service import fetch_job_listings

router = APIRouter()

SessionId = Annotated[str, Path(min_length=8, max_length=200)]


@router.get("/sessions/{session_id}/jobs", response_model=JobSearchResponse)
@rate_limit()
async def session_jobs(
    request: Request,
    session_id: SessionId,
    query: str = Query(default="", max_length=200),
    min_match: int = Query(default=0, ge=0, le=100),
    sort: SortDirection = Query(default="desc"),
):
    _ = request
    skills = list_user_skills(session_id)
    if not skills:
        return JobSearchResponse(total=0, query=query, min_match=min_match, sort=sort, listings=[])

    listings = get_cached_listings(session_id)
    if listings is None:
        listings = await fetch_job_listings([skill.name for skill in skills])
        # Skills may have changed while the search was pending.
        if list_user_skills(session_id) == skills:
            set_cached_listings(session_id, listings)

    return JobSearchResponse(
        total=len(listings),
        query=query,
        min_match=min_match,
        sort=sort,
        listings=search_listings(listings, query=query, min_match=min_match, direction=sort),
    )
