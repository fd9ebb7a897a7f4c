from __future__ import annotations

from typing import Iterable, Sequence

from app.schemas.jobs import JobListing, SortDirection

from .skill_scorer import clamp_score, round_half_up


def _skill_keys(skills: Iterable[str]) -> set[str]:
    return {skill.strip().lower() for skill in skills if skill and skill.strip()}


def compute_match_score(job_skills: Iterable[str], user_skills: Iterable[str]) -> int:
    """Percentage of the job's required skills the user holds; 0 when none are required."""
    required = _skill_keys(job_skills)
    if not required:
        return 0
    held = _skill_keys(user_skills)
    return clamp_score(round_half_up(100 * len(required & held) / len(required)))


def split_skills(job_skills: Iterable[str], user_skills: Iterable[str]) -> tuple[list[str], list[str]]:
    """Return (matching, missing) required skills in listing order."""
    held = _skill_keys(user_skills)
    required = list(job_skills)
    matching = [skill for skill in required if skill.strip().lower() in held]
    missing = [skill for skill in required if skill.strip().lower() not in held]
    return matching, missing


def listing_matches_query(job: JobListing, query: str) -> bool:
    needle = (query or "").strip().lower()
    if not needle:
        return True
    return (
        needle in job.title.lower()
        or needle in job.company.lower()
        or needle in job.description.lower()
        or any(needle in skill.lower() for skill in job.skills)
    )


def filter_listings(
    listings: Sequence[JobListing],
    query: str = "",
    min_match: int = 0,
) -> list[JobListing]:
    return [
        job
        for job in listings
        if listing_matches_query(job, query) and job.match_score >= min_match
    ]


def sort_listings(listings: Sequence[JobListing], direction: SortDirection = "desc") -> list[JobListing]:
    if direction == "asc":
        return sorted(listings, key=lambda job: job.match_score)
    return sorted(listings, key=lambda job: -job.match_score)


def search_listings(
    listings: Sequence[JobListing],
    *,
    query: str = "",
    min_match: int = 0,
    direction: SortDirection = "desc",
) -> list[JobListing]:
    return sort_listings(filter_listings(listings, query, min_match), direction)
