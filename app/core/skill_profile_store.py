from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from typing import Callable, Iterable

from app.core.config import settings
from app.schemas.jobs import JobListing
from app.schemas.skills import ProficiencyLevel, UserSkill, UserSkillInput


@dataclass
class _SkillProfile:
    skills: list[UserSkill] = field(default_factory=list)
    listings: list[JobListing] | None = None
    touched_at: float = field(default_factory=time.time)


# Only touched from the event loop thread.
_profiles: dict[str, _SkillProfile] = {}


def _new_id() -> str:
    return str(uuid.uuid4())


def _ttl_seconds() -> int:
    return settings.session_ttl_minutes * 60


def _is_expired(profile: _SkillProfile, now: float) -> bool:
    return now - profile.touched_at >= _ttl_seconds()


def purge_expired_skill_profiles(*, now: float | None = None) -> int:
    """Drop sessions idle for longer than SESSION_TTL_MINUTES. Returns how many were removed."""
    now = time.time() if now is None else now
    expired = [session_id for session_id, profile in _profiles.items() if _is_expired(profile, now)]
    for session_id in expired:
        del _profiles[session_id]
    return len(expired)


def _live_profile(session_id: str) -> _SkillProfile | None:
    profile = _profiles.get(session_id)
    if profile is None:
        return None
    now = time.time()
    if _is_expired(profile, now):
        del _profiles[session_id]
        return None
    profile.touched_at = now
    return profile


def _profile(session_id: str) -> _SkillProfile:
    profile = _live_profile(session_id)
    if profile is None:
        purge_expired_skill_profiles()
        profile = _SkillProfile()
        _profiles[session_id] = profile
    return profile


def list_user_skills(session_id: str) -> list[UserSkill]:
    profile = _live_profile(session_id)
    return list(profile.skills) if profile else []


def _upsert(
    profile: _SkillProfile,
    name: str,
    years_of_experience: int,
    level: ProficiencyLevel,
    make_id: Callable[[], str],
) -> UserSkill:
    name = name.strip()
    key = name.lower()
    profile.listings = None
    for index, existing in enumerate(profile.skills):
        if existing.name.lower() == key:
            updated = existing.model_copy(update={"years_of_experience": years_of_experience, "level": level})
            profile.skills[index] = updated
            return updated

    created = UserSkill(id=make_id(), name=name, years_of_experience=years_of_experience, level=level)
    profile.skills.append(created)
    return created


def upsert_user_skill(
    session_id: str,
    payload: UserSkillInput,
    *,
    id_factory: Callable[[], str] | None = None,
) -> UserSkill:
    """Add a skill, or update years and level when the name already exists (case-insensitive)."""
    return _upsert(
        _profile(session_id),
        payload.name,
        payload.years_of_experience,
        payload.level,
        id_factory or _new_id,
    )


def merge_user_skills(session_id: str, skills: Iterable[UserSkill]) -> list[UserSkill]:
    """Upsert already-validated skills (e.g. inferred from a CV), keeping their ids for new entries."""
    profile = _profile(session_id)
    for skill in skills:
        _upsert(profile, skill.name, skill.years_of_experience, skill.level, lambda: skill.id)
    return list(profile.skills)


def remove_user_skill(session_id: str, skill_id: str) -> bool:
    profile = _live_profile(session_id)
    if profile is None:
        return False
    remaining = [skill for skill in profile.skills if skill.id != skill_id]
    if len(remaining) == len(profile.skills):
        return False
    profile.skills = remaining
    profile.listings = None
    return True


def get_cached_listings(session_id: str) -> list[JobListing] | None:
    profile = _live_profile(session_id)
    if profile is None or profile.listings is None:
        return None
    return list(profile.listings)


def set_cached_listings(session_id: str, listings: list[JobListing]) -> None:
    _profile(session_id).listings = list(listings)


def clear_skill_profiles() -> None:
    _profiles.clear()
