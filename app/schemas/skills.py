from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

ProficiencyLevel = Literal["beginner", "intermediate", "advanced", "expert"]


class UserSkillInput(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    years_of_experience: int = Field(default=1, ge=0, le=60)
    level: ProficiencyLevel = "beginner"

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("name must not be blank")
        return stripped


class UserSkill(BaseModel):
    id: str
    name: str = Field(min_length=1, max_length=100)
    years_of_experience: int = Field(ge=0)
    level: ProficiencyLevel


class SkillCatalogResponse(BaseModel):
    skills: list[str]
    count: int = Field(ge=0)
