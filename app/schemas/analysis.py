from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SkillStrength = Literal["Weak", "Medium", "Strong"]


class SkillAssessment(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    strength: SkillStrength
    score: int = Field(ge=0, le=100)
    years_of_experience: int | None = Field(default=None, ge=0)


class Suggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str | None = None


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall_score: int = Field(ge=0, le=100)
    content_quality: int = Field(ge=0, le=100)
    skills: list[SkillAssessment] = Field(default_factory=list)
    suggestions: list[Suggestion] = Field(default_factory=list)


class AnalyzeTextRequest(BaseModel):
    text: str = Field(default="", max_length=100000)


class DocumentAnalysisResponse(BaseModel):
    filename: str
    source_type: str
    characters: int = Field(ge=0)
    warnings: list[str] = Field(default_factory=list)
    analysis: AnalysisResult
