from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SortDirection = Literal["asc", "desc"]


class JobListing(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    company: str
    location: str
    description: str
    requirements: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    matching_skills: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)
    salary: str
    match_score: int = Field(ge=0, le=100)
    posted_date: str


class JobSearchResponse(BaseModel):
    total: int = Field(ge=0)
    query: str = ""
    min_match: int = Field(default=0, ge=0, le=100)
    sort: SortDirection = "desc"
    listings: list[JobListing] = Field(default_factory=list)
