from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

SOURCE_TYPES = {"pdf", "doc", "docx", "txt"}


class ParsedDoc(BaseModel):
    doc_id: str
    filename: str = ""
    source_type: str
    text: str
    parsing_warnings: list[str] = Field(default_factory=list)

    @field_validator("source_type")
    @classmethod
    def _validate_source_type(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in SOURCE_TYPES:
            raise ValueError("source_type must be one of: pdf, doc, docx, txt")
        return normalized

    @property
    def characters(self) -> int:
        return len(self.text)
