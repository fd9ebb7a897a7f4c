from __future__ import annotations

from typing import Protocol


class SkillCatalogProvider(Protocol):
    @property
    def names(self) -> tuple[str, ...]:
        """Canonical skill names in catalog order."""

    def lookup(self, raw: str) -> str | None:
        """Return the canonical name for *raw*, matched case-insensitively."""

    def __contains__(self, raw: object) -> bool: ...
