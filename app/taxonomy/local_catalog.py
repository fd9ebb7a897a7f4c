from __future__ import annotations

import json
from pathlib import Path

from .provider import SkillCatalogProvider


class LocalSkillCatalog(SkillCatalogProvider):
    def __init__(self, skills_path: str | Path | None = None) -> None:
        path = Path(skills_path) if skills_path else Path(__file__).with_name("skills.json")
        self._names = self._load_names(path)
        self._by_key = {name.lower(): name for name in self._names}

    @staticmethod
    def _load_names(path: Path) -> tuple[str, ...]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        if not isinstance(raw, list):
            raise RuntimeError(f"Skill catalog '{path}' must be a JSON list of names.")
        names: list[str] = []
        seen: set[str] = set()
        for item in raw:
            name = str(item).strip()
            key = name.lower()
            if not name or key in seen:
                continue
            seen.add(key)
            names.append(name)
        return tuple(names)

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def lookup(self, raw: str) -> str | None:
        return self._by_key.get((raw or "").strip().lower())

    def __contains__(self, raw: object) -> bool:
        return isinstance(raw, str) and self.lookup(raw) is not None

    def __len__(self) -> int:
        return len(self._names)
