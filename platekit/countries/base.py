"""Базовые структуры профилей стран для номерных знаков."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Pattern, Tuple


@dataclass(frozen=True)
class PlateFormat:
    name: str
    regex: Pattern[str]
    description: str = ""

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "PlateFormat":
        pattern = str(raw.get("regex") or "")
        return cls(
            name=str(raw.get("name", "default")),
            regex=re.compile(pattern),
            description=str(raw.get("description", "")),
        )

    def matches(self, value: str) -> bool:
        return self.regex.fullmatch(value) is not None


@dataclass(frozen=True)
class CountryProfile:
    name: str
    code: str
    priority: int = 100
    formats: Tuple[PlateFormat, ...] = ()
    letters: str = ""
    digits: str = "0123456789"
    separator: str = "-"
    strip_chars: str = "- _"
    transliteration: Tuple[Tuple[str, str], ...] = ()
    stop_words: Tuple[str, ...] = ()
    min_length: int = 1
    max_length: int = 16

    @classmethod
    def from_config(cls, path: Path, data: Dict[str, Any]) -> "CountryProfile":
        formats = tuple(
            PlateFormat.from_dict(item)
            for item in data.get("license_plate_formats", []) or []
            if item and item.get("regex")
        )
        valid_chars = data.get("valid_characters", {}) or {}
        transliteration = tuple(
            (str(src).upper(), str(dst).upper())
            for src, dst in (data.get("transliteration", {}) or {}).items()
            if src
        )
        _check_transliteration(transliteration)
        separator = data.get("separator", "-")
        return cls(
            name=str(data.get("name", path.stem.title())),
            code=str(data.get("code", path.stem)).upper(),
            priority=int(data.get("priority", 100)),
            formats=formats,
            letters=str(valid_chars.get("letters", "")).upper(),
            digits=str(valid_chars.get("digits", "0123456789")),
            separator="" if separator is None else str(separator),
            strip_chars=str(data.get("strip_characters", "- _")),
            transliteration=transliteration,
            stop_words=tuple(str(word).upper() for word in data.get("stop_words", []) or []),
            min_length=max(1, int(data.get("min_length", 1) or 1)),
            max_length=int(data.get("max_length", 16) or 16),
        )

    @property
    def allowed_characters(self) -> str:
        return self.letters + self.digits

    def match_format(self, value: str) -> Optional[PlateFormat]:
        for fmt in self.formats:
            if fmt.matches(value):
                return fmt
        return None


def sort_profiles(profiles: List[CountryProfile]) -> List[CountryProfile]:
    """Сортирует профили по приоритету и коду страны."""
    return sorted(profiles, key=lambda profile: (profile.priority, profile.code))


def _check_transliteration(pairs: Tuple[Tuple[str, str], ...]) -> None:
    """Замены посимвольные, и результат не содержит заменяемых символов.

    Иначе повторная нормализация канонического номера изменила бы его.
    """
    sources = {src for src, _ in pairs}
    for src, dst in pairs:
        if len(src) != 1:
            raise ValueError(f"Транслитерация задаётся для одного символа, получено: {src!r}")
        if sources.intersection(dst):
            raise ValueError(f"Результат транслитерации {src!r} -> {dst!r} содержит заменяемый символ")
