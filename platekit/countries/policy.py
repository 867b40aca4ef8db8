"""Политики стран: нормализация и проверка формата номера."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Optional

from .base import CountryProfile

DEFAULT_COUNTRY_CODE = "XX"


class CountryPlatePolicy(ABC):
    """Правила одной страны: приведение номера к каноническому виду и проверка формата.

    Реализации не хранят изменяемого состояния и разделяются всеми номерами,
    поэтому ``normalize`` и ``validate`` обязаны быть детерминированными и
    определёнными для любой строки.
    """

    @property
    @abstractmethod
    def code(self) -> str:
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def normalize(self, raw: str) -> str:
        """Возвращает канонический вид строки; не выбрасывает исключений."""

    @abstractmethod
    def validate(self, value: str) -> bool:
        """Проверяет, соответствует ли строка формату номеров страны."""

    def format_name(self, value: str) -> Optional[str]:
        """Имя формата, которому соответствует строка, если политика их различает."""
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r})"


class ProfilePlatePolicy(CountryPlatePolicy):
    """Политика, построенная по YAML-профилю страны."""

    def __init__(self, profile: CountryProfile) -> None:
        self._profile = profile
        separators = "".join(re.escape(ch) for ch in profile.strip_chars if not ch.isspace())
        self._separators = re.compile(rf"[\s{separators}]+")
        self._allowed = frozenset(profile.allowed_characters) if profile.letters else None
        self._translation = str.maketrans(dict(profile.transliteration))

    @property
    def profile(self) -> CountryProfile:
        return self._profile

    @property
    def code(self) -> str:
        return self._profile.code

    @property
    def name(self) -> str:
        return self._profile.name

    @property
    def priority(self) -> int:
        return self._profile.priority

    def _transliterate(self, text: str) -> str:
        return text.translate(self._translation) if self._translation else text

    def _compact(self, value: str) -> str:
        separator = self._profile.separator
        return value.replace(separator, "") if separator else value

    def normalize(self, raw: str) -> str:
        separator = self._profile.separator
        text = self._transliterate((raw or "").strip().upper())
        text = self._separators.sub(lambda _match: separator, text)
        return text.strip(separator) if separator else text

    def validate(self, value: str) -> bool:
        if not value:
            return False
        compact = self._compact(value)
        if value in self._profile.stop_words or compact in self._profile.stop_words:
            return False
        if not self._profile.min_length <= len(compact) <= self._profile.max_length:
            return False
        if self._allowed is not None and any(ch not in self._allowed for ch in compact):
            return False
        # Профиль без форматов ограничивается проверкой символов и длины.
        if not self._profile.formats:
            return True
        return self._profile.match_format(value) is not None

    def format_name(self, value: str) -> Optional[str]:
        fmt = self._profile.match_format(value)
        return fmt.name if fmt else None


class DefaultPlatePolicy(CountryPlatePolicy):
    """Политика для стран без собственных правил: только регистр и пробелы."""

    @property
    def code(self) -> str:
        return DEFAULT_COUNTRY_CODE

    @property
    def name(self) -> str:
        return "Default"

    def normalize(self, raw: str) -> str:
        return (raw or "").strip().upper()

    def validate(self, value: str) -> bool:
        return bool(value)
