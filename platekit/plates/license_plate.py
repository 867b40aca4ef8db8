"""Номерной знак транспортного средства с правилами формата конкретной страны."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from platekit.countries.policy import CountryPlatePolicy
from platekit.countries.registry import CountryRegistry, default_registry
from platekit.errors import InvalidArgument

CountryRef = Union[CountryPlatePolicy, str]


@dataclass(frozen=True, eq=False)
class LicensePlate:
    """Неизменяемый номерной знак, привязанный к политике страны.

    Канонический вид и признак валидности вычисляются один раз при создании:
    сначала ``normalize`` политики, затем ``validate`` над результатом.
    Создавать экземпляры следует через ``LicensePlate.for_value(...).with_country(...)``.
    """

    raw_value: str
    country: CountryPlatePolicy
    canonical_value: str = field(init=False)
    is_valid: bool = field(init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.raw_value, str) or not self.raw_value.strip():
            raise InvalidArgument("Значение номерного знака не должно быть пустым")
        if not isinstance(self.country, CountryPlatePolicy):
            raise InvalidArgument("Номерной знак должен быть привязан к политике страны")
        canonical = self.country.normalize(self.raw_value)
        object.__setattr__(self, "canonical_value", canonical)
        object.__setattr__(self, "is_valid", bool(self.country.validate(canonical)))

    @classmethod
    def for_value(cls, value: Optional[str]) -> "LicensePlateBuilder":
        if not isinstance(value, str) or not value.strip():
            raise InvalidArgument("Значение номерного знака не должно быть пустым")
        return LicensePlateBuilder(value)

    @property
    def text(self) -> str:
        # Невалидный номер показывается в исходном виде, без нормализации.
        return self.canonical_value if self.is_valid else self.raw_value

    def __str__(self) -> str:
        return self.text

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, LicensePlate):
            return False
        return self.text == other.text

    def __hash__(self) -> int:
        return hash(self.text)


class LicensePlateBuilder:
    """Промежуточный шаг построения: хранит исходное значение до выбора страны."""

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        self._value = value

    @property
    def value(self) -> str:
        return self._value

    def with_country(
        self, country: Optional[CountryRef], registry: Optional[CountryRegistry] = None
    ) -> LicensePlate:
        """Привязывает страну и строит номер.

        Код страны ищется в ``registry``; без него используется реестр встроенных
        профилей ``default_registry()``, который не учитывает настройки ``enabled``
        и ``config_dir``. Приложение с настройками передаёт ``Config.registry()``.
        """
        if country is None:
            raise InvalidArgument("Страна номерного знака не должна быть пустой")
        if isinstance(country, str):
            country = (registry if registry is not None else default_registry()).require(country)
        elif not isinstance(country, CountryPlatePolicy):
            raise InvalidArgument(f"Ожидалась политика страны, получено: {type(country).__name__}")
        return LicensePlate(self._value, country)

    def __repr__(self) -> str:
        return f"LicensePlateBuilder(value={self._value!r})"
