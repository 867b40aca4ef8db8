"""Профили стран и политики нормализации/валидации номеров."""

from .base import CountryProfile, PlateFormat
from .policy import DEFAULT_COUNTRY_CODE, CountryPlatePolicy, DefaultPlatePolicy, ProfilePlatePolicy
from .registry import CountryRegistry, default_registry, list_country_profiles, load_country_profiles

__all__ = [
    "CountryPlatePolicy",
    "CountryProfile",
    "CountryRegistry",
    "DEFAULT_COUNTRY_CODE",
    "DefaultPlatePolicy",
    "PlateFormat",
    "ProfilePlatePolicy",
    "default_registry",
    "list_country_profiles",
    "load_country_profiles",
]
