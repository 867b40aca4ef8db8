"""Типизированные номерные знаки с правилами форматов по странам."""
from platekit.countries import CountryPlatePolicy, CountryRegistry, default_registry
from platekit.errors import InvalidArgument
from platekit.plates import LicensePlate, LicensePlateBuilder

__all__ = [
    "CountryPlatePolicy",
    "CountryRegistry",
    "InvalidArgument",
    "LicensePlate",
    "LicensePlateBuilder",
    "default_registry",
]
