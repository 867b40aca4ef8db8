"""Номерной знак как неизменяемое значение."""

from .license_plate import LicensePlate, LicensePlateBuilder

__all__ = ["LicensePlate", "LicensePlateBuilder"]
