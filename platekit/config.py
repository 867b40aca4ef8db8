#!/usr/bin/env python3
"""Централизованный фасад для конфигурации библиотеки."""

from __future__ import annotations

from dataclasses import dataclass
from threading import Lock
from typing import Any, Callable, Dict, List, Optional, Tuple

from platekit.countries.policy import CountryPlatePolicy
from platekit.countries.registry import DEFAULT_CONFIG_DIR, CountryRegistry
from platekit.infrastructure.logging_manager import get_logger
from platekit.infrastructure.settings_manager import SettingsManager

logger = get_logger(__name__)


@dataclass(frozen=True)
class CountriesConfig:
    config_dir: str
    enabled: Tuple[str, ...]
    default_country: str

    @classmethod
    def from_dict(cls, countries: Dict[str, Any]) -> "CountriesConfig":
        return cls(
            config_dir=str(countries.get("config_dir") or DEFAULT_CONFIG_DIR),
            enabled=tuple(str(code).upper() for code in countries.get("enabled", []) or []),
            default_country=str(countries.get("default", "DE")).upper(),
        )


class Config:
    """Singleton-фасад для потокобезопасного доступа к настройкам."""

    _instance: Optional["Config"] = None
    _instance_lock: Lock = Lock()

    def __new__(cls, settings_manager: Optional[SettingsManager] = None) -> "Config":
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._init(settings_manager)
        return cls._instance

    def _init(self, settings_manager: Optional[SettingsManager]) -> None:
        self._settings = settings_manager or SettingsManager()
        self._cache: Dict[str, Any] = {}
        self._cache_lock = Lock()

    @classmethod
    def instance(cls) -> "Config":
        return cls()

    @classmethod
    def reset(cls) -> None:
        with cls._instance_lock:
            cls._instance = None

    # ---- Централизованные статические методы доступа ----
    @classmethod
    def countries(cls) -> CountriesConfig:
        instance = cls()
        return instance._get_cached("countries", instance._build_countries)

    @classmethod
    def registry(cls) -> CountryRegistry:
        instance = cls()
        return instance._get_cached("registry", instance._build_registry)

    @classmethod
    def default_country(cls) -> CountryPlatePolicy:
        return cls.registry().require(cls.countries().default_country)

    # ---- Методы обновления ----
    @classmethod
    def refresh(cls) -> None:
        instance = cls()
        instance._settings.refresh()
        with instance._cache_lock:
            instance._cache.clear()
        logger.info("Конфигурация обновлена из %s", instance._settings.path)

    # ---- Методы делегирования ----
    @classmethod
    def get_logging_config(cls) -> Dict[str, Any]:
        return cls()._settings.get_logging_config()

    @classmethod
    def save_enabled_countries(cls, codes: List[str]) -> None:
        cls()._settings.save_enabled_countries(codes)
        cls()._invalidate("countries", "registry")

    @classmethod
    def save_default_country(cls, code: str) -> None:
        cls()._settings.save_default_country(code)
        cls()._invalidate("countries")

    @classmethod
    def save_country_config_dir(cls, path: str) -> None:
        cls()._settings.save_country_config_dir(path)
        cls()._invalidate("countries", "registry")

    # ---- Вспомогательные методы ----
    def _invalidate(self, *keys: str) -> None:
        with self._cache_lock:
            for key in keys:
                self._cache.pop(key, None)

    def _get_cached(self, key: str, builder: Callable[[], Any]) -> Any:
        with self._cache_lock:
            if key not in self._cache:
                self._cache[key] = builder()
            return self._cache[key]

    def _build_countries(self) -> CountriesConfig:
        return CountriesConfig.from_dict(self._settings.get_countries_config())

    def _build_registry(self) -> CountryRegistry:
        countries = self._build_countries()
        return CountryRegistry.load_from_dir(countries.config_dir, enabled=countries.enabled)
