#!/usr/bin/env python3
# /platekit/infrastructure/settings_manager.py
import json
import os
from typing import Any, Dict, List

from platekit.infrastructure.logging_manager import get_logger

logger = get_logger(__name__)


class SettingsManager:
    """Управляет конфигурацией стран и логирования."""

    def __init__(self, path: str = "settings.json") -> None:
        self.path = path
        self.settings = self._load()

    def _default(self) -> Dict[str, Any]:
        return {
            "countries": self._countries_defaults(),
            "logging": self._logging_defaults(),
        }

    @staticmethod
    def _countries_defaults() -> Dict[str, Any]:
        return {
            # Пустой путь означает встроенный каталог configs пакета.
            "config_dir": "",
            "enabled": [],
            "default": "DE",
        }

    @staticmethod
    def _logging_defaults() -> Dict[str, Any]:
        return {
            "level": "INFO",
            "file": "data/platekit.log",
            "max_bytes": 1048576,
            "backup_count": 5,
        }

    def _load(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            defaults = self._default()
            self._save(defaults)
            return defaults
        with open(self.path, "r", encoding="utf-8") as f:
            return self._upgrade(json.load(f))

    def _upgrade(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Обновляет существующие настройки, добавляя недостающие поля."""

        changed = False
        if self._fill_section_defaults(data, "countries", self._countries_defaults()):
            changed = True
        if self._fill_section_defaults(data, "logging", self._logging_defaults()):
            changed = True

        if changed:
            self._save(data)
        return data

    @staticmethod
    def _fill_section_defaults(data: Dict[str, Any], section: str, defaults: Dict[str, Any]) -> bool:
        if not isinstance(data.get(section), dict):
            data[section] = dict(defaults)
            return True

        changed = False
        current = data[section]
        for key, value in defaults.items():
            if key not in current:
                # Сохраняем только отсутствующие ключи, не перезаписывая пользовательские значения.
                current[key] = value
                changed = True
        return changed

    def _save(self, data: Dict[str, Any]) -> None:
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        logger.debug("Настройки сохранены в %s", self.path)

    def get_countries_config(self) -> Dict[str, Any]:
        return self.settings.get("countries", {})

    def save_countries_config(self, countries: Dict[str, Any]) -> None:
        self.settings["countries"] = countries
        self._save(self.settings)

    def get_country_config_dir(self) -> str:
        return str(self.get_countries_config().get("config_dir", "") or "")

    def save_country_config_dir(self, path: str) -> None:
        countries = self.get_countries_config()
        countries["config_dir"] = path
        self.save_countries_config(countries)

    def get_enabled_countries(self) -> List[str]:
        enabled = self.get_countries_config().get("enabled", []) or []
        return [str(code).upper() for code in enabled]

    def save_enabled_countries(self, codes: List[str]) -> None:
        countries = self.get_countries_config()
        countries["enabled"] = [str(code).upper() for code in codes]
        self.save_countries_config(countries)

    def get_default_country(self) -> str:
        return str(self.get_countries_config().get("default", "DE")).upper()

    def save_default_country(self, code: str) -> None:
        countries = self.get_countries_config()
        countries["default"] = str(code).upper()
        self.save_countries_config(countries)

    def get_logging_config(self) -> Dict[str, Any]:
        return self.settings.get("logging", {})

    def save_logging_config(self, logging_conf: Dict[str, Any]) -> None:
        self.settings["logging"] = logging_conf
        self._save(self.settings)

    def refresh(self) -> None:
        self.settings = self._load()
