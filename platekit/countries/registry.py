"""Загрузка профилей стран и реестр политик номерных знаков."""

from __future__ import annotations

import re
from pathlib import Path
from threading import Lock
from typing import Dict, Iterable, List, Optional

import yaml

from platekit.errors import InvalidArgument
from platekit.infrastructure.logging_manager import get_logger

from .base import CountryProfile, sort_profiles
from .policy import CountryPlatePolicy, DefaultPlatePolicy, ProfilePlatePolicy

logger = get_logger(__name__)

DEFAULT_CONFIG_DIR = Path(__file__).parent / "configs"


def load_country_profiles(config_dir: Path | str = DEFAULT_CONFIG_DIR) -> List[CountryProfile]:
    base = Path(config_dir)
    if not base.is_dir():
        logger.warning("Каталог профилей стран не найден: %s", base)
        return []

    profiles: List[CountryProfile] = []
    for yaml_path in sorted(base.glob("*.yaml")):
        try:
            with open(yaml_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            profiles.append(CountryProfile.from_config(yaml_path, data))
        except (OSError, yaml.YAMLError, re.error, TypeError, ValueError, AttributeError) as exc:
            # Ошибка загрузки одной страны не должна останавливать остальные
            logger.warning("Не удалось загрузить профиль страны %s: %s", yaml_path.name, exc)
    return sort_profiles(profiles)


def list_country_profiles(config_dir: Path | str = DEFAULT_CONFIG_DIR) -> List[Dict[str, str]]:
    return [
        {"code": profile.code, "name": profile.name}
        for profile in load_country_profiles(config_dir)
    ]


class CountryRegistry:
    """Реестр политик стран, доступных по коду."""

    def __init__(self, policies: Iterable[CountryPlatePolicy]) -> None:
        self._policies = list(policies)
        self._by_code = {policy.code.upper(): policy for policy in self._policies}

    @classmethod
    def load_from_dir(
        cls, path: Path | str = DEFAULT_CONFIG_DIR, enabled: Optional[Iterable[str]] = None
    ) -> "CountryRegistry":
        enabled_codes = {code.upper() for code in enabled or []}
        policies: List[CountryPlatePolicy] = []
        for profile in load_country_profiles(path):
            if enabled_codes and profile.code not in enabled_codes:
                continue
            policies.append(ProfilePlatePolicy(profile))
        policies.append(DefaultPlatePolicy())
        logger.info(
            "Загружено профилей стран: %d (%s)",
            len(policies) - 1,
            ", ".join(policy.code for policy in policies[:-1]) or "нет",
        )
        return cls(policies)

    def get(self, code: Optional[str]) -> Optional[CountryPlatePolicy]:
        if not code:
            return None
        return self._by_code.get(code.strip().upper())

    def require(self, code: Optional[str]) -> CountryPlatePolicy:
        if code is None or not str(code).strip():
            raise InvalidArgument("Код страны не должен быть пустым")
        policy = self.get(code)
        if policy is None:
            raise InvalidArgument(f"Неизвестный код страны: {code}")
        return policy

    def all(self) -> List[CountryPlatePolicy]:
        return list(self._policies)

    def codes(self) -> List[str]:
        return [policy.code for policy in self._policies]

    def to_metadata(self) -> List[Dict[str, str]]:
        return [{"code": policy.code, "name": policy.name} for policy in self._policies]

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.get(code) is not None

    def __len__(self) -> int:
        return len(self._policies)


_default_registry: Optional[CountryRegistry] = None
_default_registry_lock = Lock()


def default_registry() -> CountryRegistry:
    """Реестр встроенных профилей, загружаемый один раз на процесс."""

    global _default_registry
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = CountryRegistry.load_from_dir(DEFAULT_CONFIG_DIR)
    return _default_registry
