# /plate_cli.py
"""CLI-обертка для проверки номерных знаков из командной строки.

Нормализация и валидация выполняются политиками стран из ``platekit``;
файл только разбирает аргументы, настраивает логирование и печатает результат.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from platekit.config import Config
from platekit.errors import InvalidArgument
from platekit.infrastructure.logging_manager import LoggingManager, get_logger
from platekit.infrastructure.settings_manager import SettingsManager
from platekit.plates import LicensePlate

logger = get_logger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def _print_countries() -> None:
    for item in Config.registry().to_metadata():
        print(f"{item['code']}\t{item['name']}")


def check_plate(value: str, country_code: Optional[str] = None) -> LicensePlate:
    builder = LicensePlate.for_value(value)
    if country_code:
        return builder.with_country(country_code, registry=Config.registry())
    return builder.with_country(Config.default_country())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Проверка автомобильных номеров по правилам стран.")
    parser.add_argument("value", nargs="?", help="Номер в произвольном написании, например 'hh ab 123'.")
    parser.add_argument("--country", help="Код страны (DE, NL, FR, ...). По умолчанию из настроек.")
    parser.add_argument("--settings", default="settings.json", help="Путь к файлу настроек.")
    parser.add_argument("--list-countries", action="store_true", help="Показать доступные страны.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    Config.reset()
    Config(SettingsManager(args.settings))
    LoggingManager(Config.get_logging_config())

    if args.list_countries:
        _print_countries()
        return EXIT_VALID

    try:
        plate = check_plate(args.value, args.country)
    except InvalidArgument as exc:
        logger.error("Некорректные аргументы: %s", exc)
        print(f"Ошибка: {exc}", file=sys.stderr)
        return EXIT_USAGE

    status = "valid" if plate.is_valid else "invalid"
    fields = [str(plate), plate.country.code, status]
    fmt = plate.country.format_name(plate.canonical_value) if plate.is_valid else None
    if fmt:
        fields.append(fmt)
    print("\t".join(fields))
    return EXIT_VALID if plate.is_valid else EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
