#!/usr/bin/env python3
# /platekit/infrastructure/logging_manager.py
"""Настройка логирования приложения по секции ``logging`` из настроек."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from threading import Lock
from typing import Any, Dict, List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class LoggingManager:
    """Подключает к корневому логгеру консольный и ротируемый файловый обработчики."""

    _handlers: List[logging.Handler] = []
    _lock: Lock = Lock()

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        self.config = {**self._default(), **(config or {})}
        self._configure()

    @staticmethod
    def _default() -> Dict[str, Any]:
        return {
            "level": "INFO",
            "file": "",
            "max_bytes": 1048576,
            "backup_count": 5,
        }

    @property
    def level(self) -> int:
        level = logging.getLevelName(str(self.config.get("level", "INFO")).upper())
        return level if isinstance(level, int) else logging.INFO

    def _build_handlers(self) -> List[logging.Handler]:
        formatter = logging.Formatter(LOG_FORMAT)
        handlers: List[logging.Handler] = []

        console = logging.StreamHandler()
        console.setFormatter(formatter)
        handlers.append(console)

        log_file = str(self.config.get("file") or "")
        if log_file:
            os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=int(self.config.get("max_bytes", 1048576)),
                backupCount=int(self.config.get("backup_count", 5)),
                encoding="utf-8",
            )
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)
        return handlers

    def _configure(self) -> None:
        root = logging.getLogger()
        with LoggingManager._lock:
            # Повторная настройка заменяет только собственные обработчики.
            for handler in LoggingManager._handlers:
                root.removeHandler(handler)
                handler.close()
            LoggingManager._handlers = self._build_handlers()
            for handler in LoggingManager._handlers:
                root.addHandler(handler)
            root.setLevel(self.level)

    @classmethod
    def shutdown(cls) -> None:
        root = logging.getLogger()
        with cls._lock:
            for handler in cls._handlers:
                root.removeHandler(handler)
                handler.close()
            cls._handlers = []
