"""Инфраструктурные сервисы: настройки и логирование."""
