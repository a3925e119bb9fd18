"""
Настройки приложения.

Значения читаются из переменных окружения с префиксом HOTEL_
(например, HOTEL_CURRENCY_SYMBOL) и из файла .env, если он есть.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HotelSettings(BaseSettings):
    """Настройки системы управления отелем."""

    model_config = SettingsConfigDict(
        env_prefix="HOTEL_", env_file=".env", extra="ignore"
    )

    hotel_name: str = "Hotel Management System"
    report_title: str = "HOTEL MANAGEMENT SYSTEM REPORT"
    report_filename_prefix: str = "hotel-report"
    currency_symbol: str = "$"
    log_level: str = "INFO"
    id_start: int = Field(1, ge=1)  # Первый идентификатор в журналах
