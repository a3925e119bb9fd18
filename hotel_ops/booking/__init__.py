"""
Модуль контекста бронирования (Booking Context).

Отвечает за номерной фонд и бронирование номеров, включая:
- Просмотр номеров и их статусов
- Создание бронирований
- Перевод номера в статус Occupied при бронировании
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    "domain",
    "application",
    "infrastructure",
    "interfaces",
]
