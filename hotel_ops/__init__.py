"""
Система управления отелем: доменное ядро.

Номерной фонд и бронирования, счета за проживание, заказы ресторана,
поиск и сводный отчет. Все данные хранятся в памяти в пределах одной
сессии (HotelState).
"""

from .bootstrap import bootstrap_app
from .config import HotelSettings
from .shared_kernel import ConflictError, DomainException, ValidationError
from .state import HotelState, init_state

__all__ = [
    "bootstrap_app",
    "init_state",
    "HotelState",
    "HotelSettings",
    "DomainException",
    "ValidationError",
    "ConflictError",
]
