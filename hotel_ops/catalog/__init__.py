"""
Справочный контекст (Catalog).

Номера, гости и меню ресторана: данные, которые загружаются при старте
и служат справочником для бронирования, ресторана и поиска.
"""

from .domain import Guest, MenuCategory, MenuItem, Room, RoomStatus, RoomType, SeedData
from .infrastructure import InMemoryGuestRepository, InMemoryMenuRepository, default_seed

__all__ = [
    "RoomType",
    "RoomStatus",
    "MenuCategory",
    "Room",
    "Guest",
    "MenuItem",
    "SeedData",
    "default_seed",
    "InMemoryGuestRepository",
    "InMemoryMenuRepository",
]
