"""
Инфраструктурный слой справочного контекста.

Содержит стандартный набор начальных данных отеля и репозитории
справочных данных, хранящиеся в памяти.
"""

from typing import Dict, Iterable, List, Optional

from ..shared_kernel import EntityId
from .domain import Guest, MenuCategory, MenuItem, Room, RoomStatus, RoomType, SeedData
from .interfaces import IGuestRepository, IMenuRepository


def default_rooms() -> List[Room]:
    return [
        Room(id=1, room_no="101", type=RoomType.SINGLE, price=80, status=RoomStatus.AVAILABLE),
        Room(id=2, room_no="102", type=RoomType.SINGLE, price=80, status=RoomStatus.OCCUPIED),
        Room(id=3, room_no="201", type=RoomType.DOUBLE, price=120, status=RoomStatus.AVAILABLE),
        Room(id=4, room_no="202", type=RoomType.DOUBLE, price=120, status=RoomStatus.AVAILABLE),
        Room(id=5, room_no="301", type=RoomType.SUITE, price=200, status=RoomStatus.AVAILABLE),
        Room(id=6, room_no="302", type=RoomType.SUITE, price=200, status=RoomStatus.MAINTENANCE),
        Room(id=7, room_no="401", type=RoomType.DELUXE, price=300, status=RoomStatus.AVAILABLE),
        Room(id=8, room_no="402", type=RoomType.DELUXE, price=300, status=RoomStatus.OCCUPIED),
    ]


def default_guests() -> List[Guest]:
    return [
        Guest(
            id=1,
            name="John Doe",
            phone="+1-555-0101",
            email="john@example.com",
            address="123 Main St, New York",
        ),
        Guest(
            id=2,
            name="Jane Smith",
            phone="+1-555-0102",
            email="jane@example.com",
            address="456 Oak Ave, Boston",
        ),
        Guest(
            id=3,
            name="Mike Johnson",
            phone="+1-555-0103",
            email="mike@example.com",
            address="789 Pine Rd, Chicago",
        ),
    ]


def default_menu() -> List[MenuItem]:
    return [
        MenuItem(id=1, name="Caesar Salad", price=12, category=MenuCategory.STARTER),
        MenuItem(id=2, name="Soup of the Day", price=8, category=MenuCategory.STARTER),
        MenuItem(id=3, name="Bruschetta", price=10, category=MenuCategory.STARTER),
        MenuItem(id=4, name="Grilled Salmon", price=28, category=MenuCategory.MAIN),
        MenuItem(id=5, name="Beef Steak", price=35, category=MenuCategory.MAIN),
        MenuItem(id=6, name="Vegetarian Pasta", price=18, category=MenuCategory.MAIN),
        MenuItem(id=7, name="Chicken Alfredo", price=22, category=MenuCategory.MAIN),
        MenuItem(id=8, name="Chocolate Cake", price=9, category=MenuCategory.DESSERT),
        MenuItem(id=9, name="Ice Cream Sundae", price=7, category=MenuCategory.DESSERT),
        MenuItem(id=10, name="Tiramisu", price=10, category=MenuCategory.DESSERT),
        MenuItem(id=11, name="Fresh Orange Juice", price=5, category=MenuCategory.BEVERAGE),
        MenuItem(id=12, name="Coffee", price=4, category=MenuCategory.BEVERAGE),
        MenuItem(id=13, name="Wine", price=15, category=MenuCategory.BEVERAGE),
    ]


def default_seed() -> SeedData:
    """Возвращает новый экземпляр стандартного набора данных."""
    return SeedData(
        rooms=default_rooms(),
        guests=default_guests(),
        menu_items=default_menu(),
    )


class InMemoryGuestRepository(IGuestRepository):
    """Реализация репозитория гостей в памяти."""

    def __init__(self, guests: Iterable[Guest] = ()):
        self._guests: Dict[EntityId, Guest] = {}
        for guest in guests:
            if guest.id in self._guests:
                raise ValueError(f"Guest with id {guest.id} already exists")
            self._guests[guest.id] = guest

    def get_by_id(self, guest_id: EntityId) -> Optional[Guest]:
        return self._guests.get(guest_id)

    def list_all(self) -> List[Guest]:
        return list(self._guests.values())


class InMemoryMenuRepository(IMenuRepository):
    """Реализация репозитория меню в памяти."""

    def __init__(self, items: Iterable[MenuItem] = ()):
        self._items: Dict[EntityId, MenuItem] = {}
        for item in items:
            if item.id in self._items:
                raise ValueError(f"Menu item with id {item.id} already exists")
            self._items[item.id] = item

    def get_by_id(self, item_id: EntityId) -> Optional[MenuItem]:
        return self._items.get(item_id)

    def list_all(self) -> List[MenuItem]:
        return list(self._items.values())

    def find_by_category(self, category: MenuCategory) -> List[MenuItem]:
        return [item for item in self._items.values() if item.category == category]
