"""
Тесты для доменной модели справочного контекста.
"""

import pytest
from pydantic import ValidationError as ModelValidationError

from hotel_ops.catalog import (
    Guest,
    MenuCategory,
    MenuItem,
    Room,
    RoomStatus,
    RoomType,
    SeedData,
    default_seed,
)
from hotel_ops.shared_kernel import ConflictError


class TestRoom:
    """Тесты для класса Room."""

    def test_new_room_is_available_by_default(self):
        room = Room(id=1, room_no="101", type=RoomType.SINGLE, price=80)

        assert room.status == RoomStatus.AVAILABLE
        assert room.is_available

    def test_mark_as_occupied(self):
        room = Room(id=1, room_no="101", type=RoomType.SINGLE, price=80)

        room.mark_as_occupied()

        assert room.status == RoomStatus.OCCUPIED
        assert not room.is_available

    @pytest.mark.parametrize("status", [RoomStatus.OCCUPIED, RoomStatus.MAINTENANCE])
    def test_mark_as_occupied_fails_for_unavailable_room(self, status):
        """Занять можно только свободный номер."""
        room = Room(id=2, room_no="102", type=RoomType.SINGLE, price=80, status=status)

        with pytest.raises(ConflictError, match="102"):
            room.mark_as_occupied()

        assert room.status == status

    def test_price_must_be_positive(self):
        with pytest.raises(ModelValidationError):
            Room(id=1, room_no="101", type=RoomType.SINGLE, price=0)

    def test_unknown_room_type_is_rejected(self):
        with pytest.raises(ModelValidationError):
            Room(id=1, room_no="101", type="Penthouse", price=500)

    def test_room_type_accepts_display_value(self):
        room = Room(id=1, room_no="401", type="Deluxe", price=300)

        assert room.type is RoomType.DELUXE


class TestReferenceData:
    """Тесты для гостей, меню и начальных данных."""

    def test_menu_item_is_immutable(self):
        item = MenuItem(id=1, name="Coffee", price=4, category=MenuCategory.BEVERAGE)

        with pytest.raises(ModelValidationError):
            item.price = 1

    def test_guest_is_immutable(self):
        guest = Guest(id=1, name="A", phone="1", email="a@example.com", address="x")

        with pytest.raises(ModelValidationError):
            guest.name = "B"

    def test_default_seed_contents(self):
        seed = default_seed()

        assert len(seed.rooms) == 8
        assert len(seed.guests) == 3
        assert len(seed.menu_items) == 13
        statuses = [room.status for room in seed.rooms]
        assert statuses.count(RoomStatus.AVAILABLE) == 5
        assert statuses.count(RoomStatus.OCCUPIED) == 2
        assert statuses.count(RoomStatus.MAINTENANCE) == 1

    def test_default_seed_room_numbers_are_unique(self):
        numbers = [room.room_no for room in default_seed().rooms]

        assert len(numbers) == len(set(numbers))

    def test_fresh_copy_does_not_share_rooms(self):
        """Изменение копии не затрагивает исходный набор."""
        seed = SeedData(rooms=[Room(id=1, room_no="101", type=RoomType.SINGLE, price=80)])

        copy = seed.fresh_copy()
        copy.rooms[0].mark_as_occupied()

        assert seed.rooms[0].status == RoomStatus.AVAILABLE
