"""
Тесты для доменной модели контекста бронирования.
"""

import pytest
from pydantic import ValidationError as ModelValidationError

from hotel_ops.booking.domain import Booking, BookingService
from hotel_ops.booking.infrastructure import InMemoryBookingRepository, InMemoryRoomRepository
from hotel_ops.catalog import Room, RoomStatus, RoomType
from hotel_ops.shared_kernel import ConflictError, ValidationError


@pytest.fixture
def rooms() -> InMemoryRoomRepository:
    return InMemoryRoomRepository(
        [
            Room(id=1, room_no="101", type=RoomType.SINGLE, price=80),
            Room(id=2, room_no="102", type=RoomType.SINGLE, price=80, status=RoomStatus.OCCUPIED),
            Room(id=3, room_no="302", type=RoomType.SUITE, price=200, status=RoomStatus.MAINTENANCE),
        ]
    )


@pytest.fixture
def service(rooms: InMemoryRoomRepository) -> BookingService:
    return BookingService(InMemoryBookingRepository(), rooms)


class TestBooking:
    """Тесты для класса Booking."""

    def test_create_copies_room_number(self):
        room = Room(id=7, room_no="401", type=RoomType.DELUXE, price=300)

        booking = Booking.create(1, room, "Jane Smith", "2024-06-01", "2024-06-04")

        assert booking.room_id == 7
        assert booking.room_no == "401"
        assert booking.check_in == "2024-06-01"
        assert booking.check_out == "2024-06-04"

    def test_create_does_not_change_room_status(self):
        """Статус номера меняет доменный сервис, а не фабрика."""
        room = Room(id=7, room_no="401", type=RoomType.DELUXE, price=300)

        Booking.create(1, room, "Jane Smith", "2024-06-01", "2024-06-04")

        assert room.status == RoomStatus.AVAILABLE

    def test_create_fails_for_occupied_room(self):
        room = Room(id=2, room_no="102", type=RoomType.SINGLE, price=80, status=RoomStatus.OCCUPIED)

        with pytest.raises(ConflictError):
            Booking.create(1, room, "Jane Smith", "2024-06-01", "2024-06-04")

    def test_booking_is_immutable(self):
        room = Room(id=7, room_no="401", type=RoomType.DELUXE, price=300)
        booking = Booking.create(1, room, "Jane Smith", "2024-06-01", "2024-06-04")

        with pytest.raises(ModelValidationError):
            booking.guest_name = "John Doe"


class TestBookingService:
    """Тесты для доменного сервиса бронирования."""

    def test_create_booking_occupies_room(self, service, rooms):
        booking = service.create_booking(1, "Jane Smith", "2024-06-01", "2024-06-04")

        assert rooms.get_by_id(1).status == RoomStatus.OCCUPIED
        assert service.booking_repository.list_all() == [booking]

    def test_dates_are_not_ordered(self, service):
        """Дата выезда раньше даты заезда допустима."""
        booking = service.create_booking(1, "Jane Smith", "2024-06-04", "2024-06-01")

        assert booking.check_out == "2024-06-01"

    @pytest.mark.parametrize(
        "guest_name, check_in, check_out",
        [
            ("", "2024-06-01", "2024-06-04"),
            ("   ", "2024-06-01", "2024-06-04"),
            ("Jane Smith", "", "2024-06-04"),
            ("Jane Smith", "2024-06-01", ""),
        ],
    )
    def test_empty_fields_are_rejected(self, service, rooms, guest_name, check_in, check_out):
        with pytest.raises(ValidationError):
            service.create_booking(1, guest_name, check_in, check_out)

        assert rooms.get_by_id(1).status == RoomStatus.AVAILABLE
        assert service.booking_repository.count() == 0

    def test_unknown_room_is_rejected(self, service):
        with pytest.raises(ValidationError, match="не найден"):
            service.create_booking(99, "Jane Smith", "2024-06-01", "2024-06-04")

    @pytest.mark.parametrize("room_id", [2, 3])
    def test_unavailable_room_is_rejected(self, service, room_id):
        with pytest.raises(ConflictError):
            service.create_booking(room_id, "Jane Smith", "2024-06-01", "2024-06-04")

        assert service.booking_repository.count() == 0

