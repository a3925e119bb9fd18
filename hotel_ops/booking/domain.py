"""
Доменная модель контекста бронирования.

Содержит бронирование и доменный сервис, который создает бронирование
и переводит номер из статуса Available в Occupied.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ..catalog import Room
from ..shared_kernel import ConflictError, EntityId, ValidationError, now, parse_model
from .interfaces import IBookingRepository, IRoomRepository


class Booking(BaseModel):
    """Бронирование номера в отеле."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: EntityId
    guest_name: str = Field(..., min_length=1)
    room_no: str  # Денормализованное поле для удобства
    # Даты хранятся в том виде, в каком их ввел пользователь
    check_in: str = Field(..., min_length=1)
    check_out: str = Field(..., min_length=1)
    room_id: EntityId
    created_at: datetime = Field(default_factory=now)

    @classmethod
    def create(
        cls,
        booking_id: EntityId,
        room: Room,
        guest_name: str,
        check_in: str,
        check_out: str,
    ) -> "Booking":
        """Создает новое бронирование."""
        if not room.is_available:
            raise ConflictError(
                f"Номер {room.room_no} недоступен для бронирования "
                f"(статус {room.status.value})"
            )

        return parse_model(
            cls,
            id=booking_id,
            guest_name=guest_name,
            room_no=room.room_no,
            check_in=check_in,
            check_out=check_out,
            room_id=room.id,
        )


class BookingService:
    """Доменный сервис для работы с бронированиями."""

    def __init__(
        self,
        booking_repository: "IBookingRepository",
        room_repository: "IRoomRepository",
    ):
        self.booking_repository = booking_repository
        self.room_repository = room_repository

    def create_booking(
        self, room_id: EntityId, guest_name: str, check_in: str, check_out: str
    ) -> Booking:
        """Создает бронирование и занимает номер."""
        room = self.room_repository.get_by_id(room_id)
        if room is None:
            raise ValidationError(f"Номер с id {room_id} не найден")

        booking = Booking.create(
            booking_id=self.booking_repository.next_id(),
            room=room,
            guest_name=guest_name,
            check_in=check_in,
            check_out=check_out,
        )

        self.booking_repository.add(booking)
        room.mark_as_occupied()
        return booking
