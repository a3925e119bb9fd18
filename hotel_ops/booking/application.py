"""
Прикладной слой контекста бронирования.

Сервис приложения координирует проверку входных данных, доменный
сервис и единицу работы (HotelState).
"""

from typing import TYPE_CHECKING, List, Optional, Union

from pydantic import Field

from ..catalog import Room, RoomStatus
from ..shared_kernel import (
    DomainException,
    EntityId,
    ILogger,
    RequestModel,
    StdLogger,
    ValidationError,
    parse_model,
)
from .domain import Booking, BookingService

if TYPE_CHECKING:
    from ..state import HotelState


# DTO для входящих данных


class CreateBookingRequest(RequestModel):
    """Запрос на создание бронирования."""

    room_id: EntityId
    guest_name: str = Field(..., min_length=1)
    check_in: str = Field(..., min_length=1)
    check_out: str = Field(..., min_length=1)


class BookingApplicationService:
    """Сервис приложения для номерного фонда и бронирований."""

    def __init__(self, state: "HotelState", logger: Optional[ILogger] = None):
        self._state = state
        self._logger = logger or StdLogger("hotel_ops.booking")
        self._booking_service = BookingService(state.bookings, state.rooms)

    def list_rooms(self, status: Union[RoomStatus, str, None] = None) -> List[Room]:
        """Возвращает копии номеров в порядке загрузки.

        Копии не позволяют менять статус номера в обход сервиса.
        """
        if status is None:
            rooms = self._state.rooms.list_all()
        else:
            rooms = self._state.rooms.find_by_status(_parse_status(status))
        return [room.model_copy() for room in rooms]

    def get_room(self, room_id: EntityId) -> Room:
        room = self._state.rooms.get_by_id(room_id)
        if room is None:
            raise ValidationError(f"Номер с id {room_id} не найден")
        return room.model_copy()

    def create_booking(
        self, room_id: EntityId, guest_name: str, check_in: str, check_out: str
    ) -> Booking:
        """Создает бронирование и переводит номер в статус Occupied."""
        try:
            request = parse_model(
                CreateBookingRequest,
                room_id=room_id,
                guest_name=guest_name,
                check_in=check_in,
                check_out=check_out,
            )
            with self._state:
                booking = self._booking_service.create_booking(**request.model_dump())
        except DomainException as e:
            self._logger.warning(
                "Бронирование отклонено",
                room_id=room_id,
                reason=str(e),
                error=type(e).__name__,
            )
            raise

        self._logger.info(
            "Создано бронирование",
            booking_id=booking.id,
            room_no=booking.room_no,
            guest_name=booking.guest_name,
        )
        return booking

    def list_bookings(self) -> List[Booking]:
        return self._state.bookings.list_all()


def _parse_status(status: Union[RoomStatus, str]) -> RoomStatus:
    try:
        return RoomStatus(status)
    except ValueError as e:
        raise ValidationError(f"Неизвестный статус номера: {status}") from e
