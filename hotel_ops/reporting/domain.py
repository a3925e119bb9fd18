"""
Доменная модель контекста отчетности.

Поиск по журналам и сводный отчет. Контекст только читает данные
остальных контекстов и ничего не изменяет.
"""

from datetime import datetime
from enum import Enum
from typing import Callable, Dict, Iterable, List, Sequence

from pydantic import BaseModel, ConfigDict, Field

from ..booking.domain import Booking
from ..catalog import Guest, Room, RoomStatus
from ..restaurant.domain import Order
from ..shared_kernel import now


class SearchKind(str, Enum):
    """По каким записям выполняется поиск."""

    GUESTS = "guests"
    BOOKINGS = "bookings"
    ORDERS = "orders"


def _contains(query: str, *fields: str) -> bool:
    return any(query in field.lower() for field in fields)


def guest_matches(guest: Guest, query: str) -> bool:
    return _contains(query, guest.name, guest.email, guest.phone)


def booking_matches(booking: Booking, query: str) -> bool:
    return _contains(query, booking.guest_name, booking.room_no)


def order_matches(order: Order, query: str) -> bool:
    return _contains(query, order.guest_name, str(order.id))


# Для каждого вида поиска ровно одно правило сравнения
MATCHERS: Dict[SearchKind, Callable] = {
    SearchKind.GUESTS: guest_matches,
    SearchKind.BOOKINGS: booking_matches,
    SearchKind.ORDERS: order_matches,
}


def filter_records(kind: SearchKind, records: Iterable, query: str) -> List:
    """Регистронезависимый поиск подстроки; пустой запрос совпадает со всем."""
    matcher = MATCHERS[kind]
    needle = (query or "").lower()
    return [record for record in records if matcher(record, needle)]


class Report(BaseModel):
    """Сводный отчет по текущему состоянию отеля."""

    model_config = ConfigDict(frozen=True)

    total_rooms: int = Field(..., ge=0)
    available_rooms: int = Field(..., ge=0)
    occupied_rooms: int = Field(..., ge=0)
    total_bookings: int = Field(..., ge=0)
    total_orders: int = Field(..., ge=0)
    total_revenue: float
    generated_at: datetime = Field(default_factory=now)

    @classmethod
    def build(
        cls,
        rooms: Sequence[Room],
        total_bookings: int,
        total_orders: int,
        total_revenue: float,
    ) -> "Report":
        """Агрегирует отчет по номерам и итогам журналов."""
        return cls(
            total_rooms=len(rooms),
            available_rooms=sum(1 for r in rooms if r.status == RoomStatus.AVAILABLE),
            occupied_rooms=sum(1 for r in rooms if r.status == RoomStatus.OCCUPIED),
            total_bookings=total_bookings,
            total_orders=total_orders,
            total_revenue=total_revenue,
        )

    def to_dict(self) -> Dict[str, Dict]:
        """Преобразует отчет в словарь, сгруппированный по разделам."""
        return {
            "generated_at": self.generated_at.isoformat(),
            "rooms": {
                "total": self.total_rooms,
                "available": self.available_rooms,
                "occupied": self.occupied_rooms,
            },
            "operations": {
                "total_bookings": self.total_bookings,
                "total_orders": self.total_orders,
            },
            "financial": {
                "total_revenue": round(self.total_revenue, 2),
            },
        }
