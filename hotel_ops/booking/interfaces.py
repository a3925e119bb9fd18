"""
Интерфейсы (порты) для контекста бронирования.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Protocol, Tuple

from ..catalog import Room, RoomStatus
from ..shared_kernel import EntityId

if TYPE_CHECKING:
    from .domain import Booking


class IRoomRepository(Protocol):
    """Интерфейс репозитория номеров."""

    def get_by_id(self, room_id: EntityId) -> Optional[Room]: ...
    def list_all(self) -> List[Room]: ...
    def find_by_status(self, status: RoomStatus) -> List[Room]: ...
    def snapshot(self) -> Dict[EntityId, RoomStatus]: ...
    def restore(self, snapshot: Dict[EntityId, RoomStatus]) -> None: ...


class IBookingRepository(Protocol):
    """Интерфейс репозитория бронирований (журнал только дополняется)."""

    def next_id(self) -> EntityId: ...
    def add(self, booking: Booking) -> None: ...
    def get_by_id(self, booking_id: EntityId) -> Optional[Booking]: ...
    def list_all(self) -> List[Booking]: ...
    def count(self) -> int: ...
    def snapshot(self) -> Tuple[int, EntityId]: ...
    def restore(self, snapshot: Any) -> None: ...
