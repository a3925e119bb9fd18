"""
Инфраструктурный слой контекста бронирования.

Содержит реализации репозиториев номеров и бронирований в памяти.
"""

from typing import Dict, Iterable, List, Optional

from ..catalog import Room, RoomStatus
from ..shared_kernel import EntityId, InMemoryRecordLog
from . import interfaces as ports
from .domain import Booking


class InMemoryRoomRepository(ports.IRoomRepository):
    """Реализация репозитория номеров в памяти.

    Порядок номеров совпадает с порядком загрузки.
    """

    def __init__(self, rooms: Iterable[Room] = ()):
        self._rooms: Dict[EntityId, Room] = {}
        self._numbers: Dict[str, EntityId] = {}
        for room in rooms:
            self.add(room)

    def add(self, room: Room) -> None:
        if room.id in self._rooms:
            raise ValueError(f"Room with id {room.id} already exists")
        if room.room_no in self._numbers:
            raise ValueError(f"Room with number {room.room_no} already exists")
        self._rooms[room.id] = room
        self._numbers[room.room_no] = room.id

    def get_by_id(self, room_id: EntityId) -> Optional[Room]:
        return self._rooms.get(room_id)

    def list_all(self) -> List[Room]:
        return list(self._rooms.values())

    def find_by_status(self, status: RoomStatus) -> List[Room]:
        return [room for room in self._rooms.values() if room.status == status]

    def snapshot(self) -> Dict[EntityId, RoomStatus]:
        return {room_id: room.status for room_id, room in self._rooms.items()}

    def restore(self, snapshot: Dict[EntityId, RoomStatus]) -> None:
        for room_id, status in snapshot.items():
            self._rooms[room_id].status = status


class InMemoryBookingRepository(InMemoryRecordLog[Booking], ports.IBookingRepository):
    """Реализация журнала бронирований в памяти."""

