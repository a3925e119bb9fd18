"""
Состояние отеля в рамках одной сессии.

HotelState хранит все репозитории и работает как единица работы:
перед изменяющей операцией снимается снимок состояния, а если операция
завершилась исключением, снимок восстанавливается. Так неудачная
операция не оставляет следов ни в одной коллекции.
"""

from typing import Any, Dict, List, Optional

from .accounting.infrastructure import InMemoryBillRepository
from .booking.infrastructure import InMemoryBookingRepository, InMemoryRoomRepository
from .catalog import InMemoryGuestRepository, InMemoryMenuRepository, SeedData, default_seed
from .restaurant.infrastructure import InMemoryOrderRepository
from .shared_kernel import ILogger, StdLogger


class HotelState:
    """Единица работы, владеющая всеми коллекциями отеля."""

    def __init__(
        self,
        rooms: Optional[InMemoryRoomRepository] = None,
        guests: Optional[InMemoryGuestRepository] = None,
        menu: Optional[InMemoryMenuRepository] = None,
        bookings: Optional[InMemoryBookingRepository] = None,
        bills: Optional[InMemoryBillRepository] = None,
        orders: Optional[InMemoryOrderRepository] = None,
        logger: Optional[ILogger] = None,
    ):
        self._rooms = rooms or InMemoryRoomRepository()
        self._guests = guests or InMemoryGuestRepository()
        self._menu = menu or InMemoryMenuRepository()
        self._bookings = bookings or InMemoryBookingRepository()
        self._bills = bills or InMemoryBillRepository()
        self._orders = orders or InMemoryOrderRepository()
        self._logger = logger or StdLogger("hotel_ops.state")
        self._snapshots: List[Dict[str, Any]] = []

    @property
    def rooms(self) -> InMemoryRoomRepository:
        return self._rooms

    @property
    def guests(self) -> InMemoryGuestRepository:
        return self._guests

    @property
    def menu(self) -> InMemoryMenuRepository:
        return self._menu

    @property
    def bookings(self) -> InMemoryBookingRepository:
        return self._bookings

    @property
    def bills(self) -> InMemoryBillRepository:
        return self._bills

    @property
    def orders(self) -> InMemoryOrderRepository:
        return self._orders

    def _mutable_collections(self) -> Dict[str, Any]:
        return {
            "rooms": self._rooms,
            "bookings": self._bookings,
            "bills": self._bills,
            "orders": self._orders,
        }

    def begin(self) -> None:
        """Запоминает текущее состояние изменяемых коллекций."""
        self._snapshots.append(
            {name: repo.snapshot() for name, repo in self._mutable_collections().items()}
        )

    def commit(self) -> None:
        """Фиксирует изменения (снимок больше не нужен)."""
        if self._snapshots:
            self._snapshots.pop()
        self._logger.debug("HotelState committed")

    def rollback(self) -> None:
        """Восстанавливает состояние на момент последнего begin()."""
        if not self._snapshots:
            return
        snapshot = self._snapshots.pop()
        for name, repo in self._mutable_collections().items():
            repo.restore(snapshot[name])
        self._logger.warning("HotelState rolled back")

    def __enter__(self) -> "HotelState":
        self.begin()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.commit()
        else:
            self.rollback()
        return False  # Пробрасываем исключение дальше, если оно было


def init_state(
    seed: Optional[SeedData] = None,
    id_start: int = 1,
    logger: Optional[ILogger] = None,
) -> HotelState:
    """Создает состояние отеля из набора начальных данных.

    Начальные данные копируются, поэтому один и тот же SeedData можно
    использовать для нескольких независимых состояний.
    """
    seed = (seed or default_seed()).fresh_copy()
    return HotelState(
        rooms=InMemoryRoomRepository(seed.rooms),
        guests=InMemoryGuestRepository(seed.guests),
        menu=InMemoryMenuRepository(seed.menu_items),
        bookings=InMemoryBookingRepository(id_start=id_start),
        bills=InMemoryBillRepository(id_start=id_start),
        orders=InMemoryOrderRepository(id_start=id_start),
        logger=logger,
    )
