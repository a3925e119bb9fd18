"""
Интерфейсы (порты) для контекста ресторана.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional, Protocol, Tuple

from ..shared_kernel import EntityId

if TYPE_CHECKING:
    from .domain import Order


class IOrderRepository(Protocol):
    """Интерфейс журнала заказов."""

    def next_id(self) -> EntityId: ...
    def add(self, order: Order) -> None: ...
    def get_by_id(self, order_id: EntityId) -> Optional[Order]: ...
    def list_all(self) -> List[Order]: ...
    def count(self) -> int: ...
    def revenue(self) -> float: ...
    def snapshot(self) -> Tuple[int, EntityId]: ...
    def restore(self, snapshot: Any) -> None: ...
