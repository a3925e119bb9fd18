"""
Интерфейсы (порты) для контекста учета.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional, Protocol, Tuple

from ..shared_kernel import EntityId

if TYPE_CHECKING:
    from .domain import Bill


class IBillRepository(Protocol):
    """Интерфейс журнала счетов."""

    def next_id(self) -> EntityId: ...
    def add(self, bill: Bill) -> None: ...
    def get_by_id(self, bill_id: EntityId) -> Optional[Bill]: ...
    def list_all(self) -> List[Bill]: ...
    def count(self) -> int: ...
    def revenue(self) -> float: ...
    def snapshot(self) -> Tuple[int, EntityId]: ...
    def restore(self, snapshot: Any) -> None: ...
