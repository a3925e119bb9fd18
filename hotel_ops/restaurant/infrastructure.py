"""
Инфраструктурный слой контекста ресторана.
"""

from ..shared_kernel import InMemoryRecordLog
from .domain import Order
from .interfaces import IOrderRepository


class InMemoryOrderRepository(InMemoryRecordLog[Order], IOrderRepository):
    """In-memory реализация журнала заказов."""

    def revenue(self) -> float:
        """Сумма всех оформленных заказов."""
        return sum(order.total for order in self._records)
