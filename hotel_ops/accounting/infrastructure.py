"""
Инфраструктурный слой контекста учета.
"""

from ..shared_kernel import InMemoryRecordLog
from .domain import Bill
from .interfaces import IBillRepository


class InMemoryBillRepository(InMemoryRecordLog[Bill], IBillRepository):
    """In-memory реализация журнала счетов."""

    def revenue(self) -> float:
        """Сумма всех выставленных счетов."""
        return sum(bill.total for bill in self._records)
