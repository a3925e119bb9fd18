"""
Интерфейсы (порты) для контекста отчетности.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .domain import Report


class IReportRenderer(Protocol):
    """Интерфейс для преобразования отчета в документ."""

    extension: str

    def render(self, report: Report) -> str: ...
