"""
Инфраструктурный слой контекста отчетности.

Преобразует отчет в документ для выгрузки. Запись файла остается
за вызывающей стороной.
"""

import json
from datetime import datetime
from typing import Optional, Union

from .domain import Report
from .interfaces import IReportRenderer

SEPARATOR = "=" * 32


class PlainTextReportRenderer(IReportRenderer):
    """Текстовый отчет в формате 'Метка: значение'."""

    extension = "txt"

    def __init__(
        self,
        title: str = "HOTEL MANAGEMENT SYSTEM REPORT",
        currency_symbol: str = "$",
        timestamp_format: str = "%Y-%m-%d %H:%M:%S",
    ):
        self.title = title
        self.currency_symbol = currency_symbol
        self.timestamp_format = timestamp_format

    def render(self, report: Report) -> str:
        lines = [
            self.title,
            f"Generated: {report.generated_at.strftime(self.timestamp_format)}",
            SEPARATOR,
            "",
            "ROOM STATISTICS:",
            f"- Total Rooms: {report.total_rooms}",
            f"- Available: {report.available_rooms}",
            f"- Occupied: {report.occupied_rooms}",
            "",
            "OPERATIONS:",
            f"- Total Bookings: {report.total_bookings}",
            f"- Total Orders: {report.total_orders}",
            "",
            "FINANCIAL:",
            f"- Total Revenue: {self.format_money(report.total_revenue)}",
        ]
        return "\n".join(lines) + "\n"

    def format_money(self, amount: float) -> str:
        return f"{self.currency_symbol}{amount:.2f}"


class JsonReportRenderer(IReportRenderer):
    """Отчет в формате JSON."""

    extension = "json"

    def render(self, report: Report) -> str:
        return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)


def report_token(moment: Optional[datetime] = None) -> str:
    """Метка для имени файла: миллисекунды с начала эпохи."""
    moment = moment or datetime.now()
    return str(int(moment.timestamp() * 1000))


def report_filename(
    token: Union[str, int, None] = None,
    prefix: str = "hotel-report",
    extension: str = "txt",
) -> str:
    """Имя файла отчета: <prefix>-<token>.<extension>."""
    if token is None or str(token) == "":
        token = report_token()
    return f"{prefix}-{token}.{extension}"
