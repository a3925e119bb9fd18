"""
Прикладной слой контекста отчетности.

Сервисы только читают состояние отеля.
"""

from typing import TYPE_CHECKING, Dict, List, Optional, Tuple, Union

from ..shared_kernel import ILogger, RequestModel, StdLogger, ValidationError, parse_model
from .domain import Report, SearchKind, filter_records
from .infrastructure import PlainTextReportRenderer, report_filename, report_token
from .interfaces import IReportRenderer

if TYPE_CHECKING:
    from ..state import HotelState


class SearchQuery(RequestModel):
    """Запрос поиска по записям одного вида."""

    kind: SearchKind
    query: Optional[str] = None


class QueryApplicationService:
    """Сервис приложения для поиска по записям."""

    def __init__(self, state: "HotelState"):
        self._state = state
        self._sources = {
            SearchKind.GUESTS: state.guests.list_all,
            SearchKind.BOOKINGS: state.bookings.list_all,
            SearchKind.ORDERS: state.orders.list_all,
        }

    def search(self, kind: Union[SearchKind, str], query: str = "") -> List:
        """Ищет записи выбранного вида по подстроке (без учета регистра)."""
        search = parse_model(SearchQuery, kind=kind, query=query)
        return filter_records(search.kind, self._sources[search.kind](), search.query)


class ReportApplicationService:
    """Сервис приложения для сводного отчета."""

    def __init__(
        self,
        state: "HotelState",
        renderers: Optional[Dict[str, IReportRenderer]] = None,
        filename_prefix: str = "hotel-report",
        logger: Optional[ILogger] = None,
    ):
        self._state = state
        self._renderers = renderers or {"txt": PlainTextReportRenderer()}
        self._filename_prefix = filename_prefix
        self._logger = logger or StdLogger("hotel_ops.reporting")

    def build_report(self) -> Report:
        """Строит отчет по текущему состоянию; ничего не изменяет."""
        report = Report.build(
            rooms=self._state.rooms.list_all(),
            total_bookings=self._state.bookings.count(),
            total_orders=self._state.orders.count(),
            total_revenue=self._state.bills.revenue() + self._state.orders.revenue(),
        )
        self._logger.debug("Построен отчет", **report.to_dict()["rooms"])
        return report

    def render_report(self, report: Optional[Report] = None, format: str = "txt") -> str:
        """Возвращает отчет в виде документа выбранного формата."""
        renderer = self._get_renderer(format)
        return renderer.render(report or self.build_report())

    def export_report(self, format: str = "txt") -> Tuple[str, str]:
        """Строит отчет и возвращает пару (имя файла, содержимое)."""
        renderer = self._get_renderer(format)
        report = self.build_report()
        filename = report_filename(
            token=report_token(report.generated_at),
            prefix=self._filename_prefix,
            extension=renderer.extension,
        )
        self._logger.info("Отчет подготовлен к выгрузке", filename=filename)
        return filename, renderer.render(report)

    def _get_renderer(self, format: str) -> IReportRenderer:
        try:
            return self._renderers[format]
        except KeyError as e:
            raise ValidationError(f"Неподдерживаемый формат отчета: {format}") from e
