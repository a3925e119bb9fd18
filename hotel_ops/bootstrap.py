from typing import Any, Dict, Optional

from .accounting.application import BillingApplicationService
from .booking.application import BookingApplicationService
from .catalog import SeedData
from .config import HotelSettings
from .reporting.application import QueryApplicationService, ReportApplicationService
from .reporting.infrastructure import JsonReportRenderer, PlainTextReportRenderer
from .restaurant.application import OrderApplicationService
from .shared_kernel import ILogger, StdLogger, setup_logging
from .state import init_state


def bootstrap_app(
    seed: Optional[SeedData] = None,
    settings: Optional[HotelSettings] = None,
    logger: Optional[ILogger] = None,
) -> Dict[str, Any]:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or HotelSettings()
    setup_logging(settings.log_level)
    logger = logger or StdLogger("hotel_ops")

    # 1. Состояние отеля: одна единица работы на сессию
    state = init_state(seed=seed, id_start=settings.id_start, logger=_child(logger, "state"))

    # 2. Сервисы получают одно и то же состояние
    renderers = {
        "txt": PlainTextReportRenderer(
            title=settings.report_title, currency_symbol=settings.currency_symbol
        ),
        "json": JsonReportRenderer(),
    }

    return {
        "settings": settings,
        "state": state,
        "booking_service": BookingApplicationService(state, _child(logger, "booking")),
        "billing_service": BillingApplicationService(state, _child(logger, "accounting")),
        "order_service": OrderApplicationService(state, _child(logger, "restaurant")),
        "query_service": QueryApplicationService(state),
        "report_service": ReportApplicationService(
            state,
            renderers=renderers,
            filename_prefix=settings.report_filename_prefix,
            logger=_child(logger, "reporting"),
        ),
    }


def _child(logger: ILogger, suffix: str) -> ILogger:
    # Сторонние реализации ILogger могут не поддерживать вложенные логгеры
    child = getattr(logger, "child", None)
    return child(suffix) if callable(child) else logger
