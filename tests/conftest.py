"""
Общие фикстуры для тестов.

Каждый тест получает собственное состояние отеля, созданное
из стандартного набора начальных данных.
"""

from unittest.mock import MagicMock

import pytest

from hotel_ops.accounting.application import BillingApplicationService
from hotel_ops.booking.application import BookingApplicationService
from hotel_ops.reporting.application import QueryApplicationService, ReportApplicationService
from hotel_ops.restaurant.application import OrderApplicationService
from hotel_ops.shared_kernel import ILogger
from hotel_ops.state import HotelState, init_state


@pytest.fixture
def mock_logger() -> MagicMock:
    """Фикстура для мокированного логгера."""
    return MagicMock(spec=ILogger)


@pytest.fixture
def state(mock_logger: MagicMock) -> HotelState:
    """Состояние отеля со стандартными номерами, гостями и меню."""
    return init_state(logger=mock_logger)


@pytest.fixture
def booking_service(state: HotelState, mock_logger: MagicMock) -> BookingApplicationService:
    return BookingApplicationService(state, logger=mock_logger)


@pytest.fixture
def billing_service(state: HotelState, mock_logger: MagicMock) -> BillingApplicationService:
    return BillingApplicationService(state, logger=mock_logger)


@pytest.fixture
def order_service(state: HotelState, mock_logger: MagicMock) -> OrderApplicationService:
    return OrderApplicationService(state, logger=mock_logger)


@pytest.fixture
def query_service(state: HotelState) -> QueryApplicationService:
    return QueryApplicationService(state)


@pytest.fixture
def report_service(state: HotelState, mock_logger: MagicMock) -> ReportApplicationService:
    return ReportApplicationService(state, logger=mock_logger)
