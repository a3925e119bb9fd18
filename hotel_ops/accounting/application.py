"""
Прикладной слой контекста учета.
"""

from typing import TYPE_CHECKING, List, Optional

from pydantic import Field, field_validator

from ..shared_kernel import DomainException, ILogger, RequestModel, StdLogger, parse_model
from .domain import Bill, BillingPolicy, BillingService

if TYPE_CHECKING:
    from ..state import HotelState


# ===================================================================
# Команды (Commands) и запросы (Queries)
# ===================================================================


class BillAmounts(RequestModel):
    """Денежные поля счета; незаполненные поля считаются нулем."""

    room_price_per_night: float = 0.0
    services: float = 0.0

    @field_validator("room_price_per_night", "services", mode="before")
    @classmethod
    def empty_is_zero(cls, v):
        return 0.0 if v is None else v


class GenerateBillCommand(BillAmounts):
    """Команда выставления счета."""

    guest_name: str = Field(..., min_length=1)
    room_no: str = Field(..., min_length=1)
    nights: int = Field(..., gt=0)


class PreviewBillQuery(BillAmounts):
    """Запрос предварительного итога по незаполненной форме."""

    nights: float = 0.0

    @field_validator("nights", mode="before")
    @classmethod
    def empty_nights_is_zero(cls, v):
        return 0.0 if v is None else v


class BillingApplicationService:
    """Сервис приложения для выставления счетов."""

    def __init__(self, state: "HotelState", logger: Optional[ILogger] = None):
        self._state = state
        self._logger = logger or StdLogger("hotel_ops.accounting")
        self._billing_service = BillingService(state.bills)

    def generate_bill(
        self,
        guest_name: str,
        room_no: str,
        nights,
        room_price_per_night=0,
        services=0,
    ) -> Bill:
        """Рассчитывает счет и добавляет его в журнал."""
        try:
            command = parse_model(
                GenerateBillCommand,
                guest_name=guest_name,
                room_no=room_no,
                nights=nights,
                room_price_per_night=room_price_per_night,
                services=services,
            )
            with self._state:
                bill = self._billing_service.generate_bill(**command.model_dump())
        except DomainException as e:
            self._logger.warning("Счет не выставлен", room_no=room_no, reason=str(e))
            raise

        self._logger.info(
            "Выставлен счет", bill_id=bill.id, room_no=bill.room_no, total=bill.total
        )
        return bill

    def preview_total(self, nights, room_price_per_night=0, services=0) -> float:
        """Итог по еще не выставленному счету (без сохранения)."""
        query = parse_model(
            PreviewBillQuery,
            nights=nights,
            room_price_per_night=room_price_per_night,
            services=services,
        )
        return BillingPolicy.total(query.nights, query.room_price_per_night, query.services)

    def list_bills(self) -> List[Bill]:
        return self._state.bills.list_all()
