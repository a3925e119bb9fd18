"""
Доменная модель контекста учета.

Счет за проживание: стоимость номера за все ночи плюс дополнительные
услуги. Счета только создаются; изменение и аннулирование не
поддерживаются.
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from ..shared_kernel import EntityId, parse_model, today
from .interfaces import IBillRepository


class Bill(BaseModel):
    """Счет за проживание."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, allow_inf_nan=False)

    id: EntityId
    guest_name: str = Field(..., min_length=1)
    room_no: str = Field(..., min_length=1)
    nights: int = Field(..., gt=0)
    room_charge: float  # nights * цена номера за ночь
    services: float = 0.0  # Отрицательные значения не отсекаются
    total: float
    date: dt.date = Field(default_factory=today)


class BillingPolicy:
    """Правила расчета счета."""

    @staticmethod
    def room_charge(nights: float, room_price_per_night: float) -> float:
        return nights * room_price_per_night

    @classmethod
    def total(
        cls, nights: float, room_price_per_night: float = 0, services: float = 0
    ) -> float:
        return cls.room_charge(nights, room_price_per_night) + services


class BillingService:
    """Доменный сервис для выставления счетов."""

    def __init__(self, bill_repository: "IBillRepository"):
        self.bill_repository = bill_repository

    def generate_bill(
        self,
        guest_name: str,
        room_no: str,
        nights: int,
        room_price_per_night: float = 0.0,
        services: float = 0.0,
    ) -> Bill:
        """Рассчитывает и сохраняет счет."""
        room_charge = BillingPolicy.room_charge(nights, room_price_per_night)
        bill = parse_model(
            Bill,
            id=self.bill_repository.next_id(),
            guest_name=guest_name,
            room_no=room_no,
            nights=nights,
            room_charge=room_charge,
            services=services,
            total=room_charge + services,
        )

        self.bill_repository.add(bill)
        return bill
