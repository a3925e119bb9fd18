"""
Доменная модель справочного контекста (Catalog).

Номера, гости и позиции меню загружаются один раз при инициализации
и дальше используются остальными контекстами как справочные данные.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ..shared_kernel import ConflictError, EntityId


class RoomType(str, Enum):
    """Типы номеров в отеле."""

    SINGLE = "Single"
    DOUBLE = "Double"
    SUITE = "Suite"
    DELUXE = "Deluxe"


class RoomStatus(str, Enum):
    """Статусы номеров."""

    AVAILABLE = "Available"  # Свободен, можно бронировать
    OCCUPIED = "Occupied"  # Занят
    MAINTENANCE = "Maintenance"  # На обслуживании


class MenuCategory(str, Enum):
    """Категории меню ресторана."""

    STARTER = "Starter"
    MAIN = "Main"
    DESSERT = "Dessert"
    BEVERAGE = "Beverage"


class Room(BaseModel):
    """Номер в отеле."""

    model_config = ConfigDict(validate_assignment=True)

    id: EntityId
    room_no: str = Field(..., min_length=1)  # Отображаемый номер ("101", "202")
    type: RoomType
    price: float = Field(..., gt=0)  # Цена за ночь
    status: RoomStatus = RoomStatus.AVAILABLE

    @property
    def is_available(self) -> bool:
        return self.status == RoomStatus.AVAILABLE

    def mark_as_occupied(self) -> None:
        """Помечает номер как занятый."""
        if not self.is_available:
            raise ConflictError(
                f"Номер {self.room_no} недоступен для бронирования "
                f"(статус {self.status.value})"
            )
        self.status = RoomStatus.OCCUPIED


class Guest(BaseModel):
    """Гость отеля."""

    model_config = ConfigDict(frozen=True)

    id: EntityId
    name: str
    phone: str
    email: str
    address: str


class MenuItem(BaseModel):
    """Позиция меню ресторана."""

    model_config = ConfigDict(frozen=True)

    id: EntityId
    name: str
    price: float = Field(..., gt=0)
    category: MenuCategory


class SeedData(BaseModel):
    """Начальный набор справочных данных."""

    rooms: List[Room] = Field(default_factory=list)
    guests: List[Guest] = Field(default_factory=list)
    menu_items: List[MenuItem] = Field(default_factory=list)

    def fresh_copy(self) -> "SeedData":
        """Возвращает независимую копию (номера изменяемы)."""
        return self.model_copy(deep=True)
