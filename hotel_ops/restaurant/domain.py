"""
Доменная модель контекста ресторана.

Заказ оформляется в два этапа: сначала гость набирает корзину
(Cart), которую можно свободно менять, затем корзина фиксируется
в неизменяемый заказ (Order).
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..catalog import MenuItem
from ..shared_kernel import EntityId, ValidationError, now, parse_model
from .interfaces import IOrderRepository


class OrderItem(BaseModel):
    """Позиция заказа: блюдо и количество.

    Позиция неизменяема: корзина при изменении количества
    заменяет ее новой.
    """

    model_config = ConfigDict(frozen=True)

    menu_item: MenuItem
    quantity: int = Field(1, ge=1)

    @property
    def line_total(self) -> float:
        return self.menu_item.price * self.quantity


@dataclass
class Cart:
    """Корзина текущего (еще не оформленного) заказа."""

    _lines: List[OrderItem] = field(default_factory=list, init=False, repr=False)

    @property
    def lines(self) -> List[OrderItem]:
        return list(self._lines)

    def is_empty(self) -> bool:
        return not self._lines

    def add_item(self, menu_item: MenuItem) -> None:
        """Добавляет блюдо; повторное добавление увеличивает количество."""
        if self._find_index(menu_item.id) is not None:
            self.update_quantity(menu_item.id, 1)
            return
        self._lines.append(OrderItem(menu_item=menu_item, quantity=1))

    def update_quantity(self, menu_item_id: EntityId, delta: int) -> None:
        """Изменяет количество на delta; позиции с нулем удаляются."""
        index = self._find_index(menu_item_id)
        if index is None:
            return

        line = self._lines[index]
        new_quantity = line.quantity + delta
        if new_quantity <= 0:
            del self._lines[index]
            return
        self._lines[index] = parse_model(
            OrderItem, menu_item=line.menu_item, quantity=new_quantity
        )

    def total(self) -> float:
        return sum((line.line_total for line in self._lines), 0.0)

    def snapshot_lines(self) -> Tuple[OrderItem, ...]:
        """Позиции на текущий момент; дальнейшие правки корзины их не меняют."""
        return tuple(self._lines)

    def clear(self) -> None:
        self._lines.clear()

    def _find_index(self, menu_item_id: EntityId) -> Optional[int]:
        for index, line in enumerate(self._lines):
            if line.menu_item.id == menu_item_id:
                return index
        return None


class Order(BaseModel):
    """Оформленный заказ. После создания не меняется."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: EntityId
    guest_name: str = Field(..., min_length=1)
    items: Tuple[OrderItem, ...] = Field(..., min_length=1)
    total: float
    timestamp: datetime = Field(default_factory=now)

    @classmethod
    def from_cart(cls, order_id: EntityId, cart: Cart, guest_name: str) -> "Order":
        """Создает заказ из корзины (корзина не меняется)."""
        if cart.is_empty():
            raise ValidationError("Нельзя оформить пустой заказ")

        return parse_model(
            cls,
            id=order_id,
            guest_name=guest_name,
            items=cart.snapshot_lines(),
            total=cart.total(),
        )


class OrderService:
    """Доменный сервис оформления заказов."""

    def __init__(self, order_repository: "IOrderRepository"):
        self.order_repository = order_repository

    def finalize(self, cart: Cart, guest_name: str) -> Order:
        """Фиксирует корзину в заказ и очищает ее."""
        order = Order.from_cart(
            order_id=self.order_repository.next_id(), cart=cart, guest_name=guest_name
        )
        self.order_repository.add(order)
        cart.clear()
        return order
