"""
Прикладной слой контекста ресторана.

Корзина принадлежит вызывающей стороне (одна корзина на один
оформляемый заказ); журнал заказов хранится в HotelState.
"""

from typing import TYPE_CHECKING, List, Optional, Union

from pydantic import Field

from ..catalog import MenuCategory, MenuItem
from ..shared_kernel import (
    DomainException,
    EntityId,
    ILogger,
    RequestModel,
    StdLogger,
    ValidationError,
    parse_model,
)
from .domain import Cart, Order, OrderService

if TYPE_CHECKING:
    from ..state import HotelState


class UpdateQuantityCommand(RequestModel):
    """Команда изменения количества блюда в корзине."""

    menu_item_id: EntityId
    delta: int


class FinalizeOrderCommand(RequestModel):
    """Команда оформления заказа."""

    guest_name: str = Field(..., min_length=1)


class OrderApplicationService:
    """Сервис приложения для заказов ресторана."""

    def __init__(self, state: "HotelState", logger: Optional[ILogger] = None):
        self._state = state
        self._logger = logger or StdLogger("hotel_ops.restaurant")
        self._order_service = OrderService(state.orders)

    def menu(self, category: Union[MenuCategory, str, None] = None) -> List[MenuItem]:
        """Меню целиком или одна категория."""
        if category is None:
            return self._state.menu.list_all()
        try:
            category = MenuCategory(category)
        except ValueError as e:
            raise ValidationError(f"Неизвестная категория меню: {category}") from e
        return self._state.menu.find_by_category(category)

    def get_menu_item(self, menu_item_id: EntityId) -> MenuItem:
        item = self._state.menu.get_by_id(menu_item_id)
        if item is None:
            raise ValidationError(f"Позиция меню с id {menu_item_id} не найдена")
        return item

    def new_cart(self) -> Cart:
        return Cart()

    def add_item(self, cart: Cart, menu_item: Union[MenuItem, EntityId]) -> Cart:
        """Добавляет блюдо в корзину (по объекту или по id)."""
        if not isinstance(menu_item, MenuItem):
            menu_item = self.get_menu_item(menu_item)
        cart.add_item(menu_item)
        return cart

    def update_quantity(self, cart: Cart, menu_item_id: EntityId, delta: int) -> Cart:
        command = parse_model(UpdateQuantityCommand, menu_item_id=menu_item_id, delta=delta)
        cart.update_quantity(command.menu_item_id, command.delta)
        return cart

    def cart_total(self, cart: Cart) -> float:
        return cart.total()

    def finalize(self, cart: Cart, guest_name: str) -> Order:
        """Оформляет заказ из корзины; корзина после этого пуста."""
        try:
            command = parse_model(FinalizeOrderCommand, guest_name=guest_name)
            with self._state:
                order = self._order_service.finalize(cart, command.guest_name)
        except DomainException as e:
            self._logger.warning("Заказ не оформлен", reason=str(e))
            raise

        self._logger.info(
            "Оформлен заказ",
            order_id=order.id,
            guest_name=order.guest_name,
            items=len(order.items),
            total=order.total,
        )
        return order

    def list_orders(self) -> List[Order]:
        return self._state.orders.list_all()
