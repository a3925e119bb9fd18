"""
Демонстрация работы доменного ядра: одна короткая сессия
от бронирования до выгрузки отчета.

Запуск: python -m hotel_ops [каталог для сохранения отчета]
"""

import sys
from pathlib import Path

from .bootstrap import bootstrap_app
from .shared_kernel import DomainException


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    app = bootstrap_app()
    bookings = app["booking_service"]
    billing = app["billing_service"]
    orders = app["order_service"]
    query = app["query_service"]
    reports = app["report_service"]

    print("--- Номера ---")
    for room in bookings.list_rooms():
        print(f"{room.room_no:>4} {room.type.value:<7} {room.price:>6.2f} {room.status.value}")

    print("\n--- Бронирование ---")
    booking = bookings.create_booking(1, "Jane Smith", "2024-06-01", "2024-06-04")
    print(f"Бронирование #{booking.id}: {booking.guest_name}, номер {booking.room_no}")
    try:
        bookings.create_booking(1, "John Doe", "2024-06-02", "2024-06-03")
    except DomainException as e:
        print(f"Ошибка бронирования: {e}")

    print("\n--- Счет ---")
    bill = billing.generate_bill("Jane Smith", booking.room_no, 3, 80, 20)
    print(f"Счет #{bill.id}: {bill.room_charge:.2f} + {bill.services:.2f} = {bill.total:.2f}")

    print("\n--- Ресторан ---")
    cart = orders.new_cart()
    orders.add_item(cart, 4)
    orders.add_item(cart, 12)
    orders.add_item(cart, 12)
    print(f"Корзина: {orders.cart_total(cart):.2f}")
    order = orders.finalize(cart, "Jane Smith")
    print(f"Заказ #{order.id}: {order.total:.2f}")

    print("\n--- Поиск ---")
    for guest in query.search("guests", "jane"):
        print(f"{guest.name} <{guest.email}>")

    print("\n--- Отчет ---")
    filename, content = reports.export_report()
    print(content)
    if argv:
        path = Path(argv[0]) / filename
        path.write_text(content, encoding="utf-8")
        print(f"Отчет сохранен: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
