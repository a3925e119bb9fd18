"""
Модуль контекста ресторана (Restaurant Context).

Отвечает за корзину текущего заказа и журнал оформленных заказов.
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    "domain",
    "application",
    "infrastructure",
    "interfaces",
]
