"""
Модуль контекста отчетности (Reporting Context).

Отвечает за поиск по гостям, бронированиям и заказам,
а также за сводный отчет и его выгрузку.
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    "domain",
    "application",
    "infrastructure",
    "interfaces",
]
