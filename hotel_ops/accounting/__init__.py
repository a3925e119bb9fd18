"""
Модуль контекста учета (Accounting Context).

Отвечает за выставление счетов за проживание.
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    "domain",
    "application",
    "infrastructure",
    "interfaces",
]
