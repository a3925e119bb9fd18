"""
Общее ядро (Shared Kernel) для системы управления отелем.

Содержит общие типы данных, исключения и утилиты, используемые
в различных ограниченных контекстах.
"""

from .domain import (
    ConflictError,
    # Исключения
    DomainException,
    # Базовые типы
    EntityId,
    IdSequence,
    RequestModel,
    ValidationError,
    # Утилиты
    describe_errors,
    now,
    parse_model,
    today,
)
from .infrastructure import InMemoryRecordLog, StdLogger, setup_logging
from .interfaces import ILogger

__all__ = [
    # Базовые типы
    "EntityId",
    "IdSequence",
    # Исключения
    "DomainException",
    "ValidationError",
    "ConflictError",
    # Логирование
    "ILogger",
    "StdLogger",
    "setup_logging",
    "InMemoryRecordLog",
    # Утилиты
    "now",
    "today",
    "RequestModel",
    "parse_model",
    "describe_errors",
]
