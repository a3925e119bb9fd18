"""
Основные доменные типы и утилиты общего ядра.
"""

from datetime import date, datetime
from itertools import count
from typing import Any, Iterator, Type, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as ModelValidationError

# Общие типы идентификаторов
EntityId = int


class IdSequence:
    """Монотонный генератор идентификаторов в пределах одной сессии.

    Идентификаторы не зависят от системных часов, поэтому две записи,
    созданные в один и тот же момент, всегда получают разные id.
    """

    def __init__(self, start: int = 1):
        self._start = start
        self._counter: Iterator[int] = count(start)
        self._last = start - 1

    def next_id(self) -> EntityId:
        """Возвращает следующий идентификатор."""
        self._last = next(self._counter)
        return self._last

    @property
    def last(self) -> EntityId:
        """Последний выданный идентификатор."""
        return self._last

    def reset_to(self, last: EntityId) -> None:
        """Возвращает счетчик к ранее выданному значению (для отката)."""
        self._last = last
        self._counter = count(last + 1)


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class ValidationError(DomainException):
    """Отсутствуют или некорректны обязательные входные данные."""

    pass


class ConflictError(DomainException):
    """Операция отклонена из-за текущего состояния."""

    pass


class RequestModel(BaseModel):
    """Базовый класс для входящих запросов и команд.

    Строки обрезаются по краям, NaN и бесконечность не принимаются.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, allow_inf_nan=False)


M = TypeVar("M", bound=BaseModel)


def parse_model(model_cls: Type[M], **data: Any) -> M:
    """Создает модель, переводя ошибки pydantic в ValidationError."""
    try:
        return model_cls(**data)
    except ModelValidationError as e:
        raise ValidationError(describe_errors(e)) from e


def describe_errors(error: ModelValidationError) -> str:
    """Сводит ошибки pydantic в одну строку: поле и причина."""
    details = "; ".join(
        f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in error.errors()
    )
    return f"Некорректные данные {error.title}: {details}"


# Общие утилиты
def now() -> datetime:
    """Возвращает текущую дату и время."""
    return datetime.now()


def today() -> date:
    """Возвращает текущую дату."""
    return date.today()
