"""
Инфраструктурные компоненты общего ядра: логирование и журналы записей в памяти.
"""

import json
import logging
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

from pydantic import BaseModel

from .domain import EntityId, IdSequence
from .interfaces import ILogger

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """Настраивает корневой логгер (только один раз).

    Если у корневого логгера уже есть обработчики, ничего не делает:
    это случается в тестах и при повторном вызове bootstrap.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root.addHandler(handler)


class StdLogger(ILogger):
    """Реализация порта ILogger поверх стандартного модуля logging.

    Контекст, переданный именованными аргументами, дописывается
    к сообщению в виде JSON.
    """

    def __init__(self, name: str = "hotel_ops", logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    def child(self, suffix: str) -> "StdLogger":
        """Возвращает логгер для вложенного компонента."""
        return StdLogger(logger=self._logger.getChild(suffix))

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(self._format(message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(self._format(message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(self._format(message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(self._format(message, kwargs))

    @staticmethod
    def _format(message: str, context: dict) -> str:
        if not context:
            return message
        return f"{message} | {json.dumps(context, default=str, ensure_ascii=False)}"


T = TypeVar("T", bound=BaseModel)


class InMemoryRecordLog(Generic[T]):
    """Базовый класс для журналов записей, хранящихся в памяти.

    Журнал только дополняется: записи не изменяются и не удаляются.
    Идентификаторы выдаются монотонным счетчиком. Снимок состояния
    (snapshot/restore) используется единицей работы для отката.
    """

    def __init__(self, id_start: int = 1):
        self._records: List[T] = []
        self._index: Dict[EntityId, T] = {}
        self._ids = IdSequence(id_start)

    def next_id(self) -> EntityId:
        return self._ids.next_id()

    def add(self, record: T) -> None:
        if record.id in self._index:
            raise ValueError(f"Запись с id {record.id} уже существует")
        self._records.append(record)
        self._index[record.id] = record

    def get_by_id(self, record_id: EntityId) -> Optional[T]:
        return self._index.get(record_id)

    def list_all(self) -> List[T]:
        return list(self._records)

    def count(self) -> int:
        return len(self._records)

    def snapshot(self) -> Tuple[int, EntityId]:
        return len(self._records), self._ids.last

    def restore(self, snapshot: Tuple[int, EntityId]) -> None:
        size, last_id = snapshot
        for record in self._records[size:]:
            del self._index[record.id]
        del self._records[size:]
        self._ids.reset_to(last_id)
