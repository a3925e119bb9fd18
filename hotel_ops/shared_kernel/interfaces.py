"""
Интерфейсы (порты) общего ядра.
"""

from __future__ import annotations

from typing import Any, Protocol


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...
