"""
Интерфейсы (порты) справочного контекста.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from ..shared_kernel import EntityId
from .domain import Guest, MenuCategory, MenuItem


class IGuestRepository(Protocol):
    """Интерфейс репозитория гостей (только чтение)."""

    def get_by_id(self, guest_id: EntityId) -> Optional[Guest]: ...
    def list_all(self) -> List[Guest]: ...


class IMenuRepository(Protocol):
    """Интерфейс репозитория меню (только чтение)."""

    def get_by_id(self, item_id: EntityId) -> Optional[MenuItem]: ...
    def list_all(self) -> List[MenuItem]: ...
    def find_by_category(self, category: MenuCategory) -> List[MenuItem]: ...
