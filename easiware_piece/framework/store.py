"""
Key-value store the host lends to triggers between lifecycle calls.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class Store(ABC):
    """Async key-value store."""

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """Return the stored value or None."""

    @abstractmethod
    async def put(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``."""

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove ``key`` if present."""


class InMemoryStore(Store):
    """Dict-backed store for local runs and tests."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = dict(initial or {})

    async def get(self, key: str) -> Optional[Any]:
        return self._data.get(key)

    async def put(self, key: str, value: Any) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data
