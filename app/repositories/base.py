"""Base repository class."""

from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from loguru import logger

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """Read-only in-memory store keyed by entity id, in insertion order."""

    def __init__(self, items: Iterable[T]):
        self._items: dict[str, T] = {}
        for item in items:
            self._items[item.id] = item
        logger.debug("{} initialized with {} items", self.__class__.__name__, len(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: str) -> bool:
        return item_id in self._items

    def get(self, item_id: str) -> T | None:
        """Item by id, or None."""
        return self._items.get(item_id)

    def all(self) -> list[T]:
        return list(self._items.values())

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        """Items matching predicate, in insertion order."""
        return [item for item in self._items.values() if predicate(item)]
