import logging
from typing import Callable, Iterable, Optional

from .base import Element, SetBase, V, check_set


class Set(SetBase[V]):
    def __init__(self, items: Iterable[V] = ()):
        """
        A Set is an unordered collection of distinct hashable values.

        It takes no locks and must not be shared between threads that
        mutate it. See :class:`ConcurrentSet` for the synchronized variant.

        Args:
          items: An iterable with which to initialise the set elements.
            Repeated values are stored once.
        """

        self._elements: dict[V, None] = {}

        for item in items:
            self._elements[item] = None

    def add(self, item: V) -> None:
        """Add item to this set."""

        self._elements[item] = None

    def remove(self, item: V) -> None:
        """Remove item from this set if it is present."""

        self._elements.pop(item, None)

    def contains(self, item: V) -> bool:
        return item in self._elements

    def size(self) -> int:
        return len(self._elements)

    def clear(self) -> None:
        self._elements.clear()

    def enumerate(self) -> list:
        return list(self._elements)

    def pop(self) -> Optional[Element]:
        if not self._elements:
            logging.debug("pop called on an empty set")
            return None

        value, _ = self._elements.popitem()

        return Element(value)

    def copy(self) -> "Set":
        """Return a shallow copy of this set"""

        ret = type(self)()
        ret._elements = self._elements.copy()

        return ret

    # Callbacks see a snapshot, so they may add to or remove from this set.
    def map(self, f: Callable[[V], V]) -> "Set":
        return type(self)(f(element) for element in self.enumerate())

    def filter(self, p: Callable[[V], bool]) -> "Set":
        return type(self)(element for element in self.enumerate() if p(element))

    def subset(self, other: SetBase) -> bool:
        check_set(other)

        for element in self._elements:
            if not other.contains(element):
                return False

        return True
