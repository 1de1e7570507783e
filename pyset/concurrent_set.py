from typing import Callable, Iterable, Optional

from .base import Element, SetBase, V, check_set
from .rwlock import ReadWriteLock
from .set import Set


class ConcurrentSet(SetBase[V]):
    """A set that may be shared between threads.

    Wraps a :class:`Set` behind a :class:`ReadWriteLock`. Queries and
    ``subset`` hold the lock in shared mode, while ``add``, ``remove``,
    ``clear`` and ``pop`` hold it exclusively. Every operation releases the
    lock before returning.

    Operations on a single ConcurrentSet are sequentially consistent.
    Nothing is promised across sets: ``union(a, b)`` reads ``a`` and ``b``
    one after the other and either may change in between. Callers needing
    a joint snapshot of several sets must synchronize externally.

    ``map`` and ``filter`` copy the members under the shared lock and call
    the callback on that copy with no lock held, so the callback may read or
    mutate this set or any other. Members added by the callback are not
    seen by the running ``map`` or ``filter``.

    Args:
        items (iterable): Initial members. Repeated values are stored once.
    """

    def __init__(self, items: Iterable[V] = ()):
        self._set = Set(items)
        self._lock = ReadWriteLock()

    def add(self, item: V) -> None:
        with self._lock.write_context():
            self._set.add(item)

    def remove(self, item: V) -> None:
        with self._lock.write_context():
            self._set.remove(item)

    def clear(self) -> None:
        with self._lock.write_context():
            self._set.clear()

    def pop(self) -> Optional[Element]:
        with self._lock.write_context():
            return self._set.pop()

    def contains(self, item: V) -> bool:
        with self._lock.read_context():
            return self._set.contains(item)

    def size(self) -> int:
        with self._lock.read_context():
            return self._set.size()

    def enumerate(self) -> list:
        with self._lock.read_context():
            return self._set.enumerate()

    def copy(self) -> "ConcurrentSet":
        with self._lock.read_context():
            members = self._set.enumerate()
        return type(self)(members)

    # Callbacks run on a snapshot after the lock is released.
    def map(self, f: Callable[[V], V]) -> "ConcurrentSet":
        with self._lock.read_context():
            members = self._set.enumerate()
        return type(self)(f(element) for element in members)

    def filter(self, p: Callable[[V], bool]) -> "ConcurrentSet":
        with self._lock.read_context():
            members = self._set.enumerate()
        return type(self)(element for element in members if p(element))

    def subset(self, other: SetBase) -> bool:
        check_set(other)
        if other is self:
            return True
        with self._lock.read_context():
            return self._set.subset(other)
