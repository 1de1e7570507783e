import logging
from abc import abstractmethod
from collections.abc import Collection, Hashable
from dataclasses import dataclass
from typing import Callable, Generic, Iterator, Optional, TypeVar

V = TypeVar("V", bound=Hashable)


@dataclass(frozen=True)
class Element(Generic[V]):
    """A value taken out of a set.

    Operations that may have nothing to hand back return either an Element or
    None. Wrapping the value keeps a stored ``None``, ``0`` or ``""`` distinct
    from "no element at all".
    """

    value: V


class SetBase(Collection, Generic[V]):
    """Interface shared by the unsynchronized and the concurrent set.

    Subclasses provide storage and the primitive operations; this class
    derives the Python container protocol, the iteration cursor and the
    operator forms of the set algebra from them. Iteration order is never
    specified and may differ between two calls on the same set.
    """

    # Mutable containers are unhashable.
    __hash__ = None

    @abstractmethod
    def add(self, item: V) -> None:
        """Add item to this set. Adding a member again has no effect."""

    @abstractmethod
    def remove(self, item: V) -> None:
        """Remove item from this set. Removing a non-member has no effect."""

    @abstractmethod
    def contains(self, item: V) -> bool:
        """Return True if item is a member of this set."""

    @abstractmethod
    def size(self) -> int:
        """Return the number of members."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every member."""

    @abstractmethod
    def enumerate(self) -> list:
        """Return a new list of the members, in arbitrary order."""

    @abstractmethod
    def pop(self) -> Optional[Element]:
        """Remove an arbitrary member and return it wrapped in an Element.

        Returns None, and leaves the set untouched, if the set is empty.
        """

    @abstractmethod
    def map(self, f: Callable[[V], V]) -> "SetBase":
        """Return a new set of the distinct values f(v) for each member v."""

    @abstractmethod
    def filter(self, p: Callable[[V], bool]) -> "SetBase":
        """Return a new set of the members v for which p(v) holds."""

    @abstractmethod
    def subset(self, other: "SetBase") -> bool:
        """Return True if every member of this set is a member of other."""

    @abstractmethod
    def copy(self) -> "SetBase":
        """Return a shallow copy of this set."""

    def is_empty(self) -> bool:
        return self.size() == 0

    def iterate(self) -> Callable[[], Optional[Element]]:
        """Return a cursor over a snapshot of the members.

        Each call of the cursor returns one more member as an Element, and
        None once every member has been returned. Later changes to the set
        are not seen by the cursor.
        """
        remaining = iter(self.enumerate())

        def cursor() -> Optional[Element]:
            try:
                value = next(remaining)
            except StopIteration:
                logging.debug("Set cursor exhausted")
                return None
            return Element(value)

        return cursor

    def __contains__(self, item: object) -> bool:
        return self.contains(item)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[V]:
        return iter(self.enumerate())

    def __repr__(self) -> str:
        members = self.enumerate()
        if members:
            return "{}([{}])".format(type(self).__name__, ", ".join(map(repr, members)))
        return "{}()".format(type(self).__name__)

    def __or__(self, other: "SetBase") -> "SetBase":
        if not isinstance(other, SetBase):
            return NotImplemented
        from .algebra import union
        return union(self, other)

    def __and__(self, other: "SetBase") -> "SetBase":
        if not isinstance(other, SetBase):
            return NotImplemented
        from .algebra import intersection
        return intersection(self, other)

    def __xor__(self, other: "SetBase") -> "SetBase":
        if not isinstance(other, SetBase):
            return NotImplemented
        from .algebra import difference
        return difference(self, other)

    def __sub__(self, other: "SetBase") -> "SetBase":
        if not isinstance(other, SetBase):
            return NotImplemented
        from .algebra import subtract
        return subtract(self, other)

    def __le__(self, other: "SetBase") -> bool:
        if not isinstance(other, SetBase):
            return NotImplemented
        return self.subset(other)


def check_set(obj: object) -> None:
    """Raise TypeError unless obj is one of the set classes."""
    if not isinstance(obj, SetBase):
        raise TypeError("Expected a set, got an object of type '{}'.".format(type(obj).__name__))
