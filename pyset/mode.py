from enum import Enum

from .concurrent_set import ConcurrentSet
from .set import Set


class ConcurrencyMode(Enum):
    """How a set guards its storage.

    UNSYNCHRONIZED: No locking. Fastest, but the set must not be mutated
    while another thread uses it.
    CONCURRENT: A reader/writer lock guards the storage, so the set can be
    shared freely between threads.

    """
    UNSYNCHRONIZED = 1
    CONCURRENT = 2

    @property
    def set_class(self):
        """The set class implementing this mode."""
        if self is ConcurrencyMode.CONCURRENT:
            return ConcurrentSet
        return Set


def new(*items, mode=ConcurrencyMode.UNSYNCHRONIZED):
    """Create a set holding items.

    Args:
        *items: Initial members. Repeated values are stored once, and no
            items at all gives an empty set.
        mode (ConcurrencyMode): Selects the set class. Defaults to
            :attr:`ConcurrencyMode.UNSYNCHRONIZED`.

    Returns:
        Set or ConcurrentSet: The new set.

    """
    if not isinstance(mode, ConcurrencyMode):
        raise TypeError("mode must be a ConcurrencyMode, not '{}'.".format(type(mode).__name__))

    ret = mode.set_class()
    for item in items:
        ret.add(item)
    return ret
