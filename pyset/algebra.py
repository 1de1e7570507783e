"""Set algebra over pairs of sets.

Every function builds a new set of the same class as its first operand and
leaves both operands untouched. The operands are read one after the other
through their own public operations, so no lock is held across both of them.
"""
import logging
from itertools import chain

from .base import SetBase, check_set
from .concurrent_set import ConcurrentSet


def _check_operands(a, b):
    check_set(a)
    check_set(b)
    if isinstance(a, ConcurrentSet) != isinstance(b, ConcurrentSet):
        logging.warning("Combining a ConcurrentSet with an unsynchronized %s; "
                        "the unsynchronized operand is read without a lock.",
                        type(b if isinstance(a, ConcurrentSet) else a).__name__)


def union(a: SetBase, b: SetBase) -> SetBase:
    """Return the set of values that are members of a, of b, or of both."""
    _check_operands(a, b)
    return type(a)(chain(a.enumerate(), b.enumerate()))


def intersection(a: SetBase, b: SetBase) -> SetBase:
    """Return the set of values that are members of both a and b."""
    _check_operands(a, b)
    return type(a)(x for x in b.enumerate() if a.contains(x))


def difference(a: SetBase, b: SetBase) -> SetBase:
    """Return the symmetric difference of a and b.

    That is the values that are members of exactly one of the two sets. For
    the values of a that are not in b, use :func:`subtract`.
    """
    _check_operands(a, b)
    only_b = (x for x in b.enumerate() if not a.contains(x))
    only_a = (x for x in a.enumerate() if not b.contains(x))
    return type(a)(chain(only_b, only_a))


def subtract(a: SetBase, b: SetBase) -> SetBase:
    """Return the set of members of a that are not members of b."""
    _check_operands(a, b)
    return type(a)(x for x in a.enumerate() if not b.contains(x))
