# flake8: noqa
from .base import Element, SetBase
from .set import Set
from .concurrent_set import ConcurrentSet
from .rwlock import ReadWriteLock
from .mode import ConcurrencyMode, new
from .algebra import union, intersection, difference, subtract
from importlib.metadata import metadata

meta = metadata("pyset-collection")
__version__ = meta["Version"]
__author__ = meta.get("Author", "")
__license__ = meta.get("License", "")
__email__ = meta.get("Author-email", "")
__program_name__ = meta["Name"]


__all__ = [
    "Element",
    "SetBase",
    "Set",
    "ConcurrentSet",
    "ReadWriteLock",
    "ConcurrencyMode",
    "new",
    "union",
    "intersection",
    "difference",
    "subtract",
]
