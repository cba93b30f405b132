"""Outcome types and exceptions for OrderedTreeLib.

The core tree operations (insert, lookup, delete) report their result as
plain values: a duplicate insert or a missing key is a normal answer, not
an error. Exceptions are reserved for the Pythonic protocol methods
(``tree[key]``), strict helpers, diagnostics, and programming defects.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class OrderedTreeError(Exception):
    """Base class for all OrderedTreeLib exceptions."""
    pass


class DuplicateKeyError(OrderedTreeError, KeyError):
    """Raised by strict helpers when a key is already present."""
    pass


class KeyNotFoundError(OrderedTreeError, KeyError):
    """Raised by ``tree[key]`` when no node holds the key."""
    pass


class InvariantViolationError(OrderedTreeError):
    """Raised when the BST property or the node graph is found corrupted."""
    pass


class ConcurrentModificationError(OrderedTreeError, RuntimeError):
    """Raised when a tree is mutated while a traversal is in progress."""
    pass


class ConfigurationError(OrderedTreeError, ValueError):
    """Raised when a traversal configuration is inconsistent."""
    pass


class InsertOutcome(Enum):
    """Result of ``OrderedTree.insert``."""
    INSERTED = "inserted"
    DUPLICATE_KEY = "duplicate_key"


class DeletionOutcome(Enum):
    """Result of ``OrderedTree.delete``."""
    REMOVED = "removed"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class LookupResult:
    """Result of a key lookup.

    Truthiness follows ``found`` so callers can write::

        result = tree.lookup(key)
        if result:
            use(result.value)
    """

    found: bool
    key: Any = None
    value: Any = None

    def __bool__(self) -> bool:
        return self.found

    def value_or(self, default: Any = None) -> Any:
        """Return the value if found, otherwise ``default``."""
        return self.value if self.found else default


NOT_FOUND = LookupResult(found=False)
