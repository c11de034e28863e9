# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""LTreePath - an immutable, validated label tree path.

This module provides the LTreePath class, a value type modeled after
PostgreSQL's ``ltree``: a dot-separated sequence of labels naming a node in
a tree. The tree itself is never materialized; every relation between two
paths is derived from their strings.

Path Syntax:
    - Label: one or more of ``A-Z``, ``a-z``, ``0-9``, ``_``
    - Path: labels joined by '.', e.g. 'electronics.phone_and_accessories'
    - No empty labels: leading, trailing or doubled separators are invalid

Example:
    Basic usage::

        path = LTreePath.of('electronics.phone_and_accessories')
        path.is_root()                     # False
        path.get_parent()                  # LTreePath('electronics')
        path.append('smartphones').value   # 'electronics.phone_and_accessories.smartphones'

        LTreePath.of('A.B').is_ancestor_of(LTreePath.of('A.B.C'))   # True
        LTreePath.of('A.B').is_ancestor_of(LTreePath.of('A.BC'))    # False
"""

from __future__ import annotations

import logging
from functools import total_ordering
from typing import Any

from .exceptions import InvalidPathError
from .grammar import SEPARATOR, is_valid_label, is_valid_path

logger = logging.getLogger(__name__)


def _require_path(other: Any, action: str) -> None:
    if not isinstance(other, LTreePath):
        raise TypeError(
            f"cannot {action} LTreePath with {type(other).__name__}"
        )


@total_ordering
class LTreePath:
    """An immutable hierarchical path of labels.

    Instances are built through ``LTreePath.of(raw)`` (or the equivalent
    ``LTreePath(raw)``), which validates the whole string. The stored value
    is exactly the string passed in: nothing is trimmed or case-folded.

    Equality, hashing and ordering use the canonical string only, so paths
    sort like plain strings and can be used as dict keys or set members.

    Attributes:
        value: The canonical string form (read-only).

    Example:
        >>> p = LTreePath.of('A.B')
        >>> c = LTreePath.of('A.B.C')
        >>> p.is_ancestor_of(c), c.is_descendant_of(p)
        (True, True)
        >>> c.get_parent() == p
        True
    """

    __slots__ = ('_value',)

    def __init__(self, value: str) -> None:
        """Validate ``value`` and wrap it.

        Args:
            value: A full path string such as 'a.b.c'.

        Raises:
            InvalidPathError: If value is None, not a string, empty, or does
                not fully match the path grammar.
            AttributeError: If called again on an existing path.
        """
        if hasattr(self, '_value'):
            raise AttributeError(f"{type(self).__name__} is immutable")
        if not is_valid_path(value):
            logger.debug("Rejected path %r", value)
            raise InvalidPathError(value)
        object.__setattr__(self, '_value', value)

    @classmethod
    def of(cls, value: str) -> LTreePath:
        """Build a validated path from its string form.

        Example:
            >>> LTreePath.of('electronics').is_root()
            True
        """
        return cls(value)

    # ==================== Immutability ====================

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[LTreePath], tuple[str]]:
        # Rebuild through the constructor so unpickled data is re-validated.
        return (type(self), (self._value,))

    # ==================== Accessors ====================

    @property
    def value(self) -> str:
        """The canonical string, exactly as given at construction."""
        return self._value

    def to_canonical_string(self) -> str:
        """Return the canonical string form."""
        return self._value

    @property
    def labels(self) -> tuple[str, ...]:
        """The labels of this path, root first."""
        return tuple(self._value.split(SEPARATOR))

    @property
    def depth(self) -> int:
        """Number of labels in this path (1 for a root)."""
        return self._value.count(SEPARATOR) + 1

    # ==================== Structure ====================

    def is_ancestor_of(self, other: LTreePath | None) -> bool:
        """True if this path is a strict ancestor of ``other``.

        The prefix must end on a label boundary: 'A.B' is an ancestor of
        'A.B.C' but not of 'A.BC'. A path is never its own ancestor.

        Raises:
            TypeError: If other is neither None nor an LTreePath.
        """
        if other is None:
            return False
        _require_path(other, 'relate')
        if len(self._value) >= len(other._value):
            return False
        return (
            other._value.startswith(self._value)
            and other._value[len(self._value)] == SEPARATOR
        )

    def is_descendant_of(self, other: LTreePath | None) -> bool:
        """True if this path is a strict descendant of ``other``.

        Raises:
            TypeError: If other is neither None nor an LTreePath.
        """
        if other is None:
            return False
        _require_path(other, 'relate')
        if len(other._value) >= len(self._value):
            return False
        return other.is_ancestor_of(self)

    def append(self, label: str) -> LTreePath:
        """Return a new path with ``label`` added as the last level.

        Args:
            label: A single label, without separators.

        Returns:
            A new LTreePath; this one is left unchanged.

        Raises:
            InvalidPathError: If label is None, contains the separator, or
                is not a valid label.

        Example:
            >>> LTreePath.of('electronics').append('phones').value
            'electronics.phones'
        """
        if not is_valid_label(label):
            logger.debug("Rejected label %r for %r", label, self._value)
            raise InvalidPathError(label)
        return type(self)(f"{self._value}{SEPARATOR}{label}")

    def get_parent(self) -> LTreePath | None:
        """Return the parent path, or None if this path is a root."""
        last = self._value.rfind(SEPARATOR)
        if last == -1:
            return None
        return type(self)(self._value[:last])

    def is_root(self) -> bool:
        """True if this path has exactly one label."""
        return SEPARATOR not in self._value

    def has_parent(self) -> bool:
        """True if this path has more than one label."""
        return SEPARATOR in self._value

    # ==================== Comparison ====================

    def compare_to(self, other: LTreePath) -> int:
        """Compare canonical strings: -1, 0 or 1.

        Raises:
            TypeError: If other is not an LTreePath.
        """
        _require_path(other, 'compare')
        if self._value == other._value:
            return 0
        return -1 if self._value < other._value else 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LTreePath):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LTreePath):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    # ==================== Special Methods ====================

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"LTreePath({self._value!r})"
