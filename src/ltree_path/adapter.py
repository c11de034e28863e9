# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Storage adapter contract for LTreePath columns.

Storage layers (ORM column types, driver adapters) convert an LTreePath to
its canonical string on the way in and rebuild it through ``LTreePath.of``
on the way out. This module holds that contract without importing any
database driver.

Reading accepts:
    - None: the column is NULL, returns None
    - LTreePath: returned as is
    - driver objects with a ``value`` attribute (PGobject-like): that value
      is validated as is, so a driver object wrapping NULL is rejected
    - anything else: converted with ``str()``

Validation errors are never translated: an invalid stored value raises
InvalidPathError to the caller.

Example:
    >>> to_storage(LTreePath.of('a.b'))
    'a.b'
    >>> from_storage('a.b')
    LTreePath('a.b')
    >>> from_storage(None) is None
    True
"""

from __future__ import annotations

import logging
from typing import Any

from .path import LTreePath

logger = logging.getLogger(__name__)

STORAGE_TYPE_NAME = 'ltree'


def to_storage(path: LTreePath | None) -> str | None:
    """Return the column value for ``path`` (None for an absent path)."""
    if path is None:
        return None
    return path.to_canonical_string()


def from_storage(data: Any) -> LTreePath | None:
    """Rebuild an LTreePath from a column value.

    Args:
        data: None, an LTreePath, a driver object exposing ``value``, or
            any object whose ``str()`` is a path.

    Returns:
        The validated LTreePath, or None if data is None.

    Raises:
        InvalidPathError: If the stored value is not a valid path, including
            a driver object whose ``value`` is None.
    """
    if data is None:
        return None
    if isinstance(data, LTreePath):
        return data
    if hasattr(data, 'value'):
        raw = data.value
    else:
        raw = str(data)
    logger.debug("Reading %s value %r", STORAGE_TYPE_NAME, raw)
    return LTreePath.of(raw)


class LTreePathAdapter:
    """Object form of the storage contract.

    For frameworks that expect a converter instance rather than functions.

    Example:
        >>> adapter = LTreePathAdapter()
        >>> adapter.type_name
        'ltree'
        >>> adapter.from_storage(adapter.to_storage(LTreePath.of('x.y')))
        LTreePath('x.y')
    """

    type_name = STORAGE_TYPE_NAME

    def to_storage(self, path: LTreePath | None) -> str | None:
        return to_storage(path)

    def from_storage(self, data: Any) -> LTreePath | None:
        return from_storage(data)

    def __repr__(self) -> str:
        return f"LTreePathAdapter(type_name={self.type_name!r})"
