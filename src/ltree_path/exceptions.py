# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""LTreePath exceptions."""

from __future__ import annotations

from typing import Any


class LTreeError(Exception):
    """Base exception for ltree_path errors."""

    pass


class InvalidPathError(LTreeError, ValueError):
    """Raised when a path or a single label fails its grammar check.

    The rejected input is kept on ``value`` for diagnostics.

    Example:
        >>> try:
        ...     LTreePath.of('electronics.')
        ... except InvalidPathError as e:
        ...     e.value
        'electronics.'
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Invalid LTreePath: {value}")
