# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ltree-path - Validated label tree paths modeled after PostgreSQL ltree.

A lightweight, zero-dependency library providing an immutable path value
type ('electronics.phone_and_accessories') with ancestor/descendant checks,
parent and child derivation, and ordering.
"""

import logging

__version__ = "0.1.0"

from .adapter import LTreePathAdapter, from_storage, to_storage
from .exceptions import InvalidPathError, LTreeError
from .grammar import SEPARATOR, is_valid_label, is_valid_path
from .path import LTreePath

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core classes
    "LTreePath",
    # Grammar
    "SEPARATOR",
    "is_valid_label",
    "is_valid_path",
    # Storage adapters
    "LTreePathAdapter",
    "to_storage",
    "from_storage",
    # Exceptions
    "LTreeError",
    "InvalidPathError",
]
