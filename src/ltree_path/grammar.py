# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Label and path grammar for ltree paths.

A label is one or more ASCII letters, digits or underscores. A path is one
or more labels joined by ``SEPARATOR``. Both patterns are always applied with
``fullmatch``, so a valid prefix followed by anything else is rejected.

Example:
    >>> is_valid_path('electronics.phone_and_accessories')
    True
    >>> is_valid_path('A.B$')
    False
    >>> is_valid_label('a.b')
    False
"""

from __future__ import annotations

import re
from typing import Any

SEPARATOR = '.'

LABEL_PATTERN = re.compile(r'[A-Za-z0-9_]+')
PATH_PATTERN = re.compile(r'[A-Za-z0-9_]+(?:\.[A-Za-z0-9_]+)*')


def is_valid_label(label: Any) -> bool:
    """True if ``label`` is a single, non-empty label string."""
    if not isinstance(label, str) or SEPARATOR in label:
        return False
    return LABEL_PATTERN.fullmatch(label) is not None


def is_valid_path(path: Any) -> bool:
    """True if ``path`` is a non-empty, separator-joined sequence of labels."""
    if not isinstance(path, str) or not path:
        return False
    return PATH_PATTERN.fullmatch(path) is not None
