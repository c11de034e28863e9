# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for the storage adapter contract."""

import pytest

from ltree_path import (
    InvalidPathError,
    LTreePath,
    LTreePathAdapter,
    from_storage,
    to_storage,
)


class FakeDriverObject:
    """Stand-in for a driver value object such as PGobject."""

    def __init__(self, type_name, value):
        self.type = type_name
        self.value = value

    def __str__(self):
        return f"<{self.type}>"


class TestToStorage:
    """Tests for writing paths to a column."""

    def test_path_to_string(self):
        """Test a path becomes its canonical string."""
        assert to_storage(LTreePath.of('electronics.phones')) == 'electronics.phones'

    def test_none_to_none(self):
        """Test an absent path is stored as None."""
        assert to_storage(None) is None


class TestFromStorage:
    """Tests for reading paths from a column."""

    def test_none_from_none(self):
        """Test a NULL column gives None."""
        assert from_storage(None) is None

    def test_from_string(self):
        """Test plain strings are validated into paths."""
        assert from_storage('a.b.c') == LTreePath.of('a.b.c')

    def test_from_path(self):
        """Test an LTreePath is returned unchanged."""
        path = LTreePath.of('a.b')
        assert from_storage(path) is path

    def test_from_driver_object(self):
        """Test driver objects are read through their value attribute."""
        data = FakeDriverObject('ltree', 'electronics.phones')
        assert from_storage(data) == LTreePath.of('electronics.phones')

    def test_from_object_without_value(self):
        """Test other objects are read through str()."""
        class Wrapper:
            def __str__(self):
                return 'x.y'

        assert from_storage(Wrapper()) == LTreePath.of('x.y')

    @pytest.mark.parametrize('raw', ['', 'a..b', 'A.B$', 'Space Here'])
    def test_invalid_data_propagates(self, raw):
        """Test invalid stored data raises InvalidPathError unchanged."""
        with pytest.raises(InvalidPathError) as exc_info:
            from_storage(raw)
        assert exc_info.value.value == raw

    def test_driver_object_wrapping_null_is_rejected(self):
        """Test a driver object whose value is None raises, even if str() is a path."""
        class NullDriverObject:
            value = None

            def __str__(self):
                return str(self.value)

        with pytest.raises(InvalidPathError) as exc_info:
            from_storage(NullDriverObject())
        assert exc_info.value.value is None

    def test_driver_object_value_is_used_over_str(self):
        """Test a non-string value is validated instead of falling back to str()."""
        data = FakeDriverObject('ltree', 42)
        with pytest.raises(InvalidPathError, match="Invalid LTreePath: 42"):
            from_storage(data)

    def test_invalid_driver_object_propagates(self):
        """Test an invalid driver value raises InvalidPathError."""
        with pytest.raises(InvalidPathError, match="Invalid LTreePath: bad.path."):
            from_storage(FakeDriverObject('ltree', 'bad.path.'))


class TestLTreePathAdapter:
    """Tests for the adapter object."""

    def test_type_name(self):
        """Test the column type name."""
        assert LTreePathAdapter().type_name == 'ltree'

    def test_round_trip(self):
        """Test writing then reading gives an equal path."""
        adapter = LTreePathAdapter()
        path = LTreePath.of('electronics.phone_and_accessories.smartphones')
        assert adapter.from_storage(adapter.to_storage(path)) == path
        assert adapter.to_storage(None) is None
        assert adapter.from_storage(None) is None

    def test_repr(self):
        """Test string representation."""
        assert 'ltree' in repr(LTreePathAdapter())
