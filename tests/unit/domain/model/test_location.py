"""Tests for domain/model/location.py."""

from pathlib import Path

import pytest

from anchor.domain.model.location import Location


class TestLocationCreation:
    """Tests for valid Location creation."""

    def test_minimal_valid(self) -> None:
        loc = Location(file=Path("test.py"))
        assert loc.file == Path("test.py")
        assert loc.line == 1

    def test_str(self) -> None:
        assert str(Location(file=Path("a/b.py"), line=12)) == "a/b.py:12"

    def test_is_frozen(self) -> None:
        loc = Location(file=Path("test.py"), line=1)
        with pytest.raises(AttributeError):
            loc.line = 2  # type: ignore[misc]


class TestLocationFailFirst:
    """Tests for FAIL-FIRST validation in Location."""

    def test_line_zero_raises(self) -> None:
        with pytest.raises(ValueError, match="line must be > 0"):
            Location(file=Path("test.py"), line=0)

    def test_line_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="line must be > 0"):
            Location(file=Path("test.py"), line=-1)

    def test_none_file_raises(self) -> None:
        with pytest.raises(TypeError, match="file must not be None"):
            Location(file=None)  # type: ignore[arg-type]
