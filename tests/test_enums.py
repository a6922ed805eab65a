"""Tests for PropertiesStatus and status_to_string()."""

from __future__ import annotations

import pytest

from proplexengine import PropertiesStatus, status_to_string


class TestPropertiesStatus:
    """Status enumeration behaviour."""

    def test_string_values(self) -> None:
        """StrEnum members compare equal to their values."""
        assert PropertiesStatus.OK == "ok"
        assert str(PropertiesStatus.ERROR_READ) == "read_error"

    def test_only_ok_is_ok(self) -> None:
        """is_ok is True for OK alone."""
        assert PropertiesStatus.OK.is_ok
        for status in PropertiesStatus:
            if status is not PropertiesStatus.OK:
                assert not status.is_ok

    @pytest.mark.parametrize("status", list(PropertiesStatus))
    def test_every_status_described(self, status: PropertiesStatus) -> None:
        """Every member maps to a non-empty description."""
        assert status_to_string(status)
        assert status_to_string(status) == status.description


class TestStatusToString:
    """Human-readable descriptions."""

    def test_ok(self) -> None:
        """OK maps to 'OK'."""
        assert status_to_string(PropertiesStatus.OK) == "OK"

    def test_invalid_file_type(self) -> None:
        """The invalid-type text names the expected extension."""
        assert ".properties" in status_to_string(PropertiesStatus.ERROR_INVALID_FILE_TYPE)

    def test_accepts_value_string(self) -> None:
        """Raw status values are coerced to members."""
        assert status_to_string("write_error") == "Failed to write properties file"  # type: ignore[arg-type]

    def test_unknown_value_rejected(self) -> None:
        """Unknown values raise ValueError."""
        with pytest.raises(ValueError, match="not a valid"):
            status_to_string("bogus")  # type: ignore[arg-type]
