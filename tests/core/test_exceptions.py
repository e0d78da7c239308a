"""
Tests for exceptions
"""

import pytest

from hexview.core.exceptions import (
    ConfigurationError,
    GeometryError,
    HexViewError,
    InvalidCellError,
)


class TestExceptions:
    """Test exception hierarchy"""

    def test_base_exception(self):
        """Test HexViewError"""
        with pytest.raises(HexViewError):
            raise HexViewError("Test error")

    def test_configuration_error(self):
        """Test ConfigurationError inherits from HexViewError"""
        with pytest.raises(HexViewError):
            raise ConfigurationError("Bad policy")

        with pytest.raises(ConfigurationError):
            raise ConfigurationError("Bad policy")

    def test_geometry_error(self):
        """Test GeometryError inherits from HexViewError"""
        with pytest.raises(HexViewError):
            raise GeometryError("Not a polygon")

    def test_invalid_cell_error(self):
        """Test InvalidCellError inherits from HexViewError"""
        with pytest.raises(HexViewError):
            raise InvalidCellError("Invalid cell")

    def test_exception_messages(self):
        """Test exception messages are preserved"""
        msg = "Custom error message"

        try:
            raise GeometryError(msg)
        except GeometryError as e:
            assert str(e) == msg
