"""Tests for unimplemented()."""

import pytest as _pytest

import oocompose.errors as errors
import oocompose.utils as utils


class TestUnimplemented:
    """Placeholder callables always fail."""

    def test_raises_with_name(self) -> None:
        """The error names the missing function."""
        placeholder = utils.unimplemented("render")

        with _pytest.raises(errors.UnimplementedError) as exc_info:
            placeholder()

        assert str(exc_info.value) == "unimplemented function render()"
        assert exc_info.value.name == "render"

    def test_any_arguments(self) -> None:
        """Arguments don't change the outcome."""
        placeholder = utils.unimplemented("render")

        with _pytest.raises(errors.UnimplementedError):
            placeholder(1, 2, key="value")

    def test_is_not_implemented_error(self) -> None:
        """It can be caught as NotImplementedError."""
        with _pytest.raises(NotImplementedError):
            utils.unimplemented("x")()

    def test_named_after_member(self) -> None:
        """The callable carries the member name."""
        assert utils.unimplemented("area").__name__ == "area"
