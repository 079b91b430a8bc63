"""
Tests for the edustats exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via EduStatsError)
    - Stable error codes used by presentation layers
    - Diagnostic attributes and their defaults
"""

import pytest

from edustats.core.exceptions import (
    ConstantDataError,
    EduStatsError,
    EmptyDataError,
    InsufficientDataError,
    InvalidArgumentError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via EduStatsError and ValidationError."""

    @pytest.mark.parametrize("exc", [
        EmptyDataError("x"),
        InsufficientDataError("x"),
        ConstantDataError("x"),
        InvalidArgumentError("x"),
    ])
    def test_taxonomy_is_validation_error(self, exc):
        with pytest.raises(ValidationError):
            raise exc

    def test_validation_error_is_edustats_error(self):
        with pytest.raises(EduStatsError):
            raise ValidationError("bad input")

    def test_not_caught_as_value_error(self):
        assert not isinstance(EmptyDataError("x"), ValueError)


# ═══════════════════════════════════════════════════════════════════════
# Error codes
# ═══════════════════════════════════════════════════════════════════════


class TestCodes:

    @pytest.mark.parametrize("cls, code", [
        (EduStatsError, "Error"),
        (ValidationError, "ValidationError"),
        (EmptyDataError, "EmptyData"),
        (InsufficientDataError, "InsufficientData"),
        (ConstantDataError, "ConstantData"),
        (InvalidArgumentError, "InvalidArgument"),
    ])
    def test_code(self, cls, code):
        assert cls.code == code
        assert cls("message").code == code


# ═══════════════════════════════════════════════════════════════════════
# Attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:

    def test_insufficient_data_attributes(self):
        err = InsufficientDataError("need 2", required=2, actual=1)
        assert str(err) == "need 2"
        assert err.required == 2
        assert err.actual == 1

    def test_insufficient_data_defaults(self):
        err = InsufficientDataError("need more")
        assert err.required is None
        assert err.actual is None

    def test_constant_data_value(self):
        err = ConstantDataError("all equal", value=15.0)
        assert err.value == 15.0
        assert ConstantDataError("all equal").value is None

    def test_invalid_argument_attributes(self):
        err = InvalidArgumentError("negative", argument="n", value=-1)
        assert err.argument == "n"
        assert err.value == -1
