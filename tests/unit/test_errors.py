"""Tests for error classification."""

import pytest

from unitester.errors import (
    ErrorKind,
    ExpectationKindError,
    FilterError,
    UnitesterError,
    classify_error,
    describe_error,
    describe_hierarchy,
)


class Opaque(BaseException):
    pass


class TestClassifyError:
    def test_exception_is_recognized(self):
        captured = classify_error(ValueError("bad input"))
        assert captured.kind is ErrorKind.RECOGNIZED
        assert captured.is_recognized
        assert captured.description == "ValueError: bad input"

    def test_base_exception_is_opaque(self):
        error = Opaque("hidden")
        captured = classify_error(error)
        assert captured.kind is ErrorKind.OPAQUE
        assert captured.error is error
        assert captured.description is None

    def test_custom_hierarchy(self):
        assert classify_error(KeyError("k"), (LookupError,)).is_recognized
        assert not classify_error(ValueError(), (LookupError,)).is_recognized


class TestDescriptions:
    def test_error_without_message(self):
        assert describe_error(RuntimeError()) == "RuntimeError"

    def test_hierarchy_names(self):
        assert describe_hierarchy((Exception,)) == "Exception"
        assert describe_hierarchy((LookupError, ArithmeticError)) == "LookupError or ArithmeticError"


@pytest.mark.parametrize("error_class", [FilterError, ExpectationKindError])
def test_misuse_errors_are_type_errors(error_class):
    assert issubclass(error_class, UnitesterError)
    assert issubclass(error_class, TypeError)
