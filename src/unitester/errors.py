"""Error model for computations run by the tester.

Anything a computation raises is sorted into one of two kinds:

``RECOGNIZED``
    An instance of the recognized hierarchy (``Exception`` unless configured
    otherwise). It carries a description used in failure reports.
``OPAQUE``
    Anything else that can be raised, e.g. a bare ``BaseException`` subclass.
    It has no description; reports only say it fell outside the hierarchy.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Classification of an error raised by a computation."""

    RECOGNIZED = "recognized"
    OPAQUE = "opaque"


@dataclass(frozen=True, slots=True)
class CapturedError:
    """An error contained by the tester.

    Attributes
    ----------
    kind
        Whether the error belongs to the recognized hierarchy.
    error
        The exception instance itself.
    description
        ``"<TypeName>: <message>"`` for recognized errors, ``None`` otherwise.
    """

    kind: ErrorKind
    error: BaseException
    description: str | None = None

    @property
    def is_recognized(self) -> bool:
        return self.kind is ErrorKind.RECOGNIZED


def describe_error(error: BaseException) -> str:
    message = str(error)
    if not message:
        return type(error).__name__
    return f"{type(error).__name__}: {message}"


def classify_error(
    error: BaseException,
    recognized: tuple[type[BaseException], ...] = (Exception,),
) -> CapturedError:
    """Sort ``error`` into the recognized or opaque kind."""
    if isinstance(error, recognized):
        return CapturedError(ErrorKind.RECOGNIZED, error, describe_error(error))
    return CapturedError(ErrorKind.OPAQUE, error)


def describe_hierarchy(recognized: tuple[type[BaseException], ...]) -> str:
    """Human-readable name of the recognized hierarchy, e.g. ``"Exception"``."""
    return " or ".join(kind.__name__ for kind in recognized)


class UnitesterError(Exception):
    """Base class for misuse of the tester itself."""


class FilterError(UnitesterError, TypeError):
    """Raised when a filter is not a callable over identifiers."""


class ExpectationKindError(UnitesterError, TypeError):
    """Raised when an expected exception kind is not an exception class."""
