"""unitester - inline unit testing with immediate PASS/FAIL reporting."""

from .config import TesterSettings
from .errors import (
    CapturedError,
    ErrorKind,
    ExpectationKindError,
    FilterError,
    UnitesterError,
    classify_error,
)
from .outcomes import Outcome, Tally
from .sink import ReportSink
from .tester import UnitTester, UnitTestNamer
from .version import __version__


__all__ = [
    # Engine
    "UnitTester",
    "UnitTestNamer",
    "ReportSink",
    "TesterSettings",
    # Outcomes
    "Outcome",
    "Tally",
    # Errors
    "CapturedError",
    "ErrorKind",
    "ExpectationKindError",
    "FilterError",
    "UnitesterError",
    "classify_error",
]
