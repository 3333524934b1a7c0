"""Inline expectation engine.

Create a `UnitTester` and call its ``expect_*`` methods; each expectation runs
immediately, prints a PASS or FAIL line and updates the tester's counters.
Call `UnitTester.summary` at the end of the run.

Example::

    test = UnitTester()
    test.expect_value("1+1 equals 2", 2, lambda: 1 + 1)
    test("one third").expect_in_range(0.333, 0.334, lambda: 1 / 3)
    test.summary()
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from fnmatch import fnmatchcase
from typing import Any, TextIO

from rich.console import Console

from unitester.config import TesterSettings
from unitester.errors import (
    ExpectationKindError,
    FilterError,
    classify_error,
    describe_hierarchy,
)
from unitester.outcomes import Outcome, Tally
from unitester.sink import ReportSink

logger = logging.getLogger(__name__)


Computation = Callable[[], Any]
IdFilter = Callable[[str], bool]
ExceptionKind = type[BaseException] | tuple[type[BaseException], ...]

PASS_TOKEN = "☑  PASS  "
FAIL_TOKEN = "☒  FAIL  "


def _exception_kinds(kind: ExceptionKind) -> tuple[type[BaseException], ...]:
    kinds = kind if isinstance(kind, tuple) else (kind,)
    if not kinds or not all(isinstance(k, type) and issubclass(k, BaseException) for k in kinds):
        raise ExpectationKindError(f"expected an exception class or a tuple of them, got {kind!r}")
    return kinds


class UnitTester:
    """Runs expectations and accounts for their outcomes.

    Parameters
    ----------
    out
        Where report lines go: a text stream (standard output by default),
        a Rich console or a ready-made `ReportSink`. The tester never closes it.
    settings
        Initial configuration. Loaded from ``UNITESTER_*`` environment
        variables when omitted.
    """

    def __init__(
        self,
        out: TextIO | Console | ReportSink | None = None,
        *,
        settings: TesterSettings | None = None,
    ) -> None:
        if settings is None:
            settings = TesterSettings()
        self._sink = out if isinstance(out, ReportSink) else ReportSink(out)
        self._tally = Tally()
        self._color = settings.color
        self._hide_pass = settings.hide_pass
        self._filter: IdFilter | None = None
        self._recognized = tuple(settings.recognized_errors)
        if settings.only is not None:
            self.only_matching(settings.only)

    def __call__(self, identifier: str) -> UnitTestNamer:
        """Bind ``identifier`` so it need not be repeated.

        ``test("id").expect_value(42, f)`` is the same as
        ``test.expect_value("id", 42, f)``.
        """
        return UnitTestNamer(self, identifier)

    @property
    def sink(self) -> ReportSink:
        return self._sink

    # Configuration

    @property
    def color_enabled(self) -> bool:
        return self._color

    @property
    def passes_hidden(self) -> bool:
        return self._hide_pass

    def color_output(self, enabled: bool | None = None) -> bool | UnitTester:
        """Enable or disable color output. Enabled by default.

        Called without an argument, returns whether color output is enabled
        and changes nothing.
        """
        if enabled is None:
            return self._color
        self._color = enabled
        return self

    def hide_pass(self) -> UnitTester:
        self._hide_pass = True
        return self

    def show_pass(self) -> UnitTester:
        self._hide_pass = False
        return self

    def only_if(self, predicate: IdFilter) -> UnitTester:
        """Run expectations only when ``predicate(identifier)`` is true.

        Replaces any previous condition. Expectations that do not satisfy it
        are counted as skipped and print nothing.
        """
        if not callable(predicate):
            raise FilterError(f"only_if() expects a callable over identifiers, got {predicate!r}")
        self._filter = predicate
        logger.debug("Expectation filter set to %r", predicate)
        return self

    def only_matching(self, pattern: str) -> UnitTester:
        """Run only expectations whose identifier matches a shell-style ``pattern``."""
        return self.only_if(lambda identifier: fnmatchcase(identifier, pattern))

    def always(self) -> UnitTester:
        """Remove any condition set by `only_if`."""
        self._filter = None
        logger.debug("Expectation filter cleared")
        return self

    # Reporting

    @property
    def tally(self) -> Tally:
        """Snapshot of the counters."""
        return replace(self._tally)

    def count_pass(self) -> int:
        return self._tally.passed

    def count_fail(self) -> int:
        return self._tally.failed

    def count_skip(self) -> int:
        return self._tally.skipped

    def summary(self) -> None:
        """Print the skipped (if any), passed and failed (if any) counts."""
        tally = self._tally
        if tally.skipped > 0:
            self._sink.write(f"{tally.skipped} tests skipped.")
        self._sink.write(f"{tally.passed} tests passed.")
        if tally.failed > 0:
            self._sink.write(f"{tally.failed} tests ", ("FAILED !", self._style("red")))

    # Expectations

    def expect_true(self, identifier: str, computation: Computation) -> bool:
        """Expect ``computation()`` to be truthy.

        Returns
        -------
        bool
            Whether the expectation passed. Skipped expectations return False.
        """
        if self._skipped(identifier):
            return False
        with self._sink.formatting(boolalpha=True):
            return self._check_value(identifier, True, lambda: bool(computation()))

    def expect_false(self, identifier: str, computation: Computation) -> bool:
        """Expect ``computation()`` to be falsy."""
        if self._skipped(identifier):
            return False
        with self._sink.formatting(boolalpha=True):
            return self._check_value(identifier, False, lambda: bool(computation()))

    def expect_value(self, identifier: str, value: Any, computation: Computation) -> bool:
        """Expect ``computation()`` to compare equal to ``value``.

        Any error raised by the computation, or by the comparison, is reported
        as a failure.
        """
        if self._skipped(identifier):
            return False
        return self._check_value(identifier, value, computation)

    def expect_in_range(
        self, identifier: str, minimum: Any, maximum: Any, computation: Computation
    ) -> bool:
        """Expect ``minimum <= computation() <= maximum``.

        Handy for floating point results. A computation with a random result
        passing once says nothing about it always passing.
        """
        if self._skipped(identifier):
            return False
        bounds = f"[{self._sink.format_value(minimum)}, {self._sink.format_value(maximum)}]"
        try:
            actual = computation()
            passed = bool(minimum <= actual <= maximum)
        except BaseException as error:
            return self._fail(identifier, self._exception_detail(f"expected a value in {bounds}", error))
        if passed:
            return self._pass(identifier)
        return self._fail(
            identifier,
            f"value {self._sink.format_value(actual)} is not in expected range {bounds}",
        )

    def expect_any_exception(self, identifier: str, computation: Computation) -> bool:
        """Expect ``computation()`` to raise, whatever the error is."""
        if self._skipped(identifier):
            return False
        try:
            computation()
        except BaseException as error:
            logger.debug("Expectation %r raised %s as expected", identifier, type(error).__name__)
            return self._pass(identifier)
        return self._fail(identifier, "expected exception was not thrown.")

    def expect_exception(
        self,
        identifier: str,
        kind: ExceptionKind,
        computation: Computation,
        *,
        exact: bool = False,
    ) -> bool:
        """Expect ``computation()`` to raise an error of ``kind``.

        ``kind`` is matched the way an ``except`` clause matches, so subclasses
        count. With ``exact=True`` the error's type must be ``kind`` itself
        (or one of the types, when a tuple is given); pass it when only that
        exact kind may count as a match.

        Raises
        ------
        ExpectationKindError
            If ``kind`` is not an exception class or a tuple of them.
        """
        kinds = _exception_kinds(kind)
        if self._skipped(identifier):
            return False
        try:
            computation()
        except BaseException as error:
            matched = type(error) in kinds if exact else isinstance(error, kinds)
            if matched:
                return self._pass(identifier)
            logger.debug("Expectation %r raised an unexpected error", identifier, exc_info=error)
            return self._fail(identifier, "an exception happened but not of the correct type.")
        return self._fail(identifier, "expected exception was not thrown.")

    # Internals

    def _style(self, color: str) -> str | None:
        return color if self._color else None

    def _skipped(self, identifier: str) -> bool:
        if self._filter is None or self._filter(identifier):
            return False
        self._tally.record(Outcome.SKIPPED)
        logger.debug("Skipping expectation %r: filtered out", identifier)
        return True

    def _check_value(self, identifier: str, value: Any, computation: Computation) -> bool:
        expected = self._sink.format_value(value)
        try:
            actual = computation()
            passed = bool(actual == value)
        except BaseException as error:
            return self._fail(identifier, self._exception_detail(f"expected value {expected}", error))
        if passed:
            return self._pass(identifier)
        return self._fail(
            identifier,
            f"expected value {expected}, found {self._sink.format_value(actual)} instead.",
        )

    def _exception_detail(self, prefix: str, error: BaseException) -> str:
        logger.debug("Contained error from computation", exc_info=error)
        captured = classify_error(error, self._recognized)
        if captured.is_recognized:
            return f"{prefix}, got exception: {captured.description}"
        return f"{prefix}, got exception not derived from {describe_hierarchy(self._recognized)}"

    def _pass(self, identifier: str) -> bool:
        self._tally.record(Outcome.PASSED)
        logger.debug("PASS %s", identifier)
        if not self._hide_pass:
            self._sink.write((PASS_TOKEN, self._style("green")), identifier)
        return True

    def _fail(self, identifier: str, detail: str) -> bool:
        self._tally.record(Outcome.FAILED)
        logger.debug("FAIL %s: %s", identifier, detail)
        self._sink.write((FAIL_TOKEN, self._style("red")), identifier)
        self._sink.detail(detail)
        return False


@dataclass(frozen=True, slots=True)
class UnitTestNamer:
    """An identifier bound to a tester; returned by ``tester(identifier)``.

    Each method forwards to the tester method of the same name with the
    bound identifier. Holds no state of its own.
    """

    tester: UnitTester
    identifier: str

    def expect_true(self, computation: Computation) -> bool:
        return self.tester.expect_true(self.identifier, computation)

    def expect_false(self, computation: Computation) -> bool:
        return self.tester.expect_false(self.identifier, computation)

    def expect_value(self, value: Any, computation: Computation) -> bool:
        return self.tester.expect_value(self.identifier, value, computation)

    def expect_in_range(self, minimum: Any, maximum: Any, computation: Computation) -> bool:
        return self.tester.expect_in_range(self.identifier, minimum, maximum, computation)

    def expect_any_exception(self, computation: Computation) -> bool:
        return self.tester.expect_any_exception(self.identifier, computation)

    def expect_exception(
        self, kind: ExceptionKind, computation: Computation, *, exact: bool = False
    ) -> bool:
        return self.tester.expect_exception(self.identifier, kind, computation, exact=exact)
