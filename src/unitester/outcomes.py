"""Expectation outcomes and the counters they feed."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Outcome(Enum):
    """Outcome of a single expectation call."""

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"

    @property
    def is_executed(self) -> bool:
        """Check if the computation actually ran for this outcome."""
        return self is not Outcome.SKIPPED


@dataclass
class Tally:
    """Pass, fail and skip counters of a tester.

    Every expectation call records exactly one outcome, so the counters only
    ever grow.
    """

    passed: int = 0
    failed: int = 0
    skipped: int = 0

    def record(self, outcome: Outcome) -> None:
        if outcome is Outcome.PASSED:
            self.passed += 1
        elif outcome is Outcome.FAILED:
            self.failed += 1
        else:
            self.skipped += 1

    @property
    def executed(self) -> int:
        """Number of expectations whose computation was run."""
        return self.passed + self.failed

    @property
    def total(self) -> int:
        return self.executed + self.skipped
