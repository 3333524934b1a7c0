"""Tests for outcomes and counters."""

from unitester.outcomes import Outcome, Tally


class TestOutcome:
    def test_executed_outcomes(self):
        assert Outcome.PASSED.is_executed
        assert Outcome.FAILED.is_executed
        assert not Outcome.SKIPPED.is_executed


class TestTally:
    def test_starts_at_zero(self):
        tally = Tally()
        assert (tally.passed, tally.failed, tally.skipped) == (0, 0, 0)
        assert tally.total == 0

    def test_record_increments_one_counter(self):
        tally = Tally()
        tally.record(Outcome.PASSED)
        tally.record(Outcome.PASSED)
        tally.record(Outcome.FAILED)
        tally.record(Outcome.SKIPPED)

        assert tally.passed == 2
        assert tally.failed == 1
        assert tally.skipped == 1
        assert tally.executed == 3
        assert tally.total == 4
