"""Example inline tests written with unitester."""

import math
import sys

from unitester import UnitTester


def parse_version(text: str) -> tuple[int, ...]:
    """Parse ``"1.2.3"`` into ``(1, 2, 3)``."""
    return tuple(int(part) for part in text.split("."))


def main() -> int:
    test = UnitTester()

    # 1. Values and booleans
    test.expect_value("parse simple version", (1, 2, 3), lambda: parse_version("1.2.3"))
    test.expect_true("versions compare numerically", lambda: parse_version("1.10") > parse_version("1.9"))
    test.expect_false("empty tuple is falsy", lambda: parse_version("1")[1:])

    # 2. Floating point results
    test("pi approximation").expect_in_range(3.1415, 3.1416, lambda: math.pi)

    # 3. Errors
    test.expect_exception("non-numeric part", ValueError, lambda: parse_version("1.x"))
    test("empty string").expect_any_exception(lambda: parse_version(""))

    # 4. Run a subset only
    test.only_matching("parse *")
    test.expect_value("parse two parts", (2, 0), lambda: parse_version("2.0"))
    test.expect_value("skipped: not a parse test", 1, lambda: 1)
    test.always()

    test.summary()
    return 1 if test.count_fail() else 0


if __name__ == "__main__":
    sys.exit(main())
