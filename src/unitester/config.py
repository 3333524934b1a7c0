"""Tester configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TesterSettings(BaseSettings):
    """Initial state of a `UnitTester`.

    Loads from environment variables automatically:
        UNITESTER_COLOR, UNITESTER_HIDE_PASS, UNITESTER_ONLY

    Or pass values directly. Settings only seed a tester; its fluent
    configuration calls change the state afterwards.
    """

    color: bool = Field(default=True, description="Colorize PASS/FAIL tokens with ANSI codes")
    hide_pass: bool = Field(default=False, description="Count passing expectations without printing them")
    only: str | None = Field(
        default=None,
        description="Shell-style pattern; expectations whose id does not match are skipped",
    )
    recognized_errors: tuple[type[BaseException], ...] = Field(
        default=(Exception,),
        exclude=True,
        description="Errors reported with their description rather than as opaque",
    )

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="UNITESTER_",
    )
