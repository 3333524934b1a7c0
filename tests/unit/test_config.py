"""Tests for tester settings."""

import pytest
from pydantic import ValidationError

from unitester import UnitTester
from unitester.config import TesterSettings as Settings


class TestTesterSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.color is True
        assert settings.hide_pass is False
        assert settings.only is None
        assert settings.recognized_errors == (Exception,)

    def test_loads_from_environment(self, monkeypatch):
        monkeypatch.setenv("UNITESTER_COLOR", "false")
        monkeypatch.setenv("UNITESTER_HIDE_PASS", "1")
        monkeypatch.setenv("UNITESTER_ONLY", "parser *")

        settings = Settings()

        assert settings.color is False
        assert settings.hide_pass is True
        assert settings.only == "parser *"

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            Settings(colour=False)


class TestSettingsSeedTester:
    def test_environment_configures_default_tester(self, monkeypatch, out):
        monkeypatch.setenv("UNITESTER_COLOR", "false")
        monkeypatch.setenv("UNITESTER_HIDE_PASS", "true")
        monkeypatch.setenv("UNITESTER_ONLY", "math*")

        tester = UnitTester(out)
        tester.expect_value("math add", 2, lambda: 1 + 1)
        tester.expect_value("io read", 1, lambda: 1)

        assert tester.color_enabled is False
        assert tester.passes_hidden is True
        assert tester.count_pass() == 1
        assert tester.count_skip() == 1
        assert out.getvalue() == ""

    def test_fluent_calls_override_settings(self, out):
        tester = UnitTester(out, settings=Settings(color=False, only="nothing"))
        tester.always()
        assert tester.expect_true("runs", lambda: True) is True
        assert out.getvalue() == "☑  PASS  runs\n"
