"""Tests for DemoSettings environment loading and validation."""

import pytest
from pydantic import ValidationError

from valref.config import DemoSettings


def test_defaults(clean_env):
    settings = DemoSettings()

    assert settings.log_level == "WARNING"
    assert settings.headings is False
    assert settings.demos is None


def test_loads_from_environment(clean_env):
    clean_env.setenv("VALREF_LOG_LEVEL", "debug")
    clean_env.setenv("VALREF_HEADINGS", "true")
    clean_env.setenv("VALREF_DEMOS", '["point", "score"]')

    settings = DemoSettings()

    assert settings.log_level == "DEBUG"
    assert settings.headings is True
    assert settings.demos == ["point", "score"]


def test_loads_from_dotenv_file(clean_env, tmp_path):
    (tmp_path / ".env").write_text("VALREF_HEADINGS=1\n", encoding="utf-8")

    assert DemoSettings().headings is True


def test_explicit_values_override_environment(clean_env):
    clean_env.setenv("VALREF_HEADINGS", "true")
    assert DemoSettings(headings=False).headings is False


def test_unknown_demo_rejected(clean_env):
    with pytest.raises(ValidationError, match="Unknown demo"):
        DemoSettings(demos=["point", "teleport"])


def test_invalid_log_level_rejected(clean_env):
    with pytest.raises(ValidationError):
        DemoSettings(log_level="LOUD")
