"""Pytest configuration and shared fixtures for nullability-policy tests."""

import pytest

import nullability_policy.io.logging_setup
from nullability_policy.app.extension import NullabilityExtension


# ---------------------------------------------------------------------------
# Isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep tests away from the real settings file and logging state."""
    monkeypatch.delenv("NULLABILITY_POLICY_CONFIG", raising=False)
    monkeypatch.delenv("NULLABILITY_POLICY_LOG_FILE", raising=False)
    monkeypatch.delenv("NULLABILITY_POLICY_LOG_LEVEL", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    nullability_policy.io.logging_setup.reset()
    yield
    nullability_policy.io.logging_setup.reset()


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    """Redirect settings to a temp file and return its path."""
    settings_path = tmp_path / "nullability-policy" / "settings.json"
    monkeypatch.setattr(
        "nullability_policy.io.settings.get_config_path",
        lambda: settings_path,
    )
    return settings_path


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

@pytest.fixture
def extension():
    """Extension with the usual test source set opted in."""
    ext = NullabilityExtension()
    ext.source_set("test", "test")
    return ext
