import pytest

from imview.models import DisplaySettings


def test_defaults():
    settings = DisplaySettings()
    assert settings.window_name == "imview"
    assert settings.wait_ms == 0


def test_negative_wait_is_rejected():
    with pytest.raises(ValueError, match="non-negative"):
        DisplaySettings(wait_ms=-1)


def test_from_env_uses_defaults_when_unset():
    assert DisplaySettings.from_env({}) == DisplaySettings()


def test_from_env_reads_overrides():
    settings = DisplaySettings.from_env({"IMVIEW_WINDOW_NAME": "Preview", "IMVIEW_WAIT_MS": " 250 "})
    assert settings.window_name == "Preview"
    assert settings.wait_ms == 250


def test_from_env_ignores_blank_values():
    settings = DisplaySettings.from_env({"IMVIEW_WINDOW_NAME": "", "IMVIEW_WAIT_MS": ""})
    assert settings == DisplaySettings()


def test_from_env_rejects_non_integer_wait():
    with pytest.raises(ValueError, match="IMVIEW_WAIT_MS must be an integer"):
        DisplaySettings.from_env({"IMVIEW_WAIT_MS": "soon"})


def test_from_env_defaults_to_process_environment(monkeypatch):
    monkeypatch.setenv("IMVIEW_WINDOW_NAME", "From env")
    monkeypatch.delenv("IMVIEW_WAIT_MS", raising=False)
    assert DisplaySettings.from_env().window_name == "From env"
