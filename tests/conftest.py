import pytest

from gilded_rose import settings


@pytest.fixture
def isolated_settings(tmp_path, monkeypatch):
    """Points every settings path at a temporary directory and disables the webhook."""
    monkeypatch.setattr(settings, "INPUT_DIR", tmp_path / "input")
    monkeypatch.setattr(settings, "OUTPUT_DIR", tmp_path / "output")
    monkeypatch.setattr(settings, "LOG_DIR", tmp_path / "logs")
    monkeypatch.setattr(settings, "WEBHOOK_URL", None)
    monkeypatch.setattr(settings, "SAVE_JSON_OUTPUT", False)
    return tmp_path
