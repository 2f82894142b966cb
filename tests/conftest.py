import logging

import pytest

SETTINGS_VARS = (
    "DURATIONCALC_COMPACT",
    "DURATIONCALC_TOTAL_PREFIX",
    "DURATIONCALC_STDIN_PREFIX",
    "DURATIONCALC_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run every test without inherited settings or a stray .env file."""
    for name in SETTINGS_VARS:
        # setenv first so values written by load_dotenv are undone afterwards
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo configure_logging() calls made by the code under test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
