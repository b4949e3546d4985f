"""Tests for logging setup."""

import logging

import pytest

from exhibition_api.app.core.config import Settings
from exhibition_api.app.core.logging_config import UVICORN_LOGGERS, resolve_level, setup_logging
from exhibition_api.app.main import create_app


@pytest.fixture(autouse=True)
def restore_logging():
    """Put root and uvicorn loggers back the way the test found them."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    levels = {name: logging.getLogger(name).level for name in ("",) + UVICORN_LOGGERS}
    yield
    for handler in root.handlers:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


class TestResolveLevel:
    @pytest.mark.parametrize("name, expected", [("debug", logging.DEBUG), ("WARNING", logging.WARNING)])
    def test_known_names(self, name, expected):
        assert resolve_level(name) == expected

    def test_unknown_name_falls_back_to_info(self):
        assert resolve_level("chatty") == logging.INFO


class TestSetupLogging:
    def test_level_applies_to_root_and_uvicorn(self):
        assert setup_logging("DEBUG") == logging.DEBUG
        assert logging.getLogger().level == logging.DEBUG
        for name in UVICORN_LOGGERS:
            assert logging.getLogger(name).level == logging.DEBUG

    def test_later_call_changes_level(self):
        setup_logging("DEBUG")
        setup_logging("ERROR")
        assert logging.getLogger().level == logging.ERROR
        assert logging.getLogger("uvicorn.access").level == logging.ERROR

    def test_create_app_applies_its_settings(self):
        create_app(Settings(log_level="WARNING"))
        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("uvicorn.access").level == logging.WARNING

    def test_log_file_gets_one_handler(self, tmp_path):
        logfile = tmp_path / "api.log"
        setup_logging("INFO", str(logfile))
        setup_logging("INFO", str(logfile))
        file_handlers = [
            h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)
        ]
        assert len(file_handlers) == 1

        logging.getLogger("exhibition_api.test").info("hello catalog")
        file_handlers[0].flush()
        assert "[INFO] exhibition_api.test: hello catalog" in logfile.read_text(encoding="utf-8")
