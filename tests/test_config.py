"""Tests for environment settings and logging setup."""
import logging
import sys

from divepal import app_logging
from divepal.config import Settings


class TestSettingsFromEnv:
    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.data_source == "static"
        assert settings.remote_table == "dive_sites"
        assert settings.http_timeout == 10.0
        assert settings.log_level == "INFO"
        assert settings.log_dir.endswith("logs")

    def test_reads_values(self):
        settings = Settings.from_env(
            {
                "DIVEPAL_DATA_SOURCE": " Remote ",
                "SUPABASE_URL": "https://demo.supabase.co",
                "SUPABASE_KEY": "anon",
                "DIVEPAL_REMOTE_TABLE": "sites",
                "DIVEPAL_HTTP_TIMEOUT": "2.5",
                "DIVEPAL_LOG_DIR": "/tmp/divepal",
                "DIVEPAL_LOG_LEVEL": "debug",
            }
        )
        assert settings.data_source == "remote"
        assert settings.supabase_url == "https://demo.supabase.co"
        assert settings.supabase_key == "anon"
        assert settings.remote_table == "sites"
        assert settings.http_timeout == 2.5
        assert settings.log_dir == "/tmp/divepal"
        assert settings.log_level == "DEBUG"

    def test_invalid_values_fall_back(self):
        settings = Settings.from_env(
            {
                "DIVEPAL_DATA_SOURCE": "ftp",
                "DIVEPAL_HTTP_TIMEOUT": "soon",
                "DIVEPAL_LOG_LEVEL": "LOUD",
            }
        )
        assert settings.data_source == "static"
        assert settings.http_timeout == 10.0
        assert settings.log_level == "INFO"

    def test_negative_timeout_falls_back(self):
        assert Settings.from_env({"DIVEPAL_HTTP_TIMEOUT": "-1"}).http_timeout == 10.0

    def test_with_remote_override(self):
        settings = Settings().with_remote(True, " https://x.supabase.co ", " k ")
        assert settings.data_source == "remote"
        assert settings.supabase_url == "https://x.supabase.co"
        assert settings.supabase_key == "k"
        assert Settings().with_remote(False, "", "").data_source == "static"


def test_setup_logging_is_idempotent(tmp_path, monkeypatch):
    monkeypatch.setattr(app_logging, "_CONFIGURED_LOG_PATH", None)
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    try:
        first = app_logging.setup_logging(tmp_path, "DEBUG")
        second = app_logging.setup_logging(tmp_path / "other", "INFO")
        assert first == second
        assert first.parent == tmp_path
        assert len(root.handlers) == len(before) + 2
        logging.getLogger("divepal.test").info("hello")
        for handler in root.handlers:
            handler.flush()
        assert "hello" in first.read_text(encoding="utf-8")
    finally:
        for handler in root.handlers[len(before):]:
            root.removeHandler(handler)
            handler.close()
        root.setLevel(level)
