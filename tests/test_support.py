"""Tests for clipboard, settings and logging helpers."""

import logging
from unittest.mock import patch

import pyperclip
import pytest

from passcraft.clipboard import copy_to_clipboard
from passcraft.config import DEFAULT_SETTINGS, load_settings
from passcraft.log import configure_logging, redact_passwords


# ── copy_to_clipboard ──────────────────────────────────────────────────────


class TestCopyToClipboard:
    @patch("passcraft.clipboard.pyperclip.copy")
    def test_success(self, mock_copy):
        assert copy_to_clipboard("s3cret!") is True
        mock_copy.assert_called_once_with("s3cret!")

    @patch("passcraft.clipboard.pyperclip.copy")
    def test_failure_reported(self, mock_copy):
        mock_copy.side_effect = pyperclip.PyperclipException("no clipboard")
        assert copy_to_clipboard("s3cret!") is False

    @patch("passcraft.clipboard.pyperclip.copy")
    def test_other_errors_propagate(self, mock_copy):
        mock_copy.side_effect = RuntimeError("boom")
        with pytest.raises(RuntimeError, match="boom"):
            copy_to_clipboard("s3cret!")


# ── load_settings ──────────────────────────────────────────────────────────


class TestLoadSettings:
    def test_defaults(self):
        assert load_settings({}) == DEFAULT_SETTINGS
        assert DEFAULT_SETTINGS.default_length == 16
        assert DEFAULT_SETTINGS.log_level == "WARNING"
        assert DEFAULT_SETTINGS.log_json is False

    @pytest.mark.parametrize("raw, expected", [
        ("24", 24), ("99", 50), ("2", 4), ("abc", 16), ("", 16),
    ])
    def test_length(self, raw, expected):
        assert load_settings({"PASSCRAFT_LENGTH": raw}).default_length == expected

    @pytest.mark.parametrize("raw, expected", [
        ("debug", "DEBUG"), (" Info ", "INFO"), ("loud", "WARNING"),
    ])
    def test_log_level(self, raw, expected):
        assert load_settings({"PASSCRAFT_LOG_LEVEL": raw}).log_level == expected

    @pytest.mark.parametrize("raw, expected", [
        ("1", True), ("yes", True), ("TRUE", True), ("0", False), ("no", False),
    ])
    def test_log_json(self, raw, expected):
        assert load_settings({"PASSCRAFT_LOG_JSON": raw}).log_json is expected

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("PASSCRAFT_LENGTH", "30")
        assert load_settings().default_length == 30


# ── logging ────────────────────────────────────────────────────────────────


class TestLogging:
    def test_redacts_password_keys(self):
        event = {"event": "x", "password": "hunter2", "new_passwd": "a", "length": 7}
        out = redact_passwords(None, "info", event)
        assert out["password"] == "[REDACTED]"
        assert out["new_passwd"] == "[REDACTED]"
        assert out["length"] == 7

    @pytest.mark.parametrize("json_output", [False, True])
    def test_configure_sets_level(self, json_output):
        configure_logging("DEBUG", json_output=json_output)
        assert logging.getLogger().level == logging.DEBUG
        configure_logging("WARNING")
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_falls_back(self):
        configure_logging("chatty")
        assert logging.getLogger().level == logging.WARNING
