from __future__ import annotations

import json
import logging

import pytest

from linemap.observability import JsonFormatter, JsonLogConfig, configure_logging
from linemap.settings import load_settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    monkeypatch.delenv("LINEMAP_CONFIG_PATH", raising=False)

    settings = load_settings()
    assert settings.log_level == "INFO"
    assert settings.log_format == "text"
    assert settings.config_path is None


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", " JSON ")
    monkeypatch.setenv("LINEMAP_CONFIG_PATH", "  /etc/linemap/lines.yaml ")

    settings = load_settings()
    assert settings.log_level == "debug"
    assert settings.log_format == "json"
    assert settings.config_path == "/etc/linemap/lines.yaml"


def test_json_formatter_payload() -> None:
    formatter = JsonFormatter(JsonLogConfig())
    record = logging.LogRecord(
        name="linemap.line",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="configured line slope=%s",
        args=(2.0,),
        exc_info=None,
    )
    record.fields = {"line": "tank_temp_c"}

    payload = json.loads(formatter.format(record))
    assert payload["severity"] == "INFO"
    assert payload["logger"] == "linemap.line"
    assert payload["message"] == "configured line slope=2.0"
    assert payload["service"] == "linemap"
    assert payload["fields"] == {"line": "tank_temp_c"}


def test_configure_logging_replaces_handlers() -> None:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        configure_logging(level=logging.WARNING, log_format="json")
        configure_logging(level=logging.WARNING, log_format="json")
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
