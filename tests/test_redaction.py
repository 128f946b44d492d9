"""Tests for credential redaction in log text."""

from __future__ import annotations

import json
import logging

from current_weather.log_setup import JsonConsoleFormatter
from current_weather.redaction import REDACTED, sanitize_for_logging, sanitize_text


def test_query_string_appid_is_redacted() -> None:
    url = "https://api.openweathermap.org/data/2.5/weather?lat=1&lon=2&appid=abc123&units=metric"
    sanitized = sanitize_text(url)
    assert "abc123" not in sanitized
    assert f"appid={REDACTED}&units=metric" in sanitized


def test_dict_repr_api_key_is_redacted() -> None:
    text = "input_value={'OPENWEATHER_API_KEY': 'abc123', 'LOG_LEVEL': 'INFO'}"
    sanitized = sanitize_text(text)
    assert "abc123" not in sanitized
    assert "LOG_LEVEL" in sanitized


def test_bearer_token_is_redacted() -> None:
    assert "tok-999" not in sanitize_text("Authorization header: Bearer tok-999")


def test_plain_text_is_untouched() -> None:
    text = "Invalid API key. Please see the FAQ."
    assert sanitize_text(text) == text


def test_nested_sensitive_keys_are_redacted() -> None:
    payload = {"params": {"appid": "abc123", "lat": 1.0}, "headers": [{"Api-Key": "x"}]}
    sanitized = sanitize_for_logging(payload)
    assert sanitized["params"]["appid"] == REDACTED
    assert sanitized["params"]["lat"] == 1.0
    assert sanitized["headers"][0]["Api-Key"] == REDACTED


def test_json_formatter_sanitizes_messages() -> None:
    record = logging.LogRecord(
        name="current_weather",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Request failed for %s",
        args=("https://example.test/weather?appid=abc123",),
        exc_info=None,
    )
    event = json.loads(JsonConsoleFormatter().format(record))
    assert event["level"] == "WARNING"
    assert event["logger"] == "current_weather"
    assert "abc123" not in event["message"]
