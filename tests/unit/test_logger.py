"""Unit tests for core.logger formatters and token usage logging."""

import json
import logging

from core.logger import JSONFormatter, StructuredFormatter, get_logger, log_token_usage


def make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="ai_tools.content.generator",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="Using prompt: %s",
        args=("Generate a blog_post",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    def test_format_shortens_module_and_appends_extras(self):
        line = StructuredFormatter().format(make_record(content_type="blog_post", tone="casual"))

        assert "[INFO    ]" in line
        assert "[content.generator]" in line
        assert "Using prompt: Generate a blog_post" in line
        assert line.endswith("| content_type=blog_post | tone=casual")

    def test_unknown_extras_are_ignored(self):
        line = StructuredFormatter().format(make_record(secret="x"))
        assert "secret" not in line


class TestJSONFormatter:
    def test_format_is_valid_json(self):
        data = json.loads(JSONFormatter().format(make_record(provider="gemini")))

        assert data["level"] == "INFO"
        assert data["logger"] == "ai_tools.content.generator"
        assert data["message"] == "Using prompt: Generate a blog_post"
        assert data["provider"] == "gemini"


def test_token_usage_line(caplog):
    logger = get_logger("usage.tokens")
    logger.addHandler(caplog.handler)
    try:
        log_token_usage("gemini-2.5-flash", input_tokens=100, output_tokens=250, cost=0.000655)
    finally:
        logger.removeHandler(caplog.handler)

    record = caplog.records[-1]
    assert record.getMessage() == "Token usage: 350 total (100 input + 250 output)"
    assert record.tokens == 350
    assert record.cost == "$0.000655"
    assert record.model_name == "gemini-2.5-flash"
