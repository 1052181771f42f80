"""Tests for message formatting."""

import re
from datetime import datetime, timezone

from slack_logger import DEFAULT_MENTION, Severity, format_message
from slack_logger.formatter import format_timestamp, quote

NOW = datetime(2026, 10, 16, 10, 0, 0, tzinfo=timezone.utc)


class TestQuote:
    """Tests for line quoting."""

    def test_multiline(self):
        assert quote("a\nb\nc") == "> a\n> b\n> c"

    def test_single_line(self):
        assert quote("hello") == "> hello"

    def test_empty_body(self):
        """An empty body still produces one quoted line."""
        assert quote("") == "> "


class TestFormatMessage:
    """Tests for format_message."""

    def test_section_block_is_quoted(self):
        result = format_message("a\nb\nc", Severity.DEFAULT, now=NOW)
        assert result.blocks[0]["type"] == "section"
        assert result.blocks[0]["text"] == {"type": "mrkdwn", "text": "> a\n> b\n> c"}

    def test_context_block_has_timestamp(self):
        result = format_message("hello", "success", now=NOW)
        assert len(result.blocks) == 2
        context = result.blocks[1]
        assert context["type"] == "context"
        assert context["elements"] == [{"type": "mrkdwn", "text": format_timestamp(NOW)}]

    def test_deterministic_with_frozen_clock(self):
        first = format_message("same\nbody", Severity.ERROR, now=NOW)
        second = format_message("same\nbody", Severity.ERROR, now=NOW)
        assert first == second

    def test_info_prefix(self):
        result = format_message("hello", Severity.INFO, now=NOW)
        assert result.text == ":information_source: hello"
        assert result.blocks[0]["text"]["text"] == ":information_source: > hello"

    def test_start_prefix(self):
        result = format_message("deploy finished", "start", now=NOW)
        assert result.text == ":rocket: deploy finished"

    def test_cron_prefix(self):
        result = format_message("nightly", "cron", now=NOW)
        assert result.text == ":alarm_clock: nightly"
        assert result.console_text == "[CRON]: nightly"

    def test_error_banner(self):
        result = format_message("disk full", Severity.ERROR, now=NOW)
        assert result.text.startswith("🚨")
        assert DEFAULT_MENTION in result.text
        assert "[ERROR]: disk full" in result.text
        assert "[ERROR]: > disk full" in result.blocks[0]["text"]["text"]

    def test_error_custom_mention(self):
        result = format_message("disk full", "error", now=NOW, mention="<@U999>")
        assert "<@U999>" in result.text
        assert DEFAULT_MENTION not in result.text

    def test_no_prefix_severities(self):
        for severity in ("warning", "success", "default"):
            result = format_message("plain", severity, now=NOW)
            assert result.text == "plain"
            assert result.console_text == "plain"

    def test_unknown_severity_passthrough(self):
        result = format_message("plain", "bogus", now=NOW)
        assert result.text == "plain"
        assert result.blocks[0]["text"]["text"] == "> plain"
        assert result.console_text == "plain"

    def test_to_post(self):
        post = format_message("hi", "info", now=NOW).to_post("xoxb-1", "C42")
        assert post.token == "xoxb-1"
        assert post.channel == "C42"
        assert post.payload() == {
            "channel": "C42",
            "text": ":information_source: hi",
            "blocks": post.blocks,
        }


class TestFormatTimestamp:
    """Tests for the JavaScript-style timestamp."""

    def test_shape(self):
        stamp = format_timestamp(NOW)
        assert re.fullmatch(
            r"\w{3} \w{3} \d{2} \d{4} \d{2}:\d{2}:\d{2} GMT[+-]\d{4} \(.+\)", stamp
        )

    def test_naive_datetime(self):
        stamp = format_timestamp(datetime(2026, 1, 2, 3, 4, 5))
        assert stamp.startswith("Fri Jan 02 2026 03:04:05 GMT")
