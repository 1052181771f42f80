"""Configuration loading for slack-logger."""

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from .severity import DEFAULT_MENTION
from .slack import POST_MESSAGE_URL

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_interval_ms(value: object) -> int:
    try:
        interval = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        raise ValueError(f"min interval must be an integer number of ms, got {value!r}") from None
    if interval < 0:
        raise ValueError(f"min interval must be >= 0 ms, got {interval}")
    return interval


def _parse_log_level(value: object) -> str:
    level = str(value).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
    return level


@dataclass
class Config:
    """Logger configuration."""

    slack_token: str | None = None
    slack_channel: str | None = None
    mention: str = DEFAULT_MENTION
    api_url: str = POST_MESSAGE_URL
    min_interval_ms: int = 1000
    log_level: str = "INFO"

    @property
    def min_interval(self) -> float:
        """Minimum spacing between Slack requests, in seconds."""
        return self.min_interval_ms / 1000

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            slack_token=os.environ.get("SLACK_TOKEN"),
            slack_channel=os.environ.get("SLACK_CHANNEL_ID"),
            mention=os.environ.get("SLACK_MENTION", DEFAULT_MENTION),
            api_url=os.environ.get("SLACK_API_URL", POST_MESSAGE_URL),
            min_interval_ms=_parse_interval_ms(os.environ.get("SLACK_MIN_INTERVAL_MS", "1000")),
            log_level=_parse_log_level(os.environ.get("SLACK_LOGGER_LOG_LEVEL", "INFO")),
        )

    @classmethod
    def from_file(cls, path: Path) -> "Config":
        """Load configuration from YAML file, with env var overrides.

        Example file:

            slack:
              token: xoxb-...
              channel: C0123456
              mention: "<@U0123456>"
            rate_limit:
              min_interval_ms: 1000
        """
        config = cls.from_env()

        if path.exists():
            with open(path) as f:
                data = yaml.safe_load(f)

            if data and "slack" in data:
                slack = data["slack"] or {}
                if not config.slack_token:
                    config.slack_token = slack.get("token")
                if not config.slack_channel:
                    config.slack_channel = slack.get("channel")
                if "SLACK_MENTION" not in os.environ:
                    config.mention = slack.get("mention", config.mention)
                if "SLACK_API_URL" not in os.environ:
                    config.api_url = slack.get("api_url", config.api_url)

            if data and "rate_limit" in data and "SLACK_MIN_INTERVAL_MS" not in os.environ:
                limit = data["rate_limit"] or {}
                config.min_interval_ms = _parse_interval_ms(
                    limit.get("min_interval_ms", config.min_interval_ms)
                )

            if data and "log_level" in data and "SLACK_LOGGER_LOG_LEVEL" not in os.environ:
                config.log_level = _parse_log_level(data["log_level"])

        return config
