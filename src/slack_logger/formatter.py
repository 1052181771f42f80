"""Message formatting for the console and Slack sinks."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .severity import DEFAULT_MENTION, Severity, resolve, slack_prefix


@dataclass(frozen=True)
class OutboundPost:
    """A chat.postMessage request, consumed once by the delivery queue."""

    token: str
    channel: str
    text: str
    blocks: list[dict[str, Any]] = field(default_factory=list)

    def payload(self) -> dict[str, Any]:
        """Return the JSON body for chat.postMessage.

        The token is sent as a bearer header, not in the body.
        """
        return {
            "channel": self.channel,
            "text": self.text,
            "blocks": self.blocks,
        }


@dataclass(frozen=True)
class FormattedMessage:
    """Result of formatting one log call for both sinks."""

    console_text: str
    text: str
    blocks: list[dict[str, Any]]

    def to_post(self, token: str, channel: str) -> OutboundPost:
        return OutboundPost(token=token, channel=channel, text=self.text, blocks=self.blocks)


def quote(body: str) -> str:
    """Prefix every line of body with a markdown quote marker."""
    return "\n".join(f"> {line}" for line in body.split("\n"))


def format_timestamp(now: datetime) -> str:
    """Render a timestamp in the shape of JavaScript's Date.toString().

    Only the shape matches: the zone in parentheses is Python's short
    tzname() (``UTC``), not the long name a browser or Node prints
    (``Coordinated Universal Time``).

    Example: ``Fri Oct 16 2026 10:00:00 GMT+0000 (UTC)``
    """
    local = now.astimezone()
    return f"{local:%a %b %d %Y %H:%M:%S} GMT{local:%z} ({local.tzname()})"


def console_text(body: str, severity: "Severity | str | None") -> str:
    return f"{resolve(severity).label}{body}"


def format_message(
    body: str,
    severity: "Severity | str | None",
    *,
    now: datetime | None = None,
    mention: str = DEFAULT_MENTION,
) -> FormattedMessage:
    """Format a log message for both sinks.

    Args:
        body: Free-text message, may span several lines
        severity: Severity tag; unknown values are passed through unprefixed
        now: Timestamp for the context block (default: current time)
        mention: Slack mention inserted into the error banner

    Returns:
        FormattedMessage with console text, Slack fallback text and blocks
    """
    prefix = slack_prefix(severity, mention)
    timestamp = format_timestamp(now or datetime.now())

    blocks = [
        {
            "type": "section",
            "text": {"type": "mrkdwn", "text": f"{prefix}{quote(body)}"},
        },
        {
            "type": "context",
            "elements": [{"type": "mrkdwn", "text": timestamp}],
        },
    ]

    return FormattedMessage(
        console_text=console_text(body, severity),
        text=f"{prefix}{body}",
        blocks=blocks,
    )
