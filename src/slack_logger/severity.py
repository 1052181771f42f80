"""Severity levels and the formatting rules attached to each one."""

from dataclasses import dataclass
from enum import Enum

# Slack user/group mentioned on error posts
DEFAULT_MENTION = "<@S0790GPRA48>"


class Severity(str, Enum):
    """Log severity tags."""

    INFO = "info"
    START = "start"
    CRON = "cron"
    ERROR = "error"
    WARNING = "warning"
    SUCCESS = "success"
    DEFAULT = "default"


@dataclass(frozen=True)
class SeverityStyle:
    """How a severity is rendered on each sink."""

    prefix: str = ""  # Prepended to Slack text, may contain {mention}
    fg: str | None = None  # click foreground color
    bg: str | None = None  # click background color
    err: bool = False  # Write to stderr instead of stdout
    label: str = ""  # Console-only textual label


PASSTHROUGH = SeverityStyle()

STYLES: dict[Severity, SeverityStyle] = {
    Severity.INFO: SeverityStyle(prefix=":information_source: ", fg="blue"),
    Severity.START: SeverityStyle(prefix=":rocket: ", bg="blue"),
    Severity.CRON: SeverityStyle(prefix=":alarm_clock: ", fg="magenta", label="[CRON]: "),
    Severity.ERROR: SeverityStyle(
        prefix="🚨 Yo {mention} deres an error \n\n [ERROR]: ",
        fg="red",
        err=True,
    ),
    Severity.WARNING: SeverityStyle(fg="yellow", err=True),
    Severity.SUCCESS: SeverityStyle(fg="green"),
    Severity.DEFAULT: PASSTHROUGH,
}


def resolve(severity: "Severity | str | None") -> SeverityStyle:
    """Look up the style for a severity.

    Unknown values fall back to the pass-through style rather than raising.
    """
    try:
        return STYLES[Severity(severity)]
    except ValueError:
        return PASSTHROUGH


def slack_prefix(severity: "Severity | str | None", mention: str = DEFAULT_MENTION) -> str:
    """Return the Slack text prefix for a severity, with the mention filled in."""
    return resolve(severity).prefix.format(mention=mention)
