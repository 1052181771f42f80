"""Console sink: colorized, synchronous output."""

import click

from .formatter import console_text
from .severity import Severity, resolve


def style(message: str, severity: "Severity | str | None") -> str:
    """Return message with the severity's label and ANSI styling applied."""
    sev_style = resolve(severity)
    text = console_text(message, severity)
    if sev_style.fg is None and sev_style.bg is None:
        return text
    return click.style(text, fg=sev_style.fg, bg=sev_style.bg)


def emit(message: str, severity: "Severity | str | None" = Severity.DEFAULT) -> None:
    """Write message to stdout/stderr styled for its severity.

    Styling is stripped by click when the stream is not a terminal.
    """
    click.echo(style(message, severity), err=resolve(severity).err)
