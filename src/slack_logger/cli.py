"""CLI for slack-logger.

Usage:
    slack-logger send "deploy finished" --severity start
    slack-logger send "disk full" -s error --no-terminal
    slack-logger test
    slack-logger severities
"""

import asyncio
from pathlib import Path

import click

from slack_logger.config import Config
from slack_logger.logger import SlackLogger
from slack_logger.logging import configure_logging, get_logger
from slack_logger.severity import STYLES, Severity

log = get_logger(__name__)

SEVERITY_CHOICES = [s.value for s in Severity]


def _require_destination(config: Config, token: str | None, channel: str | None) -> tuple[str, str]:
    token = token or config.slack_token
    channel = channel or config.slack_channel
    if not token:
        raise click.UsageError("Slack token required (set SLACK_TOKEN or pass --token)")
    if not channel:
        raise click.UsageError("Slack channel required (set SLACK_CHANNEL_ID or pass --channel)")
    return token, channel


async def _deliver(
    config: Config,
    message: str,
    token: str,
    channel: str,
    severity: str,
    terminal: bool,
) -> bool:
    logger = SlackLogger.from_config(config)
    if terminal:
        logger.full(message, token, channel, severity)
    else:
        logger.slack(token, channel, message, severity)
    await logger.aclose()
    return logger.queue.failed == 0


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=False, path_type=Path),
    default=Path.home() / ".slack-logger.yaml",
    help="Config file path",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: Path, verbose: bool) -> None:
    """Log messages to the terminal and a Slack channel."""
    ctx.ensure_object(dict)
    config = Config.from_file(config_path)
    configure_logging("DEBUG" if verbose else config.log_level)
    ctx.obj["config"] = config


@main.command("send")
@click.argument("message")
@click.option(
    "--severity",
    "-s",
    type=click.Choice(SEVERITY_CHOICES),
    default=Severity.DEFAULT.value,
    help="Message severity",
)
@click.option("--token", "-t", help="Slack bot token (default: SLACK_TOKEN)")
@click.option("--channel", "-c", help="Slack channel ID (default: SLACK_CHANNEL_ID)")
@click.option("--no-terminal", is_flag=True, help="Only send to Slack")
@click.pass_context
def send(
    ctx: click.Context,
    message: str,
    severity: str,
    token: str | None,
    channel: str | None,
    no_terminal: bool,
) -> None:
    """Send MESSAGE to the terminal and Slack."""
    config = ctx.obj["config"]
    token, channel = _require_destination(config, token, channel)

    ok = asyncio.run(_deliver(config, message, token, channel, severity, not no_terminal))
    if not ok:
        log.error("Slack delivery failed", channel=channel)
        ctx.exit(1)


@main.command("test")
@click.option("--token", "-t", help="Slack bot token (default: SLACK_TOKEN)")
@click.option("--channel", "-c", help="Slack channel ID (default: SLACK_CHANNEL_ID)")
@click.pass_context
def test(ctx: click.Context, token: str | None, channel: str | None) -> None:
    """Send a test message to verify the token and channel."""
    config = ctx.obj["config"]
    token, channel = _require_destination(config, token, channel)

    click.echo(f"Sending test message to {channel}...")
    ok = asyncio.run(
        _deliver(config, "slack-logger is configured correctly.", token, channel, "success", False)
    )
    if ok:
        click.echo("Test message sent successfully")
    else:
        click.echo("Failed to send test message", err=True)
        ctx.exit(1)


@main.command("severities")
def severities() -> None:
    """List severities and how each is rendered."""
    for severity, style in STYLES.items():
        color = style.fg or (f"on {style.bg}" if style.bg else "plain")
        stream = "stderr" if style.err else "stdout"
        prefix = style.prefix.split(" ", 1)[0] if style.prefix else "-"
        click.echo(f"{severity.value:<8} {color:<10} {stream:<7} {prefix}")


if __name__ == "__main__":
    main()
