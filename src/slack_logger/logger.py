"""Public logging surface: console, Slack, or both."""

from collections.abc import Callable
from datetime import datetime

from . import console
from .config import Config
from .formatter import format_message
from .queue import DeliveryQueue
from .severity import DEFAULT_MENTION, Severity
from .slack import SlackClient


class SlackLogger:
    """Mirror log messages to the terminal and a Slack channel.

    Usage:
        logger = SlackLogger(DeliveryQueue(SlackClient().send))
        logger.full("deploy finished", token, channel_id, "start")

    slack() and full() hand the post to the delivery queue and return
    immediately; they must be called while an asyncio event loop runs.
    """

    def __init__(
        self,
        queue: DeliveryQueue,
        mention: str = DEFAULT_MENTION,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.queue = queue
        self.mention = mention
        self._clock = clock

    @classmethod
    def from_config(cls, config: Config) -> "SlackLogger":
        client = SlackClient(api_url=config.api_url)
        queue = DeliveryQueue(client.send, min_interval=config.min_interval)
        return cls(queue, mention=config.mention)

    def log(self, message: str, severity: "Severity | str" = Severity.DEFAULT) -> None:
        """Log a message to the console only."""
        console.emit(message, severity)

    terminal = log

    def slack(
        self,
        token: str,
        channel_id: str,
        message: str,
        severity: "Severity | str" = Severity.DEFAULT,
    ) -> None:
        """Queue a message for the Slack channel.

        Args:
            token: Bot token allowed to post in the channel
            channel_id: Destination channel ID
            message: The message to log
            severity: Severity tag selecting the prefix
        """
        formatted = format_message(message, severity, now=self._clock(), mention=self.mention)
        self.queue.enqueue(formatted.to_post(token, channel_id))

    def full(
        self,
        message: str,
        token: str,
        channel_id: str,
        severity: "Severity | str" = Severity.DEFAULT,
    ) -> None:
        """Log a message to the console, then queue it for Slack."""
        self.terminal(message, severity)
        self.slack(token, channel_id, message, severity)

    async def aclose(self) -> None:
        """Wait for queued Slack posts, then stop the delivery worker."""
        await self.queue.aclose()
