"""Mirror log messages to the terminal and a Slack channel.

Slack posts go through a single-worker queue that keeps them in order and
spaces requests at least one second apart.
"""

from .config import Config
from .console import emit, style
from .formatter import FormattedMessage, OutboundPost, format_message
from .logger import SlackLogger
from .queue import DeliveryQueue
from .rate_limiter import RateGate
from .severity import DEFAULT_MENTION, STYLES, Severity, SeverityStyle
from .slack import SlackClient

__version__ = "0.1.0"

__all__ = [
    # Logger
    "SlackLogger",
    # Delivery
    "DeliveryQueue",
    "RateGate",
    "SlackClient",
    # Formatting
    "format_message",
    "FormattedMessage",
    "OutboundPost",
    "emit",
    "style",
    # Severity
    "Severity",
    "SeverityStyle",
    "STYLES",
    "DEFAULT_MENTION",
    # Config
    "Config",
]
