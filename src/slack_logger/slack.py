"""Slack Web API client for posting log messages."""

import httpx

from .formatter import OutboundPost
from .logging import get_logger

log = get_logger(__name__)

POST_MESSAGE_URL = "https://slack.com/api/chat.postMessage"


class SlackClient:
    """Minimal chat.postMessage client.

    No timeout is applied by default: a stalled request holds up the
    delivery queue until the connection gives up.
    """

    def __init__(
        self,
        api_url: str = POST_MESSAGE_URL,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_url = api_url
        self.timeout = timeout
        self._transport = transport

    async def send(self, post: OutboundPost) -> bool:
        """Post a message to Slack.

        Args:
            post: The message, including its bot token and channel

        Returns:
            True if Slack accepted the message, False otherwise
        """
        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=self.timeout
            ) as client:
                response = await client.post(
                    self.api_url,
                    json=post.payload(),
                    headers={"Authorization": f"Bearer {post.token}"},
                )
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as e:
            log.error("Slack API error", status=e.response.status_code)
            return False
        except httpx.RequestError as e:
            log.error("Slack request failed", error=str(e))
            return False
        except ValueError as e:
            log.error("Slack returned invalid JSON", error=str(e))
            return False

        if not isinstance(body, dict):
            log.error("Slack returned unexpected response", body_type=type(body).__name__)
            return False

        if not body.get("ok"):
            log.error("Slack rejected message", channel=post.channel, error=body.get("error"))
            return False

        log.debug("Slack message sent", channel=post.channel, ts=body.get("ts"))
        return True
