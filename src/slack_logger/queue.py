"""Ordered, rate-limited delivery of Slack posts."""

import asyncio
from collections.abc import Awaitable, Callable

from .formatter import OutboundPost
from .logging import get_logger
from .metrics import POSTS, QUEUE_PENDING
from .rate_limiter import DEFAULT_MIN_INTERVAL, RateGate

log = get_logger(__name__)

Sender = Callable[[OutboundPost], Awaitable[bool]]


class DeliveryQueue:
    """Single-worker FIFO in front of the Slack sink.

    Posts are attempted one at a time, in enqueue order, each after the
    rate gate admits it. A failed post is logged and dropped; it is never
    retried or re-enqueued. The worker runs on the event loop that was
    running when the first post was enqueued.
    """

    def __init__(
        self,
        sender: Sender,
        min_interval: float = DEFAULT_MIN_INTERVAL,
        rate_gate: RateGate | None = None,
    ):
        """Initialize the queue.

        Args:
            sender: Coroutine function delivering one post, True on success
            min_interval: Minimum seconds between dispatch starts
            rate_gate: Pre-built gate (overrides min_interval)
        """
        self._sender = sender
        self.rate_gate = rate_gate or RateGate(min_interval)
        self._queue: asyncio.Queue[OutboundPost] | None = None
        self._worker: asyncio.Task[None] | None = None
        self._loop: asyncio.AbstractEventLoop | None = None
        self.in_flight: OutboundPost | None = None
        self.delivered = 0
        self.failed = 0

    @property
    def pending(self) -> int:
        """Number of posts waiting (not counting the one in flight)."""
        return self._queue.qsize() if self._queue is not None else 0

    def _ensure_worker(self) -> asyncio.Queue[OutboundPost]:
        loop = asyncio.get_running_loop()
        if self._loop is not loop:
            # Anything left on a previous loop went away with it
            if self._queue is not None:
                QUEUE_PENDING.dec(self._queue.qsize())
            self._queue = asyncio.Queue()
            self._loop = loop
            self._worker = None
        assert self._queue is not None
        if self._worker is None or self._worker.done():
            self._worker = loop.create_task(self._run(self._queue), name="slack-delivery")
        return self._queue

    def enqueue(self, post: OutboundPost) -> None:
        """Queue a post for delivery without waiting for it.

        Raises:
            RuntimeError: If called outside a running event loop
        """
        queue = self._ensure_worker()
        queue.put_nowait(post)
        QUEUE_PENDING.inc()
        log.debug("Slack post queued", channel=post.channel, pending=queue.qsize())

    async def _deliver(self, post: OutboundPost) -> bool:
        try:
            return await self._sender(post)
        except Exception:
            log.exception("Error posting message", channel=post.channel)
            return False

    async def _run(self, queue: asyncio.Queue[OutboundPost]) -> None:
        while True:
            post = await queue.get()
            QUEUE_PENDING.dec()
            try:
                await self.rate_gate.acquire()
                self.in_flight = post
                ok = await self._deliver(post)
                if ok:
                    self.delivered += 1
                    POSTS.labels(status="success").inc()
                else:
                    self.failed += 1
                    POSTS.labels(status="failure").inc()
                    log.error("Failed to send message", channel=post.channel, text=post.text[:200])
            finally:
                self.in_flight = None
                queue.task_done()

    async def join(self) -> None:
        """Wait until every queued post has been attempted."""
        if self._queue is not None:
            await self._queue.join()

    async def aclose(self) -> None:
        """Drain the queue, then stop the worker."""
        await self.join()
        if self._worker is not None and not self._worker.done():
            self._worker.cancel()
            try:
                await self._worker
            except asyncio.CancelledError:
                pass
        self._worker = None
