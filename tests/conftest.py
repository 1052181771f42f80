"""Shared fixtures for slack-logger tests."""

import asyncio
import logging

import pytest

from slack_logger import OutboundPost


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 100.0):
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds
        await asyncio.sleep(0)


class RecordingSender:
    """Stand-in for SlackClient.send that records every attempt."""

    def __init__(self, fail=(), raise_on=(), latency=None, clock=None):
        self.fail = set(fail)
        self.raise_on = set(raise_on)
        self.latency = latency or {}
        self.clock = clock
        self.calls: list[str] = []
        self.started: list[float] = []

    async def __call__(self, post: OutboundPost) -> bool:
        self.calls.append(post.text)
        if self.clock is not None:
            self.started.append(self.clock())
        delay = self.latency.get(post.text, 0.0)
        if self.clock is not None:
            self.clock.advance(delay)
            await asyncio.sleep(0)
        elif delay:
            await asyncio.sleep(delay)
        if post.text in self.raise_on:
            raise RuntimeError(f"boom: {post.text}")
        return post.text not in self.fail


def make_post(text: str, channel: str = "C123") -> OutboundPost:
    return OutboundPost(token="xoxb-test", channel=channel, text=text)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def bare_logging():
    """Run with no root handlers, as in a host that never set up logging."""
    root = logging.getLogger()
    saved = root.handlers[:]
    root.handlers.clear()
    try:
        yield
    finally:
        root.handlers[:] = saved
