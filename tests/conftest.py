"""Shared test fixtures."""

from unittest.mock import AsyncMock

import pytest

from slack_notifications.tools.envelope import ServerContext

BUILD_CHANNEL = "C0BUILDS01"


@pytest.fixture()
def slack_client() -> AsyncMock:
    """AsyncMock standing in for slack_sdk's AsyncWebClient."""
    return AsyncMock()


@pytest.fixture()
def context(slack_client: AsyncMock) -> ServerContext:
    """Server context with a configured build channel."""
    return ServerContext(client=slack_client, default_channel_id=BUILD_CHANNEL)


@pytest.fixture()
def unconfigured_context(slack_client: AsyncMock) -> ServerContext:
    """Server context without SLACK_BUILD_CHANNEL_ID."""
    return ServerContext(client=slack_client, default_channel_id=None)
