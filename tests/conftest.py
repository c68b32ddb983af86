"""Pytest configuration and fixtures."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, Mock

import pytest

from domains.updates import (
    ActiveConversations,
    Clock,
    CommandEvent,
    ConversationType,
    MessagingPort,
    UpdatesDomain,
    UpdateStore,
)


class FrozenNow:
    """Settable time source for Clock(now_func=...)."""

    def __init__(self, value: datetime):
        self.value = value

    def set(self, *args):
        self.value = datetime(*args, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.value


@pytest.fixture
def frozen_now():
    """Time source fixed at 2024-06-03 10:15:30 UTC."""
    return FrozenNow(datetime(2024, 6, 3, 10, 15, 30, tzinfo=timezone.utc))


@pytest.fixture
def clock(frozen_now):
    return Clock("UTC", now_func=frozen_now)


@pytest.fixture
def store():
    return UpdateStore()


@pytest.fixture
def conversations():
    return ActiveConversations()


@pytest.fixture
def mock_messenger():
    """Messaging port whose calls can be inspected."""
    return AsyncMock(spec=MessagingPort)


@pytest.fixture
def domain(mock_messenger, clock, store, conversations):
    return UpdatesDomain(mock_messenger, clock=clock, store=store, conversations=conversations)


@pytest.fixture
def make_command():
    """Factory for CommandEvents with sensible defaults."""
    def _make(
        command: str,
        argument: str = None,
        conversation_id: int = 1001,
        conversation_type: ConversationType = ConversationType.SUPERGROUP,
        sender_id: int = 1,
        sender_name: str = "Alice",
        sender_handle: str = "alice"
    ) -> CommandEvent:
        return CommandEvent(
            conversation_id=conversation_id,
            conversation_type=conversation_type,
            sender_id=sender_id,
            sender_name=sender_name,
            sender_handle=sender_handle,
            command=command,
            argument=argument
        )
    return _make


@pytest.fixture
def mock_discord_bot():
    """Create a mock Discord bot with one cached channel."""
    bot = Mock()
    channel = Mock(send=AsyncMock())
    bot.get_channel = Mock(return_value=channel)
    bot.fetch_channel = AsyncMock(return_value=channel)
    bot.user = Mock(name="UpdatesBot#1234")
    return bot
