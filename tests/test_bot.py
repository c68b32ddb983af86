"""Tests for the Discord event wiring in bot.py."""

from unittest.mock import AsyncMock, Mock, patch

import discord
import pytest

import bot as bot_module


def _message(content, author_is_bot=False):
    message = Mock()
    message.content = content
    message.channel = Mock(spec=discord.TextChannel, id=42)
    message.channel.is_news.return_value = False
    message.author = Mock(id=7, display_name="Uma", bot=author_is_bot)
    message.author.name = "uma"
    return message


@pytest.mark.asyncio
async def test_command_message_routed_to_domain():
    with patch.object(bot_module.updates, "handle_event", new=AsyncMock()) as handle:
        await bot_module.on_message(_message("/update wrote tests"))

    event = handle.await_args.args[0]
    assert event.command == "update"
    assert event.argument == "wrote tests"
    assert event.conversation_id == 42


@pytest.mark.asyncio
@pytest.mark.parametrize("content,author_is_bot", [
    ("just chatting", False),
    ("/update from another bot", True),
])
async def test_other_messages_ignored(content, author_is_bot):
    with patch.object(bot_module.updates, "handle_event", new=AsyncMock()) as handle:
        await bot_module.on_message(_message(content, author_is_bot))

    handle.assert_not_awaited()


@pytest.mark.asyncio
async def test_button_press_tracked_and_routed():
    interaction = Mock(
        id=31,
        channel_id=42,
        type=discord.InteractionType.component,
        data={"custom_id": "submit_update"}
    )
    interaction.user.id = 7

    with patch.object(bot_module.updates, "handle_event", new=AsyncMock()) as handle, \
            patch.object(bot_module.messenger, "track_interaction") as track:
        await bot_module.on_interaction(interaction)

    track.assert_called_once_with(interaction)
    assert handle.await_args.args[0].data_token == "submit_update"


def test_domain_wired_to_discord_messenger():
    assert bot_module.updates.messenger is bot_module.messenger
    assert bot_module.messenger.bot is bot_module.bot


@pytest.mark.asyncio
async def test_on_error_logs_with_traceback():
    with patch.object(bot_module, "logger") as logger:
        await bot_module.on_error("on_message", "payload")

    logger.exception.assert_called_once()
    assert "on_message" in logger.exception.call_args.args[0]


def test_main_without_token_does_not_start():
    with patch.object(bot_module, "DISCORD_TOKEN", None), \
            patch.object(bot_module, "logger") as logger, \
            patch.object(bot_module.bot, "run") as run:
        bot_module.main()

    run.assert_not_called()
    logger.error.assert_called_once_with("DISCORD_TOKEN not set")


def test_main_runs_bot_with_token():
    with patch.object(bot_module, "DISCORD_TOKEN", "token-123"), \
            patch.object(bot_module.bot, "run") as run:
        bot_module.main()

    run.assert_called_once_with("token-123")
