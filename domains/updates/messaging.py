"""Messaging port and its Discord implementation.

The domain only talks to ``MessagingPort``. ``DiscordMessenger`` translates
discord.py failures into ``DeliveryError`` subclasses so the reminder
scheduler can tell "bot was removed" apart from a flaky request.
"""

import asyncio
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Optional

import aiohttp
import discord

from logger import logger
from .errors import ForbiddenDeliveryError, TransientDeliveryError
from .messages import split_message
from .parser import parse_command
from .types import Choice, CommandEvent, ConversationType, InteractionEvent


class MessagingPort(ABC):
    """Outbound messaging used by the dispatcher and the reminder scheduler."""

    @abstractmethod
    async def send_text(self, conversation_id: int, text: str) -> None:
        """Deliver a plain text message. Raises DeliveryError on failure."""

    @abstractmethod
    async def send_choice(self, conversation_id: int, text: str, choices: list[Choice]) -> None:
        """Deliver a message with buttons. Raises DeliveryError on failure."""

    @abstractmethod
    async def acknowledge_interaction(self, interaction_id: int) -> None:
        """Acknowledge a button press so the client stops waiting."""


class ChoiceView(discord.ui.View):
    """Buttons whose custom_id is the choice's data token.

    Presses are handled by the bot's on_interaction listener, not by item
    callbacks, so they still work after a restart.
    """

    def __init__(self, choices: list[Choice]):
        super().__init__(timeout=None)
        for choice in choices:
            self.add_item(discord.ui.Button(
                label=choice.label,
                custom_id=choice.data_token,
                style=discord.ButtonStyle.primary
            ))


@contextmanager
def _delivery(conversation_id: int):
    """Translate discord.py exceptions into DeliveryError subclasses."""
    try:
        yield
    except (discord.Forbidden, discord.NotFound) as e:
        raise ForbiddenDeliveryError(conversation_id, str(e)) from e
    except (discord.HTTPException, aiohttp.ClientError, asyncio.TimeoutError) as e:
        raise TransientDeliveryError(conversation_id, str(e) or type(e).__name__) from e


class DiscordMessenger(MessagingPort):
    """MessagingPort backed by a discord.py client."""

    def __init__(self, bot: discord.Client):
        self.bot = bot
        self._interactions: dict[int, discord.Interaction] = {}

    def track_interaction(self, interaction: discord.Interaction):
        """Remember an interaction until it is acknowledged."""
        self._interactions[interaction.id] = interaction

    async def _get_channel(self, conversation_id: int):
        channel = self.bot.get_channel(conversation_id)
        if not channel:
            channel = await self.bot.fetch_channel(conversation_id)
        return channel

    async def send_text(self, conversation_id: int, text: str) -> None:
        with _delivery(conversation_id):
            channel = await self._get_channel(conversation_id)
            for chunk in split_message(text):
                await channel.send(chunk)

    async def send_choice(self, conversation_id: int, text: str, choices: list[Choice]) -> None:
        with _delivery(conversation_id):
            channel = await self._get_channel(conversation_id)
            await channel.send(text, view=ChoiceView(choices))

    async def acknowledge_interaction(self, interaction_id: int) -> None:
        interaction = self._interactions.pop(interaction_id, None)
        if interaction is None:
            logger.warning(f"No pending interaction {interaction_id} to acknowledge")
            return

        if interaction.response.is_done():
            return

        # Ack failures are transient even for 403/404 responses
        try:
            await interaction.response.defer()
        except (discord.HTTPException, aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransientDeliveryError(
                interaction.channel_id, f"Could not acknowledge interaction {interaction_id}: {e}"
            ) from e


# =============================================================================
# INBOUND ADAPTERS
# =============================================================================

def conversation_type_of(channel) -> ConversationType:
    """Map a Discord channel onto the domain's conversation types."""
    if isinstance(channel, discord.DMChannel):
        return ConversationType.PRIVATE
    if isinstance(channel, discord.GroupChannel):
        return ConversationType.GROUP
    if isinstance(channel, discord.TextChannel) and channel.is_news():
        return ConversationType.CHANNEL
    return ConversationType.SUPERGROUP


def event_from_message(message: discord.Message, prefix: str) -> Optional[CommandEvent]:
    """Build a CommandEvent from a message, or None if it isn't a command."""
    parsed = parse_command(message.content, prefix)
    if not parsed:
        return None

    author = message.author
    return CommandEvent(
        conversation_id=message.channel.id,
        conversation_type=conversation_type_of(message.channel),
        sender_id=author.id,
        sender_name=author.display_name,
        sender_handle=author.name or None,
        command=parsed.name,
        argument=parsed.argument
    )


def event_from_interaction(interaction: discord.Interaction) -> Optional[InteractionEvent]:
    """Build an InteractionEvent from a button press, or None for other interactions."""
    if interaction.type != discord.InteractionType.component:
        return None

    data_token = (interaction.data or {}).get("custom_id")
    if not data_token:
        return None

    return InteractionEvent(
        interaction_id=interaction.id,
        conversation_id=interaction.channel_id,
        sender_id=interaction.user.id,
        data_token=data_token
    )
