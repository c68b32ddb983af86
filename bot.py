"""Daily Updates Bot - Main Bot.

Collects status updates from group members, keyed by day, and reminds
active groups every two hours during working hours to post them.
"""

import asyncio

import discord
from discord.ext import commands
from apscheduler.schedulers.asyncio import AsyncIOScheduler

from logger import logger
from config import DISCORD_TOKEN, HEALTH_HOST, HEALTH_PORT
from domains.updates import (
    DiscordMessenger,
    UpdatesDomain,
    event_from_interaction,
    event_from_message,
)
from domains.updates.config import COMMAND_PREFIX
from status_api.main import build_server

# Initialize bot
intents = discord.Intents.default()
intents.message_content = True
bot = commands.Bot(command_prefix=COMMAND_PREFIX, intents=intents, help_command=None)

# Initialize scheduler
scheduler = AsyncIOScheduler()

# Domain state - one store and one registry for the life of the process
messenger = DiscordMessenger(bot)
updates = UpdatesDomain(messenger)

_health_task: asyncio.Task | None = None


@bot.event
async def on_ready():
    """Called when bot is connected and ready (again after each reconnect)."""
    global _health_task
    logger.info(f"Logged in as {bot.user}")

    if not scheduler.running:
        job_ids = updates.register_schedules(scheduler)
        scheduler.start()
        logger.info(f"Scheduler started with jobs: {', '.join(job_ids)}")

    if _health_task is None:
        server = build_server(HEALTH_HOST, HEALTH_PORT)
        _health_task = asyncio.create_task(server.serve())
        logger.info(f"Health endpoint listening on {HEALTH_HOST}:{HEALTH_PORT}")


@bot.event
async def on_message(message: discord.Message):
    """Handle incoming messages."""
    # Ignore bot messages
    if message.author.bot:
        return

    event = event_from_message(message, updates.prefix)
    if event is None:
        return

    logger.info(f"Command '{event.command}' from {event.sender_id} in {event.conversation_id}")
    await updates.handle_event(event)


@bot.event
async def on_interaction(interaction: discord.Interaction):
    """Handle button presses from reminder messages."""
    event = event_from_interaction(interaction)
    if event is None:
        return

    messenger.track_interaction(interaction)
    await updates.handle_event(event)


@bot.event
async def on_error(event, *args, **kwargs):
    """Handle errors."""
    logger.exception(f"Bot error in {event}: {args}")


def main():
    """Entry point."""
    if not DISCORD_TOKEN:
        logger.error("DISCORD_TOKEN not set")
        return

    logger.info("Starting Daily Updates Bot...")
    bot.run(DISCORD_TOKEN)


if __name__ == "__main__":
    main()
