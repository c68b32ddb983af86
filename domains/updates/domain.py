"""Updates domain - owns the store, the registry and their handlers."""

from datetime import datetime
from typing import Optional

from domains.base import Domain, ScheduledTask
from logger import logger
from .clock import Clock
from .config import COMMAND_PREFIX, REMINDER_END_HOUR, REMINDER_START_HOUR, RETAIN_DAYS, TIMEZONE
from .conversations import ActiveConversations
from .dispatcher import CommandDispatcher
from .messaging import MessagingPort
from .scheduler import ReminderScheduler
from .store import UpdateStore
from .types import CommandEvent, InboundEvent, InteractionEvent, TickEvent


class UpdatesDomain(Domain):
    """Daily update collection and scheduled reminders.

    Built once at startup; every handler reaches state through this object.
    """

    def __init__(
        self,
        messenger: MessagingPort,
        clock: Optional[Clock] = None,
        store: Optional[UpdateStore] = None,
        conversations: Optional[ActiveConversations] = None,
        prefix: str = COMMAND_PREFIX,
        start_hour: int = REMINDER_START_HOUR,
        end_hour: int = REMINDER_END_HOUR
    ):
        self.messenger = messenger
        self.clock = clock or Clock(TIMEZONE)
        self.store = store or UpdateStore(retain_days=RETAIN_DAYS)
        self.conversations = conversations or ActiveConversations()
        self.prefix = prefix

        self.reminders = ReminderScheduler(
            self.conversations, messenger, self.clock, start_hour=start_hour, end_hour=end_hour
        )
        # Welcome and help text advertise the same window the gate enforces
        self.dispatcher = CommandDispatcher(
            self.store, self.conversations, messenger, self.clock, prefix=prefix,
            start_hour=self.reminders.start_hour, end_hour=self.reminders.end_hour
        )

    @property
    def name(self) -> str:
        return "updates"

    @property
    def schedules(self) -> list[ScheduledTask]:
        return [
            ScheduledTask(
                name="reminders",
                handler=self.fire_reminders,
                hour=self.reminders.cron_hours,
                minute=0,
                timezone=self.clock.tz.key
            )
        ]

    async def fire_reminders(self):
        """Cron entry point - wraps the tick in an event."""
        await self.handle_event(TickEvent(fired_at=self.clock.now()))

    async def handle_event(self, event: InboundEvent):
        """Route an inbound event to its handler.

        Errors never escape: a failing event is logged and dropped, leaving
        the store and registry as they were after the last completed mutation.
        """
        try:
            if isinstance(event, CommandEvent):
                return await self.dispatcher.handle_command(event)
            if isinstance(event, InteractionEvent):
                return await self.dispatcher.handle_interaction(event)
            if isinstance(event, TickEvent):
                return await self.reminders.on_tick(event)
            logger.warning(f"Unhandled event type: {type(event).__name__}")
        except Exception:
            logger.exception(f"Error handling {type(event).__name__}")
        return None
