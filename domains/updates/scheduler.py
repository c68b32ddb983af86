"""Scheduled reminders asking active conversations for their updates.

Fires at the top of every even hour (cron ``0 */2 * * *``) and only posts
inside the working-hours window. A conversation that has removed or blocked
the bot is dropped from the registry; any other failure is logged and the
next tick tries again.
"""

from logger import logger
from .clock import Clock
from .config import (
    REMINDER_CRON_HOURS,
    REMINDER_END_HOUR,
    REMINDER_START_HOUR,
    SUBMIT_UPDATE_LABEL,
    SUBMIT_UPDATE_TOKEN,
)
from .conversations import ActiveConversations
from .errors import DeliveryError, ForbiddenDeliveryError
from .messages import REMINDER_CHOICE_TEXT, reminder_text
from .messaging import MessagingPort
from .types import Choice, ReminderReport, TickEvent


class ReminderScheduler:
    """Working-hours gate plus reminder fan-out."""

    def __init__(
        self,
        conversations: ActiveConversations,
        messenger: MessagingPort,
        clock: Clock,
        start_hour: int = REMINDER_START_HOUR,
        end_hour: int = REMINDER_END_HOUR,
        cron_hours: str = REMINDER_CRON_HOURS
    ):
        self.conversations = conversations
        self.messenger = messenger
        self.clock = clock
        self.start_hour = start_hour
        self.end_hour = end_hour
        self.cron_hours = cron_hours

    def is_working_hours(self) -> bool:
        """True when the local hour is inside [start_hour, end_hour]."""
        return self.start_hour <= self.clock.hour() <= self.end_hour

    async def on_tick(self, event: TickEvent) -> ReminderReport:
        logger.debug(f"Reminder tick at {event.fired_at.isoformat()}")
        return await self.send_reminders()

    async def send_reminders(self) -> ReminderReport:
        """Post the reminder and the Submit Update button to every active conversation."""
        report = ReminderReport()

        if not self.is_working_hours():
            logger.debug(f"Outside working hours ({self.clock.hour()}:00), skipping reminders")
            report.skipped = True
            return report

        targets = self.conversations.list_active()
        text = reminder_text()
        choices = [Choice(label=SUBMIT_UPDATE_LABEL, data_token=SUBMIT_UPDATE_TOKEN)]

        for conversation_id in targets:
            try:
                await self.messenger.send_text(conversation_id, text)
                await self.messenger.send_choice(conversation_id, REMINDER_CHOICE_TEXT, choices)
                report.delivered.append(conversation_id)

            except ForbiddenDeliveryError as e:
                logger.warning(f"Bot removed from conversation {conversation_id}, deactivating: {e}")
                self.conversations.deactivate(conversation_id)
                report.failed.append(conversation_id)
                report.deactivated.append(conversation_id)

            except DeliveryError as e:
                logger.error(f"Error sending reminder to conversation {conversation_id}: {e}")
                report.failed.append(conversation_id)

            except Exception:
                logger.exception(f"Unexpected error sending reminder to conversation {conversation_id}")
                report.failed.append(conversation_id)

        logger.info(
            f"Sent reminders to {len(report.delivered)}/{len(targets)} conversations "
            f"({len(report.deactivated)} deactivated)"
        )
        return report
