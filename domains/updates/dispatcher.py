"""Command handlers - map inbound commands to store/registry operations."""

from logger import logger
from .clock import Clock, DAY_KEY_FORMAT, TIME_FORMAT
from .config import COMMAND_PREFIX, REMINDER_END_HOUR, REMINDER_START_HOUR, SUBMIT_UPDATE_TOKEN
from .conversations import ActiveConversations
from .errors import DeliveryError, ValidationError
from .messages import (
    NO_OWN_UPDATES_TODAY,
    NO_UPDATES_TODAY,
    UPDATE_RECORDED,
    format_all_updates,
    format_own_updates,
    help_text,
    submit_prompt,
    usage_hint,
    welcome_text,
)
from .messaging import MessagingPort
from .store import UpdateStore
from .types import CommandEvent, InteractionEvent


class CommandDispatcher:
    """Runs one command per call and replies in the originating conversation.

    Every store and registry mutation happens before the first await, so a
    handler never leaves state half-applied while waiting on the network.
    """

    def __init__(
        self,
        store: UpdateStore,
        conversations: ActiveConversations,
        messenger: MessagingPort,
        clock: Clock,
        prefix: str = COMMAND_PREFIX,
        start_hour: int = REMINDER_START_HOUR,
        end_hour: int = REMINDER_END_HOUR
    ):
        self.store = store
        self.conversations = conversations
        self.messenger = messenger
        self.clock = clock
        self.prefix = prefix
        self.start_hour = start_hour
        self.end_hour = end_hour
        self._handlers = {
            "start": self._start,
            "help": self._help,
            "update": self._update,
            "viewupdates": self._view_updates,
            "viewmyupdates": self._view_my_updates,
        }

    async def handle_command(self, event: CommandEvent) -> str | None:
        """Run a command and send the reply.

        Returns:
            The reply text, or None if the command is unknown
        """
        handler = self._handlers.get(event.command)
        if handler is None:
            logger.debug(f"Ignoring unknown command '{event.command}'")
            return None

        reply = handler(event)
        await self.messenger.send_text(event.conversation_id, reply)
        return reply

    async def handle_interaction(self, event: InteractionEvent) -> str | None:
        """Answer a button press.

        The press is acknowledged before the reply goes out; Discord expires
        an unanswered interaction after three seconds.
        """
        try:
            await self.messenger.acknowledge_interaction(event.interaction_id)
        except DeliveryError as e:
            logger.warning(f"Could not acknowledge interaction {event.interaction_id}: {e}")

        if event.data_token != SUBMIT_UPDATE_TOKEN:
            logger.debug(f"Ignoring unknown interaction token '{event.data_token}'")
            return None

        reply = submit_prompt(self.prefix)
        await self.messenger.send_text(event.conversation_id, reply)
        return reply

    # -------------------------------------------------------------------------
    # Handlers - synchronous, return the reply text
    # -------------------------------------------------------------------------

    def _start(self, event: CommandEvent) -> str:
        if event.conversation_type.is_group:
            self.conversations.activate(event.conversation_id)
        return welcome_text(self.prefix, self.start_hour, self.end_hour)

    def _help(self, event: CommandEvent) -> str:
        return help_text(self.prefix, self.start_hour, self.end_hour)

    def _update(self, event: CommandEvent) -> str:
        now = self.clock.now()
        try:
            self.store.record_update(
                day=now.strftime(DAY_KEY_FORMAT),
                author_id=event.sender_id,
                author_name=event.sender_name,
                author_handle=event.sender_handle,
                text=event.argument or "",
                submitted_at=now.strftime(TIME_FORMAT)
            )
        except ValidationError:
            return usage_hint(self.prefix)
        return UPDATE_RECORDED

    def _view_updates(self, event: CommandEvent) -> str:
        day = self.clock.today_key()
        updates = self.store.list_updates(day)
        if not updates:
            return NO_UPDATES_TODAY
        return format_all_updates(day, updates)

    def _view_my_updates(self, event: CommandEvent) -> str:
        day = self.clock.today_key()
        updates = self.store.list_updates_for_author(day, event.sender_id)
        if not updates:
            return NO_OWN_UPDATES_TODAY
        return format_own_updates(day, updates)
