"""Updates domain - collect daily status updates and remind groups to post them."""

from .clock import Clock
from .conversations import ActiveConversations
from .dispatcher import CommandDispatcher
from .domain import UpdatesDomain
from .errors import (
    DeliveryError,
    ForbiddenDeliveryError,
    RetentionError,
    TransientDeliveryError,
    UpdatesBotError,
    ValidationError,
)
from .messaging import DiscordMessenger, MessagingPort, event_from_interaction, event_from_message
from .scheduler import ReminderScheduler
from .store import UpdateStore
from .types import (
    Choice,
    CommandEvent,
    ConversationType,
    DailyUpdate,
    InteractionEvent,
    ReminderReport,
    TickEvent,
)

__all__ = [
    "Clock",
    "ActiveConversations",
    "CommandDispatcher",
    "UpdatesDomain",
    "DeliveryError",
    "ForbiddenDeliveryError",
    "RetentionError",
    "TransientDeliveryError",
    "UpdatesBotError",
    "ValidationError",
    "DiscordMessenger",
    "MessagingPort",
    "event_from_interaction",
    "event_from_message",
    "ReminderScheduler",
    "UpdateStore",
    "Choice",
    "CommandEvent",
    "ConversationType",
    "DailyUpdate",
    "InteractionEvent",
    "ReminderReport",
    "TickEvent",
]
