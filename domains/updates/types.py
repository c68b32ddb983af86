"""Type definitions for the updates domain."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Union


class ConversationType(str, Enum):
    """Kind of conversation a command arrived in."""
    PRIVATE = "private"        # One-to-one DM with the bot
    GROUP = "group"            # Group DM
    SUPERGROUP = "supergroup"  # Guild text channel or thread
    CHANNEL = "channel"        # Announcement channel

    @property
    def is_group(self) -> bool:
        return self in (ConversationType.GROUP, ConversationType.SUPERGROUP)


@dataclass(frozen=True)
class DailyUpdate:
    """One submitted status entry."""
    author_id: int
    author_name: str
    author_handle: Optional[str]
    text: str
    submitted_at: str  # HH:MM:SS in the bot's time zone
    day: str           # YYYY-MM-DD bucket the entry belongs to


@dataclass(frozen=True)
class Choice:
    """An interactive button offered alongside a message."""
    label: str
    data_token: str


# =============================================================================
# INBOUND EVENTS
# =============================================================================

@dataclass(frozen=True)
class CommandEvent:
    """A parsed command from a member of a conversation."""
    conversation_id: int
    conversation_type: ConversationType
    sender_id: int
    sender_name: str
    command: str
    sender_handle: Optional[str] = None
    argument: Optional[str] = None


@dataclass(frozen=True)
class InteractionEvent:
    """A member pressed one of the bot's buttons."""
    interaction_id: int
    conversation_id: int
    sender_id: int
    data_token: str


@dataclass(frozen=True)
class TickEvent:
    """The reminder schedule fired."""
    fired_at: datetime


InboundEvent = Union[CommandEvent, InteractionEvent, TickEvent]


@dataclass
class ReminderReport:
    """Outcome of one reminder run."""
    skipped: bool = False
    delivered: list[int] = field(default_factory=list)
    failed: list[int] = field(default_factory=list)
    deactivated: list[int] = field(default_factory=list)
