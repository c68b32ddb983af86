"""Reply templates and listing formatters for the updates domain."""

from .config import (
    COMMAND_PREFIX,
    MAX_MESSAGE_LENGTH,
    REMINDER_END_HOUR,
    REMINDER_INTERVAL_HOURS,
    REMINDER_START_HOUR,
)
from .types import DailyUpdate


def _hour_label(hour: int) -> str:
    """24h hour -> '8 AM' / '8 PM'."""
    suffix = "AM" if hour < 12 else "PM"
    display = hour % 12 or 12
    return f"{display} {suffix}"


def _window_label(start_hour: int, end_hour: int) -> str:
    return f"{_hour_label(start_hour)} - {_hour_label(end_hour)}"


def _command_summary(prefix: str) -> str:
    return "\n".join([
        f"{prefix}update - Submit your daily update",
        f"{prefix}viewupdates - View all updates for today",
        f"{prefix}viewmyupdates - View your updates for today",
        f"{prefix}help - Show this help message",
    ])


def welcome_text(
    prefix: str = COMMAND_PREFIX,
    start_hour: int = REMINDER_START_HOUR,
    end_hour: int = REMINDER_END_HOUR
) -> str:
    return "\n".join([
        "Welcome to the Daily Updates Bot! 🎓",
        f"I'll remind you every {REMINDER_INTERVAL_HOURS} hours during working hours "
        f"({_window_label(start_hour, end_hour)}) to submit your updates.",
        "",
        "Available commands:",
        _command_summary(prefix),
        "",
        "Note: Make sure I can post in this channel to receive reminders!",
    ])


def help_text(
    prefix: str = COMMAND_PREFIX,
    start_hour: int = REMINDER_START_HOUR,
    end_hour: int = REMINDER_END_HOUR
) -> str:
    return "\n".join([
        "Daily Updates Bot Commands:",
        f"{prefix}update [Your Update Message]",
        f"Example: {prefix}update Completed assignment 3, working on project",
        "",
        f"{prefix}viewupdates - View all updates for today",
        f"{prefix}viewmyupdates - View your updates for today",
        f"{prefix}help - Show this help message",
        "",
        f"The bot will automatically remind you every {REMINDER_INTERVAL_HOURS} hours "
        f"during working hours ({_window_label(start_hour, end_hour)}) to submit your updates.",
    ])


def reminder_text(prefix: str = COMMAND_PREFIX) -> str:
    return "\n".join([
        "📢 Time for your update!",
        "",
        f"Please share what you're working on using the {prefix}update command.",
        f"Example: {prefix}update Completed chapter 3 exercises, starting work on the project",
        "",
        "Haven't submitted your update yet? Please take a moment to let us know your progress! 📝",
    ])


REMINDER_CHOICE_TEXT = "Click below to submit your update:"
UPDATE_RECORDED = "✅ Your update has been recorded successfully!"
NO_UPDATES_TODAY = "No updates have been submitted today."
NO_OWN_UPDATES_TODAY = "You haven't submitted any updates today."


def usage_hint(prefix: str = COMMAND_PREFIX) -> str:
    return f"Please provide your update message.\nFormat: {prefix}update [Your Update Message]"


def submit_prompt(prefix: str = COMMAND_PREFIX) -> str:
    return f"Please submit your update using:\n{prefix}update [Your Update Message]"


def format_all_updates(day: str, updates: list[DailyUpdate]) -> str:
    """Numbered listing of everyone's updates for a day."""
    lines = [f"📊 Updates for {day}:", ""]
    for i, update in enumerate(updates, start=1):
        author = update.author_name
        if update.author_handle:
            author += f" (@{update.author_handle})"
        lines.append(f"{i}. {author}")
        lines.append(f"Time: {update.submitted_at}")
        lines.append(f"Update: {update.text}")
        lines.append("")
    return "\n".join(lines).rstrip()


def format_own_updates(day: str, updates: list[DailyUpdate]) -> str:
    """Numbered listing of one member's updates for a day."""
    lines = [f"📊 Your Updates for {day}:", ""]
    for i, update in enumerate(updates, start=1):
        lines.append(f"{i}. Time: {update.submitted_at}")
        lines.append(f"Update: {update.text}")
        lines.append("")
    return "\n".join(lines).rstrip()


def split_message(text: str, limit: int = MAX_MESSAGE_LENGTH) -> list[str]:
    """Split text into chunks that fit the platform message limit.

    Prefers breaking on a newline; falls back to a hard cut for lines
    longer than the limit.
    """
    if len(text) <= limit:
        return [text]

    chunks = []
    remaining = text
    while len(remaining) > limit:
        cut = remaining.rfind("\n", 0, limit + 1)
        if cut <= 0:
            cut = limit
        chunks.append(remaining[:cut])
        remaining = remaining[cut:].lstrip("\n")
    if remaining:
        chunks.append(remaining)
    return chunks
