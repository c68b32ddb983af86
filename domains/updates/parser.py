"""Parse chat messages into command names and arguments."""

import re
from dataclasses import dataclass
from typing import Optional

from .config import COMMAND_PREFIX

KNOWN_COMMANDS = {"start", "help", "update", "viewupdates", "viewmyupdates"}

# "/name", "/name@botname", followed by whitespace and an optional argument
_COMMAND_RE = re.compile(r"^(?P<name>[A-Za-z]+)(?:@\S+)?(?:\s+(?P<argument>.*))?$", re.DOTALL)


@dataclass
class ParsedCommand:
    """Command name (lower-cased, no prefix) and stripped argument."""
    name: str
    argument: Optional[str] = None


def parse_command(text: str, prefix: str = COMMAND_PREFIX) -> Optional[ParsedCommand]:
    """Parse a message into a known command.

    Examples:
    - "/update Finished module 2" -> ("update", "Finished module 2")
    - "/update" and "/update    " -> ("update", None)
    - "/viewupdates@UpdatesBot" -> ("viewupdates", None)

    Args:
        text: Raw message content
        prefix: Command prefix

    Returns:
        ParsedCommand, or None for ordinary chat and unknown commands
    """
    if not text or not prefix:
        return None

    text = text.strip()
    if not text.startswith(prefix):
        return None

    match = _COMMAND_RE.match(text[len(prefix):])
    if not match:
        return None

    name = match.group("name").lower()
    if name not in KNOWN_COMMANDS:
        return None

    argument = (match.group("argument") or "").strip()
    return ParsedCommand(name=name, argument=argument or None)
