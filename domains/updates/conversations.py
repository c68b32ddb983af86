"""Registry of conversations that receive scheduled reminders."""

from logger import logger


class ActiveConversations:
    """Set of conversation IDs the reminder scheduler should post to.

    A conversation is added by ``/start`` in a group conversation and only
    removed when a delivery to it fails because the bot was removed or
    blocked.
    """

    def __init__(self):
        self._ids: set[int] = set()

    def activate(self, conversation_id: int) -> bool:
        """Add a conversation. Returns True if it was not already active."""
        if conversation_id in self._ids:
            return False
        self._ids.add(conversation_id)
        logger.info(f"Activated reminders for conversation {conversation_id}")
        return True

    def deactivate(self, conversation_id: int) -> bool:
        """Remove a conversation. Returns True if it was active."""
        if conversation_id not in self._ids:
            return False
        self._ids.discard(conversation_id)
        logger.info(f"Deactivated reminders for conversation {conversation_id}")
        return True

    def list_active(self) -> set[int]:
        """Snapshot of active conversation IDs, safe to iterate while mutating."""
        return set(self._ids)

    def __contains__(self, conversation_id) -> bool:
        return conversation_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)
