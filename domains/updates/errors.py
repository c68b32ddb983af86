"""Exceptions raised by the updates domain."""


class UpdatesBotError(Exception):
    """Base class for updates domain errors."""


class ValidationError(UpdatesBotError):
    """Command input was rejected (e.g. blank update text)."""


class DeliveryError(UpdatesBotError):
    """A message could not be delivered to a conversation."""

    def __init__(self, conversation_id: int, message: str):
        super().__init__(message)
        self.conversation_id = conversation_id


class TransientDeliveryError(DeliveryError):
    """Delivery failed for a reason that may clear up on the next attempt."""


class ForbiddenDeliveryError(DeliveryError):
    """The bot was removed from or blocked in the conversation."""


class RetentionError(UpdatesBotError):
    """The day being written is older than the store's retention window."""
