"""
Custom exceptions for the Pet Shop core.

ValidationError and NotFoundError are always recoverable: the caller reports
the message and carries on. Expected refusals (insufficient stock, bad discount)
are not exceptions at all, see ``petshop.schemas.dtos.OperationResult``.
"""

from typing import Any, Optional


class PetShopError(Exception):
    """Base class for every error raised by the core."""

    pass


class ValidationError(PetShopError, ValueError):
    """Raised when input is malformed or out of range."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class SlotRejectedError(ValidationError):
    """An appointment slot was refused; ``reason`` says which rule failed."""

    reason = "slot"

    def __init__(self, message: str):
        super().__init__(message, field="slot")


class PastSlotError(SlotRejectedError):
    """The requested date/time is already behind us."""

    reason = "past"


class ClosedSlotError(SlotRejectedError):
    """The shop is closed at the requested date/time."""

    reason = "closed"


class NotFoundError(PetShopError, LookupError):
    """Raised when a lookup by identifier or name finds nothing."""

    def __init__(self, entity_name: str, identifier: Any):
        super().__init__(f"{entity_name} '{identifier}' not found")
        self.entity_name = entity_name
        self.identifier = identifier
