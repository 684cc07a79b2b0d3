"""Stream Chat Transport Layer - Module Exports"""

from .schemas import (
    CommandMessage,
    CommandRequest,
    CommandResponse,
    FormData,
    InvokingUser,
)
from .security import SignatureVerificationError, verify_signature, verify_webhook

__all__ = [
    # Schemas
    "CommandMessage",
    "CommandRequest",
    "CommandResponse",
    "FormData",
    "InvokingUser",
    # Security
    "verify_webhook",
    "verify_signature",
    "SignatureVerificationError",
]
