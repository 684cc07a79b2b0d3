"""
Stream Chat Custom Command - Pydantic Schemas

PURE DATA MODELS - NO LOGIC
Defines the contract between Stream's custom command webhook and the command handlers.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


# Fields the command handlers write on the way out. They are only echoed back
# when the inbound payload carried them or a handler assigned them.
OUTBOUND_FIELDS = ("type", "text", "mml", "attachments")


# ============================================================================
# WEBHOOK PAYLOAD SCHEMAS (INPUT)
# ============================================================================

class CommandMessage(BaseModel):
    """
    The message being created or updated by a custom command.

    Handlers rewrite it in place and send it back; any field Stream
    sends that we do not model is passed through untouched.
    """

    command: str = Field("", description="Command name without the slash, e.g. 'ticket'")
    args: str = Field("", description="Free text typed after the command")

    type: Optional[str] = Field(None, description="regular | ephemeral | error")
    text: Optional[str] = None
    mml: Optional[str] = Field(None, description="Message Markup Language body")
    attachments: Optional[List[Any]] = None

    class Config:
        extra = "allow"  # Stream sends the full message object

    def to_payload(self) -> Dict[str, Any]:
        """Serialize, leaving out outbound fields nobody set."""
        data = self.model_dump()
        for name in OUTBOUND_FIELDS:
            if name not in self.model_fields_set:
                data.pop(name, None)
        return data


class FormData(BaseModel):
    """Values submitted from an MML form. Absent on the first invocation."""

    # Left untyped: anything other than "confirm"/"cancel" means no action
    action: Optional[Any] = Field(None, description="Name of the pressed button's value")
    reported_by: Optional[Any] = None

    class Config:
        extra = "allow"  # any other form inputs


class InvokingUser(BaseModel):
    """The user who typed the command."""

    name: Optional[Any] = ""

    class Config:
        extra = "allow"


class CommandRequest(BaseModel):
    """Full custom command webhook body."""

    message: CommandMessage
    form_data: Optional[FormData] = None
    user: Optional[InvokingUser] = None

    class Config:
        extra = "allow"  # channel, etc.


# ============================================================================
# WEBHOOK RESPONSE (OUTPUT)
# ============================================================================

class CommandResponse(BaseModel):
    """Response body. A null message tells the client to drop it."""

    message: Optional[CommandMessage] = None

    def to_payload(self) -> Dict[str, Any]:
        return {"message": self.message.to_payload() if self.message is not None else None}
