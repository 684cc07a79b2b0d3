"""
/ticket Custom Command

State machine for the ticket form. Stateless: every round trip carries the
message being edited plus whatever the user submitted, and the handler decides
the next message purely from that.

    (no action) --args empty--> error
    (no action) --args given--> ephemeral form --confirm--> regular confirmation
                                               \\--cancel--> message removed
"""

import json
import logging
from enum import Enum

from transport.stream.schemas import CommandRequest, CommandResponse, FormData

from .mml import render_confirmation, render_ticket_form

logger = logging.getLogger(__name__)


MML_COMPAT_NOTICE = (
    "this message contains Message Markup Language, "
    "you might need to upgrade your stream-chat-react library."
)
MISSING_DESCRIPTION = "missing ticket description"


class TicketAction(str, Enum):
    """Button value submitted with the ticket form."""

    CONFIRM = "confirm"
    CANCEL = "cancel"
    NONE = ""  # first invocation, or a value we don't recognise


def resolve_action(form_data: FormData) -> TicketAction:
    """Map the submitted action onto a TicketAction, defaulting to NONE."""
    if form_data.action == TicketAction.CONFIRM.value:
        return TicketAction.CONFIRM
    if form_data.action == TicketAction.CANCEL.value:
        return TicketAction.CANCEL
    return TicketAction.NONE


def handle_ticket_command(request: CommandRequest) -> CommandResponse:
    """
    Decide the next message for a /ticket interaction.

    Args:
        request: Decoded webhook body

    Returns:
        CommandResponse whose message is None when the form was cancelled
    """

    message = request.message
    form_data = request.form_data or FormData()
    action = resolve_action(form_data)

    logger.info(
        f'POST /{message.command} "{message.args}" => '
        f"{json.dumps(form_data.model_dump(exclude_unset=True))}"
    )

    if action is TicketAction.CONFIRM:
        reported_by = _as_text(form_data.reported_by)
        message.type = "regular"
        message.mml = render_confirmation(message.args, reported_by)
        message.attachments = None

    elif action is TicketAction.CANCEL:
        message = None

    else:
        if message.args.strip() == "":
            message.type = "error"
            message.text = MISSING_DESCRIPTION
            message.mml = None
        else:
            message.type = "ephemeral"
            message.mml = render_ticket_form(message.args, _user_name(request))

    # Clients without MML support fall back to text
    if message is not None and message.mml is not None:
        message.text = MML_COMPAT_NOTICE

    return CommandResponse(message=message)


def _user_name(request: CommandRequest) -> str:
    return _as_text(request.user.name) if request.user is not None else ""


def _as_text(value) -> str:
    return "" if value is None else str(value)
