"""
Custom command handlers.

Includes:
- ticket.py: /ticket form state machine
- mml.py: Message Markup Language templates
"""

from .mml import render_confirmation, render_ticket_form
from .ticket import (
    MISSING_DESCRIPTION,
    MML_COMPAT_NOTICE,
    TicketAction,
    handle_ticket_command,
    resolve_action,
)

__all__ = [
    "handle_ticket_command",
    "resolve_action",
    "TicketAction",
    "MML_COMPAT_NOTICE",
    "MISSING_DESCRIPTION",
    "render_ticket_form",
    "render_confirmation",
]
