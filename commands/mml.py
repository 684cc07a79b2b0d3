"""
Message Markup Language (MML) templates for the ticket command.

PURE RENDERING - string interpolation only.
User text is embedded as-is; Stream's client parses the result.
"""


def render_ticket_form(description: str, reported_by_default: str) -> str:
    """
    Build the interactive ticket form.

    The form carries one text input (reported_by) and two buttons that
    both submit under the name "action", so the next webhook call
    arrives with form_data.action set to "confirm" or "cancel".
    """
    return f"""
        <mml name="ticket_form">
            <text>creating ticket about "{description}"</text>
            <row>
                <column width="2">By:</column>
                <column width="10">
                    <input type="text" name="reported_by" value="{reported_by_default}" />
                </column>
            </row>
            <button_list>
                <button name="action" value="confirm">Confirm</button>
                <button name="action" value="cancel">Cancel</button>
            </button_list>
        </mml>"""


def render_confirmation(description: str, reported_by: str) -> str:
    """Build the final 'ticket created' message."""
    return f"""
        <mml>
            <text>ticket created about "{description}" by {reported_by}</text>
        </mml>"""
