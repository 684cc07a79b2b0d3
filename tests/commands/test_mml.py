"""MML Template Tests"""

from commands.mml import render_confirmation, render_ticket_form


class TestTicketForm:

    def test_quotes_description(self):
        mml = render_ticket_form("printer broken", "Alice")
        assert '<text>creating ticket about "printer broken"</text>' in mml

    def test_reporter_input_prefilled(self):
        mml = render_ticket_form("printer broken", "Alice")
        assert '<input type="text" name="reported_by" value="Alice" />' in mml

    def test_named_form(self):
        mml = render_ticket_form("x", "y")
        assert mml.strip().startswith('<mml name="ticket_form">')
        assert mml.strip().endswith("</mml>")

    def test_deterministic(self):
        assert render_ticket_form("a", "b") == render_ticket_form("a", "b")

    def test_empty_inputs(self):
        mml = render_ticket_form("", "")
        assert 'creating ticket about ""' in mml
        assert 'value=""' in mml

    def test_user_text_embedded_verbatim(self):
        """No escaping is applied."""
        mml = render_ticket_form('a <b> "c"', "d&e")
        assert 'a <b> "c"' in mml
        assert 'value="d&e"' in mml


class TestConfirmation:

    def test_mentions_description_and_reporter(self):
        mml = render_confirmation("printer broken", "Bob")
        assert '<text>ticket created about "printer broken" by Bob</text>' in mml

    def test_no_form_elements(self):
        mml = render_confirmation("printer broken", "Bob")
        assert "<button" not in mml
        assert "<input" not in mml

    def test_deterministic(self):
        assert render_confirmation("a", "b") == render_confirmation("a", "b")
