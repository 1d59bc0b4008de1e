"""Tests for the TwiML formatter."""

import logging

from sms_locator.shell.twiml import MAX_MESSAGE_SIZE, TwimlFormatter, cap_messages


class TestCapMessages:
    """Tests for cap_messages() function."""

    def test_short_messages_unchanged(self):
        assert cap_messages(["a", "b"]) == ["a", "b"]

    def test_truncates_and_logs(self, caplog):
        """Overlong messages are cut to the limit and logged."""
        with caplog.at_level(logging.ERROR):
            capped = cap_messages(["x" * (MAX_MESSAGE_SIZE + 10)])

        assert len(capped[0]) == MAX_MESSAGE_SIZE
        assert "exceeds" in caplog.text


class TestTwimlFormatter:
    """Tests for TwimlFormatter."""

    def test_single_message(self):
        twiml = str(TwimlFormatter().format(["Found 1 shelters near 70118:"]))

        assert twiml.count("<Message>") == 1
        assert "Found 1 shelters near 70118:" in twiml
        assert "[1 of 1]" not in twiml

    def test_numbers_multiple_messages(self):
        twiml = str(TwimlFormatter().format(["first", "second"]))

        assert twiml.count("<Message>") == 2
        assert "[1 of 2] first" in twiml
        assert "[2 of 2] second" in twiml

    def test_numbering_disabled(self):
        prepared = TwimlFormatter(number=False).prepare(["first", "second"])

        assert prepared == ["first", "second"]

    def test_custom_limit(self):
        prepared = TwimlFormatter(number=False, limit=5).prepare(["abcdefgh"])

        assert prepared == ["abcde"]

    def test_escapes_markup(self):
        twiml = str(TwimlFormatter().format(["Food & Water <Center>"]))

        assert "Food &amp; Water &lt;Center&gt;" in twiml
