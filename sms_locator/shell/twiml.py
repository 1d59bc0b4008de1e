"""TwiML Formatter - Imperative Shell.

Wraps reply segments in a Twilio MessagingResponse for the SMS webhook.
"""

import logging
from typing import Sequence

from twilio.twiml.messaging_response import MessagingResponse

from sms_locator.core.formatter import number_messages


logger = logging.getLogger(__name__)


# Twilio maximum sendable message length in characters
MAX_MESSAGE_SIZE = 1600


def cap_messages(messages: Sequence[str], limit: int = MAX_MESSAGE_SIZE) -> list[str]:
    """Truncate messages longer than the Twilio limit, logging each one."""
    capped = []
    for message in messages:
        if len(message) > limit:
            logger.error(
                "Message length of %d exceeds the %d character limit, truncating: %r",
                len(message),
                limit,
                message,
            )
        capped.append(message[:limit])
    return capped


class TwimlFormatter:
    """Formats reply segments as TwiML."""

    def __init__(self, number: bool = True, limit: int = MAX_MESSAGE_SIZE) -> None:
        """Initialize formatter.

        Args:
            number: Prefix multi-segment replies with "[i of n] "
            limit: Maximum characters per message
        """
        self.number = number
        self.limit = limit

    def prepare(self, messages: Sequence[str]) -> list[str]:
        """Number (if enabled) and cap the messages."""
        if self.number:
            messages = number_messages(messages)
        return cap_messages(messages, self.limit)

    def format(self, messages: Sequence[str]) -> MessagingResponse:
        """Build a MessagingResponse with one <Message> per segment."""
        response = MessagingResponse()
        for message in self.prepare(messages):
            response.message(message)
        return response
