"""Best-effort replies to the channel a command came from."""

from typing import Callable

from .errors import RelayError
from .logging import anonymize_id, get_logger
from .utils import split_long_message

logger = get_logger(__name__)

# Gateway send primitive: (channel_id, text) -> None, raises RelayError on failure
SendFunction = Callable[[int, str], None]


class MessageRelay:
    """Sends text back to a channel through the chat gateway.

    Failures are logged and reported as False. Callers never escalate them.
    """

    def __init__(self, send: SendFunction):
        """Initialize the relay.

        Args:
            send: Gateway function that delivers a message to a channel
        """
        self._send = send

    def send(self, channel_id: int, text: str) -> bool:
        """Send a message to a channel.

        Text over Discord's length limit is sent as several messages.

        Args:
            channel_id: Destination channel
            text: Message text

        Returns:
            True if every part was sent
        """
        if not text:
            logger.debug(f"Not sending empty message to {anonymize_id(channel_id)}")
            return False

        try:
            for part in split_long_message(text):
                self._send(channel_id, part)
        except RelayError as e:
            logger.error(f"Error sending message: {e}")
            return False

        logger.debug(f"Message sent to {anonymize_id(channel_id)}")
        return True
