"""Type definitions for the bot framework."""

from dataclasses import dataclass
from typing import Callable, Optional


@dataclass(frozen=True)
class Command:
    """A parsed chat command.

    Attributes:
        verb: Lowercased first token (e.g., "!startbot")
        argument: Second token, if present (e.g., "reasoning")
    """
    verb: str
    argument: Optional[str] = None


@dataclass
class MessageContext:
    """Context for an incoming chat message.

    Attributes:
        channel_id: Channel the message was posted in
        author_id: Sender's user ID
        author_name: Sender's display name
        author_is_bot: Whether the sender is an automated account
        content: Raw message text
    """
    channel_id: int
    author_id: int
    author_name: str
    author_is_bot: bool
    content: Optional[str]


@dataclass
class CommandContext:
    """Context for executing a command.

    Attributes:
        message: The full message context
        command: The parsed command
    """
    message: MessageContext
    command: Command

    @property
    def channel_id(self) -> int:
        """Shortcut to message.channel_id."""
        return self.message.channel_id

    @property
    def argument(self) -> Optional[str]:
        """Shortcut to command.argument."""
        return self.command.argument


@dataclass
class BotCommand:
    """Definition of a bot command.

    Attributes:
        name: Command verb (e.g., "!startbot")
        handler: Function to call when command is invoked; a returned string is relayed
    """
    name: str
    handler: Callable[[CommandContext], Optional[str]]
