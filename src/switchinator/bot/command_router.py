"""Command routing for Switchinator."""

from typing import Callable, Dict, Optional

from .types import BotCommand, Command, CommandContext
from ..logging import get_logger

logger = get_logger(__name__)

COMMAND_PREFIX = "!"


def parse_command(text: Optional[str]) -> Optional[Command]:
    """Split message text into a command verb and argument.

    The first whitespace-separated token, lowercased, is the verb. The second
    token, if any, is the argument; further tokens are ignored.

    Args:
        text: Raw message text

    Returns:
        Parsed Command, or None for empty input or text without the "!" prefix
    """
    if not text:
        return None

    parts = text.split()
    if not parts or not parts[0].startswith(COMMAND_PREFIX):
        return None

    verb = parts[0].lower()
    argument = parts[1] if len(parts) > 1 else None
    return Command(verb=verb, argument=argument)


class CommandRouter:
    """Routes parsed commands to their handlers.

    Unknown verbs are ignored rather than answered, so ordinary chat that
    happens to start with "!" never draws a reply.
    """

    def __init__(self, commands: Dict[str, BotCommand] = None):
        """Initialize the command router.

        Args:
            commands: Dict mapping command verbs to BotCommand objects
        """
        self._commands: Dict[str, BotCommand] = {}
        for command in (commands or {}).values():
            self.register_command(command)

    def register_command(self, command: BotCommand) -> None:
        """Register a command handler.

        Args:
            command: BotCommand to register
        """
        name = command.name if command.name.startswith(COMMAND_PREFIX) else f"{COMMAND_PREFIX}{command.name}"
        self._commands[name.lower()] = command
        logger.debug(f"Registered command: {name}")

    def route(
        self,
        context: CommandContext,
        send_response: Callable[[str], bool],
    ) -> bool:
        """Route a command to its handler.

        Args:
            context: CommandContext with the parsed command
            send_response: Function to send the handler's response

        Returns:
            True if command was handled, False if the verb is unknown

        Errors raised by the handler propagate to the caller.
        """
        command = self._commands.get(context.command.verb)

        if not command:
            return False

        response = command.handler(context)
        if response:
            send_response(response)

        return True

