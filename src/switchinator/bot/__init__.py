"""Bot framework for Switchinator.

Provides command parsing, routing and the message dispatcher.
"""

from .types import BotCommand, Command, CommandContext, MessageContext
from .command_router import CommandRouter, parse_command
from .dispatcher import SwitchinatorBot

__all__ = [
    "BotCommand",
    "Command",
    "CommandContext",
    "MessageContext",
    "CommandRouter",
    "parse_command",
    "SwitchinatorBot",
]
