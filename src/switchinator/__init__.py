"""Switchinator - chat-driven remote control for other bots.

Listens for commands in a Discord channel and switches remote bot processes
on and off over HTTP:
- Endpoint registry (name -> base URL)
- Command parsing and routing
- HTTP bot controller
- Best-effort message relay
- Privacy-safe logging
- CLI scaffolding (Click-based)
"""

__version__ = "0.1.0"

from .logging import setup_logging, get_logger
from .errors import (
    SwitchinatorError,
    ConfigError,
    GatewayConnectionError,
    RelayError,
    ControlError,
    EndpointUnreachableError,
    BadStatusError,
)
from .registry import Endpoint, EndpointRegistry
from .config import Settings
from .controller import BotController, ControlAction, describe_control_error
from .relay import MessageRelay
from .bot import SwitchinatorBot, BotCommand, Command, CommandContext, MessageContext, CommandRouter

__all__ = [
    "__version__",
    "setup_logging",
    "get_logger",
    # Errors
    "SwitchinatorError",
    "ConfigError",
    "GatewayConnectionError",
    "RelayError",
    "ControlError",
    "EndpointUnreachableError",
    "BadStatusError",
    # Endpoints
    "Endpoint",
    "EndpointRegistry",
    "Settings",
    # Control
    "BotController",
    "ControlAction",
    "describe_control_error",
    "MessageRelay",
    # Bot framework
    "SwitchinatorBot",
    "BotCommand",
    "Command",
    "CommandContext",
    "MessageContext",
    "CommandRouter",
]
