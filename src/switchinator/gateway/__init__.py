"""Chat gateway integration for Switchinator."""

from .discord_client import DiscordGateway, default_intents, to_message_context

__all__ = [
    "DiscordGateway",
    "default_intents",
    "to_message_context",
]
