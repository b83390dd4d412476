"""Utility functions for Switchinator."""

from .message_utils import DISCORD_MAX_MESSAGE_LENGTH, split_long_message

__all__ = [
    "DISCORD_MAX_MESSAGE_LENGTH",
    "split_long_message",
]
