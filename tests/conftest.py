"""Shared fixtures for Switchinator tests."""

import os
import pytest
from unittest.mock import MagicMock

from switchinator.bot.types import Command, CommandContext, MessageContext
from switchinator.bot.dispatcher import SwitchinatorBot
from switchinator.controller import BotController
from switchinator.registry import Endpoint, EndpointRegistry
from switchinator.relay import MessageRelay


REASONING_URL = "https://reasoning.example.com/bot"
ASSISTANT_URL = "https://assistant.example.com/bot"
CHANNEL_ID = 112233445566778899


# ==================== Registry Fixtures ====================

@pytest.fixture
def registry():
    """Registry with the two default bots."""
    return EndpointRegistry([
        Endpoint(name="reasoning", url=REASONING_URL),
        Endpoint(name="assistant", url=ASSISTANT_URL),
    ])


# ==================== Message Fixtures ====================

@pytest.fixture
def make_message():
    """Factory for MessageContext objects."""
    def _make(content, author_is_bot=False, channel_id=CHANNEL_ID):
        return MessageContext(
            channel_id=channel_id,
            author_id=998877665544332211,
            author_name="alice#0001",
            author_is_bot=author_is_bot,
            content=content,
        )
    return _make


@pytest.fixture
def make_command_context(make_message):
    """Factory for CommandContext objects."""
    def _make(verb, argument=None):
        text = f"{verb} {argument}" if argument else verb
        return CommandContext(
            message=make_message(text),
            command=Command(verb=verb, argument=argument),
        )
    return _make


# ==================== Bot Fixtures ====================

@pytest.fixture
def gateway_send():
    """Spy standing in for the gateway's send primitive."""
    return MagicMock()


@pytest.fixture
def relay(gateway_send):
    """MessageRelay over the spy send function."""
    return MessageRelay(gateway_send)


@pytest.fixture
def bot(registry, relay):
    """SwitchinatorBot with a real controller and relay."""
    return SwitchinatorBot(
        registry=registry,
        controller=BotController(),
        relay=relay,
    )


@pytest.fixture
def ok_response():
    """Factory for mocked HTTP responses."""
    def _make(status_code=200, text="started"):
        response = MagicMock()
        response.status_code = status_code
        response.text = text
        return response
    return _make


# ==================== Environment Fixtures ====================

@pytest.fixture
def clean_env():
    """Clean environment for testing."""
    env_vars = [
        "DISCORD_BOT_TOKEN",
        "DISCORD_BOT_URL",
        "ASSISTANT_BOT_URL",
        "BOT_ENDPOINTS",
        "CONTROL_TIMEOUT",
        "LOG_LEVEL",
        "LOG_SENSITIVE",
    ]
    original = {k: os.environ.get(k) for k in env_vars}
    for k in env_vars:
        os.environ.pop(k, None)
    yield
    for k, v in original.items():
        if v is not None:
            os.environ[k] = v
        else:
            os.environ.pop(k, None)
