"""Environment-driven configuration for Switchinator."""

import os
from dataclasses import dataclass
from typing import List, Mapping, Optional

from .errors import ConfigError
from .registry import Endpoint, EndpointRegistry

TOKEN_ENV = "DISCORD_BOT_TOKEN"
REASONING_URL_ENV = "DISCORD_BOT_URL"
ASSISTANT_URL_ENV = "ASSISTANT_BOT_URL"
EXTRA_ENDPOINTS_ENV = "BOT_ENDPOINTS"
CONTROL_TIMEOUT_ENV = "CONTROL_TIMEOUT"

DEFAULT_ASSISTANT_URL = "https://your-assistant-bot-url.com/bot"


def parse_endpoint_list(raw: str) -> List[Endpoint]:
    """Parse a comma-separated list of name=url pairs.

    Args:
        raw: e.g. "coder=https://coder.example.com,writer=http://10.0.0.5:8000"

    Returns:
        Endpoints in the order given

    Raises:
        ConfigError: If an entry has no '=' or an empty name
    """
    endpoints = []
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        name, sep, url = entry.partition("=")
        name, url = name.strip(), url.strip()
        if not sep or not name or " " in name:
            raise ConfigError(f"Malformed {EXTRA_ENDPOINTS_ENV} entry: {entry!r} (expected name=url)")
        endpoints.append(Endpoint(name=name, url=url))
    return endpoints


def build_registry(env: Mapping[str, str] = None) -> EndpointRegistry:
    """Build the endpoint registry from the environment.

    The "reasoning" and "assistant" endpoints always come first, followed by
    any extra endpoints from BOT_ENDPOINTS.
    """
    env = os.environ if env is None else env
    endpoints = [
        Endpoint(name="reasoning", url=env.get(REASONING_URL_ENV, "")),
        Endpoint(name="assistant", url=env.get(ASSISTANT_URL_ENV, DEFAULT_ASSISTANT_URL)),
    ]
    endpoints.extend(parse_endpoint_list(env.get(EXTRA_ENDPOINTS_ENV, "")))
    return EndpointRegistry(endpoints)


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigError(f"{CONTROL_TIMEOUT_ENV} must be a number of seconds, got {raw!r}")
    if timeout <= 0:
        raise ConfigError(f"{CONTROL_TIMEOUT_ENV} must be positive, got {raw!r}")
    return timeout


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, loaded once at startup.

    Attributes:
        token: Discord bot token
        registry: Endpoints that can be controlled from chat
        control_timeout: Seconds to wait on an endpoint (None = HTTP client default)
    """
    token: str
    registry: EndpointRegistry
    control_timeout: Optional[float] = None

    @classmethod
    def from_env(cls, env: Mapping[str, str] = None, token: str = None) -> "Settings":
        """Load settings from environment variables.

        Args:
            env: Mapping to read from (default: os.environ)
            token: Explicit token, overriding DISCORD_BOT_TOKEN

        Raises:
            ConfigError: If the token is missing or any value is malformed
        """
        env = os.environ if env is None else env
        token = token or env.get(TOKEN_ENV, "")
        if not token.strip():
            raise ConfigError(f"No token provided. Set {TOKEN_ENV} environment variable")

        return cls(
            token=token.strip(),
            registry=build_registry(env),
            control_timeout=_parse_timeout(env.get(CONTROL_TIMEOUT_ENV)),
        )
