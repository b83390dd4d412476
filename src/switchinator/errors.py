"""Exception hierarchy for Switchinator."""

from typing import Optional


class SwitchinatorError(Exception):
    """Base class for all Switchinator errors."""


class ConfigError(SwitchinatorError):
    """Missing or malformed configuration. Fatal at startup."""


class GatewayConnectionError(SwitchinatorError):
    """The chat gateway session could not be opened. Fatal at startup."""


class RelayError(SwitchinatorError):
    """A message could not be sent back to a channel."""


class ControlError(SwitchinatorError):
    """An endpoint control request did not succeed."""


class EndpointUnreachableError(ControlError):
    """The endpoint could not be reached (refused, timed out, DNS failure)."""

    def __init__(self, url: str, cause: Optional[Exception] = None):
        super().__init__(f"Endpoint unreachable: {url}: {cause}")
        self.url = url
        self.cause = cause


class BadStatusError(ControlError):
    """The endpoint answered with a non-2xx HTTP status."""

    def __init__(self, url: str, status_code: int):
        super().__init__(f"HTTP error! Status: {status_code}")
        self.url = url
        self.status_code = status_code
