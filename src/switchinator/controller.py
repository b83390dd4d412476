"""HTTP client that switches remote bots on and off."""

from enum import Enum
from typing import Optional

import requests

from .errors import BadStatusError, ControlError, EndpointUnreachableError
from .logging import get_logger
from .registry import Endpoint

logger = get_logger(__name__)


class ControlAction(Enum):
    """Lifecycle operation requested on an endpoint.

    The value is the path segment sent on the wire.
    """
    START = "on"
    STOP = "off"


class BotController:
    """Issues control requests against bot endpoints.

    One POST per call, no retries. The full response body is buffered and
    returned as text.
    """

    HEADERS = {"Content-Type": "application/json"}

    def __init__(self, timeout: Optional[float] = None):
        """Initialize the controller.

        Args:
            timeout: Seconds to wait for the endpoint. None leaves the
                requests default in place.
        """
        self.timeout = timeout

    @staticmethod
    def build_url(endpoint: Endpoint, action: ControlAction) -> str:
        """Build the control URL for an endpoint and action."""
        return f"{endpoint.url}/{action.value}"

    def control(self, endpoint: Endpoint, action: ControlAction) -> str:
        """Send a control request to an endpoint.

        Args:
            endpoint: Target endpoint
            action: ControlAction.START or ControlAction.STOP

        Returns:
            The response body, verbatim

        Raises:
            EndpointUnreachableError: On connection, timeout or DNS failure
            BadStatusError: If the endpoint answers with a non-2xx status
        """
        url = self.build_url(endpoint, action)
        logger.debug(f"POST {url}")

        try:
            response = requests.post(url, headers=self.HEADERS, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise EndpointUnreachableError(url, e) from e

        if not 200 <= response.status_code < 300:
            raise BadStatusError(url, response.status_code)

        logger.info(f"{endpoint.name} bot answered {response.status_code} to '{action.value}'")
        return response.text


def describe_control_error(error: ControlError, endpoint: Endpoint, action: ControlAction) -> str:
    """Map a control error to the text shown in chat."""
    if isinstance(error, BadStatusError):
        return f"HTTP error! Status: {error.status_code}"
    return f"Failed to {action.value} {endpoint.name} bot."
