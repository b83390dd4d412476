"""Tests for the HTTP bot controller."""

import pytest
import requests
from unittest.mock import patch

from switchinator.controller import BotController, ControlAction, describe_control_error
from switchinator.errors import BadStatusError, EndpointUnreachableError
from switchinator.registry import Endpoint

REASONING_URL = "https://reasoning.example.com/bot"


@pytest.fixture
def endpoint():
    return Endpoint(name="reasoning", url=REASONING_URL)


class TestControlAction:
    """Tests for the wire tokens."""

    def test_wire_values(self):
        assert ControlAction.START.value == "on"
        assert ControlAction.STOP.value == "off"


class TestBotControllerControl:
    """Tests for BotController.control."""

    def test_build_url(self, endpoint):
        """Test that the action is appended as a path segment."""
        assert BotController.build_url(endpoint, ControlAction.START) == f"{REASONING_URL}/on"
        assert BotController.build_url(endpoint, ControlAction.STOP) == f"{REASONING_URL}/off"

    def test_success_returns_body(self, endpoint, ok_response):
        """Test that the body is returned verbatim."""
        with patch("requests.post") as mock_post:
            mock_post.return_value = ok_response(200, "  started\n")

            result = BotController().control(endpoint, ControlAction.START)

        assert result == "  started\n"

    def test_posts_json_content_type_with_empty_body(self, endpoint, ok_response):
        """Test the outbound request shape."""
        with patch("requests.post") as mock_post:
            mock_post.return_value = ok_response()

            BotController().control(endpoint, ControlAction.STOP)

        mock_post.assert_called_once()
        call_args = mock_post.call_args
        assert call_args[0][0] == f"{REASONING_URL}/off"
        assert call_args[1]["headers"] == {"Content-Type": "application/json"}
        assert "data" not in call_args[1]
        assert "json" not in call_args[1]

    def test_default_timeout_is_client_default(self, endpoint, ok_response):
        """Test that no timeout is imposed unless configured."""
        with patch("requests.post") as mock_post:
            mock_post.return_value = ok_response()
            BotController().control(endpoint, ControlAction.START)

        assert mock_post.call_args[1]["timeout"] is None

    def test_configured_timeout(self, endpoint, ok_response):
        """Test passing a configured timeout through."""
        with patch("requests.post") as mock_post:
            mock_post.return_value = ok_response()
            BotController(timeout=7.5).control(endpoint, ControlAction.START)

        assert mock_post.call_args[1]["timeout"] == 7.5

    @pytest.mark.parametrize("status_code", [201, 202, 204])
    def test_any_2xx_is_success(self, endpoint, ok_response, status_code):
        """Test that every 2xx status counts as success."""
        with patch("requests.post") as mock_post:
            mock_post.return_value = ok_response(status_code, "ok")

            assert BotController().control(endpoint, ControlAction.START) == "ok"

    @pytest.mark.parametrize("status_code", [301, 404, 500, 503])
    def test_non_2xx_raises_bad_status(self, endpoint, ok_response, status_code):
        """Test that non-2xx statuses raise BadStatusError."""
        with patch("requests.post") as mock_post:
            mock_post.return_value = ok_response(status_code, "nope")

            with pytest.raises(BadStatusError) as exc_info:
                BotController().control(endpoint, ControlAction.START)

        assert exc_info.value.status_code == status_code

    @pytest.mark.parametrize("error", [
        requests.exceptions.ConnectionError("refused"),
        requests.exceptions.Timeout("slow"),
        requests.exceptions.InvalidURL("bad"),
    ])
    def test_transport_failure_raises_unreachable(self, endpoint, error):
        """Test that transport failures raise EndpointUnreachableError."""
        with patch("requests.post") as mock_post:
            mock_post.side_effect = error

            with pytest.raises(EndpointUnreachableError) as exc_info:
                BotController().control(endpoint, ControlAction.STOP)

        assert exc_info.value.cause is error
        assert exc_info.value.url == f"{REASONING_URL}/off"


class TestDescribeControlError:
    """Tests for the error-to-chat-message mapping."""

    def test_unreachable_message(self, endpoint):
        error = EndpointUnreachableError(f"{REASONING_URL}/off")

        assert describe_control_error(error, endpoint, ControlAction.STOP) == "Failed to off reasoning bot."

    def test_bad_status_message(self, endpoint):
        error = BadStatusError(f"{REASONING_URL}/on", 500)

        assert describe_control_error(error, endpoint, ControlAction.START) == "HTTP error! Status: 500"
