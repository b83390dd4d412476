"""Switchinator chat bot: turns chat commands into endpoint control calls."""

from typing import Dict, Optional

from .command_router import CommandRouter, parse_command
from .types import BotCommand, CommandContext, MessageContext
from ..controller import BotController, ControlAction, describe_control_error
from ..errors import ControlError
from ..logging import anonymize_id, get_logger
from ..registry import EndpointRegistry
from ..relay import MessageRelay

logger = get_logger(__name__)


class SwitchinatorBot:
    """Chat bot for switching remote bots on and off.

    Commands:
    - !startbot <bot> - POST <bot url>/on
    - !stopbot <bot> - POST <bot url>/off
    - !listbots - List configured bots

    Stateless per message; safe to call from several worker threads at once.
    """

    def __init__(
        self,
        registry: EndpointRegistry,
        controller: BotController,
        relay: MessageRelay,
    ):
        """Initialize the bot.

        Args:
            registry: Endpoints that can be controlled
            controller: HTTP client used for control calls
            relay: Sends replies back to the originating channel
        """
        self.registry = registry
        self.controller = controller
        self.relay = relay

        self._router = CommandRouter(self.get_commands())

    @property
    def bot_name(self) -> str:
        return "Switchinator"

    def get_commands(self) -> Dict[str, BotCommand]:
        return {
            "!startbot": BotCommand(
                name="!startbot",
                handler=self._cmd_start,
            ),
            "!stopbot": BotCommand(
                name="!stopbot",
                handler=self._cmd_stop,
            ),
            "!listbots": BotCommand(
                name="!listbots",
                handler=self._cmd_list,
            ),
        }

    # ==================== Message Handler ====================

    def handle_message(self, context: MessageContext) -> None:
        """Handle an incoming chat message.

        Registered with the gateway as its message callback.
        """
        if context.author_is_bot:
            return

        command = parse_command(context.content)
        if command is None:
            return

        def send_response(msg: str) -> bool:
            return self.relay.send(context.channel_id, msg)

        handled = self._router.route(CommandContext(message=context, command=command), send_response)
        if handled:
            logger.debug(f"Handled {command.verb} from {anonymize_id(context.author_id)}")

    # ==================== Commands ====================

    def _cmd_start(self, context: CommandContext) -> Optional[str]:
        """Handle !startbot command."""
        return self._control(context, ControlAction.START)

    def _cmd_stop(self, context: CommandContext) -> Optional[str]:
        """Handle !stopbot command."""
        return self._control(context, ControlAction.STOP)

    def _cmd_list(self, context: CommandContext) -> str:
        """Handle !listbots command."""
        return f"Available bots: {self.registry.listing()}"

    def _control(self, context: CommandContext, action: ControlAction) -> Optional[str]:
        bot_name = context.argument
        if not bot_name:
            return f"Please specify the bot name. Available bots: {self.registry.listing()}"

        endpoint = self.registry.find(bot_name)
        if endpoint is None:
            return f'Bot "{bot_name}" not found. Available bots: {self.registry.listing()}'

        try:
            return self.controller.control(endpoint, action)
        except ControlError as e:
            self.relay.send(context.channel_id, describe_control_error(e, endpoint, action))
            logger.error(f"Error controlling bot: {e}")
            return None
