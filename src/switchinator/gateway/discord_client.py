"""Discord gateway client for Switchinator.

Wraps a discord.py client: inbound messages are converted to MessageContext
and handed to synchronous handlers on worker threads, and handlers reply
through send_message(), which is safe to call from those threads.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional

import discord

from ..bot.types import MessageContext
from ..errors import GatewayConnectionError, RelayError
from ..logging import get_logger

logger = get_logger(__name__)

MessageHandler = Callable[[MessageContext], None]

DEFAULT_HANDLER_WORKERS = 16


def default_intents() -> discord.Intents:
    """Intents needed to read commands in guild channels."""
    intents = discord.Intents.default()
    intents.guilds = True
    intents.guild_messages = True
    intents.message_content = True
    return intents


def to_message_context(message: discord.Message) -> MessageContext:
    """Convert a discord.py message to a MessageContext."""
    return MessageContext(
        channel_id=message.channel.id,
        author_id=message.author.id,
        author_name=str(message.author),
        author_is_bot=bool(message.author.bot),
        content=message.content,
    )


class DiscordGateway:
    """Client for the Discord real-time gateway.

    Example:
        gateway = DiscordGateway(token)

        def handle_message(ctx: MessageContext):
            gateway.send_message(ctx.channel_id, "pong")

        gateway.add_handler(handle_message)
        gateway.run()
    """

    def __init__(
        self,
        token: str,
        client: discord.Client = None,
        max_workers: int = DEFAULT_HANDLER_WORKERS,
    ):
        """Initialize the gateway.

        Args:
            token: Discord bot token
            client: Pre-built discord.py client (default: one with default_intents())
            max_workers: Threads reserved for message handlers
        """
        self.token = token
        self._client = client or discord.Client(intents=default_intents())
        self._handlers: List[MessageHandler] = []
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._ready_callbacks: List[Callable[[str], None]] = []
        # Separate from the loop default executor, which discord.py uses for DNS
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="switchinator-handler")

        self._client.event(self.on_ready)
        self._client.event(self.on_message)

    def add_handler(self, handler: MessageHandler) -> None:
        """Register a message handler."""
        self._handlers.append(handler)

    def add_ready_callback(self, callback: Callable[[str], None]) -> None:
        """Register a callback invoked with the bot's user name once connected."""
        self._ready_callbacks.append(callback)

    # =========================================================================
    # discord.py events
    # =========================================================================

    async def on_ready(self) -> None:
        self._loop = asyncio.get_running_loop()
        user_name = str(self._client.user)
        logger.info(f"Controller Bot logged in as {user_name}")
        for callback in self._ready_callbacks:
            callback(user_name)

    async def on_message(self, message: discord.Message) -> None:
        context = to_message_context(message)
        loop = asyncio.get_running_loop()
        for handler in self._handlers:
            try:
                # Handlers block on HTTP calls; keep them off the event loop
                await loop.run_in_executor(self._executor, handler, context)
            except Exception:
                logger.exception("Message handler error")

    # =========================================================================
    # Sending
    # =========================================================================

    def send_message(self, channel_id: int, text: str) -> None:
        """Send a message to a channel from a handler thread.

        Raises:
            RelayError: If the gateway is not connected or the message could not be delivered
        """
        if self._loop is None:
            raise RelayError("Discord gateway is not connected")

        future = asyncio.run_coroutine_threadsafe(self._send(channel_id, text), self._loop)
        try:
            future.result()
        except Exception as e:
            raise RelayError(f"Could not send message to channel {channel_id}: {e!r}") from e

    async def _send(self, channel_id: int, text: str) -> None:
        channel = self._client.get_channel(channel_id)
        if channel is None:
            channel = await self._client.fetch_channel(channel_id)
        await channel.send(text)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def run(self) -> None:
        """Connect to Discord and process events until interrupted.

        Raises:
            GatewayConnectionError: If login or the gateway connection fails
        """
        try:
            self._client.run(self.token, log_handler=None)
        except discord.LoginFailure as e:
            raise GatewayConnectionError(f"Error creating Discord session: {e}") from e
        except (discord.GatewayNotFound, discord.ConnectionClosed, discord.HTTPException) as e:
            raise GatewayConnectionError(f"Error opening connection: {e}") from e
        finally:
            self._executor.shutdown(wait=False)
