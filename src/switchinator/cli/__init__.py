"""CLI commands for Switchinator."""

import sys

import click

from .. import setup_logging, get_logger
from ..bot import SwitchinatorBot
from ..config import CONTROL_TIMEOUT_ENV, TOKEN_ENV, Settings, build_registry
from ..controller import BotController, ControlAction, describe_control_error
from ..errors import ConfigError, ControlError, GatewayConnectionError
from ..relay import MessageRelay

logger = get_logger(__name__)

ACTIONS = {action.value: action for action in ControlAction}


@click.group()
@click.pass_context
def cli(ctx):
    """Switchinator - Discord bot for switching other bots on and off"""
    ctx.ensure_object(dict)
    setup_logging()


@cli.command()
@click.option('--token', envvar=TOKEN_ENV, default=None, help='Discord bot token')
def daemon(token):
    """Run Switchinator daemon."""
    from ..gateway import DiscordGateway

    click.echo("Starting Switchinator daemon...")

    try:
        settings = Settings.from_env(token=token)
    except ConfigError as e:
        click.echo(f"\nError: {e}")
        logger.critical(str(e))
        sys.exit(1)

    registry = settings.registry
    click.echo(f"  Bots: {registry.listing()}")
    timeout = f"{settings.control_timeout}s" if settings.control_timeout else "client default"
    click.echo(f"  Control timeout: {timeout}")

    gateway = DiscordGateway(settings.token)
    bot = SwitchinatorBot(
        registry=registry,
        controller=BotController(timeout=settings.control_timeout),
        relay=MessageRelay(gateway.send_message),
    )
    gateway.add_handler(bot.handle_message)
    gateway.add_ready_callback(lambda _user: logger.info(f"Available bots: {registry.listing()}"))

    click.echo("\nSwitchinator initialized")
    click.echo("Bot is running. Press CTRL-C to exit.\n")

    try:
        gateway.run()
    except KeyboardInterrupt:
        click.echo("\nSwitchinator stopped.")
    except GatewayConnectionError as e:
        click.echo(f"\nError: {e}")
        logger.critical(str(e))
        sys.exit(1)


@cli.command(name='list-bots')
def list_bots():
    """List configured bots and their URLs."""
    try:
        registry = build_registry()
    except ConfigError as e:
        click.echo(f"Configuration error: {e}")
        sys.exit(1)

    for endpoint in registry:
        click.echo(f"  {endpoint.name}: {endpoint.url or '(no url set)'}")


@cli.command()
@click.argument('name')
@click.argument('action', type=click.Choice(sorted(ACTIONS), case_sensitive=False))
@click.option('--timeout', envvar=CONTROL_TIMEOUT_ENV, type=float, default=None,
              help='Seconds to wait for the bot endpoint')
def control(name, action, timeout):
    """Switch a bot on or off directly, without Discord."""
    try:
        registry = build_registry()
    except ConfigError as e:
        click.echo(f"Configuration error: {e}")
        sys.exit(1)

    endpoint = registry.find(name)
    if endpoint is None:
        click.echo(f'Bot "{name}" not found. Available bots: {registry.listing()}')
        sys.exit(1)

    control_action = ACTIONS[action.lower()]
    try:
        body = BotController(timeout=timeout).control(endpoint, control_action)
    except ControlError as e:
        click.echo(describe_control_error(e, endpoint, control_action))
        sys.exit(1)

    click.echo(body)


if __name__ == "__main__":
    cli()
