"""The `config` command: show, set, setup and doctor."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import click

from rskwallet.config import ConfigError, ConfigManager, Network
from rskwallet.doctor import run_doctor
from rskwallet.setup_wizard import run_setup_wizard


def _masked(value: str | None) -> str:
    return "********" if value is not None else click.style("Not set", dim=True)


def show_config(manager: ConfigManager) -> None:
    """Print the current configuration with API keys masked."""
    config = manager.load()

    click.echo("\n" + click.style("Current Configuration:", bold=True, fg="cyan"))
    click.echo("=" * 60)

    click.echo("\n" + click.style("🌐 Network", bold=True))
    click.echo(f"  Default network: {config.default_network}")

    click.echo("\n" + click.style("🔑 API Keys", bold=True))
    click.echo(f"  Mainnet API key: {_masked(config.alchemy_mainnet_key)}")
    click.echo(f"  Testnet API key: {_masked(config.alchemy_testnet_key)}")

    if config.default_wallet is not None:
        click.echo("\n" + click.style("💼 Wallet", bold=True))
        click.echo(f"  Default wallet: {config.default_wallet}")

    click.echo("\n" + click.style("Paths", bold=True))
    click.echo(f"  Config file: {manager.config_path}")


def set_config(manager: ConfigManager, key: str, value: str) -> str:
    """Set one configuration value, save, and return the confirmation message."""
    config = manager.load()
    name = key.lower()
    if name == "default-network":
        network = Network.parse(value)
        config.default_network = network
        message = f"Set default network to: {network}"
    elif name == "alchemy-mainnet-key":
        config.alchemy_mainnet_key = value
        message = "Set Alchemy Mainnet API key"
    elif name == "alchemy-testnet-key":
        config.alchemy_testnet_key = value
        message = "Set Alchemy Testnet API key"
    elif name == "default-wallet":
        config.default_wallet = value
        message = f"Set default wallet to: {value}"
    else:
        raise ConfigError(f"Unknown configuration key: {key}")
    click.echo(message)
    manager.save(config)
    return message


@contextmanager
def _reporting() -> Iterator[None]:
    try:
        yield
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group(help="Manage the wallet configuration.")
@click.option("--config-dir", type=click.Path(file_okay=False), default=None,
              help="Directory holding config.json.")
@click.option("--data-dir", type=click.Path(file_okay=False), default=None,
              help="Directory holding wallet data.")
@click.pass_context
def cli(ctx: click.Context, config_dir: str | None, data_dir: str | None) -> None:
    ctx.obj = ConfigManager(config_dir, data_dir)


@cli.command(help="Show current configuration.")
@click.pass_obj
def show(manager: ConfigManager) -> None:
    with _reporting():
        show_config(manager)


@cli.command(name="set", help="Set a configuration value.")
@click.argument("key")
@click.argument("value")
@click.pass_obj
def set_command(manager: ConfigManager, key: str, value: str) -> None:
    with _reporting():
        set_config(manager, key, value)


@cli.command(help="Run the setup wizard.")
@click.pass_obj
def setup(manager: ConfigManager) -> None:
    with _reporting():
        run_setup_wizard(manager)


@cli.command(help="Run diagnostics.")
@click.pass_obj
def doctor(manager: ConfigManager) -> None:
    with _reporting():
        run_doctor(manager)


def main(argv: list[str] | None = None) -> int:
    """Run the config command; return the exit status."""
    try:
        result = cli.main(args=argv, prog_name="config", standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return result if isinstance(result, int) else 0