"""Diagnostics for the wallet configuration."""

from __future__ import annotations

import click

from rskwallet.config import Config, ConfigManager, Network

_CHECKED_NETWORKS = (
    Network.MAINNET,
    Network.ALCHEMY_MAINNET,
    Network.ROOTSTOCK_MAINNET,
    Network.TESTNET,
    Network.ALCHEMY_TESTNET,
    Network.ROOTSTOCK_TESTNET,
    Network.REGTEST,
)


def check_api_key(config: Config, network: Network) -> str:
    """Return a report line saying whether the network's Alchemy key is set."""
    if network.key_type() == "mainnet":
        key = config.alchemy_mainnet_key
    else:
        key = config.alchemy_testnet_key
    if key is not None:
        status = click.style("✓ Configured", fg="green")
    else:
        status = click.style("✗ Missing", fg="red")
    return f"  {network.label()} API key: {status}"


def run_doctor(manager: ConfigManager | None = None) -> bool:
    """Print a diagnostic report; return False if there is no config file."""
    manager = manager if manager is not None else ConfigManager()
    click.echo("\n" + click.style("🩺 Running diagnostics...", bold=True, fg="cyan"))
    click.echo("=" * 40)

    config = manager.load()

    click.echo("\n" + click.style("🔍 Configuration:", bold=True))
    click.echo(f"  Config file: {manager.config_path}")

    if not manager.config_path.exists():
        click.echo("  ❌ Configuration file not found")
        click.echo("     Run `setup` to create a new configuration")
        return False

    click.echo("\n" + click.style("🌐 Network Configuration:", bold=True))
    click.echo(f"  Default network: {config.default_network}")

    click.echo("\n" + click.style("🔑 API Keys:", bold=True))
    for network in _CHECKED_NETWORKS:
        click.echo(check_api_key(config, network))

    click.echo("\n" + click.style("💼 Wallet Configuration:", bold=True))
    if config.default_wallet is not None:
        click.echo(f"  Default wallet: {config.default_wallet}")
    else:
        click.echo("  ℹ️ No default wallet set")
        click.echo("     Run `wallet create` to create a new wallet")

    click.echo("\n" + click.style("✅ Diagnostics complete", bold=True, fg="green"))
    return True