"""Interactive first-time setup of the wallet configuration."""

from __future__ import annotations

import click

from rskwallet.api import ApiKey, ApiProvider
from rskwallet.config import (
    ALCH_MAINNET_URL,
    ALCH_TESTNET_URL,
    RSK_RPC_DOCS_URL,
    Config,
    ConfigManager,
    Network,
)

_NETWORK_CHOICES = (
    ("Testnet (recommended for testing)", Network.TESTNET),
    ("Mainnet (for real funds)", Network.MAINNET),
    ("Regtest (local development)", Network.REGTEST),
    ("Alchemy Mainnet", Network.ALCHEMY_MAINNET),
    ("Alchemy Testnet", Network.ALCHEMY_TESTNET),
    ("Rootstock Mainnet", Network.ROOTSTOCK_MAINNET),
    ("Rootstock Testnet", Network.ROOTSTOCK_TESTNET),
)


def _select_network() -> Network:
    for number, (label, _) in enumerate(_NETWORK_CHOICES, start=1):
        click.echo(f"  {number}. {label}")
    choice = click.prompt(
        "Select your default network",
        type=click.IntRange(1, len(_NETWORK_CHOICES)),
        default=1,
    )
    return _NETWORK_CHOICES[choice - 1][1]


def run_setup_wizard(manager: ConfigManager | None = None) -> Config:
    """Ask for a default network and optional API keys, then save the config."""
    manager = manager if manager is not None else ConfigManager()
    click.echo(
        "\n" + click.style("🌟 Welcome to Rootstock Wallet CLI!", bold=True, fg="cyan")
    )
    click.echo("=" * 40)
    click.echo("\nLet's get you set up with the basic configuration.\n")

    config = manager.load()
    network = _select_network()
    config.default_network = network

    setup_api_keys(config, network)
    manager.save(config)

    click.echo("\n" + click.style("✅ Setup complete!", bold=True, fg="green"))
    click.echo("\nRun `rootstock-wallet --help` to see available commands.")
    return config


def setup_api_keys(config: Config, network: Network) -> None:
    """Ask for optional RSK RPC and Alchemy keys for the network's key type."""
    click.echo("\n" + click.style("🔑 API Key Setup (Optional)", bold=True, fg="cyan"))
    click.echo("=" * 40)

    key_type = network.key_type()

    click.echo(
        "\n" + click.style("The wallet works with public RSK nodes by default.", fg="green")
    )
    click.echo(
        "You can optionally configure API keys for enhanced performance and features:\n"
    )
    click.echo(
        f"• {click.style('RSK RPC API', bold=True)}: Better rate limits and performance"
    )
    click.echo(
        f"• {click.style('Alchemy API', bold=True)}: "
        "Transaction history and advanced queries"
    )

    if click.confirm(
        f"Would you like to set up RSK RPC API key for {key_type} (recommended)?",
        default=False,
    ):
        click.echo("\nGet your RSK RPC API key from:")
        click.echo(click.style(RSK_RPC_DOCS_URL, fg="blue", underline=True))
        rsk_key = click.prompt(f"Enter your RSK RPC {key_type} API key", type=str)
        config.api.keys.append(
            ApiKey(rsk_key, key_type, ApiProvider.rsk_rpc(), "RSK RPC")
        )

    if click.confirm(
        f"Would you like to set up Alchemy API key for {key_type} "
        "(for transaction history)?",
        default=False,
    ):
        click.echo("\nAlchemy provides transaction history and advanced query features.")
        click.echo("Get your Alchemy API key from:")
        alchemy_url = ALCH_MAINNET_URL if key_type == "mainnet" else ALCH_TESTNET_URL
        click.echo(click.style(alchemy_url, fg="blue", underline=True))
        alchemy_key = click.prompt(f"Enter your Alchemy {key_type} API key", type=str)
        config.api.keys.append(
            ApiKey(alchemy_key, key_type, ApiProvider.alchemy(), "Alchemy")
        )
        if key_type == "mainnet":
            config.alchemy_mainnet_key = alchemy_key
        else:
            config.alchemy_testnet_key = alchemy_key

    if key_type == "mainnet":
        click.echo("\nWould you like to set up testnet API keys as well?")
        other_network = Network.TESTNET
    else:
        click.echo("\nWould you like to set up mainnet API keys as well?")
        other_network = Network.MAINNET

    if click.confirm(
        f"Set up {other_network.key_type()} API keys now?", default=False
    ):
        setup_api_keys(config, other_network)