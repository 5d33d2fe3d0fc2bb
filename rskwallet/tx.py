"""The `tx` command: look up the status of a transaction through Alchemy."""

from __future__ import annotations

import json
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import click
import requests

from rskwallet.api import ApiProvider
from rskwallet.config import ConfigError, ConfigManager, Network

_MAINNET_URL = "https://rootstock-mainnet.g.alchemy.com/v2"
_TESTNET_URL = "https://rootstock-testnet.g.alchemy.com/v2"
_MAINNET_EXPLORER = "https://explorer.rsk.co/tx/"
_TESTNET_EXPLORER = "https://explorer.testnet.rsk.co/tx/"


class TxError(Exception):
    """Raised when a transaction cannot be looked up."""


def alchemy_url(testnet: bool = False) -> str:
    """The Alchemy JSON-RPC endpoint for the chosen network."""
    return _TESTNET_URL if testnet else _MAINNET_URL


def _strip_hex_prefix(text: str) -> str:
    while text.startswith("0x"):
        text = text[2:]
    return text


def explorer_url(tx_hash: str, testnet: bool = False) -> str:
    """The block-explorer page for a transaction."""
    base = _TESTNET_EXPLORER if testnet else _MAINNET_EXPLORER
    return base + _strip_hex_prefix(tx_hash)


def _rpc_call(
    session: requests.Session,
    url: str,
    api_key: str,
    method: str,
    tx_hash: str,
    what: str,
) -> dict[str, Any]:
    request = {"jsonrpc": "2.0", "id": 1, "method": method, "params": [tx_hash]}
    try:
        response = session.post(
            url, headers={"Authorization": f"Bearer {api_key}"}, json=request
        )
    except requests.RequestException as exc:
        raise TxError(f"Request failed: {exc}") from exc
    try:
        body = response.json()
    except ValueError as exc:
        raise TxError(f"Failed to parse response: {exc}") from exc

    if isinstance(body, dict) and "error" in body:
        error = json.dumps(body["error"], separators=(",", ":"), ensure_ascii=False)
        raise TxError(f"Alchemy API error: {error}")

    result = body.get("result") if isinstance(body, dict) else None
    if not isinstance(result, dict):
        raise TxError(f"Invalid transaction {what} response")
    return result


def get_transaction_receipt(
    session: requests.Session, url: str, api_key: str, tx_hash: str
) -> dict[str, Any]:
    """Fetch the receipt of a transaction; it carries the status."""
    return _rpc_call(
        session, url, api_key, "eth_getTransactionReceipt", tx_hash, "receipt"
    )


def get_transaction_details(
    session: requests.Session, url: str, api_key: str, tx_hash: str
) -> dict[str, Any]:
    """Fetch the transaction itself."""
    return _rpc_call(
        session, url, api_key, "eth_getTransactionByHash", tx_hash, "details"
    )


def _text(data: dict[str, Any], key: str, default: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else default


def _status(receipt: dict[str, Any]) -> str:
    status = receipt.get("status")
    if status in ("0x1", "0x01"):
        return click.style("✓ Success", fg="green", bold=True)
    if status in ("0x0", "0x00"):
        return click.style("✗ Failed", fg="red", bold=True)
    return "⏳ Pending"


def _dim(text: str) -> str:
    return click.style(text, dim=True)


def _heading(text: str) -> str:
    return click.style(text, bold=True, underline=True)


def format_transaction_info(
    tx_hash: str,
    tx_details: dict[str, Any],
    receipt: dict[str, Any],
    testnet: bool = False,
) -> str:
    """Render a transaction and its receipt as a report for the terminal."""
    block_number = _text(receipt, "blockNumber", "pending")
    sender = _text(tx_details, "from", "unknown")
    recipient = _text(tx_details, "to", "contract creation")

    lines = [
        "",
        _heading("Transaction Details"),
        "",
        "-" * 60,
        _dim(f"  Hash: {tx_hash}"),
        _dim(f"  Block: {block_number}"),
        _dim(f"  From: {sender}"),
        _dim(f"  To: {recipient}"),
        "",
        _heading("Transaction Data"),
        "-" * 60,
        "",
        _dim(f"  Status: {_status(receipt)}"),
    ]

    contract = receipt.get("contractAddress")
    if isinstance(contract, str) and contract:
        lines += [
            "",
            _heading("Contract Creation"),
            "-" * 60,
            _dim(f"  Contract: {contract}"),
        ]

    logs = receipt.get("logs")
    if isinstance(logs, list) and logs:
        lines += ["", _heading(f"  Logs ({len(logs)}):")]
        for log in logs:
            topics = log.get("topics") if isinstance(log, dict) else None
            if isinstance(topics, list) and topics and isinstance(topics[0], str):
                lines.append(f"  - {topics[0]}")

    lines += [
        "",
        click.style("ℹ️  Tip:", fg="blue", bold=True)
        + " "
        + _dim("Use a block explorer for more detailed information"),
        "",
        "🔗 View on Explorer: "
        + click.style(explorer_url(tx_hash, testnet), fg="blue", underline=True),
    ]
    return "\n".join(lines)


def check_transaction(
    tx_hash: str,
    testnet: bool = False,
    api_key: str | None = None,
    manager: ConfigManager | None = None,
) -> str:
    """Look up a transaction, print its report and return it."""
    network = Network.ROOTSTOCK_TESTNET if testnet else Network.ROOTSTOCK_MAINNET
    manager = manager if manager is not None else ConfigManager()
    config = manager.load()

    if api_key is None:
        api_key = config.get_api_key(ApiProvider.alchemy())
        if api_key is None:
            raise TxError(
                f"No API key found for {network}. "
                "Please set one up using 'wallet config'."
            )

    url = alchemy_url(testnet)
    with requests.Session() as session:
        receipt = get_transaction_receipt(session, url, api_key, tx_hash)
        details = get_transaction_details(session, url, api_key, tx_hash)

    report = format_transaction_info(tx_hash, details, receipt, testnet)
    click.echo(report)
    return report


@contextmanager
def _reporting() -> Iterator[None]:
    try:
        yield
    except (TxError, ConfigError) as exc:
        raise click.ClickException(str(exc)) from exc


@click.command(help="Check the status of a transaction.")
@click.option("-t", "--tx-hash", required=True, help="Transaction hash to check.")
@click.option("--testnet", is_flag=True, help="Use testnet.")
@click.option("--api-key", default=None,
              help="Alchemy API key (the saved key is used if not given).")
@click.option("--config-dir", type=click.Path(file_okay=False), default=None,
              help="Directory holding config.json.")
@click.option("--data-dir", type=click.Path(file_okay=False), default=None,
              help="Directory holding wallet data.")
def cli(
    tx_hash: str,
    testnet: bool,
    api_key: str | None,
    config_dir: str | None,
    data_dir: str | None,
) -> None:
    with _reporting():
        check_transaction(tx_hash, testnet, api_key, ConfigManager(config_dir, data_dir))


def main(argv: list[str] | None = None) -> int:
    """Run the tx command; return the exit status."""
    try:
        result = cli.main(args=argv, prog_name="tx", standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return result if isinstance(result, int) else 0