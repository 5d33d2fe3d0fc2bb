import json

import click
import pytest
import requests
import responses
from responses import matchers

from rskwallet.config import Config, ConfigManager, Network
from rskwallet.tx import (
    TxError,
    alchemy_url,
    check_transaction,
    explorer_url,
    format_transaction_info,
    get_transaction_details,
    get_transaction_receipt,
    main,
)

MAINNET = "https://rootstock-mainnet.g.alchemy.com/v2"
TESTNET = "https://rootstock-testnet.g.alchemy.com/v2"
TX_HASH = "0xabc123"
SENDER = "0x" + "1" * 40
RECIPIENT = "0x" + "2" * 40


def _body(method):
    return {"jsonrpc": "2.0", "id": 1, "method": method, "params": [TX_HASH]}


def _register(mock, url, receipt, details, api_key="placeholder"):
    auth = matchers.header_matcher({"Authorization": f"Bearer {api_key}"})
    mock.add(
        responses.POST,
        url,
        json={"jsonrpc": "2.0", "id": 1, "result": receipt},
        match=[matchers.json_params_matcher(_body("eth_getTransactionReceipt")), auth],
    )
    mock.add(
        responses.POST,
        url,
        json={"jsonrpc": "2.0", "id": 1, "result": details},
        match=[matchers.json_params_matcher(_body("eth_getTransactionByHash")), auth],
    )


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


@pytest.fixture
def manager(tmp_path):
    return ConfigManager(tmp_path / "cfg", tmp_path / "data")


def test_alchemy_url_per_network():
    assert alchemy_url(False) == MAINNET
    assert alchemy_url(True) == TESTNET


def test_explorer_url_strips_prefix():
    assert explorer_url(TX_HASH, False) == "https://explorer.rsk.co/tx/abc123"
    assert explorer_url(TX_HASH, True) == "https://explorer.testnet.rsk.co/tx/abc123"
    assert explorer_url("abc123", False).endswith("/tx/abc123")


def test_get_transaction_receipt_returns_result(mocked):
    receipt = {"status": "0x1", "blockNumber": "0x10"}
    _register(mocked, MAINNET, receipt, {"from": SENDER})
    with requests.Session() as session:
        got = get_transaction_receipt(session, MAINNET, "placeholder", TX_HASH)
    assert got == receipt
    sent = json.loads(mocked.calls[0].request.body)
    assert sent["method"] == "eth_getTransactionReceipt"
    assert mocked.calls[0].request.headers["Authorization"] == "Bearer placeholder"


def test_get_transaction_details_returns_result(mocked):
    details = {"from": SENDER, "to": RECIPIENT}
    _register(mocked, MAINNET, {"status": "0x1"}, details)
    with requests.Session() as session:
        got = get_transaction_details(session, MAINNET, "placeholder", TX_HASH)
    assert got == details


def test_api_error_is_raised(mocked):
    mocked.add(
        responses.POST,
        MAINNET,
        json={"jsonrpc": "2.0", "id": 1, "error": {"code": -1, "message": "bad"}},
    )
    with requests.Session() as session:
        with pytest.raises(TxError, match="Alchemy API error") as info:
            get_transaction_receipt(session, MAINNET, "placeholder", TX_HASH)
    assert "bad" in str(info.value)


def test_null_result_is_invalid(mocked):
    mocked.add(responses.POST, MAINNET, json={"jsonrpc": "2.0", "id": 1, "result": None})
    with requests.Session() as session:
        with pytest.raises(TxError, match="Invalid transaction receipt response"):
            get_transaction_receipt(session, MAINNET, "placeholder", TX_HASH)
        with pytest.raises(TxError, match="Invalid transaction details response"):
            get_transaction_details(session, MAINNET, "placeholder", TX_HASH)


def test_unparsable_response(mocked):
    mocked.add(responses.POST, MAINNET, body="not json")
    with requests.Session() as session:
        with pytest.raises(TxError, match="Failed to parse response"):
            get_transaction_receipt(session, MAINNET, "placeholder", TX_HASH)


def test_connection_failure(mocked):
    mocked.add(responses.POST, MAINNET, body=requests.ConnectionError("down"))
    with requests.Session() as session:
        with pytest.raises(TxError, match="Request failed"):
            get_transaction_details(session, MAINNET, "placeholder", TX_HASH)


def test_format_success():
    text = click.unstyle(
        format_transaction_info(
            TX_HASH,
            {"from": SENDER, "to": RECIPIENT},
            {"status": "0x1", "blockNumber": "0x10"},
            False,
        )
    )
    assert f"  Hash: {TX_HASH}" in text
    assert "  Block: 0x10" in text
    assert f"  From: {SENDER}" in text
    assert f"  To: {RECIPIENT}" in text
    assert "Status: ✓ Success" in text
    assert "https://explorer.rsk.co/tx/abc123" in text
    assert "Contract Creation" not in text


@pytest.mark.parametrize("status", ["0x0", "0x00"])
def test_format_failed(status):
    text = click.unstyle(format_transaction_info(TX_HASH, {}, {"status": status}))
    assert "Status: ✗ Failed" in text


def test_format_defaults_and_pending():
    text = click.unstyle(format_transaction_info(TX_HASH, {"to": None}, {}, True))
    assert "  Block: pending" in text
    assert "  From: unknown" in text
    assert "  To: contract creation" in text
    assert "Status: ⏳ Pending" in text
    assert "https://explorer.testnet.rsk.co/tx/abc123" in text


def test_format_contract_and_logs():
    receipt = {
        "status": "0x01",
        "contractAddress": RECIPIENT,
        "logs": [{"topics": ["0xfeed", "0xbeef"]}, {"topics": ["0xcafe"]}],
    }
    text = click.unstyle(format_transaction_info(TX_HASH, {}, receipt))
    assert f"  Contract: {RECIPIENT}" in text
    assert "  Logs (2):" in text
    assert "  - 0xfeed" in text
    assert "  - 0xcafe" in text
    assert "0xbeef" not in text


def test_format_empty_contract_address_hidden():
    text = click.unstyle(format_transaction_info(TX_HASH, {}, {"contractAddress": ""}))
    assert "Contract Creation" not in text


def test_check_transaction_with_given_key(mocked, manager):
    _register(mocked, TESTNET, {"status": "0x1"}, {"from": SENDER})
    report = click.unstyle(check_transaction(TX_HASH, True, "placeholder", manager))
    assert "Status: ✓ Success" in report
    assert f"  From: {SENDER}" in report
    assert len(mocked.calls) == 2


def test_check_transaction_uses_saved_key(mocked, manager):
    manager.save(Config(default_network=Network.MAINNET, alchemy_mainnet_key="token"))
    _register(mocked, MAINNET, {"status": "0x0"}, {}, api_key="token")
    report = click.unstyle(check_transaction(TX_HASH, False, None, manager))
    assert "Status: ✗ Failed" in report


def test_check_transaction_without_key(manager):
    with pytest.raises(TxError, match="No API key found for Rootstock Mainnet"):
        check_transaction(TX_HASH, False, None, manager)


def test_main_success(mocked, tmp_path, capsys):
    _register(mocked, MAINNET, {"status": "0x1"}, {"from": SENDER})
    code = main(
        ["--tx-hash", TX_HASH, "--api-key", "placeholder",
         "--config-dir", str(tmp_path / "cfg"), "--data-dir", str(tmp_path / "data")]
    )
    assert code == 0
    assert "✓ Success" in click.unstyle(capsys.readouterr().out)


def test_main_missing_key(tmp_path, capsys):
    code = main(
        ["-t", TX_HASH, "--config-dir", str(tmp_path / "cfg"),
         "--data-dir", str(tmp_path / "data")]
    )
    assert code == 1
    assert "No API key found" in capsys.readouterr().err


def test_main_requires_hash(tmp_path):
    assert main(["--config-dir", str(tmp_path / "cfg")]) == 2