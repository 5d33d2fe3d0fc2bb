# rskwallet

Command-line tools for a Rootstock (RSK) wallet: keep the wallet
configuration, check that it is complete, and look up the status of a
transaction through the Alchemy JSON-RPC endpoint.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Configuration

The configuration is kept as JSON in `config.json` inside a
`rootstock-wallet` folder in the user's configuration directory. It holds
the default network, API keys for the supported providers (Alchemy, RSK
RPC, or a custom named provider), the legacy Alchemy mainnet and testnet
keys, and optionally a default wallet name. When there is no file, the
defaults are used: the testnet network and no keys.

Both commands take `--config-dir` and `--data-dir` to use other
directories than the user's own.

Show the current configuration (API keys are masked):

```
rskwallet-config show
```

Set a single value:

```
rskwallet-config set default-network testnet
rskwallet-config set alchemy-mainnet-key placeholder
rskwallet-config set alchemy-testnet-key placeholder
rskwallet-config set default-wallet my-wallet
```

Network names are matched without regard to case, spaces, hyphens or
underscores: `mainnet`, `testnet`, `regtest`, `alchemy-mainnet`,
`alchemy-testnet`, `rootstock-mainnet` and `rootstock-testnet`. Unknown
keys and unknown networks are rejected with an error.

Walk through an interactive setup that picks the default network and
optionally records RSK RPC and Alchemy keys for mainnet and testnet:

```
rskwallet-config setup
```

Run diagnostics, reporting which network is selected, which Alchemy keys
are configured for each network and whether a default wallet is set:

```
rskwallet-config doctor
```

## Transaction status

Look up a transaction by hash. The API key is taken from `--api-key`, or
otherwise from the saved Alchemy key for the configured default network:

```
rskwallet-tx --tx-hash 0x0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef
rskwallet-tx --tx-hash 0x0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef --testnet --api-key placeholder
```

The report shows the hash, block (or `pending`), sender, recipient (or
`contract creation`), status (success, failed or pending), any created
contract address, the first topic of each log entry, and a link to the
block explorer. Errors returned by the endpoint are reported and the
command exits with a non-zero status.

## Library use

The same pieces are available from Python:

- `rskwallet.api` — `ProviderKind`, `ApiProvider`, `ApiKey`, `ApiManager`, `ApiConfig`
- `rskwallet.config` — `Network`, `Config`, `ConfigManager`, `ConfigError`
- `rskwallet.doctor` — `run_doctor`, `check_api_key`
- `rskwallet.setup_wizard` — `run_setup_wizard`, `setup_api_keys`
- `rskwallet.config_command` — `show_config`, `set_config`, `main`
- `rskwallet.tx` — `check_transaction`, `get_transaction_receipt`,
  `get_transaction_details`, `format_transaction_info`, `alchemy_url`,
  `explorer_url`, `TxError`, `main`

```python
from rskwallet.api import ApiProvider
from rskwallet.config import ConfigManager

manager = ConfigManager()
config = manager.load()
print(config.get_api_key(ApiProvider.alchemy()))
```

`ConfigManager.ensure_configured()` raises `ConfigError` when the default
network is mainnet or testnet and its Alchemy key is not set.
`ConfigManager.clear_cache()` deletes everything in the configuration and
data directories and returns the paths it removed.

## What this package does not do

This package covers configuration and transaction lookup only. It does
not create, import, list or back up wallets, hold private keys, show
balances, send transfers, keep contacts or tokens, or list transaction
history. Messages from `doctor` and `setup` that mention `wallet create`
or `rootstock-wallet --help` refer to commands this package does not
provide.