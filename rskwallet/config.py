"""Wallet configuration: networks, API keys and the on-disk config file."""

from __future__ import annotations

import json
import shutil
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

import platformdirs

from rskwallet.api import ApiConfig, ApiKey, ApiProvider, ProviderKind

APP_NAME = "rootstock-wallet"

RSK_RPC_DOCS_URL = "https://dev.rootstock.io/developers/rpc-api/"
ALCH_MAINNET_URL = "https://dashboard.alchemy.com/apps/create?referrer=/apps"
ALCH_TESTNET_URL = (
    "https://dashboard.alchemy.com/apps/create?referrer=/apps&chain=rsk-testnet"
)


class ConfigError(Exception):
    """Raised when the configuration cannot be read, parsed or used."""


_LABELS = {
    "Mainnet": "Mainnet",
    "Testnet": "Testnet",
    "Regtest": "Regtest",
    "AlchemyMainnet": "Alchemy Mainnet",
    "AlchemyTestnet": "Alchemy Testnet",
    "RootStockMainnet": "Rootstock Mainnet",
    "RootStockTestnet": "Rootstock Testnet",
}


def _normalise(text: str) -> str:
    return "".join(ch for ch in text.lower() if ch not in " -_")


class Network(Enum):
    """The networks the wallet can be pointed at."""

    MAINNET = "Mainnet"
    TESTNET = "Testnet"
    REGTEST = "Regtest"
    ALCHEMY_MAINNET = "AlchemyMainnet"
    ALCHEMY_TESTNET = "AlchemyTestnet"
    ROOTSTOCK_MAINNET = "RootStockMainnet"
    ROOTSTOCK_TESTNET = "RootStockTestnet"

    @classmethod
    def parse(cls, text: str) -> Network:
        """Parse a network name such as 'mainnet' or 'alchemy-testnet'."""
        wanted = _normalise(text)
        for network in cls:
            if wanted in (_normalise(network.value), _normalise(network.label())):
                return network
        raise ConfigError(f"Unknown network: {text}")

    def key_type(self) -> str:
        """'mainnet' or 'testnet': which set of API keys this network uses."""
        if self in (Network.MAINNET, Network.ALCHEMY_MAINNET, Network.ROOTSTOCK_MAINNET):
            return "mainnet"
        return "testnet"

    def label(self) -> str:
        return _LABELS[self.value]

    def __str__(self) -> str:
        return self.label()


@dataclass
class Config:
    """The wallet configuration."""

    default_network: Network = Network.TESTNET
    api: ApiConfig = field(default_factory=ApiConfig)
    alchemy_mainnet_key: str | None = None
    alchemy_testnet_key: str | None = None
    default_wallet: str | None = None

    def get_api_key(self, provider: ApiProvider) -> str | None:
        """The key for a provider on the current network, if any."""
        network = self.default_network.key_type()
        for key in self.api.keys:
            if key.provider == provider and key.network == network:
                return key.key
        if provider.kind is ProviderKind.ALCHEMY:
            if network == "mainnet":
                return self.alchemy_mainnet_key
            return self.alchemy_testnet_key
        return None

    def get_rsk_rpc_key(self) -> str | None:
        return self.get_api_key(ApiProvider.rsk_rpc())

    def get_alchemy_key(self) -> str | None:
        return self.get_api_key(ApiProvider.alchemy())

    def set_api_key(
        self, provider: ApiProvider, key: str, name: str | None = None
    ) -> str:
        """Add a key for the current network and return a confirmation message."""
        network = self.default_network.key_type()
        self.api.keys.append(ApiKey(key, network, provider, name))
        if provider.kind is ProviderKind.ALCHEMY:
            if network == "mainnet":
                self.alchemy_mainnet_key = key
            else:
                self.alchemy_testnet_key = key
        display_name = name if name is not None else "unnamed"
        return f"API key for {provider} on {network} saved as '{display_name}'"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "default_network": self.default_network.value,
            "api": self.api.to_dict(),
        }
        for name in ("alchemy_mainnet_key", "alchemy_testnet_key", "default_wallet"):
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        return data

    @classmethod
    def from_dict(cls, data: Any) -> Config:
        if not isinstance(data, dict):
            raise ConfigError("configuration must be a JSON object")
        if "default_network" not in data:
            raise ConfigError("missing field 'default_network'")
        try:
            network = Network(data["default_network"])
        except ValueError:
            raise ConfigError(
                f"unknown network: {data['default_network']!r}"
            ) from None
        try:
            api = ApiConfig.from_dict(data["api"]) if "api" in data else ApiConfig()
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
        optional = {}
        for name in ("alchemy_mainnet_key", "alchemy_testnet_key", "default_wallet"):
            value = data.get(name)
            if value is not None and not isinstance(value, str):
                raise ConfigError(f"field {name!r} must be a string")
            optional[name] = value
        return cls(default_network=network, api=api, **optional)


class ConfigManager:
    """Reads and writes the configuration file."""

    def __init__(
        self,
        config_dir: str | Path | None = None,
        data_dir: str | Path | None = None,
    ) -> None:
        if config_dir is None:
            config_dir = platformdirs.user_config_dir(APP_NAME, appauthor=False)
        if data_dir is None:
            data_dir = platformdirs.user_data_dir(APP_NAME, appauthor=False)
        self.config_dir = Path(config_dir)
        self.data_dir = Path(data_dir)
        self.config_dir.mkdir(parents=True, exist_ok=True)

    @property
    def config_path(self) -> Path:
        return self.config_dir / "config.json"

    def load(self) -> Config:
        """Load the configuration, or the defaults if there is no file."""
        if not self.config_path.exists():
            return Config()
        try:
            content = self.config_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError("Failed to read config file") from exc
        try:
            return Config.from_dict(json.loads(content))
        except (json.JSONDecodeError, ConfigError) as exc:
            raise ConfigError(f"Failed to parse config file: {exc}") from exc

    def save(self, config: Config) -> None:
        try:
            self.config_path.write_text(
                json.dumps(config.to_dict(), indent=2), encoding="utf-8"
            )
        except OSError as exc:
            raise ConfigError("Failed to write config file") from exc

    def ensure_configured(self) -> None:
        """Raise ConfigError if the default network lacks its Alchemy key."""
        config = self.load()
        if config.default_network is Network.MAINNET and config.alchemy_mainnet_key is None:
            raise ConfigError(
                "Mainnet API key not configured. Please run `setup` or "
                "`config set alchemy-mainnet-key <key>`"
            )
        if config.default_network is Network.TESTNET and config.alchemy_testnet_key is None:
            raise ConfigError(
                "Testnet API key not configured. Please run `setup` or "
                "`config set alchemy-testnet-key <key>`"
            )

    def clear_cache(self) -> list[Path]:
        """Delete all configuration and wallet data; return the removed paths."""
        removed: list[Path] = []

        def _empty(directory: Path) -> None:
            for path in directory.iterdir():
                if path.is_dir() and not path.is_symlink():
                    shutil.rmtree(path)
                else:
                    path.unlink()
                print(f"Removed: {path}")
                removed.append(path)

        if self.config_dir.exists():
            _empty(self.config_dir)
            self.config_dir.mkdir(parents=True, exist_ok=True)

        if self.data_dir.exists():
            _empty(self.data_dir)
            self.data_dir.rmdir()
            print(f"Removed: {self.data_dir}")
            removed.append(self.data_dir)

        print("\n✅ Cache and all wallet data have been cleared successfully.")
        print("A new configuration will be created when you start the wallet again.")
        return removed