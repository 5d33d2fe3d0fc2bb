"""API providers and API keys used to reach blockchain services."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ProviderKind(Enum):
    """The kinds of API provider the wallet knows about."""

    ALCHEMY = "Alchemy"
    RSK_RPC = "RskRpc"
    CUSTOM = "Custom"


@dataclass(frozen=True)
class ApiProvider:
    """An API provider: Alchemy, RSK RPC, or a custom named provider."""

    kind: ProviderKind
    name: str | None = None

    def __post_init__(self) -> None:
        if self.kind is ProviderKind.CUSTOM:
            if not isinstance(self.name, str):
                raise ValueError("a custom provider needs a name")
        elif self.name is not None:
            raise ValueError(f"{self.kind.value} provider takes no name")

    @classmethod
    def alchemy(cls) -> ApiProvider:
        """Alchemy, used for transaction history and advanced queries."""
        return cls(ProviderKind.ALCHEMY)

    @classmethod
    def rsk_rpc(cls) -> ApiProvider:
        """The RSK RPC API, used for balances and transactions."""
        return cls(ProviderKind.RSK_RPC)

    @classmethod
    def custom(cls, name: str) -> ApiProvider:
        """A custom provider with the given name."""
        return cls(ProviderKind.CUSTOM, name)

    def __str__(self) -> str:
        if self.kind is ProviderKind.ALCHEMY:
            return "Alchemy"
        if self.kind is ProviderKind.RSK_RPC:
            return "RSK RPC"
        return self.name or ""

    def debug_name(self) -> str:
        """The variant form used to build key identifiers."""
        if self.kind is ProviderKind.CUSTOM:
            escaped = (self.name or "").replace("\\", "\\\\").replace('"', '\\"')
            return f'Custom("{escaped}")'
        return self.kind.value

    def identifier(self, network: str) -> str:
        """The lower-case identifier for this provider on a network."""
        return f"{self.debug_name()}-{network}".lower()

    def to_json(self) -> Any:
        """JSON form: a bare variant name, or {"Custom": name}."""
        if self.kind is ProviderKind.CUSTOM:
            return {"Custom": self.name}
        return self.kind.value

    @classmethod
    def from_json(cls, data: Any) -> ApiProvider:
        """Read a provider from its JSON form."""
        if isinstance(data, str):
            if data == ProviderKind.ALCHEMY.value:
                return cls.alchemy()
            if data == ProviderKind.RSK_RPC.value:
                return cls.rsk_rpc()
            raise ValueError(f"unknown API provider: {data!r}")
        if isinstance(data, dict) and len(data) == 1 and "Custom" in data:
            name = data["Custom"]
            if not isinstance(name, str):
                raise ValueError("custom provider name must be a string")
            return cls.custom(name)
        raise ValueError(f"invalid API provider: {data!r}")


@dataclass
class ApiKey:
    """An API key for one provider on one network."""

    key: str
    network: str
    provider: ApiProvider
    name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "network": self.network,
            "provider": self.provider.to_json(),
            "name": self.name,
        }

    @classmethod
    def from_dict(cls, data: Any) -> ApiKey:
        if not isinstance(data, dict):
            raise ValueError("API key entry must be an object")
        try:
            key = data["key"]
            network = data["network"]
            provider = data["provider"]
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r} in API key") from None
        if not isinstance(key, str) or not isinstance(network, str):
            raise ValueError("API key fields 'key' and 'network' must be strings")
        name = data.get("name")
        if name is not None and not isinstance(name, str):
            raise ValueError("API key field 'name' must be a string")
        return cls(key, network, ApiProvider.from_json(provider), name)


@dataclass
class ApiManager:
    """API keys indexed by provider and network."""

    keys: dict[str, ApiKey] = field(default_factory=dict)

    def add_key(self, key: ApiKey) -> str:
        """Store a key, replacing any for the same provider and network."""
        ident = key.provider.identifier(key.network)
        self.keys[ident] = key
        return ident

    def get_key(self, provider: ApiProvider, network: str) -> ApiKey | None:
        return self.keys.get(provider.identifier(network))

    def remove_key(self, provider: ApiProvider, network: str) -> ApiKey | None:
        return self.keys.pop(provider.identifier(network), None)

    def list_keys(self) -> list[ApiKey]:
        return list(self.keys.values())


@dataclass
class ApiConfig:
    """The API section of the wallet configuration."""

    default_provider: ApiProvider | None = None
    keys: list[ApiKey] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "default_provider": (
                self.default_provider.to_json() if self.default_provider else None
            ),
            "keys": [key.to_dict() for key in self.keys],
        }

    @classmethod
    def from_dict(cls, data: Any) -> ApiConfig:
        if not isinstance(data, dict):
            raise ValueError("API configuration must be an object")
        if "keys" not in data:
            raise ValueError("missing field 'keys' in API configuration")
        keys = data["keys"]
        if not isinstance(keys, list):
            raise ValueError("API configuration 'keys' must be a list")
        provider = data.get("default_provider")
        return cls(
            default_provider=(
                ApiProvider.from_json(provider) if provider is not None else None
            ),
            keys=[ApiKey.from_dict(entry) for entry in keys],
        )