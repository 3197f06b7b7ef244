"""Network registry: name to descriptor lookup, built once at startup."""

import logging
from collections.abc import Iterable, Iterator, Mapping
from functools import partial
from types import MappingProxyType
from typing import Any

from netconf.blockchain.networks import (
    WILDCARD_NETWORK_ID,
    Credentials,
    DeferredDescriptor,
    DirectDescriptor,
    NetworkDescriptor,
    ProviderFactory,
)
from netconf.blockchain.provider import HDWalletProvider
from netconf.config import NetconfConfig
from netconf.errors import UnknownNetworkError

logger = logging.getLogger(__name__)

DEVELOPMENT_GAS_LIMIT = 5_000_000
DEVELOPMENT_GAS_PRICE = 5_000_000_000  # 5 gwei

ROPSTEN_ENDPOINT = "https://ropsten.infura.io/v3/{project_id}"
MAINNET_ENDPOINT = "https://mainnet.infura.io/v3/{project_id}"


class NetworkRegistry(Mapping[str, NetworkDescriptor]):
    """Read-only, insertion-ordered mapping of network name to descriptor.

    Parameters
    ----------
    descriptors : Iterable[NetworkDescriptor]
        Descriptors to register, in order.

    Raises
    ------
    ValueError
        If two descriptors share a name.
    """

    def __init__(self, descriptors: Iterable[NetworkDescriptor]):
        networks: dict[str, NetworkDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.name in networks:
                raise ValueError(f"Duplicate network name: {descriptor.name!r}")
            networks[descriptor.name] = descriptor
        self._networks = MappingProxyType(networks)

    def resolve(self, name: str) -> NetworkDescriptor:
        """Look up a network by name.

        Parameters
        ----------
        name : str
            The network name.

        Returns
        -------
        NetworkDescriptor
            The registered descriptor.

        Raises
        ------
        UnknownNetworkError
            If no network with this name is registered.
        """
        try:
            return self._networks[name]
        except KeyError:
            raise UnknownNetworkError(name, self.names()) from None

    def names(self) -> list[str]:
        """Registered network names, in registration order."""
        return list(self._networks)

    def __getitem__(self, name: str) -> NetworkDescriptor:
        return self.resolve(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._networks)

    def __len__(self) -> int:
        return len(self._networks)

    def __repr__(self) -> str:
        return f"NetworkRegistry({self.names()!r})"

    def to_dict(self) -> dict[str, Any]:
        """Export in the shape a deployment tool reads its networks from."""
        return {
            "networks": {name: descriptor.to_dict() for name, descriptor in self._networks.items()}
        }


def default_networks(
    credentials: Credentials,
    provider_factory: ProviderFactory = HDWalletProvider,
) -> list[NetworkDescriptor]:
    """The development, ropsten and mainnet descriptors."""
    return [
        DirectDescriptor(
            name="development",
            protocol="http",
            host="localhost",
            port=8545,
            gas_limit=DEVELOPMENT_GAS_LIMIT,
            gas_price=DEVELOPMENT_GAS_PRICE,
            network_id=WILDCARD_NETWORK_ID,
        ),
        DeferredDescriptor(
            name="ropsten",
            network_id=3,
            endpoint_template=ROPSTEN_ENDPOINT,
            credentials=credentials,
            provider_factory=provider_factory,
        ),
        DeferredDescriptor(
            name="mainnet",
            network_id=1,
            endpoint_template=MAINNET_ENDPOINT,
            credentials=credentials,
            provider_factory=provider_factory,
        ),
    ]


def build_registry(
    config: NetconfConfig,
    provider_factory: ProviderFactory | None = None,
) -> NetworkRegistry:
    """Build the default registry from a loaded config.

    Parameters
    ----------
    config : NetconfConfig
        The loaded configuration. Its credentials are captured but not
        validated.
    provider_factory : ProviderFactory, optional
        Replaces the HD wallet provider for deferred networks. When
        omitted, the config's HD wallet options are bound into
        :class:`HDWalletProvider`.

    Returns
    -------
    NetworkRegistry
        The registry of default networks.
    """
    if provider_factory is None:
        provider_factory = partial(
            HDWalletProvider,
            address_index=config.address_index,
            num_addresses=config.num_addresses,
            hd_path=config.hd_path,
        )
    registry = NetworkRegistry(
        default_networks(Credentials.from_config(config), provider_factory)
    )
    logger.debug("Network registry built: %s", ", ".join(registry.names()))
    return registry
