"""Network descriptors for netconf.

A descriptor is either direct (literal connection parameters) or
deferred (a provider built on demand from credentials and an endpoint
template). Deferred descriptors never build a provider on their own.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import SecretStr

from netconf.blockchain.provider import HDWalletProvider
from netconf.config import NetconfConfig
from netconf.errors import CredentialError, MissingCredentialError

logger = logging.getLogger(__name__)

# Matches any network id reported by the node
WILDCARD_NETWORK_ID = "*"

ProviderFactory = Callable[[SecretStr | None, str], Any]


@dataclass(frozen=True)
class Credentials:
    """Credentials captured from the environment at startup.

    Attributes
    ----------
    mnemonic : SecretStr | None
        Seed phrase from DEV_MNEMONIC.
    project_id : str | None
        Infura project id from INFURA_PROJECT_ID.
    """

    mnemonic: SecretStr | None = field(default=None, repr=False)
    project_id: str | None = field(default=None, repr=False)

    @classmethod
    def from_config(cls, config: NetconfConfig) -> "Credentials":
        """Snapshot the credentials held by a loaded config."""
        return cls(mnemonic=config.dev_mnemonic, project_id=config.infura_project_id)


@dataclass(frozen=True)
class DirectDescriptor:
    """Literal connection parameters for a locally reachable node.

    Attributes
    ----------
    name : str
        The network name.
    protocol : str
        URL scheme, e.g. ``http``.
    host : str
        Node host name.
    port : int
        Node RPC port.
    gas_limit : int
        Default gas limit for deployments.
    gas_price : int
        Default gas price in wei.
    network_id : int | str
        The expected network id, or ``"*"`` to accept any.
    """

    name: str
    protocol: str
    host: str
    port: int
    gas_limit: int
    gas_price: int
    network_id: int | str = WILDCARD_NETWORK_ID

    kind: Literal["direct"] = field(default="direct", init=False)

    @property
    def url(self) -> str:
        """The node URL built from protocol, host and port."""
        return f"{self.protocol}://{self.host}:{self.port}"

    @property
    def is_wildcard(self) -> bool:
        """True if any network id is accepted."""
        return self.network_id == WILDCARD_NETWORK_ID

    def to_dict(self) -> dict[str, Any]:
        """Export as a deployment-tool network record."""
        return {
            "protocol": self.protocol,
            "host": self.host,
            "port": self.port,
            "gas": self.gas_limit,
            "gasPrice": self.gas_price,
            "networkId": self.network_id,
        }


@dataclass(frozen=True)
class DeferredDescriptor:
    """A remote network whose provider is built only when requested.

    Attributes
    ----------
    name : str
        The network name.
    network_id : int
        The network id of the remote chain.
    endpoint_template : str
        RPC URL with a ``{project_id}`` placeholder.
    credentials : Credentials
        Credentials captured at startup; not validated until
        :meth:`build_provider` is called.
    provider_factory : ProviderFactory
        Called as ``provider_factory(mnemonic, endpoint)``.
    """

    name: str
    network_id: int
    endpoint_template: str
    credentials: Credentials = field(default_factory=Credentials, repr=False)
    provider_factory: ProviderFactory = field(
        default=HDWalletProvider, repr=False, compare=False
    )

    kind: Literal["deferred"] = field(default="deferred", init=False)

    def endpoint(self) -> str:
        """Render the RPC endpoint URL.

        Raises
        ------
        MissingCredentialError
            If INFURA_PROJECT_ID is unset or empty.
        """
        project_id = (self.credentials.project_id or "").strip()
        if not project_id:
            raise MissingCredentialError("INFURA_PROJECT_ID", self.name)
        return self.endpoint_template.format(project_id=project_id)

    def build_provider(self) -> Any:
        """Build the provider for this network.

        Returns
        -------
        Any
            Whatever ``provider_factory`` returns; an
            :class:`HDWalletProvider` by default.

        Raises
        ------
        MissingCredentialError
            If DEV_MNEMONIC or INFURA_PROJECT_ID is unset or empty.
        InvalidCredentialError
            If the mnemonic cannot be used to derive an account.
        """
        endpoint = self.endpoint()
        try:
            provider = self.provider_factory(self.credentials.mnemonic, endpoint)
        except CredentialError as e:
            if e.network is None:
                raise e.for_network(self.name) from e
            raise
        logger.info(
            "Provider built for %s (network id %s) with %d address(es)",
            self.name,
            self.network_id,
            len(provider.addresses),
        )
        return provider

    def to_dict(self) -> dict[str, Any]:
        """Export as a deployment-tool network record.

        The ``provider`` value is the bound :meth:`build_provider`, so
        nothing is built until the consumer calls it.
        """
        return {
            "provider": self.build_provider,
            "networkId": self.network_id,
        }


NetworkDescriptor = DirectDescriptor | DeferredDescriptor
