"""netconf - network configuration for contract deployment."""

from .blockchain import (
    DeferredDescriptor,
    DirectDescriptor,
    HDWalletProvider,
    NetworkDescriptor,
    NetworkRegistry,
    build_registry,
)
from .config import NetconfConfig
from .errors import (
    CredentialError,
    InvalidCredentialError,
    MissingCredentialError,
    NetworkConfigError,
    UnknownNetworkError,
)

__all__ = [
    "CredentialError",
    "DeferredDescriptor",
    "DirectDescriptor",
    "HDWalletProvider",
    "InvalidCredentialError",
    "MissingCredentialError",
    "NetconfConfig",
    "NetworkConfigError",
    "NetworkDescriptor",
    "NetworkRegistry",
    "UnknownNetworkError",
    "build_registry",
]
