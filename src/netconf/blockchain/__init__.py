"""Blockchain network configuration for netconf."""

from .networks import (
    WILDCARD_NETWORK_ID,
    Credentials,
    DeferredDescriptor,
    DirectDescriptor,
    NetworkDescriptor,
)
from .provider import HDWalletProvider
from .registry import NetworkRegistry, build_registry

__all__ = [
    "WILDCARD_NETWORK_ID",
    "Credentials",
    "DeferredDescriptor",
    "DirectDescriptor",
    "HDWalletProvider",
    "NetworkDescriptor",
    "NetworkRegistry",
    "build_registry",
]
