"""Core netconf components."""

from .wallet import MnemonicWallet, WalletProvider

__all__ = [
    "MnemonicWallet",
    "WalletProvider",
]
