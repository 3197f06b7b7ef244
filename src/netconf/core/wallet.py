"""Wallet provider abstraction for mnemonic-derived signing accounts."""

from abc import ABC, abstractmethod

from eth_account import Account
from eth_account.signers.local import LocalAccount
from eth_utils import ValidationError
from pydantic import SecretStr

from netconf.config import DEFAULT_HD_PATH, HD_PATH_PATTERN
from netconf.errors import InvalidCredentialError, MissingCredentialError

Account.enable_unaudited_hdwallet_features()


class WalletProvider(ABC):
    """Abstract wallet provider holding one or more signing accounts."""

    @abstractmethod
    def get_accounts(self) -> list[LocalAccount]:
        """Get the wallet accounts for signing.

        Returns
        -------
        list[LocalAccount]
            The account instances, in derivation order.
        """
        ...

    def get_account(self) -> LocalAccount:
        """Get the primary (first) account."""
        return self.get_accounts()[0]

    @property
    def address(self) -> str:
        """Get the primary wallet address.

        Returns
        -------
        str
            The checksummed wallet address.
        """
        return self.get_account().address

    @property
    def addresses(self) -> list[str]:
        """Get every wallet address, in derivation order."""
        return [account.address for account in self.get_accounts()]


class MnemonicWallet(WalletProvider):
    """Derive accounts from a BIP-39 mnemonic along a BIP-44 path.

    Parameters
    ----------
    mnemonic : SecretStr, optional
        The seed phrase (from DEV_MNEMONIC).
    address_index : int
        Index of the first account to derive.
    num_addresses : int
        Number of consecutive accounts to derive.
    hd_path : str
        Derivation path prefix; the account index is appended.

    Raises
    ------
    MissingCredentialError
        If the mnemonic is unset or blank.
    InvalidCredentialError
        If the mnemonic is not a valid BIP-39 phrase.
    ValueError
        If hd_path is not a valid derivation path.
    """

    def __init__(
        self,
        mnemonic: SecretStr | None,
        address_index: int = 0,
        num_addresses: int = 1,
        hd_path: str = DEFAULT_HD_PATH,
    ):
        phrase = mnemonic.get_secret_value().strip() if mnemonic is not None else ""
        if not phrase:
            raise MissingCredentialError("DEV_MNEMONIC")
        if address_index < 0:
            raise ValueError("address_index must not be negative")
        if num_addresses < 1:
            raise ValueError("num_addresses must be at least 1")
        if not HD_PATH_PATTERN.match(hd_path):
            raise ValueError(f"Invalid derivation path prefix: {hd_path!r}")

        # eth-account errors quote the phrase, so only the variable is named
        try:
            Account.from_mnemonic(phrase)
        except (ValueError, ValidationError) as e:
            raise InvalidCredentialError("DEV_MNEMONIC", "is not a valid BIP-39 mnemonic") from e

        self._accounts: list[LocalAccount] = [
            Account.from_mnemonic(phrase, account_path=f"{hd_path}{index}")
            for index in range(address_index, address_index + num_addresses)
        ]

    def get_accounts(self) -> list[LocalAccount]:
        """Get the derived accounts.

        Returns
        -------
        list[LocalAccount]
            The derived accounts, first one at ``address_index``.
        """
        return list(self._accounts)
