"""HD wallet provider: a mnemonic-derived wallet bound to an RPC endpoint."""

import logging

from eth_account.signers.local import LocalAccount
from pydantic import SecretStr
from web3 import Web3
from web3.middleware import SignAndSendRawMiddlewareBuilder

from netconf.config import DEFAULT_HD_PATH
from netconf.core.wallet import MnemonicWallet

logger = logging.getLogger(__name__)


def redact_endpoint(endpoint: str) -> str:
    """Mask the trailing path segment (the project id) of an RPC URL.

    Parameters
    ----------
    endpoint : str
        The RPC endpoint URL.

    Returns
    -------
    str
        The URL with all but the first four characters of its last
        path segment replaced by ``*``.
    """
    base, sep, secret = endpoint.rstrip("/").rpartition("/")
    if not sep or "://" not in base or not secret:
        return endpoint
    return f"{base}/{secret[:4]}{'*' * max(len(secret) - 4, 0)}"


class HDWalletProvider:
    """Signing provider for a remote node, built from a mnemonic and an RPC URL.

    Construction derives the accounts but opens no connection; the
    ``w3`` instance is created on first access.

    Parameters
    ----------
    mnemonic : SecretStr, optional
        The seed phrase used to derive the signing accounts.
    endpoint : str
        The RPC endpoint URL.
    address_index : int
        Index of the first derived account.
    num_addresses : int
        Number of accounts to derive.
    hd_path : str
        Derivation path prefix.

    Raises
    ------
    MissingCredentialError
        If the mnemonic is unset or blank.
    InvalidCredentialError
        If the mnemonic is not a valid BIP-39 phrase.
    """

    def __init__(
        self,
        mnemonic: SecretStr | None,
        endpoint: str,
        address_index: int = 0,
        num_addresses: int = 1,
        hd_path: str = DEFAULT_HD_PATH,
    ):
        self._endpoint = endpoint
        self._wallet = MnemonicWallet(
            mnemonic,
            address_index=address_index,
            num_addresses=num_addresses,
            hd_path=hd_path,
        )
        self._w3: Web3 | None = None

    @property
    def endpoint(self) -> str:
        """The RPC endpoint URL."""
        return self._endpoint

    @property
    def addresses(self) -> list[str]:
        """Derived account addresses, in derivation order."""
        return self._wallet.addresses

    def get_account(self, address: str | None = None) -> LocalAccount:
        """Get a derived account.

        Parameters
        ----------
        address : str | None
            The address to look up. If None, the first account is returned.

        Returns
        -------
        LocalAccount
            The matching account.

        Raises
        ------
        KeyError
            If no derived account has the given address.
        """
        if address is None:
            return self._wallet.get_account()
        for account in self._wallet.get_accounts():
            if account.address.lower() == address.lower():
                return account
        raise KeyError(f"Address not managed by this provider: {address}")

    @property
    def w3(self) -> Web3:
        """Get Web3 instance with signing middleware (lazy loaded)."""
        if self._w3 is None:
            w3 = Web3(Web3.HTTPProvider(self._endpoint))
            w3.middleware_onion.inject(
                SignAndSendRawMiddlewareBuilder.build(self._wallet.get_accounts()),
                layer=0,
            )
            w3.eth.default_account = self._wallet.address
            logger.debug("Web3 instance created for %s", redact_endpoint(self._endpoint))
            self._w3 = w3
        return self._w3
