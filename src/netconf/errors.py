"""Exceptions raised while resolving networks and building providers."""


class NetworkConfigError(Exception):
    """Base class for network configuration errors."""


class UnknownNetworkError(NetworkConfigError, KeyError):
    """Raised when a network name is not in the registry.

    Parameters
    ----------
    name : str
        The network name that was looked up.
    available : list[str]
        The names the registry does define.
    """

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        self.message = (
            f"Unknown network: {name!r}. Available networks: {', '.join(available) or 'none'}"
        )
        super().__init__(self.message)

    def __str__(self) -> str:
        # KeyError would quote the message
        return self.message


class CredentialError(NetworkConfigError):
    """Base class for credential problems found while building a provider.

    Messages name the environment variable, never its value.

    Parameters
    ----------
    variable : str
        The environment variable at fault.
    detail : str
        What is wrong with it.
    network : str | None
        The network whose provider was being built, if known.
    """

    summary = "Credential error"

    def __init__(self, variable: str, detail: str, network: str | None = None):
        self.variable = variable
        self.detail = detail
        self.network = network
        target = f" for network {network!r}" if network else ""
        super().__init__(f"{self.summary}{target}: {detail}")

    def for_network(self, network: str) -> "CredentialError":
        """Return the same error tagged with a network name."""
        return CredentialError(self.variable, self.detail, network)


class MissingCredentialError(CredentialError):
    """Raised when a provider is built without a required environment variable."""

    summary = "Missing credential"

    def __init__(self, variable: str, network: str | None = None):
        super().__init__(variable, f"set {variable}", network)

    def for_network(self, network: str) -> "MissingCredentialError":
        return MissingCredentialError(self.variable, network)


class InvalidCredentialError(CredentialError):
    """Raised when a credential is present but cannot be used."""

    summary = "Invalid credential"

    def __init__(self, variable: str, reason: str, network: str | None = None):
        self.reason = reason
        super().__init__(variable, f"{variable} {reason}", network)

    def for_network(self, network: str) -> "InvalidCredentialError":
        return InvalidCredentialError(self.variable, self.reason, network)
