"""Configuration management for netconf using Pydantic Settings."""

import re

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HD_PATH = "m/44'/60'/0'/0/"

# "m/" followed by zero or more (optionally hardened) indices, each ending in "/"
HD_PATH_PATTERN = re.compile(r"^m/(\d+'?/)*$")


class NetconfConfig(BaseSettings):
    """netconf configuration loaded from environment variables.

    Credentials are read as-is; an unset mnemonic or project id only
    fails once a provider that needs it is built.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    # Credentials
    dev_mnemonic: SecretStr | None = Field(default=None, alias="DEV_MNEMONIC")
    infura_project_id: str | None = Field(default=None, alias="INFURA_PROJECT_ID")

    # HD wallet
    hd_path: str = Field(default=DEFAULT_HD_PATH, alias="NETCONF_HD_PATH")
    address_index: int = Field(default=0, alias="NETCONF_ADDRESS_INDEX", ge=0)
    num_addresses: int = Field(default=1, alias="NETCONF_NUM_ADDRESSES", gt=0)

    # Observability
    log_level: str = Field(default="INFO", alias="NETCONF_LOG_LEVEL")
    log_format: str = Field(default="text", alias="NETCONF_LOG_FORMAT")

    @field_validator("hd_path")
    @classmethod
    def _check_hd_path(cls, value: str) -> str:
        if not HD_PATH_PATTERN.match(value):
            raise ValueError(
                f"Invalid derivation path prefix: {value!r}. "
                "Expected e.g. \"m/44'/60'/0'/0/\"; the account index is appended."
            )
        return value
