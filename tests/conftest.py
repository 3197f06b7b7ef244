"""Pytest configuration and fixtures for netconf tests."""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Clear netconf-related environment variables before each test.

    Tests run from an empty directory so a developer's .env is not read.
    """
    env_prefixes = ("NETCONF_",)
    for key in list(os.environ.keys()):
        if key.startswith(env_prefixes):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("DEV_MNEMONIC", raising=False)
    monkeypatch.delenv("INFURA_PROJECT_ID", raising=False)
    monkeypatch.chdir(tmp_path)
