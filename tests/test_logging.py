"""Tests for structured logging."""

import logging

import pytest
import structlog

from netconf.observability.logging import (
    _add_network,
    _redact_sensitive,
    clear_network,
    configure_logging,
    get_logger,
    network_var,
    set_network,
)


class TestNetworkContext:
    """Tests for active network context variable."""

    def test_network_default_none(self):
        """Network is None by default."""
        clear_network()
        assert network_var.get() is None

    def test_set_network(self):
        """set_network sets the context variable."""
        set_network("ropsten")
        assert network_var.get() == "ropsten"
        clear_network()

    def test_clear_network(self):
        """clear_network clears the context variable."""
        set_network("mainnet")
        clear_network()
        assert network_var.get() is None


class TestAddNetworkProcessor:
    """Tests for _add_network processor."""

    def test_adds_network_when_set(self):
        """Adds network to event dict when set."""
        set_network("ropsten")
        try:
            result = _add_network(None, None, {"event": "test"})
            assert result["network"] == "ropsten"
        finally:
            clear_network()

    def test_no_network_when_not_set(self):
        """Does not add network when not set."""
        clear_network()
        result = _add_network(None, None, {"event": "test"})
        assert "network" not in result

    def test_explicit_network_wins(self):
        """An explicit network field is not overwritten."""
        set_network("ropsten")
        try:
            result = _add_network(None, None, {"event": "test", "network": "mainnet"})
            assert result["network"] == "mainnet"
        finally:
            clear_network()


class TestRedactSensitiveProcessor:
    """Tests for _redact_sensitive processor."""

    def test_redacts_mnemonic(self):
        """Redacts mnemonic field."""
        result = _redact_sensitive(None, None, {"event": "test", "mnemonic": "seed words"})
        assert result["mnemonic"] == "[REDACTED]"

    def test_redacts_dev_mnemonic(self):
        """Redacts dev_mnemonic field."""
        result = _redact_sensitive(None, None, {"event": "test", "dev_mnemonic": "seed words"})
        assert result["dev_mnemonic"] == "[REDACTED]"

    def test_redacts_project_id(self):
        """Redacts project_id field."""
        result = _redact_sensitive(None, None, {"event": "test", "project_id": "abc123"})
        assert result["project_id"] == "[REDACTED]"

    def test_redacts_private_key(self):
        """Redacts private_key field."""
        result = _redact_sensitive(None, None, {"event": "test", "private_key": "0x1234"})
        assert result["private_key"] == "[REDACTED]"

    def test_redacts_case_insensitive(self):
        """Redacts fields case-insensitively."""
        result = _redact_sensitive(None, None, {"event": "test", "DEV_MNEMONIC": "seed"})
        assert result["DEV_MNEMONIC"] == "[REDACTED]"

    def test_preserves_network_fields(self):
        """Preserves network_id and endpoint_template."""
        event_dict = {
            "event": "test",
            "network_id": 3,
            "endpoint_template": "https://ropsten.infura.io/v3/{project_id}",
        }
        result = _redact_sensitive(None, None, event_dict)
        assert result["network_id"] == 3
        assert result["endpoint_template"] == "https://ropsten.infura.io/v3/{project_id}"


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def setup_method(self):
        """Reset structlog before each test."""
        structlog.reset_defaults()

    def test_configure_json_format(self):
        """Configures JSON format logging."""
        configure_logging(level="INFO", log_format="json")

        assert get_logger("test") is not None

    def test_configure_text_format(self):
        """Configures text format logging."""
        configure_logging(level="DEBUG", log_format="text")

        assert get_logger("test") is not None

    def test_configure_log_level(self):
        """Configures log level."""
        root_logger = logging.getLogger()
        saved_handlers = root_logger.handlers[:]
        saved_level = root_logger.level
        # basicConfig is a no-op while the root logger has handlers
        root_logger.handlers.clear()

        try:
            configure_logging(level="DEBUG", log_format="json")

            assert root_logger.level == logging.DEBUG
            assert len(root_logger.handlers) == 1
        finally:
            root_logger.handlers[:] = saved_handlers
            root_logger.setLevel(saved_level)
            structlog.reset_defaults()

    def test_configure_invalid_log_level_raises(self):
        """Invalid log level raises ValueError."""
        with pytest.raises(ValueError, match="Invalid log level"):
            configure_logging(level="INVALID", log_format="json")


def test_logging_integration(capfd):
    """Integration test for structured logging."""
    structlog.reset_defaults()
    # Force reconfiguration by clearing handlers
    root = logging.getLogger()
    root.handlers.clear()

    configure_logging(level="INFO", log_format="json")

    try:
        set_network("ropsten")
        get_logger("integration").info("provider ready", network_id=3, mnemonic="seed words")
        logging.getLogger("netconf.integration").info("Provider for %s built", "ropsten")
        clear_network()

        captured = capfd.readouterr()
        output = captured.out + captured.err
        assert "provider ready" in output
        assert "Provider for ropsten built" in output
        assert output.count('"network": "ropsten"') == 2
        assert "seed words" not in output
        assert "provider ready" not in captured.out
    finally:
        root.handlers.clear()
        root.setLevel(logging.WARNING)
        structlog.reset_defaults()
