"""CLI subcommands for inspecting netconf networks.

Provides command-line interface for:
- Listing configured networks
- Showing a network's connection parameters
- Building a network's provider and showing its derived accounts
"""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from netconf.blockchain.networks import DeferredDescriptor, NetworkDescriptor
from netconf.blockchain.provider import redact_endpoint
from netconf.blockchain.registry import NetworkRegistry, build_registry
from netconf.config import NetconfConfig
from netconf.errors import NetworkConfigError
from netconf.observability.logging import clear_network, configure_logging, set_network

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="netconf",
        description="netconf - network configuration for contract deployment",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("networks", help="List configured networks")

    show_parser = subparsers.add_parser("show", help="Show a network's connection parameters")
    show_parser.add_argument("network", type=str, help="Network name")

    provider_parser = subparsers.add_parser(
        "provider", help="Build a network's provider and show its accounts"
    )
    provider_parser.add_argument("network", type=str, help="Network name")

    return parser


class CLIContext:
    """Shared context for CLI commands."""

    def __init__(self, config: NetconfConfig, json_output: bool = False):
        self.config = config
        self.json_output = json_output
        self._registry: NetworkRegistry | None = None

    @property
    def registry(self) -> NetworkRegistry:
        """Get network registry (lazy loaded)."""
        if self._registry is None:
            self._registry = build_registry(self.config)
        return self._registry

    def output(self, data: dict) -> None:
        """Output data in the appropriate format."""
        if self.json_output:
            print(json.dumps(data, indent=2))
        else:
            self._print_formatted(data)

    def _print_formatted(self, data: dict, indent: int = 0) -> None:
        """Print data in human-readable format."""
        prefix = "  " * indent
        for key, value in data.items():
            if isinstance(value, dict):
                print(f"{prefix}{key}:")
                self._print_formatted(value, indent + 1)
            elif isinstance(value, list):
                print(f"{prefix}{key}:")
                for item in value:
                    print(f"{prefix}  - {item}")
            else:
                print(f"{prefix}{key}: {value}")


def _describe(descriptor: NetworkDescriptor) -> dict:
    """Describe a network without building its provider."""
    if isinstance(descriptor, DeferredDescriptor):
        return {
            "name": descriptor.name,
            "kind": descriptor.kind,
            "network_id": descriptor.network_id,
            "endpoint_template": descriptor.endpoint_template,
        }
    return {
        "name": descriptor.name,
        "kind": descriptor.kind,
        "network_id": descriptor.network_id,
        "protocol": descriptor.protocol,
        "host": descriptor.host,
        "port": descriptor.port,
        "gas": descriptor.gas_limit,
        "gas_price": descriptor.gas_price,
    }


def cmd_networks(ctx: CLIContext) -> int:
    """List configured networks."""
    ctx.output(
        {
            "networks": {
                name: {"kind": descriptor.kind, "network_id": descriptor.network_id}
                for name, descriptor in ctx.registry.items()
            }
        }
    )
    return 0


def cmd_show(ctx: CLIContext, network: str) -> int:
    """Show a network's connection parameters."""
    try:
        descriptor = ctx.registry.resolve(network)
    except NetworkConfigError as e:
        ctx.output({"error": str(e)})
        return 1

    ctx.output(_describe(descriptor))
    return 0


def cmd_provider(ctx: CLIContext, network: str) -> int:
    """Build a network's provider and show its accounts."""
    set_network(network)
    try:
        descriptor = ctx.registry.resolve(network)
        if not isinstance(descriptor, DeferredDescriptor):
            ctx.output(
                {
                    "name": descriptor.name,
                    "kind": descriptor.kind,
                    "network_id": descriptor.network_id,
                    "url": descriptor.url,
                }
            )
            return 0

        provider = descriptor.build_provider()
        ctx.output(
            {
                "name": descriptor.name,
                "kind": descriptor.kind,
                "network_id": descriptor.network_id,
                "endpoint": redact_endpoint(provider.endpoint),
                "addresses": provider.addresses,
            }
        )
        return 0
    except NetworkConfigError as e:
        logger.warning("Provider unavailable: %s", e)
        ctx.output({"error": str(e)})
        return 1
    finally:
        clear_network()


def run_cli(args: argparse.Namespace) -> int:
    """Execute CLI command based on parsed arguments.

    Returns
    -------
    int
        Exit code: 0 for success, positive for error, -1 signals caller
        to show help (no CLI command specified).
    """
    try:
        config = NetconfConfig()
        configure_logging(level=config.log_level, log_format=config.log_format)
    except (ValidationError, ValueError) as e:
        if args.json:
            print(json.dumps({"error": f"Configuration error: {e}"}))
        else:
            print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    ctx = CLIContext(config, json_output=args.json)

    if args.command == "networks":
        return cmd_networks(ctx)
    elif args.command == "show":
        return cmd_show(ctx, args.network)
    elif args.command == "provider":
        return cmd_provider(ctx, args.network)
    else:
        return -1
