#!/usr/bin/env python3
"""netconf - network configuration for contract deployment.

Entry point for the netconf command.
"""

import sys

from netconf.cli import create_parser, run_cli


def parse_args(argv: list[str] | None = None):
    """Parse command line arguments."""
    return create_parser().parse_args(argv)


def main() -> None:
    """Main entry point for netconf."""
    args = parse_args()

    exit_code = run_cli(args)
    if exit_code >= 0:
        sys.exit(exit_code)
    # exit_code < 0 means no subcommand given
    create_parser().print_help()
    sys.exit(0)


if __name__ == "__main__":
    main()
