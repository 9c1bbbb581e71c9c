#!/usr/bin/env python3
"""Install a development root CA into the system trust store."""

import argparse
import sys
from pathlib import Path

from devca_trust.lib.command_runner import DryRunCommandRunner
from devca_trust.lib.config import TrustStoreConfig, load_strategies
from devca_trust.lib.logging_config import LOGGER
from devca_trust.lib.trust_store_manager import platform_trust_store


def main() -> int:
    """Install root CA certificate.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = argparse.ArgumentParser(
        description="Install a development root CA into the system trust store"
    )
    parser.add_argument(
        "--cert",
        type=Path,
        required=True,
        help="PEM-encoded root CA certificate (e.g., ~/.local/share/mkcert/rootCA.pem)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: INFO)",
    )
    parser.add_argument(
        "--strategies-file",
        type=Path,
        help="JSON file overriding the ordered list of trust anchor layouts",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log the commands that would run without changing the system",
    )
    args = parser.parse_args()

    try:
        config = TrustStoreConfig(log_level=args.log_level)
        if args.strategies_file:
            config.strategies = load_strategies(args.strategies_file)

        if args.dry_run:
            LOGGER.info("DRY RUN - the trust store will not be modified")
        runner = DryRunCommandRunner() if args.dry_run else None
        store = platform_trust_store(config=config, runner=runner)

        result = store.install(args.cert)

        LOGGER.info("Root CA installed:")
        LOGGER.info("  Serial: %s", result.serial_number)
        LOGGER.info("  Path: %s", result.certificate_path)
        return 0

    except Exception as e:
        LOGGER.error("Install failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
