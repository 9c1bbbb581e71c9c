#!/usr/bin/env python3
"""Check whether a development root CA is present in the system trust store."""

import argparse
import sys
from pathlib import Path

from devca_trust.lib.config import TrustStoreConfig, load_strategies
from devca_trust.lib.logging_config import LOGGER
from devca_trust.lib.trust_store_manager import platform_trust_store


def main() -> int:
    """Report trust status of a root CA certificate.

    Returns:
        Exit code (0 when installed, 1 when missing or on failure)
    """
    parser = argparse.ArgumentParser(
        description="Check whether a development root CA is installed"
    )
    parser.add_argument(
        "--cert",
        type=Path,
        required=True,
        help="PEM-encoded root CA certificate to look for",
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
    args = parser.parse_args()

    try:
        config = TrustStoreConfig(log_level=args.log_level)
        if args.strategies_file:
            config.strategies = load_strategies(args.strategies_file)

        status = platform_trust_store(config=config).status(args.cert)

        LOGGER.info("Trust anchors: %s", status.strategy.anchor_dir)
        LOGGER.info("  Serial: %s", status.serial_number)
        LOGGER.info("  Path: %s", status.certificate_path)
        if status.legacy_present:
            LOGGER.warning("Legacy root CA file present: %s", status.legacy_path)

        if not status.installed:
            LOGGER.info("Root CA is not installed")
            return 1

        LOGGER.info("Root CA is installed")
        return 0

    except Exception as e:
        LOGGER.error("Status check failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
