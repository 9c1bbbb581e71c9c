#!/usr/bin/env python3
"""Re-run the system trust refresh command, e.g. after a failed install."""

import argparse
import sys
from pathlib import Path

from devca_trust.lib.command_runner import DryRunCommandRunner
from devca_trust.lib.config import TrustStoreConfig, load_strategies
from devca_trust.lib.logging_config import LOGGER
from devca_trust.lib.trust_store_manager import platform_trust_store


def main() -> int:
    """Refresh the system trust bundle.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = argparse.ArgumentParser(description="Rebuild the system trust bundle")
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
        help="Log the refresh command without running it",
    )
    args = parser.parse_args()

    try:
        config = TrustStoreConfig(log_level=args.log_level)
        if args.strategies_file:
            config.strategies = load_strategies(args.strategies_file)

        runner = DryRunCommandRunner() if args.dry_run else None
        result = platform_trust_store(config=config, runner=runner).refresh()

        LOGGER.info("Trust refreshed: %s", " ".join(result.argv))
        return 0

    except Exception as e:
        LOGGER.error("Refresh failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
