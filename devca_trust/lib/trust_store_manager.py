"""Trust store manager for installing and removing a development root CA."""

import sys
from pathlib import Path

from .cert_utils import certificate_path, derive_identity, read_certificate_bytes
from .command_runner import CommandRunner, SubprocessCommandRunner
from .config import TrustStoreConfig
from .errors import UnsupportedPlatformError
from .logging_config import LOGGER, configure_logging
from .models import (
    CertificateIdentity,
    CommandResult,
    InstallResult,
    TrustAnchorStrategy,
    TrustStatus,
    UninstallResult,
)
from .path_prober import FilesystemProber, PathProber
from .strategy import resolve_strategy


class LinuxTrustStore:
    """System trust store for Linux distributions that keep anchors in a directory.

    Every mutation goes through the CommandRunner; the prober is only used to
    pick a strategy and to spot a legacy file. Each operation is a fixed
    sequence of steps and stops at the first failing one.
    """

    def __init__(
        self,
        runner: CommandRunner,
        prober: PathProber,
        config: TrustStoreConfig,
    ) -> None:
        """Initialize trust store.

        Args:
            runner: Executes tee, rm and refresh commands
            prober: Existence check for anchor directories and legacy files
            config: Candidate strategies and file naming
        """
        self.runner = runner
        self.prober = prober
        self.config = config

    def resolve_strategy(self) -> TrustAnchorStrategy:
        """Return the strategy for this host.

        Raises:
            NoStrategyError: If no known anchor directory exists
        """
        strategy = resolve_strategy(self.prober, self.config.strategies)
        LOGGER.info("Using trust anchors in %s", strategy.anchor_dir)
        return strategy

    def certificate_path(
        self, strategy: TrustAnchorStrategy, identity: CertificateIdentity
    ) -> str:
        return certificate_path(strategy, identity, self.config.name_label)

    def legacy_path(self, strategy: TrustAnchorStrategy) -> str:
        return strategy.path_for(self.config.legacy_name)

    def install(self, path: Path) -> InstallResult:
        """Install the PEM root certificate at path into the system store.

        Steps:
            1. Read certificate bytes
            2. Derive serial-number identity
            3. Resolve strategy
            4. Write bytes to the anchor path with tee
            5. Run the refresh command

        If the refresh fails the written file stays in place; re-running
        install or refresh completes the operation.

        Args:
            path: PEM-encoded root certificate

        Returns:
            InstallResult with the strategy and written path

        Raises:
            CertificateReadError: If the file cannot be read
            CertificateParseError: If the file is not a PEM certificate
            NoStrategyError: If no strategy applies to this host
            CommandExecutionError: If tee or the refresh command fails
        """
        pem_data = read_certificate_bytes(path)
        identity = derive_identity(pem_data)
        strategy = self.resolve_strategy()

        target = self.certificate_path(strategy, identity)
        LOGGER.info("Installing root CA serial %s to %s", identity.serial_number, target)
        self.runner.run(["tee", target], stdin=pem_data)

        self._refresh(strategy)

        return InstallResult(
            strategy=strategy,
            certificate_path=target,
            serial_number=identity.serial_number,
        )

    def uninstall(self, path: Path) -> UninstallResult:
        """Remove the PEM root certificate at path from the system store.

        Removal uses rm -f, so a certificate that was never installed is not
        an error. A file left under the legacy shared name is removed as well.

        Args:
            path: PEM-encoded root certificate

        Returns:
            UninstallResult with every path removed

        Raises:
            CertificateReadError: If the file cannot be read
            CertificateParseError: If the file is not a PEM certificate
            NoStrategyError: If no strategy applies to this host
            CommandExecutionError: If rm or the refresh command fails
        """
        identity = derive_identity(read_certificate_bytes(path))
        strategy = self.resolve_strategy()

        target = self.certificate_path(strategy, identity)
        LOGGER.info("Removing root CA serial %s from %s", identity.serial_number, target)
        self.runner.run(["rm", "-f", target])
        result = UninstallResult(
            strategy=strategy,
            certificate_path=target,
            serial_number=identity.serial_number,
            removed_paths=[target],
        )

        # Older releases installed every root under one shared name
        legacy = self.legacy_path(strategy)
        if self.prober.exists(legacy):
            LOGGER.info("Removing legacy root CA file %s", legacy)
            self.runner.run(["rm", "-f", legacy])
            result.removed_paths.append(legacy)
            result.legacy_removed = True

        self._refresh(strategy)

        return result

    def status(self, path: Path) -> TrustStatus:
        """Report whether the certificate at path is present in the anchor directory.

        Runs no commands.
        """
        identity = derive_identity(read_certificate_bytes(path))
        strategy = self.resolve_strategy()
        target = self.certificate_path(strategy, identity)
        legacy = self.legacy_path(strategy)

        return TrustStatus(
            strategy=strategy,
            certificate_path=target,
            serial_number=identity.serial_number,
            installed=self.prober.exists(target),
            legacy_path=legacy,
            legacy_present=self.prober.exists(legacy),
        )

    def refresh(self) -> CommandResult:
        """Rebuild the system trust bundle without adding or removing files."""
        return self._refresh(self.resolve_strategy())

    def _refresh(self, strategy: TrustAnchorStrategy) -> CommandResult:
        LOGGER.info("Refreshing system trust: %s", " ".join(strategy.refresh_command))
        return self.runner.run(list(strategy.refresh_command))


def platform_trust_store(
    config: TrustStoreConfig | None = None,
    runner: CommandRunner | None = None,
    prober: PathProber | None = None,
) -> LinuxTrustStore:
    """Return the trust store for the running platform.

    Args:
        config: Trust store configuration (defaults to TrustStoreConfig())
        runner: Command runner (defaults to SubprocessCommandRunner)
        prober: Path prober (defaults to FilesystemProber)

    Raises:
        UnsupportedPlatformError: If the platform is not Linux
    """
    if not sys.platform.startswith("linux"):
        raise UnsupportedPlatformError(f"no trust store support for platform {sys.platform!r}")

    config = config or TrustStoreConfig()
    configure_logging(config.log_level)
    if runner is None:
        runner = SubprocessCommandRunner(use_sudo=config.use_sudo, sudo_prompt=config.sudo_prompt)

    return LinuxTrustStore(
        runner=runner,
        prober=prober or FilesystemProber(),
        config=config,
    )
