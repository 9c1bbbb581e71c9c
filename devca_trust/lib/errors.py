"""Exceptions raised by trust store operations."""

from collections.abc import Sequence


class TrustStoreError(Exception):
    """Base class for every failure surfaced by install, uninstall and status."""


class CertificateReadError(TrustStoreError):
    """The root certificate file could not be read."""


class CertificateParseError(TrustStoreError):
    """The root certificate is not a well-formed PEM X.509 certificate."""


class NoStrategyError(TrustStoreError):
    """None of the known trust anchor directories exist on this host."""

    def __init__(self, probed: Sequence[str]) -> None:
        self.probed = tuple(probed)
        super().__init__(
            "no install strategy available; checked: " + ", ".join(self.probed)
        )


class UnsupportedPlatformError(TrustStoreError):
    """The running operating system has no trust store implementation."""


class CommandExecutionError(TrustStoreError):
    """An external command exited non-zero or could not be started.

    The message names the failing command so it can be re-run by hand.
    """

    def __init__(
        self,
        command: Sequence[str],
        output: str = "",
        returncode: int | None = None,
        reason: str | None = None,
    ) -> None:
        self.command = tuple(command)
        self.output = output
        self.returncode = returncode

        message = f"command {' '.join(self.command)!r} failed"
        if reason:
            message += f": {reason}"
        elif returncode is not None:
            message += f": exit status {returncode}"
        if output.strip():
            message += f"\n{output.strip()}"
        super().__init__(message)
