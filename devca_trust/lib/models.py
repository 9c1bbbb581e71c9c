"""Value types and result models for trust store operations."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TrustAnchorStrategy:
    """How one Linux trust store layout accepts new root certificates.

    The strategy is selected when anchor_dir exists. roots_pattern holds a single
    "%s" placeholder for the certificate file name, and refresh_command rebuilds
    the system trust bundle once a file has been added or removed.
    """

    anchor_dir: str
    roots_pattern: str
    refresh_command: tuple[str, ...]

    def __post_init__(self) -> None:
        if self.roots_pattern.count("%s") != 1:
            raise ValueError(f"roots_pattern must contain exactly one %s: {self.roots_pattern!r}")
        try:
            self.roots_pattern % "x"
        except (TypeError, ValueError) as e:
            raise ValueError(f"roots_pattern is not a valid pattern: {self.roots_pattern!r}") from e
        if not self.refresh_command:
            raise ValueError("refresh_command must not be empty")
        object.__setattr__(self, "refresh_command", tuple(self.refresh_command))

    def path_for(self, file_name: str) -> str:
        """Return the on-disk path for file_name under this layout."""
        return self.roots_pattern % file_name


@dataclass(frozen=True)
class CertificateIdentity:
    """Serial number of a root certificate, as decimal text."""

    serial_number: str


@dataclass(frozen=True)
class CommandResult:
    """A command that exited zero and its combined stdout/stderr."""

    argv: tuple[str, ...]
    output: str = ""


@dataclass
class InstallResult:
    """Result from installing a root certificate."""

    strategy: TrustAnchorStrategy
    certificate_path: str
    serial_number: str


@dataclass
class UninstallResult:
    """Result from uninstalling a root certificate.

    removed_paths lists every path passed to rm, including a legacy file.
    """

    strategy: TrustAnchorStrategy
    certificate_path: str
    serial_number: str
    removed_paths: list[str] = field(default_factory=list)
    legacy_removed: bool = False


@dataclass
class TrustStatus:
    """Installation state of a root certificate on this host."""

    strategy: TrustAnchorStrategy
    certificate_path: str
    serial_number: str
    installed: bool
    legacy_path: str
    legacy_present: bool
