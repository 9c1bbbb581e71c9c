"""Trust store configuration dataclasses."""

import json
from dataclasses import dataclass
from pathlib import Path

from .models import TrustAnchorStrategy

# Probed in order; the first anchor directory that exists wins.
DEFAULT_STRATEGIES: tuple[TrustAnchorStrategy, ...] = (
    # RHEL, Fedora, CentOS
    TrustAnchorStrategy(
        anchor_dir="/etc/pki/ca-trust/source/anchors/",
        roots_pattern="/etc/pki/ca-trust/source/anchors/%s.pem",
        refresh_command=("update-ca-trust", "extract"),
    ),
    # Debian, Ubuntu
    TrustAnchorStrategy(
        anchor_dir="/usr/local/share/ca-certificates/",
        roots_pattern="/usr/local/share/ca-certificates/%s.crt",
        refresh_command=("update-ca-certificates",),
    ),
    # Arch
    TrustAnchorStrategy(
        anchor_dir="/etc/ca-certificates/trust-source/anchors/",
        roots_pattern="/etc/ca-certificates/trust-source/anchors/%s.crt",
        refresh_command=("trust", "extract-compat"),
    ),
    # openSUSE
    TrustAnchorStrategy(
        anchor_dir="/usr/share/pki/trust/anchors",
        roots_pattern="/usr/share/pki/trust/anchors/%s.pem",
        refresh_command=("update-ca-certificates",),
    ),
)


@dataclass
class TrustStoreConfig:
    """Trust store configuration with no host dependencies."""

    strategies: tuple[TrustAnchorStrategy, ...] = DEFAULT_STRATEGIES
    name_label: str = "mkcert development CA "
    legacy_name: str = "mkcert-rootCA"
    sudo_prompt: str = "Sudo password:"
    use_sudo: bool = True
    log_level: str = "INFO"


def load_strategies(path: Path) -> tuple[TrustAnchorStrategy, ...]:
    """Load an ordered list of candidate strategies from a JSON file.

    Expected shape::

        [{"anchor_dir": "...", "roots_pattern": "...%s...", "refresh_command": ["..."]}]

    Args:
        path: JSON file path

    Returns:
        Strategies in file order

    Raises:
        ValueError: If the document is not a non-empty list of valid entries
    """
    document = json.loads(path.read_text())
    if not isinstance(document, list) or not document:
        raise ValueError(f"{path}: expected a non-empty JSON list of strategies")

    strategies = []
    for index, entry in enumerate(document):
        if not isinstance(entry, dict):
            raise ValueError(f"{path}: entry {index} must be an object")
        try:
            anchor_dir = entry["anchor_dir"]
            roots_pattern = entry["roots_pattern"]
            refresh_command = entry["refresh_command"]
        except KeyError as e:
            raise ValueError(f"{path}: entry {index} is missing {e.args[0]!r}") from e
        if not isinstance(refresh_command, list) or not all(
            isinstance(part, str) for part in refresh_command
        ):
            raise ValueError(f"{path}: entry {index} refresh_command must be a list of strings")
        strategies.append(
            TrustAnchorStrategy(
                anchor_dir=str(anchor_dir),
                roots_pattern=str(roots_pattern),
                refresh_command=tuple(refresh_command),
            )
        )

    return tuple(strategies)
