"""Selection of the install strategy for the host's trust store layout."""

from collections.abc import Sequence

from .errors import NoStrategyError
from .models import TrustAnchorStrategy
from .path_prober import PathProber


def resolve_strategy(
    prober: PathProber,
    candidates: Sequence[TrustAnchorStrategy],
) -> TrustAnchorStrategy:
    """Return the first candidate whose anchor directory exists.

    Candidates are checked in the order given and never merged, so a host
    exposing several layouts always gets the highest-priority one.

    Args:
        prober: Existence check for anchor directories
        candidates: Strategies in priority order

    Returns:
        The selected strategy

    Raises:
        NoStrategyError: If no candidate anchor directory exists
    """
    for candidate in candidates:
        if prober.exists(candidate.anchor_dir):
            return candidate

    raise NoStrategyError([candidate.anchor_dir for candidate in candidates])
