"""Tracked alliances and alliance key validation"""

from typing import Tuple
from alliance_metrics.domain.exceptions import UnknownAllianceError

ALLIANCES: Tuple[str, ...] = ("codeshare", "exoshare", "thermoshare", "stratoshare")


def require_alliance(alliance: str) -> str:
    """Return the alliance key unchanged, or raise UnknownAllianceError"""
    if alliance not in ALLIANCES:
        raise UnknownAllianceError(alliance)
    return alliance
