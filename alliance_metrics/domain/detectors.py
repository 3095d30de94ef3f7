"""Demotion risk and optimization candidate detection"""

from typing import Dict, List, Optional, Sequence, Tuple
from alliance_metrics.domain.alliances import require_alliance
from alliance_metrics.domain.models import (
    ContributionRecord,
    DemotionRiskEntry,
    OptimizationCandidate,
    PlayerWindowStats,
)
from alliance_metrics.domain.windowing import round_half_up

# Most severe first
RISK_SEVERITY = {"both": 0, "below_30d": 1, "below_7d": 2}

# Players need this many flights in the slice to be ranked
MIN_OPTIMIZATION_FLIGHTS = 150
MAX_OPTIMIZATION_CANDIDATES = 20


def demotion_reason(stats: PlayerWindowStats) -> Optional[str]:
    """Which requirement(s) the player fails, or None if passing both"""
    below_7d = not stats.meets_7d
    below_30d = not stats.meets_30d
    if below_7d and below_30d:
        return "both"
    if below_30d:
        return "below_30d"
    if below_7d:
        return "below_7d"
    return None


def get_demotion_risks(stats: Sequence[PlayerWindowStats]) -> List[DemotionRiskEntry]:
    """
    Players below the 7-day and/or 30-day requirement.

    Sorted by severity (both, below_30d, below_7d), then alliance name,
    then player name.
    """
    risks = []
    for s in stats:
        reason = demotion_reason(s)
        if reason is not None:
            risks.append(DemotionRiskEntry(player_name=s.player_name, alliance_name=s.alliance_name, reason=reason))

    # Case-insensitive name order; the raw name breaks ties between case variants
    risks.sort(
        key=lambda r: (
            RISK_SEVERITY[r.reason],
            r.alliance_name.casefold(),
            r.player_name.casefold(),
            r.player_name,
        )
    )
    return risks


def get_optimization_candidates(
    records: Sequence[ContributionRecord],
    alliance: Optional[str] = None,
) -> List[OptimizationCandidate]:
    """
    Active players with the lowest revenue per flight over the whole slice.

    Totals are summed over every supplied record (not a rolling window).
    Zero flights gives revenue_per_flight 0. Only players with at least
    MIN_OPTIMIZATION_FLIGHTS are ranked, worst first, capped at
    MAX_OPTIMIZATION_CANDIDATES.
    """
    if alliance is not None:
        require_alliance(alliance)

    # (alliance, player) -> [flights, contributed]
    totals: Dict[Tuple[str, str], List[float]] = {}
    for record in records:
        if alliance is not None and record.alliance_name != alliance:
            continue
        entry = totals.setdefault((record.alliance_name, record.player_name), [0, 0])
        entry[0] += record.flights
        entry[1] += record.contributed

    candidates = []
    for (alliance_name, player_name), (flights, contributed) in totals.items():
        revenue_per_flight = contributed / flights if flights > 0 else 0
        candidates.append(
            OptimizationCandidate(
                player_name=player_name,
                alliance_name=alliance_name,
                flights=flights,
                contributed=contributed,
                revenue_per_flight=round_half_up(revenue_per_flight),
            )
        )

    active = [c for c in candidates if c.flights >= MIN_OPTIMIZATION_FLIGHTS]
    active.sort(key=lambda c: c.revenue_per_flight)
    return active[:MAX_OPTIMIZATION_CANDIDATES]
