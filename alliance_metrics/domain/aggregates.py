"""Read-only projections over player window stats for dashboard views"""

from typing import Dict, Iterable, List, Sequence, Set
from alliance_metrics.domain.alliances import ALLIANCES, require_alliance
from alliance_metrics.domain.models import (
    ContributionRecord,
    Donut,
    HeatmapRow,
    PipelineCounts,
    PlayerWindowStats,
    TopWorst,
    TopWorstEntry,
)
from alliance_metrics.domain.windowing import percentage

TOP_WORST_SIZE = 5


def stats_for_alliance(stats: Iterable[PlayerWindowStats], alliance: str) -> List[PlayerWindowStats]:
    return [s for s in stats if s.alliance_name == alliance]


def get_heatmap_rows(stats: Sequence[PlayerWindowStats]) -> List[HeatmapRow]:
    """Percent of each alliance's players passing each window, in ALLIANCES order"""
    rows = []
    for alliance in ALLIANCES:
        players = stats_for_alliance(stats, alliance)
        n = len(players)
        rows.append(
            HeatmapRow(
                alliance=alliance,
                pct_3d=percentage(sum(1 for s in players if s.meets_3d), n),
                pct_7d=percentage(sum(1 for s in players if s.meets_7d), n),
                pct_30d=percentage(sum(1 for s in players if s.meets_30d), n),
            )
        )
    return rows


def get_donut(stats: Sequence[PlayerWindowStats], alliance: str) -> Donut:
    """
    Trend distribution for one alliance.

    Rising and stable are rounded; dropping takes the remainder so the
    three always sum to exactly 100.
    """
    players = stats_for_alliance(stats, require_alliance(alliance))
    n = len(players)
    rising = percentage(sum(1 for s in players if s.trend_7d == "rising"), n)
    stable = percentage(sum(1 for s in players if s.trend_7d == "stable"), n)
    return Donut(rising=rising, stable=stable, dropping=100 - rising - stable)


def get_pipeline(stats: Sequence[PlayerWindowStats]) -> Dict[str, PipelineCounts]:
    """Count of players ready on the 7-day and 30-day requirement, per alliance"""
    pipeline = {}
    for alliance in ALLIANCES:
        players = stats_for_alliance(stats, alliance)
        pipeline[alliance] = PipelineCounts(
            ready_7d=sum(1 for s in players if s.meets_7d),
            ready_30d=sum(1 for s in players if s.meets_30d),
        )
    return pipeline


def get_top_worst(stats: Sequence[PlayerWindowStats], alliance: str) -> TopWorst:
    """Best and worst five players by 7-day average; worst5 starts with the lowest"""
    ranked = sorted(
        (TopWorstEntry(name=s.player_name, value=s.avg_cpd_7d) for s in stats_for_alliance(stats, require_alliance(alliance))),
        key=lambda e: e.value,
        reverse=True,
    )
    return TopWorst(
        top5=ranked[:TOP_WORST_SIZE],
        worst5=list(reversed(ranked))[:TOP_WORST_SIZE],
    )


def unique_members_by_alliance(records: Iterable[ContributionRecord]) -> Dict[str, int]:
    """Distinct player count per alliance; records from unknown alliances are ignored"""
    members: Dict[str, Set[str]] = {alliance: set() for alliance in ALLIANCES}
    for record in records:
        if record.alliance_name in members:
            members[record.alliance_name].add(record.player_name)
    return {alliance: len(names) for alliance, names in members.items()}
