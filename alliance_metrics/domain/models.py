"""Domain models - pure Python dataclasses representing contribution data and derived views"""

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional


@dataclass(frozen=True)
class ContributionRecord:
    """One player's daily contribution observation"""

    entry_date: date
    player_name: str
    alliance_name: str  # one of ALLIANCES
    contributed: float
    contribution_per_day: float
    flights: int
    share: float
    joined: date
    online: bool
    ytd_average: float
    season: str


@dataclass(frozen=True)
class WindowConfig:
    """Trailing window length and the average CPD required to pass it"""

    days: int
    min_avg_cpd: float


WINDOW_CONFIG: Mapping[str, WindowConfig] = MappingProxyType(
    {
        "3d": WindowConfig(days=3, min_avg_cpd=500),
        "7d": WindowConfig(days=7, min_avg_cpd=600),
        "30d": WindowConfig(days=30, min_avg_cpd=550),
    }
)


@dataclass(frozen=True)
class PlayerWindowStats:
    """Rolling averages, threshold flags and 7-day trend for one player"""

    player_name: str
    alliance_name: str
    avg_cpd_3d: int
    avg_cpd_7d: int
    avg_cpd_30d: int
    meets_3d: bool
    meets_7d: bool
    meets_30d: bool
    trend_7d: str  # "rising", "stable" or "dropping"


@dataclass(frozen=True)
class HeatmapRow:
    """Share of an alliance's players meeting each window threshold (percent)"""

    alliance: str
    pct_3d: int
    pct_7d: int
    pct_30d: int


@dataclass(frozen=True)
class Donut:
    """Trend distribution for one alliance; always sums to 100"""

    rising: int
    stable: int
    dropping: int


@dataclass(frozen=True)
class PipelineCounts:
    ready_7d: int
    ready_30d: int


@dataclass(frozen=True)
class TopWorstEntry:
    name: str
    value: int


@dataclass(frozen=True)
class TopWorst:
    top5: List[TopWorstEntry]
    worst5: List[TopWorstEntry]


@dataclass(frozen=True)
class DemotionRiskEntry:
    """Player failing the 7-day and/or 30-day requirement"""

    player_name: str
    alliance_name: str
    reason: str  # "both", "below_30d" or "below_7d"


@dataclass(frozen=True)
class OptimizationCandidate:
    """Active player with low revenue per flight over the slice"""

    player_name: str
    alliance_name: str
    flights: int
    contributed: float
    revenue_per_flight: int


@dataclass(frozen=True)
class AllianceOverview:
    """Summary card values for one alliance on the reference date"""

    alliance_name: str
    total_flights: int
    total_contributed: float
    total_players: int
    active_partners: int
    activity_rate: float
    avg_share: float
    total_share: float
    avg_ytd: float
    mtd_contributed: float
    ytd_contributed: float
    month_growth_contributed: float
    new_joins: int
    engagement_score: float


@dataclass(frozen=True)
class AllianceTotals:
    contributed: float
    flights: int


@dataclass(frozen=True)
class ContributionPoint:
    """Per-alliance totals on a single date, for trend charts"""

    entry_date: date
    totals: Dict[str, AllianceTotals] = field(default_factory=dict)


@dataclass(frozen=True)
class DashboardSnapshot:
    """Every dashboard view computed from one record slice and reference date"""

    reference_date: date
    alliance: Optional[str]  # None when covering all alliances
    record_count: int
    player_stats: List[PlayerWindowStats]
    heatmap: List[HeatmapRow]
    pipeline: Dict[str, PipelineCounts]
    donuts: Dict[str, Donut]
    top_worst: Dict[str, TopWorst]
    demotion_risks: List[DemotionRiskEntry]
    optimization_candidates: List[OptimizationCandidate]
    unique_members: Dict[str, int]
    overview: List[AllianceOverview]
    contribution_series: List[ContributionPoint]
