"""Per-player rolling window statistics - core requirement and trend evaluation"""

import logging
from datetime import date, timedelta
from typing import Dict, List, Sequence, Tuple, Union
from alliance_metrics.config import settings
from alliance_metrics.domain.models import ContributionRecord, PlayerWindowStats, WINDOW_CONFIG
from alliance_metrics.domain.exceptions import DataIntegrityError
from alliance_metrics.domain.windowing import average, round_half_up, window_values
from alliance_metrics.utils.date_utils import parse_iso_date

# Percent change in 7-day average needed to count as rising/dropping
TREND_THRESHOLD_PCT = 5

PlayerKey = Tuple[str, str]  # (alliance_name, player_name)


def group_by_player(records: Sequence[ContributionRecord]) -> Dict[PlayerKey, List[ContributionRecord]]:
    """Partition records by (alliance, player), each partition sorted by entry_date"""
    by_player: Dict[PlayerKey, List[ContributionRecord]] = {}
    for record in records:
        by_player.setdefault((record.alliance_name, record.player_name), []).append(record)

    for rows in by_player.values():
        rows.sort(key=lambda r: r.entry_date)

    return by_player


def check_player_identity(keys: Sequence[PlayerKey]) -> None:
    """
    Flag player names that appear under more than one alliance.

    Such players are tracked as separate identities. With
    strict_player_identity enabled this raises instead of warning.
    """
    alliances_by_name: Dict[str, List[str]] = {}
    for alliance_name, player_name in keys:
        alliances_by_name.setdefault(player_name, []).append(alliance_name)

    split = {name: sorted(alliances) for name, alliances in alliances_by_name.items() if len(alliances) > 1}
    if not split:
        return

    if settings.strict_player_identity:
        raise DataIntegrityError(f"Players recorded under multiple alliances: {split}")

    logging.warning(
        "Players recorded under multiple alliances, treating as separate identities",
        extra={"step": "compute_stats", "split_players": split},
    )


def classify_trend(current: float, previous: float) -> str:
    """
    Classify the 7-day trend from the current and previous window averages.

    - both non-zero: percent change beyond +/-TREND_THRESHOLD_PCT
    - activity appearing from nothing is rising, vanishing is dropping
    - nothing in either window is stable
    """
    if current and previous:
        delta_pct = (current - previous) / previous * 100
        if delta_pct > TREND_THRESHOLD_PCT:
            return "rising"
        if delta_pct < -TREND_THRESHOLD_PCT:
            return "dropping"
        return "stable"
    if current > 0 and previous == 0:
        return "rising"
    if current == 0 and previous > 0:
        return "dropping"
    return "stable"


def compute_stats(
    records: Sequence[ContributionRecord],
    reference_date: Union[str, date],
) -> List[PlayerWindowStats]:
    """
    Compute 3/7/30-day averages, pass flags and trend for every player.

    Averages are rounded once after averaging. The trend compares the
    rounded 7-day average against the raw average of the 7 days before it.
    Output follows first-seen player order; sort if order matters.
    """
    end = parse_iso_date(reference_date)
    by_player = group_by_player(records)
    check_player_identity(list(by_player))

    cfg_3d, cfg_7d, cfg_30d = WINDOW_CONFIG["3d"], WINDOW_CONFIG["7d"], WINDOW_CONFIG["30d"]
    previous_end = end - timedelta(days=cfg_7d.days)

    stats = []
    for (alliance_name, player_name), rows in by_player.items():
        avg_3d = round_half_up(average(window_values(rows, end, cfg_3d.days)))
        avg_7d = round_half_up(average(window_values(rows, end, cfg_7d.days)))
        avg_30d = round_half_up(average(window_values(rows, end, cfg_30d.days)))

        previous_avg = average(window_values(rows, previous_end, cfg_7d.days))

        stats.append(
            PlayerWindowStats(
                player_name=player_name,
                alliance_name=alliance_name,
                avg_cpd_3d=avg_3d,
                avg_cpd_7d=avg_7d,
                avg_cpd_30d=avg_30d,
                meets_3d=avg_3d >= cfg_3d.min_avg_cpd,
                meets_7d=avg_7d >= cfg_7d.min_avg_cpd,
                meets_30d=avg_30d >= cfg_30d.min_avg_cpd,
                trend_7d=classify_trend(avg_7d, previous_avg),
            )
        )

    return stats
