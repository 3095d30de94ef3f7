"""Dashboard snapshot service - single entry point computing every view for a date range"""

import time
from datetime import date
from typing import Optional, Sequence, Union
from alliance_metrics.domain.alliances import ALLIANCES, require_alliance
from alliance_metrics.domain.models import ContributionRecord, DashboardSnapshot
from alliance_metrics.domain.aggregates import (
    get_donut,
    get_heatmap_rows,
    get_pipeline,
    get_top_worst,
    unique_members_by_alliance,
)
from alliance_metrics.domain.detectors import get_demotion_risks, get_optimization_candidates
from alliance_metrics.domain.overview import compute_alliance_overview, contribution_series
from alliance_metrics.domain.player_stats import compute_stats
from alliance_metrics.domain.windowing import latest_entry_date, select_date_range
from alliance_metrics.infrastructure.observability.logging import log_snapshot
from alliance_metrics.infrastructure.observability.metrics import record_snapshot
from alliance_metrics.utils.date_utils import parse_iso_date


def build_snapshot(
    records: Sequence[ContributionRecord],
    start: Optional[Union[str, date]] = None,
    end: Optional[Union[str, date]] = None,
    alliance: Optional[str] = None,
) -> DashboardSnapshot:
    """
    Compute all dashboard views for the records in [start, end].

    Flow:
    1. Slice records to the date range (missing bounds are open)
    2. Take the latest entry_date in the slice as the reference date
    3. Compute per-player window stats
    4. Derive heatmap, pipeline, donuts, top/worst, risks, candidates,
       member counts, overview cards and the contribution series over the
       dates present in the slice
    5. Log and record metrics

    With `alliance` set, donuts, top/worst, optimization candidates and
    overview cover only that alliance; heatmap and pipeline always cover
    every alliance.

    Raises:
        UnknownAllianceError: alliance is not tracked
        InsufficientDataError: no records fall in the range
    """
    start_time = time.perf_counter()

    if alliance is not None:
        require_alliance(alliance)
    start_date = parse_iso_date(start) if start is not None else None
    end_date = parse_iso_date(end) if end is not None else None

    sliced = select_date_range(records, start_date, end_date)
    reference_date = latest_entry_date(sliced)

    stats = compute_stats(sliced, reference_date)
    focus = (alliance,) if alliance is not None else ALLIANCES
    entry_dates = sorted({r.entry_date for r in sliced})

    snapshot = DashboardSnapshot(
        reference_date=reference_date,
        alliance=alliance,
        record_count=len(sliced),
        player_stats=stats,
        heatmap=get_heatmap_rows(stats),
        pipeline=get_pipeline(stats),
        donuts={a: get_donut(stats, a) for a in focus},
        top_worst={a: get_top_worst(stats, a) for a in focus},
        demotion_risks=get_demotion_risks(stats),
        optimization_candidates=get_optimization_candidates(sliced, alliance),
        unique_members=unique_members_by_alliance(sliced),
        overview=compute_alliance_overview(sliced, reference_date, alliance),
        contribution_series=contribution_series(sliced, entry_dates),
    )

    duration = time.perf_counter() - start_time
    record_snapshot(snapshot, duration)
    log_snapshot(
        reference_date=reference_date.isoformat(),
        alliance=alliance,
        record_count=snapshot.record_count,
        player_count=len(stats),
        demotion_risk_count=len(snapshot.demotion_risks),
        duration_ms=duration * 1000,
    )

    return snapshot
