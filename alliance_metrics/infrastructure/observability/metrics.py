"""Prometheus metrics for snapshot volume, risk counts and trend mix"""

from prometheus_client import Counter, Histogram
from alliance_metrics.domain.models import DashboardSnapshot

snapshot_counter = Counter(
    "alliance_metrics_snapshot_total",
    "Dashboard snapshots built",
    ["scope"],  # all | <alliance>
)

records_processed_counter = Counter(
    "alliance_metrics_records_processed_total",
    "Contribution records fed into snapshots",
)

demotion_risk_counter = Counter(
    "alliance_metrics_demotion_risk_total",
    "Players flagged for demotion risk",
    ["alliance", "reason"],  # both | below_30d | below_7d
)

player_trend_counter = Counter(
    "alliance_metrics_player_trend_total",
    "Players classified per 7-day trend",
    ["alliance", "trend"],  # rising | stable | dropping
)

snapshot_duration_histogram = Histogram(
    "alliance_metrics_snapshot_duration_seconds",
    "Time spent building a dashboard snapshot",
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0],
)


def record_snapshot(snapshot: DashboardSnapshot, duration_seconds: float) -> None:
    """Record volume, risk and trend metrics for one built snapshot"""
    snapshot_counter.labels(scope=snapshot.alliance or "all").inc()
    records_processed_counter.inc(snapshot.record_count)
    snapshot_duration_histogram.observe(duration_seconds)

    for risk in snapshot.demotion_risks:
        demotion_risk_counter.labels(alliance=risk.alliance_name, reason=risk.reason).inc()

    for stats in snapshot.player_stats:
        player_trend_counter.labels(alliance=stats.alliance_name, trend=stats.trend_7d).inc()
