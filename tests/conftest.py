"""Pytest fixtures for testing"""

import pytest
from datetime import date, timedelta
from typing import Callable, List, Sequence
from alliance_metrics.domain.models import ContributionRecord, PlayerWindowStats


REFERENCE_DATE = date(2025, 9, 2)


@pytest.fixture
def reference_date() -> date:
    return REFERENCE_DATE


@pytest.fixture
def make_record() -> Callable[..., ContributionRecord]:
    """Factory for a single record with sensible defaults"""

    def _make(
        player_name: str = "pilot",
        alliance_name: str = "codeshare",
        entry_date: date = REFERENCE_DATE,
        contribution_per_day: float = 600,
        contributed: float = 0,
        flights: int = 0,
        share: float = 0.0,
        joined: date = date(2025, 1, 1),
        online: bool = True,
        ytd_average: float = 0.0,
        season: str = "S3",
    ) -> ContributionRecord:
        return ContributionRecord(
            entry_date=entry_date,
            player_name=player_name,
            alliance_name=alliance_name,
            contributed=contributed,
            contribution_per_day=contribution_per_day,
            flights=flights,
            share=share,
            joined=joined,
            online=online,
            ytd_average=ytd_average,
            season=season,
        )

    return _make


@pytest.fixture
def daily_series(make_record) -> Callable[..., List[ContributionRecord]]:
    """
    Factory for one record per day; values run oldest to newest and the
    last value lands on `end`.
    """

    def _series(
        player_name: str,
        alliance_name: str,
        cpd_values: Sequence[float],
        end: date = REFERENCE_DATE,
    ) -> List[ContributionRecord]:
        count = len(cpd_values)
        return [
            make_record(
                player_name=player_name,
                alliance_name=alliance_name,
                entry_date=end - timedelta(days=count - 1 - i),
                contribution_per_day=value,
            )
            for i, value in enumerate(cpd_values)
        ]

    return _series


@pytest.fixture
def make_stats() -> Callable[..., PlayerWindowStats]:
    """Factory for PlayerWindowStats without going through compute_stats"""

    def _make(
        player_name: str = "pilot",
        alliance_name: str = "codeshare",
        avg_cpd_7d: int = 650,
        meets_3d: bool = True,
        meets_7d: bool = True,
        meets_30d: bool = True,
        trend_7d: str = "stable",
    ) -> PlayerWindowStats:
        return PlayerWindowStats(
            player_name=player_name,
            alliance_name=alliance_name,
            avg_cpd_3d=avg_cpd_7d,
            avg_cpd_7d=avg_cpd_7d,
            avg_cpd_30d=avg_cpd_7d,
            meets_3d=meets_3d,
            meets_7d=meets_7d,
            meets_30d=meets_30d,
            trend_7d=trend_7d,
        )

    return _make


@pytest.fixture
def sample_records(make_record) -> List[ContributionRecord]:
    """Sixty days of history for three players across two alliances"""
    records = []
    start = REFERENCE_DATE - timedelta(days=59)
    players = [
        ("ace", "codeshare", 700, 12, True),
        ("rookie", "codeshare", 400, 3, False),
        ("veteran", "exoshare", 620, 8, True),
    ]
    for day in range(60):
        entry_date = start + timedelta(days=day)
        for name, alliance, cpd, flights, online in players:
            records.append(
                make_record(
                    player_name=name,
                    alliance_name=alliance,
                    entry_date=entry_date,
                    contribution_per_day=cpd,
                    contributed=cpd * 2,
                    flights=flights,
                    share=10.0,
                    online=online,
                    ytd_average=240.0,
                )
            )
    return records
