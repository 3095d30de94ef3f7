"""Unit tests for alliance overview cards and contribution series"""

import pytest
from datetime import date
from alliance_metrics.domain.alliances import ALLIANCES
from alliance_metrics.domain.exceptions import UnknownAllianceError
from alliance_metrics.domain.overview import compute_alliance_overview, contribution_series


@pytest.fixture
def codeshare_history(make_record):
    today = date(2025, 9, 2)
    return [
        # Reference day
        make_record(player_name="p1", entry_date=today, contributed=1_000, flights=10, online=True,
                    share=10.0, ytd_average=300.0, joined=date(2025, 9, 1)),
        make_record(player_name="p2", entry_date=today, contributed=500, flights=5, online=False,
                    share=20.0, ytd_average=150.0, joined=date(2025, 3, 1)),
        # Earlier this month
        make_record(player_name="p1", entry_date=date(2025, 9, 1), contributed=200),
        # Previous month
        make_record(player_name="p1", entry_date=date(2025, 8, 15), contributed=600),
        make_record(player_name="p2", entry_date=date(2025, 8, 20), contributed=400),
        # Earlier this year, and last year
        make_record(player_name="p1", entry_date=date(2025, 1, 10), contributed=300),
        make_record(player_name="p1", entry_date=date(2024, 12, 31), contributed=9_999),
    ]


def test_alliance_overview_card(codeshare_history):
    (card,) = compute_alliance_overview(codeshare_history, "2025-09-02")

    assert card.alliance_name == "codeshare"
    assert card.total_players == 2
    assert card.active_partners == 1
    assert card.total_flights == 15
    assert card.total_contributed == 1_500
    assert card.activity_rate == pytest.approx(50.0)
    assert card.avg_share == pytest.approx(15.0)
    assert card.total_share == pytest.approx(30.0)
    assert card.avg_ytd == pytest.approx(225.0)
    assert card.mtd_contributed == 1_700
    assert card.ytd_contributed == 3_000
    assert card.month_growth_contributed == pytest.approx(50.0)  # 1500 vs 1000
    assert card.new_joins == 1
    assert card.engagement_score == pytest.approx(85.0)  # 225/300*100 + 50*0.2


def test_alliance_overview_skips_alliances_without_records_today(make_record):
    today = date(2025, 9, 2)
    records = [
        make_record(alliance_name="stratoshare", entry_date=today),
        make_record(alliance_name="codeshare", entry_date=today),
        make_record(alliance_name="exoshare", entry_date=date(2025, 9, 1)),
    ]

    overview = compute_alliance_overview(records, today)

    assert [c.alliance_name for c in overview] == ["codeshare", "stratoshare"]


def test_alliance_overview_january_compares_with_december(make_record):
    records = [
        make_record(entry_date=date(2026, 1, 5), contributed=300),
        make_record(entry_date=date(2025, 12, 10), contributed=200),
    ]

    (card,) = compute_alliance_overview(records, "2026-01-05")

    assert card.month_growth_contributed == pytest.approx(50.0)
    assert card.ytd_contributed == 300


def test_alliance_overview_no_previous_month_is_zero_growth(make_record):
    (card,) = compute_alliance_overview([make_record(contributed=500)], "2025-09-02")
    assert card.month_growth_contributed == 0.0


def test_alliance_overview_single_alliance(codeshare_history, make_record):
    records = codeshare_history + [make_record(alliance_name="exoshare")]

    overview = compute_alliance_overview(records, "2025-09-02", alliance="exoshare")

    assert [c.alliance_name for c in overview] == ["exoshare"]


def test_alliance_overview_unknown_alliance(codeshare_history):
    with pytest.raises(UnknownAllianceError):
        compute_alliance_overview(codeshare_history, "2025-09-02", alliance="nope")


def test_contribution_series_totals_per_date(make_record):
    records = [
        make_record(player_name="a", alliance_name="codeshare", entry_date=date(2025, 9, 1), contributed=100, flights=2),
        make_record(player_name="b", alliance_name="codeshare", entry_date=date(2025, 9, 1), contributed=50, flights=1),
        make_record(player_name="c", alliance_name="exoshare", entry_date=date(2025, 9, 2), contributed=70, flights=4),
    ]

    series = contribution_series(records, ["2025-09-01", "2025-09-02", "2025-09-03"])

    assert [p.entry_date for p in series] == [date(2025, 9, 1), date(2025, 9, 2), date(2025, 9, 3)]
    assert series[0].totals["codeshare"].contributed == 150
    assert series[0].totals["codeshare"].flights == 3
    assert series[1].totals["exoshare"].flights == 4


def test_contribution_series_zero_fills_every_alliance(make_record):
    records = [
        make_record(alliance_name="codeshare", entry_date=date(2025, 9, 1), contributed=100, flights=2),
        make_record(alliance_name="unlisted", entry_date=date(2025, 9, 1), contributed=999, flights=9),
    ]

    first, empty = contribution_series(records, [date(2025, 9, 1), date(2025, 9, 2)])

    assert list(first.totals) == list(ALLIANCES)
    assert (first.totals["exoshare"].contributed, first.totals["exoshare"].flights) == (0, 0)
    assert list(empty.totals) == list(ALLIANCES)
    assert all((t.contributed, t.flights) == (0, 0) for t in empty.totals.values())
