"""Alliance overview cards and per-date contribution series"""

from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence, Union
from alliance_metrics.domain.alliances import ALLIANCES, require_alliance
from alliance_metrics.domain.models import AllianceOverview, AllianceTotals, ContributionPoint, ContributionRecord
from alliance_metrics.domain.windowing import average
from alliance_metrics.utils.date_utils import parse_iso_date, previous_month

# avg_ytd that maps to a full 100 engagement points
ENGAGEMENT_YTD_BASELINE = 300
ENGAGEMENT_ACTIVITY_WEIGHT = 0.2


def _sum_contributed(records: Iterable[ContributionRecord], alliance: str, year: int, month: Optional[int] = None) -> float:
    return sum(
        r.contributed for r in records
        if r.alliance_name == alliance
        and r.entry_date.year == year
        and (month is None or r.entry_date.month == month)
    )


def summarize_alliance(
    records: Sequence[ContributionRecord],
    alliance: str,
    reference_date: date,
) -> Optional[AllianceOverview]:
    """
    Overview card for one alliance on reference_date.

    Day totals use only that day's records; MTD/YTD and month growth use
    the alliance's full history in `records`. Returns None when the
    alliance has no records on the reference date.
    """
    today = [r for r in records if r.alliance_name == alliance and r.entry_date == reference_date]
    if not today:
        return None

    total_players = len(today)
    total_contributed = sum(r.contributed for r in today)
    active_partners = sum(1 for r in today if r.online)
    activity_rate = active_partners / total_players * 100
    avg_ytd = average(r.ytd_average for r in today)

    # Growth of the day's total against the whole previous calendar month
    prev_year, prev_month = previous_month(reference_date)
    prev_month_contributed = _sum_contributed(records, alliance, prev_year, prev_month)
    month_growth = (
        (total_contributed - prev_month_contributed) / prev_month_contributed * 100
        if prev_month_contributed > 0
        else 0.0
    )

    new_joins = sum(
        1 for r in today
        if r.joined.year == reference_date.year and r.joined.month == reference_date.month
    )

    return AllianceOverview(
        alliance_name=alliance,
        total_flights=sum(r.flights for r in today),
        total_contributed=total_contributed,
        total_players=total_players,
        active_partners=active_partners,
        activity_rate=activity_rate,
        avg_share=average(r.share for r in today),
        total_share=sum(r.share for r in today),
        avg_ytd=avg_ytd,
        mtd_contributed=_sum_contributed(records, alliance, reference_date.year, reference_date.month),
        ytd_contributed=_sum_contributed(records, alliance, reference_date.year),
        month_growth_contributed=month_growth,
        new_joins=new_joins,
        engagement_score=avg_ytd / ENGAGEMENT_YTD_BASELINE * 100 + activity_rate * ENGAGEMENT_ACTIVITY_WEIGHT,
    )


def compute_alliance_overview(
    records: Sequence[ContributionRecord],
    reference_date: Union[str, date],
    alliance: Optional[str] = None,
) -> List[AllianceOverview]:
    """Overview cards for every alliance active on reference_date, in ALLIANCES order"""
    day = parse_iso_date(reference_date)
    alliances = (require_alliance(alliance),) if alliance is not None else ALLIANCES

    overview = []
    for name in alliances:
        card = summarize_alliance(records, name, day)
        if card is not None:
            overview.append(card)
    return overview


def contribution_series(
    records: Iterable[ContributionRecord],
    dates: Iterable[Union[str, date]],
) -> List[ContributionPoint]:
    """
    Per-alliance contributed/flights totals for each requested date.

    Every point carries all of ALLIANCES; an alliance with no records on
    a date reports zeros. Records from untracked alliances are skipped.
    """
    wanted = [parse_iso_date(d) for d in dates]

    by_date: Dict[date, Dict[str, List[float]]] = {d: {a: [0, 0] for a in ALLIANCES} for d in wanted}
    for record in records:
        entry = by_date.get(record.entry_date, {}).get(record.alliance_name)
        if entry is None:
            continue
        entry[0] += record.contributed
        entry[1] += record.flights

    return [
        ContributionPoint(
            entry_date=d,
            totals={
                alliance: AllianceTotals(contributed=contributed, flights=flights)
                for alliance, (contributed, flights) in by_date[d].items()
            },
        )
        for d in wanted
    ]
