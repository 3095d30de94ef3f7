"""Pydantic schemas for validating raw contribution records"""

from datetime import date
from pydantic import BaseModel, ConfigDict, Field, field_validator
from alliance_metrics.domain.alliances import ALLIANCES
from alliance_metrics.domain.models import ContributionRecord


class ContributionRecordSchema(BaseModel):
    """One raw daily contribution row as supplied by the data source"""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    entry_date: date
    player_name: str = Field(..., min_length=1, description="Player display name")
    alliance_name: str = Field(..., description="One of the tracked alliances")
    contributed: float = Field(..., ge=0, description="Cumulative contribution for the entry")
    contribution_per_day: float = Field(..., ge=0, description="Per-day contribution rate")
    flights: int = Field(..., ge=0)
    share: float
    joined: date
    online: bool
    ytd_average: float
    season: str

    @field_validator("alliance_name")
    @classmethod
    def alliance_must_be_tracked(cls, value: str) -> str:
        if value not in ALLIANCES:
            raise ValueError(f"unknown alliance {value!r}, expected one of {', '.join(ALLIANCES)}")
        return value

    def to_domain(self) -> ContributionRecord:
        return ContributionRecord(
            entry_date=self.entry_date,
            player_name=self.player_name,
            alliance_name=self.alliance_name,
            contributed=self.contributed,
            contribution_per_day=self.contribution_per_day,
            flights=self.flights,
            share=self.share,
            joined=self.joined,
            online=self.online,
            ytd_average=self.ytd_average,
            season=self.season,
        )
