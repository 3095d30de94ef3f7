"""Conversion of raw record mappings into domain ContributionRecords"""

from typing import Any, Iterable, List, Mapping
from pydantic import ValidationError
from alliance_metrics.domain.models import ContributionRecord
from alliance_metrics.domain.exceptions import InvalidRecordError
from alliance_metrics.schemas import ContributionRecordSchema


def parse_records(rows: Iterable[Mapping[str, Any]]) -> List[ContributionRecord]:
    """
    Validate raw rows (e.g. decoded JSON) and convert them to domain records.

    Raises:
        InvalidRecordError: On a missing field, wrong type, negative amount
            or unknown alliance; the message names the row index
    """
    records = []
    for index, row in enumerate(rows):
        try:
            records.append(ContributionRecordSchema.model_validate(row).to_domain())
        except ValidationError as e:
            raise InvalidRecordError(f"Invalid contribution record at index {index}: {e}") from e
    return records
