"""Domain models for ZIP coverage records."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

AFFILIATE_DELIVERY_DAYS = "DNT"


@dataclass(frozen=True, slots=True)
class CoverageRecord:
    """One normalized row of the coverage table."""

    zone: str
    zip: str
    city: str
    delivery_days: str

    @property
    def is_affiliate(self) -> bool:
        return self.delivery_days == AFFILIATE_DELIVERY_DAYS


@dataclass(frozen=True, slots=True)
class CoverageTable:
    """Read-only ZIP -> record lookup built once per load.

    Only the first record seen for a ZIP is kept. Keys are always five ASCII digits.
    """

    records: Mapping[str, CoverageRecord]
    rows_read: int = 0
    rows_skipped: int = 0
    duplicate_rows: int = 0
    source: Optional[str] = None

    def __post_init__(self) -> None:
        # freeze whatever mapping we were handed
        object.__setattr__(self, "records", MappingProxyType(dict(self.records)))

    def get(self, zip_code: str) -> Optional[CoverageRecord]:
        return self.records.get(zip_code)

    def __contains__(self, zip_code: object) -> bool:
        return zip_code in self.records

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[str]:
        return iter(self.records)


@dataclass(frozen=True, slots=True)
class CoverageLoaded:
    table: CoverageTable


@dataclass(frozen=True, slots=True)
class CoverageFailed:
    message: str


CoverageLoadResult = CoverageLoaded | CoverageFailed
