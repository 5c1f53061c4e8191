"""
Indian public holiday table (2024-2026) and the immutable calendar that wraps it.

Some festival dates follow the lunar calendar and are approximate. The table
is hand-maintained and compiled in; nothing loads or mutates it at runtime.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from weekendly.exceptions import InvalidHolidayEntryError
from weekendly.utils.date_utils import format_iso_date, parse_iso_date


class HolidayCategory(str, Enum):
    """Informational holiday category; detection ignores it."""

    NATIONAL = "national"
    FESTIVAL = "festival"
    RELIGIOUS = "religious"


@dataclass(frozen=True)
class HolidayRecord:
    """A single public holiday on a civil date."""

    name: str
    date: date
    category: HolidayCategory = HolidayCategory.NATIONAL

    @property
    def iso_date(self) -> str:
        """Holiday date as YYYY-MM-DD."""
        return format_iso_date(self.date)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HolidayRecord":
        """
        Build a record from a table entry.

        Args:
            data: Mapping with 'name', 'date' (YYYY-MM-DD) and 'type' keys

        Raises:
            DateParseError: If 'date' is not a valid ISO date
            KeyError: If 'name' or 'date' is missing
            ValueError: If 'type' is not a known category
        """
        return cls(
            name=data["name"],
            date=parse_iso_date(data["date"]),
            category=HolidayCategory(data.get("type", HolidayCategory.NATIONAL.value)),
        )

    def to_dict(self) -> Dict[str, str]:
        """Serialize back to the table entry shape."""
        return {"name": self.name, "date": self.iso_date, "type": self.category.value}


# Indian National and Public Holidays 2024-2026.
# Lists are in table order, which is not chronological.
INDIAN_HOLIDAYS: Dict[int, List[Dict[str, str]]] = {
    2024: [
        {"name": "New Year's Day", "date": "2024-01-01", "type": "national"},
        {"name": "Makar Sankranti", "date": "2024-01-15", "type": "festival"},
        {"name": "Republic Day", "date": "2024-01-26", "type": "national"},
        {"name": "Maha Shivratri", "date": "2024-03-08", "type": "festival"},
        {"name": "Holi", "date": "2024-03-25", "type": "festival"},
        {"name": "Good Friday", "date": "2024-03-29", "type": "religious"},
        {"name": "Ram Navami", "date": "2024-04-17", "type": "festival"},
        {"name": "Hanuman Jayanti", "date": "2024-04-23", "type": "festival"},
        {"name": "Buddha Purnima", "date": "2024-05-23", "type": "festival"},
        {"name": "Eid al-Fitr", "date": "2024-04-11", "type": "religious"},
        {"name": "Independence Day", "date": "2024-08-15", "type": "national"},
        {"name": "Janmashtami", "date": "2024-08-26", "type": "festival"},
        {"name": "Ganesh Chaturthi", "date": "2024-09-07", "type": "festival"},
        {"name": "Gandhi Jayanti", "date": "2024-10-02", "type": "national"},
        {"name": "Dussehra", "date": "2024-10-12", "type": "festival"},
        {"name": "Diwali", "date": "2024-11-01", "type": "festival"},
        {"name": "Guru Nanak Jayanti", "date": "2024-11-15", "type": "religious"},
        {"name": "Christmas Day", "date": "2024-12-25", "type": "religious"},
    ],
    2025: [
        {"name": "New Year's Day", "date": "2025-01-01", "type": "national"},
        {"name": "Makar Sankranti", "date": "2025-01-14", "type": "festival"},
        {"name": "Republic Day", "date": "2025-01-26", "type": "national"},
        {"name": "Maha Shivratri", "date": "2025-02-26", "type": "festival"},
        {"name": "Holi", "date": "2025-03-14", "type": "festival"},
        {"name": "Good Friday", "date": "2025-04-18", "type": "religious"},
        {"name": "Ram Navami", "date": "2025-04-06", "type": "festival"},
        {"name": "Hanuman Jayanti", "date": "2025-04-13", "type": "festival"},
        {"name": "Buddha Purnima", "date": "2025-05-12", "type": "festival"},
        {"name": "Eid al-Fitr", "date": "2025-03-31", "type": "religious"},
        {"name": "Independence Day", "date": "2025-08-15", "type": "national"},
        {"name": "Janmashtami", "date": "2025-08-16", "type": "festival"},
        {"name": "Ganesh Chaturthi", "date": "2025-08-27", "type": "festival"},
        {"name": "Gandhi Jayanti", "date": "2025-10-02", "type": "national"},
        {"name": "Dussehra", "date": "2025-10-02", "type": "festival"},
        {"name": "Diwali", "date": "2025-10-20", "type": "festival"},
        {"name": "Guru Nanak Jayanti", "date": "2025-11-05", "type": "religious"},
        {"name": "Christmas Day", "date": "2025-12-25", "type": "religious"},
    ],
    2026: [
        {"name": "New Year's Day", "date": "2026-01-01", "type": "national"},
        {"name": "Makar Sankranti", "date": "2026-01-14", "type": "festival"},
        {"name": "Republic Day", "date": "2026-01-26", "type": "national"},
        {"name": "Maha Shivratri", "date": "2026-02-17", "type": "festival"},
        {"name": "Holi", "date": "2026-03-03", "type": "festival"},
        {"name": "Good Friday", "date": "2026-04-03", "type": "religious"},
        {"name": "Ram Navami", "date": "2026-03-25", "type": "festival"},
        {"name": "Hanuman Jayanti", "date": "2026-04-01", "type": "festival"},
        {"name": "Buddha Purnima", "date": "2026-05-01", "type": "festival"},
        {"name": "Eid al-Fitr", "date": "2026-03-20", "type": "religious"},
        {"name": "Independence Day", "date": "2026-08-15", "type": "national"},
        {"name": "Janmashtami", "date": "2026-09-04", "type": "festival"},
        {"name": "Ganesh Chaturthi", "date": "2026-08-16", "type": "festival"},
        {"name": "Gandhi Jayanti", "date": "2026-10-02", "type": "national"},
        {"name": "Dussehra", "date": "2026-10-21", "type": "festival"},
        {"name": "Diwali", "date": "2026-11-08", "type": "festival"},
        {"name": "Guru Nanak Jayanti", "date": "2026-11-24", "type": "religious"},
        {"name": "Christmas Day", "date": "2026-12-25", "type": "religious"},
    ],
}


class HolidayCalendar:
    """
    Read-only year -> holidays table.

    Built once and handed to whoever needs it (detector, service, tests with
    synthetic data). Years missing from the table simply have no holidays.
    """

    def __init__(self, holidays_by_year: Mapping[int, Iterable[HolidayRecord]]):
        table: Dict[int, Tuple[HolidayRecord, ...]] = {}
        for year, records in holidays_by_year.items():
            year = int(year)
            records = tuple(records)
            for record in records:
                if record.date.year != year:
                    raise InvalidHolidayEntryError(
                        year, record, f"date {record.iso_date} is not in {year}"
                    )
            table[year] = records

        self._table = MappingProxyType(table)

    @classmethod
    def from_records(cls, records: Iterable[HolidayRecord]) -> "HolidayCalendar":
        """Group records by the year of their date, keeping their order."""
        grouped: Dict[int, List[HolidayRecord]] = {}
        for record in records:
            grouped.setdefault(record.date.year, []).append(record)
        return cls(grouped)

    @classmethod
    def from_mapping(cls, mapping: Mapping[int, Iterable[Mapping[str, Any]]]) -> "HolidayCalendar":
        """
        Build a calendar from a year -> list-of-dicts table like INDIAN_HOLIDAYS.

        Raises:
            InvalidHolidayEntryError: If an entry is missing fields or malformed
        """
        parsed: Dict[int, List[HolidayRecord]] = {}
        for year, entries in mapping.items():
            records = []
            for entry in entries:
                try:
                    records.append(HolidayRecord.from_dict(entry))
                except (KeyError, TypeError, ValueError) as e:
                    raise InvalidHolidayEntryError(year, entry, str(e)) from e
            parsed[int(year)] = records
        return cls(parsed)

    @property
    def years(self) -> List[int]:
        """Years present in the table, ascending."""
        return sorted(self._table)

    def holidays_for_year(self, year: int) -> Tuple[HolidayRecord, ...]:
        """Holidays for ``year`` in table order, or an empty tuple."""
        return self._table.get(year, ())

    def get_holiday_info(self, check_date: date) -> Optional[HolidayRecord]:
        """First holiday listed on exactly ``check_date``, or None."""
        for holiday in self.holidays_for_year(check_date.year):
            if holiday.date == check_date:
                return holiday
        return None

    def is_holiday(self, check_date: date) -> bool:
        """True if ``check_date`` matches a table entry for its year."""
        return self.get_holiday_info(check_date) is not None

    def __iter__(self):
        for year in self.years:
            yield from self._table[year]

    def __len__(self) -> int:
        return sum(len(records) for records in self._table.values())

    def __repr__(self) -> str:
        return f"<HolidayCalendar(years={self.years}, holidays={len(self)})>"


@lru_cache()
def get_default_calendar() -> HolidayCalendar:
    """
    Get the cached calendar built from INDIAN_HOLIDAYS.

    Parsed once per process; the result is immutable and safe to share.
    """
    return HolidayCalendar.from_mapping(INDIAN_HOLIDAYS)
