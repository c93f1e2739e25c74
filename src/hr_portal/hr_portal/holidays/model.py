from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_iso_date
from ..common.wire import drop_empty, to_wire
from ..core.enums import HolidayType


@dataclass(frozen=True)
class Holiday:
    id: str
    name: str
    date: date
    type: HolidayType
    description: Optional[str] = None

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> "Holiday":
        return cls(
            id=str(raw["id"]),
            name=str(raw.get("name") or ""),
            date=parse_iso_date(raw["date"]),
            type=HolidayType(raw.get("type") or HolidayType.PUBLIC.value),
            description=raw.get("description") or None,
        )

    def to_api(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "date": to_wire(self.date),
            "type": self.type.value,
            "description": self.description,
        }


@dataclass(frozen=True)
class NewHoliday:
    name: str
    date: date
    type: HolidayType = HolidayType.PUBLIC
    description: Optional[str] = None

    def to_api(self) -> dict:
        return drop_empty(
            {
                "name": self.name,
                "date": to_wire(self.date),
                "type": self.type.value,
                "description": self.description or None,
            }
        )

    def to_record(self, holiday_id: str) -> Holiday:
        return Holiday(
            id=holiday_id,
            name=self.name,
            date=self.date,
            type=self.type,
            description=self.description or None,
        )
