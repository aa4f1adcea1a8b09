from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

from .errors import ContactEncodingError

# Year-unknown dates start with "--" (ISO 8601 truncated representation).
_YEARLESS_MARKER = "--"
_FULL_DATE = re.compile(r"^(\d{4})-?(\d{2})-?(\d{2})$")
_YEARLESS_DATE = re.compile(r"^--(\d{2})-?(\d{2})$")

# Any leap year will do; only used to validate Feb 29 on year-less dates.
_LEAP_YEAR = 2000


@dataclass(frozen=True)
class PartialDate:
    """A calendar date whose year may be unknown. Months are 1-12."""

    month: int
    day: int
    year: int | None = None

    @property
    def is_partial(self) -> bool:
        return self.year is None

    def to_vcard(self, version: str = "3.0") -> str:
        """Render for BDAY/ANNIVERSARY.

        vCard 3.0 uses the extended ISO form (``1990-06-15``, ``--06-15``),
        vCard 4.0 the basic form from RFC 6350 (``19900615``, ``--0615``).
        """
        sep = "" if version == "4.0" else "-"
        if self.year is None:
            return f"--{self.month:02d}{sep}{self.day:02d}"
        return f"{self.year:04d}{sep}{self.month:02d}{sep}{self.day:02d}"


def parse_event_date(text: str) -> PartialDate:
    """Parse an event value such as ``1990-06-15`` or ``--06-15``.

    Raises ContactEncodingError for anything that is not a real calendar day.
    """
    value = (text or "").strip()
    if value.startswith(_YEARLESS_MARKER):
        m = _YEARLESS_DATE.match(value)
        if not m:
            raise ContactEncodingError(f"Malformed year-less date: {text!r}")
        month, day = int(m.group(1)), int(m.group(2))
        _check_calendar_day(_LEAP_YEAR, month, day, text)
        return PartialDate(month=month, day=day)

    m = _FULL_DATE.match(value)
    if not m:
        raise ContactEncodingError(f"Malformed date: {text!r}")
    year, month, day = int(m.group(1)), int(m.group(2)), int(m.group(3))
    _check_calendar_day(year, month, day, text)
    return PartialDate(month=month, day=day, year=year)


def _check_calendar_day(year: int, month: int, day: int, text: str) -> None:
    try:
        date(year, month, day)
    except ValueError as exc:
        raise ContactEncodingError(f"Invalid date {text!r}: {exc}") from exc
