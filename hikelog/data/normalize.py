"""
Field normalization: raw CSV rows → HikeRecord, id filtering, numeric and year cleanup.
"""
from __future__ import annotations

import re
from typing import Iterable, Optional, Sequence

from hikelog.config import UNKNOWN
from hikelog.data.schemas import HikeRecord, MeasureColumns

# Field positions in the sheet
ID_COL = 0
DATE_COL = 1
COMMENTS_COL = 2
DIRECTION_COL = 3
LOCATION_COL = 4

_ID_RE = re.compile(r"\+?[0-9]+")
_YEAR_RE = re.compile(r"[0-9]{4}")
_LEADING_NUMBER_RE = re.compile(r"^[-+]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


# ---------------------------------------------------------------------------
# Scalar cleaners
# ---------------------------------------------------------------------------

def _field(row: Sequence[str], index: Optional[int]) -> str:
    if index is None or index < 0 or index >= len(row):
        return ""
    return row[index] or ""


def clean_number(raw: Optional[str]) -> float:
    """Leading number of a cell ("1,234.5 ft" → 1234.5), or 0.0 if there is none."""
    if not raw:
        return 0.0
    text = str(raw).replace(",", "").strip()
    match = _LEADING_NUMBER_RE.match(text)
    if not match:
        return 0.0
    return float(match.group(0))


def parse_id(raw: Optional[str]) -> Optional[int]:
    """Positive integer id, or None when the row should be discarded."""
    text = (raw or "").strip()
    if not _ID_RE.fullmatch(text):
        return None
    value = int(text)
    return value if value > 0 else None


def extract_year(date: Optional[str]) -> str:
    """Best-effort 4-digit year from an M/D/Y string.

    Two-digit years are read as 20YY; overlong tokens keep their last four
    characters. Anything else is "Unknown".
    """
    parts = (date or "").split("/")
    if len(parts) != 3:
        return UNKNOWN
    token = parts[2].strip()
    if len(token) == 2:
        token = "20" + token
    if len(token) > 4:
        token = token[-4:]
    if _YEAR_RE.fullmatch(token):
        return token
    return UNKNOWN


# ---------------------------------------------------------------------------
# Row normalization
# ---------------------------------------------------------------------------

def normalize_row(row: Sequence[str], columns: MeasureColumns) -> Optional[HikeRecord]:
    """Build a HikeRecord from one raw row; None means "discard this row"."""
    hike_id = parse_id(_field(row, ID_COL))
    if hike_id is None:
        return None

    date = _field(row, DATE_COL)
    return HikeRecord(
        id=hike_id,
        date=date,
        year=extract_year(date),
        comments=_field(row, COMMENTS_COL),
        direction=_field(row, DIRECTION_COL),
        location=_field(row, LOCATION_COL) or UNKNOWN,
        miles=max(clean_number(_field(row, columns.miles)), 0.0),
        elevation=max(clean_number(_field(row, columns.elevation)), 0.0),
    )


def normalize_rows(rows: Iterable[Sequence[str]], columns: MeasureColumns) -> list[HikeRecord]:
    """Normalize every row, drop discarded ones, sort by id descending.

    The sort is stable, so rows sharing an id keep their sheet order.
    """
    records = [rec for rec in (normalize_row(r, columns) for r in rows) if rec is not None]
    records.sort(key=lambda rec: rec.id, reverse=True)
    return records
