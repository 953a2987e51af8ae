"""
Sheet fetching and the raw text → Record Store pipeline.
"""
from __future__ import annotations

import logging
from pathlib import Path

import requests

from hikelog.config import FETCH_TIMEOUT
from hikelog.data.columns import resolve_measure_columns
from hikelog.data.csv_parser import parse_table
from hikelog.data.normalize import normalize_rows
from hikelog.data.schemas import HikeRecord

log = logging.getLogger("hikelog.data.loader")


class FetchError(Exception):
    """The sheet could not be retrieved (network failure, timeout, bad status)."""


# ---------------------------------------------------------------------------
# Input boundary
# ---------------------------------------------------------------------------

def fetch_csv_text(url: str, timeout: float = FETCH_TIMEOUT) -> str:
    """GET the published sheet and return its body as text."""
    log.info("Fetching hike log from %s", url)
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise FetchError(f"Could not reach the hike sheet: {exc}") from exc

    if not resp.ok:
        raise FetchError(
            f"Hike sheet returned HTTP {resp.status_code}. Check the link's sharing permissions."
        )
    return resp.text


def read_csv_text(path: Path) -> str:
    """Read a local CSV export (same pipeline as the remote sheet)."""
    return Path(path).read_text(encoding="utf-8-sig")


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

def load_hikes(text: str) -> list[HikeRecord]:
    """Parse raw CSV text into normalized records, sorted by id descending.

    Fewer than two rows (no header or no body) gives an empty list.
    """
    header, body = parse_table(text)
    if not body:
        return []

    columns = resolve_measure_columns(header)
    records = normalize_rows(body, columns)
    log.info("Parsed %d rows → %d hikes (%d discarded)", len(body), len(records), len(body) - len(records))
    return records
