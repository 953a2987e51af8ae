"""
RecordStore — immutable snapshot of the hike log; HikeStore — owner that refreshes it.

Every refresh rebuilds the full snapshot from the sheet and swaps it in with a
single assignment. A failed refresh leaves the previous snapshot in place.
"""
from __future__ import annotations

import datetime as dt
import logging
from dataclasses import asdict, fields
from functools import cached_property
from typing import Iterable, Optional

import pandas as pd

from hikelog.config import SHEET_URL, FETCH_TIMEOUT
from hikelog.data.loader import FetchError, fetch_csv_text, load_hikes
from hikelog.data.schemas import HikeRecord

log = logging.getLogger("hikelog.data.store")

RECORD_COLUMNS = [f.name for f in fields(HikeRecord)]


class RecordStore:
    """Id-descending, read-only set of HikeRecords for one fetch cycle.

    `frame` is a DataFrame view of the same records whose index is the
    position in `records`, so filtered frames map straight back to records.
    """

    def __init__(self, records: Iterable[HikeRecord] = ()) -> None:
        self._records: tuple[HikeRecord, ...] = tuple(
            sorted(records, key=lambda r: r.id, reverse=True)
        )

    @classmethod
    def from_text(cls, text: str) -> "RecordStore":
        return cls(load_hikes(text))

    @property
    def records(self) -> tuple[HikeRecord, ...]:
        return self._records

    @cached_property
    def frame(self) -> pd.DataFrame:
        if not self._records:
            return pd.DataFrame(columns=RECORD_COLUMNS)
        return pd.DataFrame([asdict(r) for r in self._records], columns=RECORD_COLUMNS)

    def take(self, index: Iterable[int]) -> list[HikeRecord]:
        """Records at the given frame positions, in the given order."""
        return [self._records[int(i)] for i in index]

    def get(self, hike_id: int) -> list[HikeRecord]:
        """All records carrying this id (ids are not de-duplicated)."""
        return [r for r in self._records if r.id == hike_id]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    @property
    def is_empty(self) -> bool:
        return not self._records


class HikeStore:
    """Owns the current RecordStore and the source URL it came from."""

    def __init__(self, source_url: str = SHEET_URL, timeout: float = FETCH_TIMEOUT) -> None:
        self.source_url = source_url
        self.timeout = timeout
        self.snapshot: RecordStore = RecordStore()
        self.refreshed_at: Optional[dt.datetime] = None
        self.last_error: Optional[str] = None
        self._loaded = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def refresh(self) -> "HikeStore":
        """Fetch the sheet and replace the snapshot.

        With no source URL the store becomes empty. On FetchError the previous
        snapshot is kept, the error is recorded and re-raised.
        """
        if not self.source_url:
            log.info("No sheet URL configured — starting with an empty hike log")
            self._replace(RecordStore())
            return self

        try:
            text = fetch_csv_text(self.source_url, timeout=self.timeout)
        except FetchError as exc:
            self.last_error = str(exc)
            log.error("Refresh failed, keeping %d cached hikes: %s", len(self.snapshot), exc)
            raise

        self._replace(RecordStore.from_text(text))
        log.info("Hike log ready — %d hikes", len(self.snapshot))
        return self

    def load_text(self, text: str) -> "HikeStore":
        """Replace the snapshot from raw CSV text (local files, tests)."""
        self._replace(RecordStore.from_text(text))
        return self

    def set_source(self, url: str) -> "HikeStore":
        """Point the store at a new sheet and re-fetch everything."""
        self.source_url = url.strip()
        return self.refresh()

    def _replace(self, snapshot: RecordStore) -> None:
        self.snapshot = snapshot
        self.refreshed_at = dt.datetime.now(dt.timezone.utc)
        self.last_error = None
        self._loaded = True

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def row_count(self) -> int:
        return len(self.snapshot)
