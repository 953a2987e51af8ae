"""Sheet fetching, CSV parsing, normalization, and the in-memory record store."""
from .csv_parser import parse_rows, parse_table
from .columns import resolve_measure_columns
from .normalize import clean_number, extract_year, normalize_row, normalize_rows
from .loader import FetchError, fetch_csv_text, load_hikes
from .store import RecordStore, HikeStore
from .schemas import HikeRecord, ScoringConfig
