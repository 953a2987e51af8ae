"""
Shared helpers used across all analytics modules.
"""
from __future__ import annotations

import math
import re
from dataclasses import asdict, is_dataclass
from typing import Iterable

import numpy as np
import pandas as pd


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Divide safely, returning default if denominator is zero or NaN."""
    if denominator == 0 or pd.isna(denominator):
        return default
    result = numerator / denominator
    return default if pd.isna(result) else result


def keyword_mask(series: pd.Series, keywords: Iterable[str]) -> pd.Series:
    """Boolean mask: True where the text contains any keyword (case-insensitive substring)."""
    words = [re.escape(k) for k in keywords if k]
    if not words or series.empty:
        return pd.Series(False, index=series.index)
    pattern = "|".join(words)
    return series.fillna("").astype(str).str.contains(pattern, case=False, regex=True)


def sanitize_for_json(obj):
    """Recursively convert dataclasses and numpy/pandas types to native Python for JSON."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return sanitize_for_json(asdict(obj))
    if isinstance(obj, dict):
        return {str(k): sanitize_for_json(v) for k, v in obj.items() if k is not None}
    if isinstance(obj, (list, tuple)):
        return [sanitize_for_json(v) for v in obj]
    if isinstance(obj, (np.integer,)):
        return int(obj)
    if isinstance(obj, (np.floating,)):
        v = float(obj)
        return 0.0 if (math.isnan(v) or math.isinf(v)) else v
    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, float):
        return 0.0 if (math.isnan(obj) or math.isinf(obj)) else obj
    return obj
