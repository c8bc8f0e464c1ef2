from __future__ import annotations

import math
from typing import Any, Optional, Union

import numpy as np
import pandas as pd

Scalar = Union[str, int, float, bool, None]

# Tokens accepted as "yes" in flag columns (brand exists, moat, use case).
TRUTHY_TOKENS = frozenset({"true", "yes", "y", "1", "x", "✓", "check", "checked", "t"})


def is_missing(value: Any) -> bool:
    """True for None and pandas/numpy missing markers (NaN, NaT, pd.NA)."""
    if value is None:
        return True
    if not pd.api.types.is_scalar(value):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def is_truthy(value: Any) -> bool:
    """
    Canonical truthiness for flag cells.

    - booleans map directly
    - missing / empty string -> False
    - numbers: zero and non-finite -> False, any other finite number -> True
    - strings: trimmed, lowercased, True iff in TRUTHY_TOKENS

    Never raises.
    """
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if is_missing(value):
        return False
    if isinstance(value, (int, float, np.integer, np.floating)):
        number = float(value)
        return math.isfinite(number) and number != 0
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_TOKENS
    return False


def to_number(value: Any) -> Optional[float]:
    """Coerce a cell to a finite float, or None if that is not possible."""
    if isinstance(value, (bool, np.bool_)):
        return 1.0 if value else 0.0
    if is_missing(value):
        return None
    if isinstance(value, (int, float, np.integer, np.floating)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def cell_text(value: Any) -> str:
    """String form of a cell; missing -> "" and integral floats drop the ".0"."""
    if is_missing(value):
        return ""
    if isinstance(value, (bool, np.bool_)):
        return "true" if value else "false"
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return str(int(value))
    return str(value)


def clean_record(record: dict) -> dict:
    """Replace missing markers with None so rows only carry plain scalars."""
    return {key: (None if is_missing(val) else val) for key, val in record.items()}
