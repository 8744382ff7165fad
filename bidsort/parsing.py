"""Conversion of noisy monetary text into floats."""

from __future__ import annotations

import re
from typing import Any, Optional

import numpy as np
import pandas as pd

DEFAULT_STRIP_CHAR = "$"

# Longest leading decimal number, mirroring C ``atof`` in the C locale: optional
# ASCII whitespace, sign, ASCII digits with an optional fraction and exponent.
NUMBER_PREFIX = r"^[ \t\n\v\f\r]*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
_NUMBER_PREFIX_RE = re.compile(NUMBER_PREFIX)


def str_to_double(text: Optional[str], strip_char: str = DEFAULT_STRIP_CHAR) -> float:
    """Strip every ``strip_char`` from ``text`` and parse the rest as a float.

    Parsing is fail-soft: anything after the leading number is ignored and
    text without a leading number yields ``0.0``.  Only ``strip_char`` is
    removed, so ``"$1,234.56"`` parses as ``1.0``.
    """

    if text is None:
        return 0.0
    cleaned = str(text).replace(strip_char, "") if strip_char else str(text)
    match = _NUMBER_PREFIX_RE.match(cleaned)
    if match is None:
        return 0.0
    return float(match.group(1))


def coerce_amounts(values: Any, strip_char: str = DEFAULT_STRIP_CHAR) -> pd.Series:
    """Vectorised :func:`str_to_double` for a column of raw amount text."""

    if not isinstance(values, pd.Series):
        values = pd.Series(values, dtype=object)
    if values.empty:
        return pd.Series([], index=values.index, dtype=np.float64)

    cleaned = values.fillna("").astype(str)
    if strip_char:
        cleaned = cleaned.str.replace(strip_char, "", regex=False)
    leading = cleaned.str.extract(NUMBER_PREFIX, expand=False)
    return pd.to_numeric(leading, errors="coerce").fillna(0.0).astype(np.float64)


__all__ = ["DEFAULT_STRIP_CHAR", "coerce_amounts", "str_to_double"]
