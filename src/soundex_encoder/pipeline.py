# src/soundex_encoder/pipeline.py
from __future__ import annotations

import logging
from typing import Any, Optional

import pandas as pd

from .config import DEFAULT_CONFIG, Config
from .encoder import encode, sounds_equal
from .preprocess import split_words

log = logging.getLogger(__name__)


def _as_text(value: Any) -> str:
    """Cell value as a string; NaN/None become empty."""
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        # list-like cells
        pass
    return str(value)


def encode_text(text: str, cfg: Config = DEFAULT_CONFIG) -> str:
    """
    Code of a whole cell, or with `split_words` the codes of
    each word joined by single spaces.
    """
    if cfg.split_words:
        return " ".join(encode(w, cfg.full) for w in split_words(text))
    return encode(text, cfg.full)


def compare_text(left: str, right: str, cfg: Config = DEFAULT_CONFIG) -> bool:
    return sounds_equal(left, right, cfg.full)


def annotate_frame(
    df: pd.DataFrame, cfg: Config = DEFAULT_CONFIG, column: Optional[str] = None
) -> pd.DataFrame:
    """
    Returns a copy of *df* with one extra column holding the code of
    *column* (default: the configured table column).
    """
    column = column or cfg.table.column
    if column not in df.columns:
        raise KeyError(column)

    target = cfg.table.target_column(column)
    log.debug("Encoding %d rows of %r into %r (mode=%s)", len(df), column, target, cfg.mode)

    out = df.copy()
    out[target] = [encode_text(_as_text(v), cfg) for v in df[column]]
    return out
