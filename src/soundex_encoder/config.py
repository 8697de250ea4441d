from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

log = logging.getLogger(__name__)

MODES = ("default", "full")
SEPARATORS = ("auto", "csv", "tsv")


@dataclass
class Table:
    column: str = "name"
    output_column: Optional[str] = None
    sep: str = "auto"

    def target_column(self, column: Optional[str] = None) -> str:
        """Name of the column that receives the codes."""
        return self.output_column or f"{column or self.column}_soundex"


@dataclass
class Config:
    mode: str = "default"
    split_words: bool = False
    table: Table = field(default_factory=Table)

    @property
    def full(self) -> bool:
        return self.mode == "full"


DEFAULT_CONFIG = Config()


def _as_str(x: Any, key: str) -> str:
    if not isinstance(x, str) or not x.strip():
        raise ValueError(f"Config error: '{key}' must be a non-empty string, got {x!r}.")
    return x.strip()


def _load_table(raw: Any) -> Table:
    if raw is None:
        return Table()
    if not isinstance(raw, dict):
        raise ValueError("Config error: 'table' must be a mapping (dict).")

    # Only pass known keys to Table to avoid unexpected-kw errors
    table_kw: Dict[str, Any] = {}
    if raw.get("column") is not None:
        table_kw["column"] = _as_str(raw["column"], "table.column")
    if raw.get("output_column") is not None:
        table_kw["output_column"] = _as_str(raw["output_column"], "table.output_column")
    if raw.get("sep") is not None:
        sep = str(raw["sep"]).lower()
        if sep not in SEPARATORS:
            raise ValueError(
                f"Config error: 'table.sep' must be one of {', '.join(SEPARATORS)}, got {sep!r}."
            )
        table_kw["sep"] = sep
    return Table(**table_kw)


def load_config(path: str) -> Config:
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError("Config error: top-level YAML must be a mapping (dict).")

    # ---- mode ----
    mode = raw.get("mode", "default")
    # allow YAML like:  full: true
    if "full" in raw:
        mode = "full" if raw["full"] else "default"
    mode = str(mode).lower()
    if mode not in MODES:
        raise ValueError(f"Config error: 'mode' must be one of {', '.join(MODES)}, got {mode!r}.")

    # ---- table ----
    table = _load_table(raw.get("table"))

    split_words = bool(raw.get("split_words", False))

    cfg = Config(mode=mode, split_words=split_words, table=table)
    log.debug("Loaded config from %s: %s", path, cfg)
    return cfg
