import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

import pandas as pd

from .config import DEFAULT_CONFIG, Config, load_config
from .pipeline import annotate_frame, compare_text, encode_text

log = logging.getLogger(__name__)


def _detect_sep(path: str) -> str:
    """
    Heuristic: prefer tab if tabs appear in the header; otherwise comma.
    """
    try:
        with open(path, "rb") as fh:
            head = fh.read(2048).decode("utf-8", errors="ignore")
        header = head.splitlines()[0] if head else ""
        return "\t" if "\t" in header else ","
    except OSError:
        # If detection fails, default to comma
        return ","


def _read_table(path_in: str, sep_arg: str) -> pd.DataFrame:
    if sep_arg == "csv":
        sep = ","
    elif sep_arg == "tsv":
        sep = "\t"
    else:  # auto
        sep = _detect_sep(path_in)
    # keep names such as "NA" or "Null" as text
    return pd.read_csv(path_in, sep=sep, dtype=str, keep_default_na=False)


def _resolve_config(cfg_path: Optional[str], full: bool) -> Config:
    try:
        cfg = load_config(cfg_path) if cfg_path else replace(DEFAULT_CONFIG)
    except (OSError, ValueError) as e:
        raise SystemExit(str(e))
    if full:
        cfg.mode = "full"
    return cfg


def cmd_encode(words: List[str], cfg: Config) -> int:
    for w in words:
        print(f"{w}\t{encode_text(w, cfg)}")
    return 0


def cmd_equal(left: str, right: str, cfg: Config) -> int:
    same = compare_text(left, right, cfg)
    print("true" if same else "false")
    return 0 if same else 1


def cmd_table(
    path_in: str,
    cfg: Config,
    out_path: Optional[str] = "-",
    column: Optional[str] = None,
    sep_arg: Optional[str] = None,
) -> int:
    df = _read_table(path_in, sep_arg or cfg.table.sep)
    log.debug("Read %d rows from %s", len(df), path_in)

    try:
        out_df = annotate_frame(df, cfg, column)
    except KeyError as e:
        raise SystemExit(
            f"Input must contain column {e.args[0]!r} (found: {', '.join(map(str, df.columns))})"
        )

    # Write output
    if out_path in (None, "-"):
        out_df.to_csv(sys.stdout, index=False)
    else:
        out_df.to_csv(out_path, index=False)
    return 0


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", dest="cfg_path", default=None, help="YAML settings file")
    common.add_argument(
        "--full", action="store_true", help="Keep the complete code instead of 4 characters"
    )
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable verbose logging (for development/debugging)",
    )

    p = argparse.ArgumentParser(prog="soundex", description="soundex-encoder CLI")
    sub = p.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encode", parents=[common], help="Print the code of each word")
    enc.add_argument("words", nargs="+")

    eq = sub.add_parser("equal", parents=[common], help="Compare the codes of two strings")
    eq.add_argument("left")
    eq.add_argument("right")

    tab = sub.add_parser("table", parents=[common], help="Add a code column to a CSV/TSV file")
    tab.add_argument("--in", dest="path_in", required=True, help="Input CSV/TSV")
    tab.add_argument(
        "--out", dest="out_path", default="-", help="Output CSV path (use '-' for stdout)"
    )
    tab.add_argument("--column", default=None, help="Column to encode (default from config)")
    tab.add_argument(
        "--sep", dest="sep", default=None, choices=["auto", "csv", "tsv"], help="Input delimiter"
    )
    return p


def main(argv: Optional[List[str]] = None) -> int:
    a = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if a.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    cfg = _resolve_config(a.cfg_path, a.full)

    if a.command == "encode":
        return cmd_encode(a.words, cfg)
    if a.command == "equal":
        return cmd_equal(a.left, a.right, cfg)
    return cmd_table(a.path_in, cfg, a.out_path, a.column, a.sep)


if __name__ == "__main__":
    sys.exit(main())
