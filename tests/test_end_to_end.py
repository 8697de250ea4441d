import pandas as pd

from soundex_encoder.config import load_config
from soundex_encoder.pipeline import annotate_frame


def _read(path):
    return pd.read_csv(path, sep="\t", dtype=str, keep_default_na=False)


def test_example_cfg_and_data():
    cfg = load_config("configs/example.yaml")
    df = _read("data/examples/names.tsv")
    gold = _read("eval/labels.tsv").set_index("name_id")

    out = annotate_frame(df, cfg).set_index("name_id")
    for name_id, r in out.iterrows():
        assert r["code"] == gold.loc[name_id, "code"], r["name"]

    cfg.mode = "full"
    out = annotate_frame(df, cfg).set_index("name_id")
    for name_id, r in out.iterrows():
        assert r["code"] == gold.loc[name_id, "code_full"], r["name"]
