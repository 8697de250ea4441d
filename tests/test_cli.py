import pandas as pd
import pytest

from soundex_encoder.cli import main


def test_encode(capsys):
    assert main(["encode", "Robert", "difficult"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Robert\tR163", "difficult\tD124"]


def test_encode_full(capsys):
    assert main(["encode", "--full", "difficult"]) == 0
    assert capsys.readouterr().out == "difficult\tD1243\n"


def test_equal(capsys):
    assert main(["equal", "Y.LEE", "Y.LIE"]) == 0
    assert capsys.readouterr().out == "true\n"
    assert main(["equal", "hello world", "hello"]) == 1
    assert capsys.readouterr().out == "false\n"


def test_full_overrides_config(tmp_path, capsys):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("mode: default\nsplit_words: true\n", encoding="utf-8")
    assert main(["encode", "--config", str(cfg), "--full", "hello world"]) == 0
    assert capsys.readouterr().out == "hello world\tH400 W643\n"


def test_bad_config_exits(tmp_path):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("mode: short\n", encoding="utf-8")
    with pytest.raises(SystemExit, match="Config error"):
        main(["encode", "--config", str(cfg), "x"])


def test_table_csv(tmp_path):
    src = tmp_path / "in.csv"
    src.write_text("id,name\n1,Knuth\n2,NA\n3,Peterson\n", encoding="utf-8")
    dst = tmp_path / "out.csv"
    assert main(["table", "--in", str(src), "--out", str(dst)]) == 0
    out = pd.read_csv(dst, dtype=str, keep_default_na=False)
    assert list(out.columns) == ["id", "name", "name_soundex"]
    assert list(out["name_soundex"]) == ["K530", "N000", "P362"]


def test_table_tsv_to_stdout(tmp_path, capsys):
    src = tmp_path / "in.tsv"
    src.write_text("id\tsurname\n1\tEuler\n", encoding="utf-8")
    assert main(["table", "--in", str(src), "--column", "surname", "--full"]) == 0
    assert capsys.readouterr().out.splitlines() == ["id,surname,surname_soundex", "1,Euler,E460"]


def test_table_missing_column(tmp_path):
    src = tmp_path / "in.csv"
    src.write_text("id,text\n1,Knuth\n", encoding="utf-8")
    with pytest.raises(SystemExit, match="'name'"):
        main(["table", "--in", str(src)])
