#!/usr/bin/env python3
"""
test_deck_generator.py

End-to-end runs of the card generator against the fixture corpora.
"""

import json
from pathlib import Path

import pytest

from kanjicards.analyzers import example_frequencies
from kanjicards.generators.deck_generator import main


@pytest.fixture
def source_args(kanjidic_path: Path, edict_path: Path, wordfreq_path: Path) -> list[str]:
    return [
        "--kanjidic", str(kanjidic_path),
        "--edict", str(edict_path),
        "--wordfreq", str(wordfreq_path),
    ]


@pytest.fixture
def input_path(tmp_path: Path) -> Path:
    path = tmp_path / "kanji.txt"
    path.write_text("漢字 (kanji)\n学, 猫\n", encoding="utf-8")
    return path


def test_tsv_output(source_args, input_path: Path, tmp_path: Path) -> None:
    output = tmp_path / "cards.txt"
    assert main(["--input", str(input_path), "--output", str(output), *source_args]) == 0

    lines = output.read_text(encoding="utf-8").splitlines()
    cards = [line.split("\t") for line in lines[3:]]
    assert [c[0] for c in cards] == ["漢", "字", "学"]
    assert cards[2][7] == (
        "学生 (がくせい) — student<br>"
        "大学 (だいがく) — university<br>"
        "学校 (がっこう) — school"
    )


def test_grade_json_output(source_args, tmp_path: Path) -> None:
    output = tmp_path / "grade1.json"
    assert main(["--grade", "1", "--format", "json", "--output", str(output), *source_args]) == 0

    doc = json.loads(output.read_text(encoding="utf-8"))
    assert doc["$id"] == "kanji-card-deck:grade-1"
    assert [c["literal"] for c in doc["cards"]] == ["学", "生", "字"]
    assert all(c["level"] == "小1" for c in doc["cards"])


def test_missing_source_is_fatal(source_args, input_path: Path, tmp_path: Path, capsys) -> None:
    output = tmp_path / "cards.txt"
    args = ["--input", str(input_path), "--output", str(output), *source_args]
    args[args.index("--edict") + 1] = str(tmp_path / "missing-edict.txt")

    assert main(args) == 1
    assert not output.exists()
    assert "missing-edict.txt" in capsys.readouterr().err


def test_dry_run_writes_nothing(source_args, input_path: Path, tmp_path: Path, capsys) -> None:
    output = tmp_path / "cards.txt"
    assert main(["--input", str(input_path), "--output", str(output), "--dry-run", *source_args]) == 0
    assert not output.exists()
    assert "DRY RUN" in capsys.readouterr().out


def test_verbose_reports_misses_and_frequencies(source_args, input_path: Path, tmp_path: Path, capsys) -> None:
    output = tmp_path / "cards.txt"
    assert main(["--input", str(input_path), "--output", str(output), "--verbose", *source_args]) == 0

    out = capsys.readouterr().out
    assert "Not in kanjidic2: 猫" in out
    assert "Skipped (not in kanjidic2): 1" in out
    assert "Example frequencies:" in out


def test_max_examples_flag(source_args, input_path: Path, tmp_path: Path) -> None:
    output = tmp_path / "cards.txt"
    assert main(["--input", str(input_path), "--output", str(output),
                 "--max-examples", "1", *source_args]) == 0

    last = output.read_text(encoding="utf-8").splitlines()[-1].split("\t")
    assert last[7] == "学生 (がくせい) — student"


def test_target_required(source_args) -> None:
    with pytest.raises(SystemExit):
        main(source_args)


def test_bad_grade_rejected(source_args) -> None:
    with pytest.raises(SystemExit):
        main(["--grade", "0", *source_args])


def test_example_frequencies_analyzer(source_args, input_path: Path, capsys) -> None:
    assert example_frequencies.main(["--input", str(input_path), *source_args]) == 0
    out = capsys.readouterr().out
    # 漢字, 漢字 + 文字, 学生 + 大学 + 学校
    assert "Total = 6" in out


def test_jlpt_json_output(source_args, tmp_path: Path) -> None:
    output = tmp_path / "jlpt4.json"
    assert main(["--jlpt", "4", "--format", "json", "--output", str(output), *source_args]) == 0

    doc = json.loads(output.read_text(encoding="utf-8"))
    assert doc["$id"] == "kanji-card-deck:jlpt-4"
    assert [c["literal"] for c in doc["cards"]] == ["学", "生"]
    assert all(c["level"] == "N4" for c in doc["cards"])


def test_jlpt_level_out_of_range(source_args) -> None:
    with pytest.raises(SystemExit):
        main(["--jlpt", "6", *source_args])


def test_targets_are_mutually_exclusive(source_args, input_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["--input", str(input_path), "--jlpt", "3", *source_args])


def test_edict_in_other_encoding_is_fatal(source_args, input_path: Path, tmp_path: Path, capsys) -> None:
    euc_edict = tmp_path / "edict.euc"
    euc_edict.write_bytes("学生 [がくせい] /(n) student/\n".encode("euc-jp"))

    output = tmp_path / "cards.txt"
    args = ["--input", str(input_path), "--output", str(output), *source_args]
    args[args.index("--edict") + 1] = str(euc_edict)

    assert main(args) == 1
    assert not output.exists()
    assert "check the file encoding" in capsys.readouterr().err


def test_edict_encoding_flag(source_args, input_path: Path, tmp_path: Path) -> None:
    euc_edict = tmp_path / "edict.euc"
    euc_edict.write_bytes("学生 [がくせい] /(n) student/\n".encode("euc-jp"))

    output = tmp_path / "cards.txt"
    args = ["--input", str(input_path), "--output", str(output),
            "--edict-encoding", "euc-jp", *source_args]
    args[args.index("--edict") + 1] = str(euc_edict)

    assert main(args) == 0
    last = output.read_text(encoding="utf-8").splitlines()[-1].split("\t")
    assert last[7] == "学生 (がくせい) — student"


def test_malformed_kanjidic_is_fatal(source_args, input_path: Path, tmp_path: Path, capsys) -> None:
    broken = tmp_path / "broken.xml"
    broken.write_text("<kanjidic2><character><literal>学</literal>", encoding="utf-8")

    output = tmp_path / "cards.txt"
    args = ["--input", str(input_path), "--output", str(output), *source_args]
    args[args.index("--kanjidic") + 1] = str(broken)

    assert main(args) == 1
    assert not output.exists()
    assert "Error:" in capsys.readouterr().err


def test_example_frequencies_analyzer_reports_bad_source(source_args, input_path: Path, tmp_path: Path, capsys) -> None:
    euc_edict = tmp_path / "edict.euc"
    euc_edict.write_bytes("学生 [がくせい] /(n) student/\n".encode("euc-jp"))

    args = ["--input", str(input_path), *source_args]
    args[args.index("--edict") + 1] = str(euc_edict)

    assert example_frequencies.main(args) == 1
    assert "check the file encoding" in capsys.readouterr().err
