#!/usr/bin/env python3
"""
corpus_io.py

Whole-file reads of the line-oriented corpora (EDICT, frequency list).

Undecodable bytes become U+FFFD so one bad line cannot abort a load; the
adapters skip any line that carries the mark.
"""

from pathlib import Path

# Left behind by undecodable bytes
REPLACEMENT_CHARACTER = "\ufffd"


def read_lines(path: Path, encoding: str = "utf-8") -> list[str]:
    """Read a corpus file in full, replacing undecodable bytes."""
    with open(path, "r", encoding=encoding, errors="replace") as f:
        return f.readlines()


def is_undecodable(line: str) -> bool:
    return REPLACEMENT_CHARACTER in line


def require_decodable(path: Path, encoding: str, lines: list[str], usable: int) -> None:
    """
    Fail when nothing usable came out of a file that had undecodable lines.

    Raises:
        UnicodeError: the file is most likely in another encoding
    """
    if usable == 0 and any(is_undecodable(line) for line in lines):
        raise UnicodeError(
            f"{path}: no usable line decodes as {encoding}; check the file encoding"
        )
