#!/usr/bin/env python3
"""
targets.py

Turn a raw list of target characters into kanji records with examples.
"""

import unicodedata
from pathlib import Path

from .adapters.kanjidic import KanjiCatalog, KanjiRecord
from .examples import ExampleResolver
from .lib.corpus_io import REPLACEMENT_CHARACTER


def is_noise(char: str) -> bool:
    """
    True for characters that cannot be kanji: ASCII (letters, digits,
    punctuation, space, control), any whitespace, decoding replacement
    marks, and control or format characters such as a byte-order mark.
    """
    if char.isascii() or char.isspace() or char == REPLACEMENT_CHARACTER:
        return True
    return unicodedata.category(char) in ("Cc", "Cf")


def sanitize(raw: str) -> str:
    """
    Strip noise from raw input, leaving (presumably) only CJK characters.

    This is a best-effort filter, not a CJK range check: full-width
    punctuation or kana in the input pass through and are then dropped as
    catalog misses.
    """
    return "".join(char for char in raw if not is_noise(char))


def read_target_file(path: Path, encoding: str = "utf-8") -> str:
    """Read a target-character file in full; undecodable bytes are replaced."""
    with open(path, "r", encoding=encoding, errors="replace") as f:
        return f.read()


class TargetSetBuilder:
    """Sanitizes target input and resolves each character to a full record."""

    def __init__(self, catalog: KanjiCatalog, resolver: ExampleResolver):
        self.catalog = catalog
        self.resolver = resolver

    def build(self, raw: str) -> list[KanjiRecord]:
        """
        Return a record, with examples attached, for every usable character.

        Input order is kept and repeated characters are resolved each time.
        """
        records = self.catalog.get(sanitize(raw))
        self.resolver.attach(records)
        return records
