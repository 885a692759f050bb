#!/usr/bin/env python3
"""
edict.py

Looks up words in EDICT.

Each line holds a word, a space, then its definition blob:
    学生 [がくせい] /(n) student (esp. a university student)/EntL1206900X/

Only the first definition seen for a word is kept.
"""

from pathlib import Path
from typing import Iterable, NamedTuple, Optional

from ..lib.corpus_io import is_undecodable, read_lines, require_decodable
from ..lib.paths import EDICT_PATH
from ..lib.styler import StyleNormalizer


class DictionaryEntry(NamedTuple):
    """Kana reading and first English gloss of a word."""
    reading: str
    gloss: str


def parse_definition(definition: str, styler: StyleNormalizer) -> DictionaryEntry:
    """
    Extract the reading and the first gloss from a definition blob.

    The reading sits in square brackets. Glosses are '/'-delimited; leading
    parenthesised grammar tags such as '(n)' or '(1)' are dropped.
    """
    reading = definition.partition("[")[2].partition("]")[0]

    gloss = definition.partition("/")[2]
    gloss = gloss.partition("/")[0].lstrip()
    while gloss.startswith("("):
        gloss = gloss.partition(")")[2].lstrip()

    return DictionaryEntry(reading, styler.normalize(gloss))


class DefinitionDictionary:
    """Word -> (reading, gloss), built once and read-only afterwards."""

    def __init__(self, styler: Optional[StyleNormalizer] = None):
        self.styler = styler or StyleNormalizer()
        self._lookup_table: dict[str, str] = {}
        self._parsed: dict[str, DictionaryEntry] = {}

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        styler: Optional[StyleNormalizer] = None,
    ) -> "DefinitionDictionary":
        dictionary = cls(styler)
        for line in lines:
            dictionary.add_line(line)
        return dictionary

    @classmethod
    def load(
        cls,
        path: Path = EDICT_PATH,
        styler: Optional[StyleNormalizer] = None,
        encoding: str = "utf-8",
    ) -> "DefinitionDictionary":
        """
        Read an EDICT file in full.

        Args:
            path: Path to the EDICT file
            styler: Style normalizer applied to glosses
            encoding: File encoding (classic EDICT is euc-jp)

        Returns:
            DefinitionDictionary
        """
        lines = read_lines(path, encoding)
        dictionary = cls.from_lines(lines, styler)
        require_decodable(path, encoding, lines, len(dictionary))
        return dictionary

    def add_line(self, line: str) -> bool:
        """
        Store the definition on this line unless the word is already known.

        Returns:
            True if a new word was stored
        """
        if " " not in line or is_undecodable(line):
            return False
        word, _, definition = line.rstrip("\r\n").partition(" ")
        if not word or word in self._lookup_table:
            return False
        self._lookup_table[word] = definition
        return True

    def define(self, word: str) -> Optional[DictionaryEntry]:
        """Return the word's reading and gloss, or None if it is not listed."""
        entry = self._parsed.get(word)
        if entry is not None:
            return entry

        definition = self._lookup_table.get(word)
        if definition is None:
            return None

        entry = parse_definition(definition, self.styler)
        self._parsed[word] = entry
        return entry

    def __contains__(self, word: str) -> bool:
        return word in self._lookup_table

    def __len__(self) -> int:
        return len(self._lookup_table)


if __name__ == "__main__":
    print(f"Parsing {EDICT_PATH}...")
    edict = DefinitionDictionary.load()
    print(f"Words: {len(edict)}")
    for word in ("学生", "日本", "劇場"):
        print(f"  {word}: {edict.define(word)}")
