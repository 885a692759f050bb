#!/usr/bin/env python3
"""
kanjidic.py

Parse kanjidic2.xml into a catalog of kanji records.
"""

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional
from xml.sax import ContentHandler, parse as sax_parse, parseString as sax_parse_string
from xml.sax.xmlreader import AttributesImpl

from ..lib.paths import KANJIDIC_PATH
from ..lib.styler import StyleNormalizer


@dataclass
class KanjiEntry:
    """A raw kanji entry from kanjidic2.xml, before styling."""
    literal: str = ""
    stroke_count: Optional[int] = None
    grade: Optional[int] = None
    jlpt: Optional[int] = None
    meanings: list[str] = field(default_factory=list)
    onyomi: list[str] = field(default_factory=list)
    kunyomi: list[str] = field(default_factory=list)


@dataclass
class KanjiRecord:
    """
    A kanji character and all details needed for its card.

    grade is None for kanji with no school grade, jlpt for kanji with no JLPT
    level. examples is filled in by the example resolver after the record is
    built.
    """
    literal: str
    grade: Optional[int]
    stroke_count: Optional[int]
    jlpt: Optional[int] = None
    meanings: list[str] = field(default_factory=list)
    onyomi: list[str] = field(default_factory=list)
    kunyomi: list[str] = field(default_factory=list)
    examples: list = field(default_factory=list)

    @classmethod
    def empty(cls) -> "KanjiRecord":
        """A blank record, rendered as an empty card."""
        return cls(literal=" ", grade=None, stroke_count=None)

    @classmethod
    def from_catalog_entry(
        cls,
        entry: KanjiEntry,
        styler: Optional[StyleNormalizer] = None,
    ) -> "KanjiRecord":
        """Build a record from a kanjidic2 entry, re-styling its meanings."""
        styler = styler or StyleNormalizer()
        return cls(
            literal=entry.literal,
            grade=entry.grade,
            stroke_count=entry.stroke_count,
            jlpt=entry.jlpt,
            meanings=[styler.normalize(m) for m in entry.meanings],
            onyomi=list(entry.onyomi),
            kunyomi=list(entry.kunyomi),
        )

    @property
    def is_blank(self) -> bool:
        return not self.literal.strip()


class KanjidictFullHandler(ContentHandler):
    """
    SAX handler for parsing kanjidic2.xml.

    Extracts kanji characters with stroke counts, grade, meanings, and readings.
    """

    def __init__(self):
        super().__init__()
        self.entries: list[KanjiEntry] = []
        self.current: Optional[KanjiEntry] = None
        self.content = ""

        # Element tracking
        self.in_character = False
        self.in_literal = False
        self.in_misc = False
        self.in_stroke_count = False
        self.in_grade = False
        self.in_jlpt = False
        self.in_reading_meaning = False
        self.in_rmgroup = False
        self.in_reading = False
        self.in_meaning = False
        self.got_stroke_count = False

        # Attribute tracking for current element
        self.current_reading_type: Optional[str] = None
        self.current_meaning_lang: Optional[str] = None

    def startElement(self, name: str, attrs: AttributesImpl):
        self.content = ""

        if name == "character":
            self.in_character = True
            self.current = KanjiEntry()
            self.got_stroke_count = False

        elif name == "literal" and self.in_character:
            self.in_literal = True

        elif name == "misc" and self.in_character:
            self.in_misc = True

        elif name == "stroke_count" and self.in_misc:
            self.in_stroke_count = True

        elif name == "grade" and self.in_misc:
            self.in_grade = True

        elif name == "jlpt" and self.in_misc:
            self.in_jlpt = True

        elif name == "reading_meaning" and self.in_character:
            self.in_reading_meaning = True

        elif name == "rmgroup" and self.in_reading_meaning:
            self.in_rmgroup = True

        elif name == "reading" and self.in_rmgroup:
            self.in_reading = True
            self.current_reading_type = attrs.get("r_type")

        elif name == "meaning" and self.in_rmgroup:
            self.in_meaning = True
            self.current_meaning_lang = attrs.get("m_lang")

    def endElement(self, name: str):
        if name == "character":
            if self.current and self.current.literal:
                self.entries.append(self.current)
            self.current = None
            self.in_character = False

        elif name == "literal":
            if self.in_literal and self.current:
                self.current.literal = self.content.strip()
            self.in_literal = False

        elif name == "misc":
            self.in_misc = False

        elif name == "stroke_count":
            if self.in_stroke_count and self.current and not self.got_stroke_count:
                # Only take the first stroke_count (primary count)
                try:
                    self.current.stroke_count = int(self.content.strip())
                    self.got_stroke_count = True
                except ValueError:
                    pass
            self.in_stroke_count = False

        elif name == "grade":
            if self.in_grade and self.current:
                # Blank grade stays None (ungraded)
                try:
                    self.current.grade = int(self.content.strip())
                except ValueError:
                    pass
            self.in_grade = False

        elif name == "jlpt":
            if self.in_jlpt and self.current:
                try:
                    self.current.jlpt = int(self.content.strip())
                except ValueError:
                    pass
            self.in_jlpt = False

        elif name == "reading_meaning":
            self.in_reading_meaning = False

        elif name == "rmgroup":
            self.in_rmgroup = False

        elif name == "reading":
            if self.in_reading and self.current:
                text = self.content.strip()
                if text:
                    if self.current_reading_type == "ja_on":
                        self.current.onyomi.append(text)
                    elif self.current_reading_type == "ja_kun":
                        self.current.kunyomi.append(text)
            self.in_reading = False
            self.current_reading_type = None

        elif name == "meaning":
            if self.in_meaning and self.current:
                text = self.content.strip()
                # Only English meanings (no m_lang attribute)
                if text and self.current_meaning_lang is None:
                    self.current.meanings.append(text)
            self.in_meaning = False
            self.current_meaning_lang = None

    def characters(self, content: str):
        self.content += content


def parse_kanjidic_full(path: Path = KANJIDIC_PATH) -> list[KanjiEntry]:
    """
    Parse kanjidic2.xml and extract full kanji entries.

    Args:
        path: Path to kanjidic2.xml file

    Returns:
        List of KanjiEntry objects, in file order
    """
    handler = KanjidictFullHandler()
    sax_parse(str(path), handler)
    return handler.entries


def parse_kanjidic_string(xml: str | bytes) -> list[KanjiEntry]:
    """Parse kanjidic2 XML held in memory."""
    handler = KanjidictFullHandler()
    if isinstance(xml, str):
        xml = xml.encode("utf-8")
    sax_parse_string(xml, handler)
    return handler.entries


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

class KanjiCatalog:
    """
    Literal -> kanjidic2 entry index.

    Records handed out by get() are fresh objects, so attaching examples to
    one never affects another.
    """

    def __init__(
        self,
        entries: Iterable[KanjiEntry],
        styler: Optional[StyleNormalizer] = None,
        verbose: bool = False,
    ):
        self.styler = styler or StyleNormalizer()
        self.verbose = verbose
        self.misses: list[str] = []
        self._lookup_table: dict[str, KanjiEntry] = {}

        for entry in entries:
            # Literals are unique; keep the first if the file repeats one
            if entry.literal not in self._lookup_table:
                self._lookup_table[entry.literal] = entry

    @classmethod
    def load(
        cls,
        path: Path = KANJIDIC_PATH,
        styler: Optional[StyleNormalizer] = None,
        verbose: bool = False,
    ) -> "KanjiCatalog":
        return cls(parse_kanjidic_full(path), styler, verbose)

    def get(self, characters: Iterable[str]) -> list[KanjiRecord]:
        """
        Build records for the given characters, in order.

        Characters missing from kanjidic2 are skipped; misses holds the ones
        skipped by the latest call.
        """
        self.misses = []
        records = []
        for char in characters:
            entry = self._lookup_table.get(char)
            if entry is None:
                self.misses.append(char)
                if self.verbose:
                    print(f"   Not in kanjidic2: {char} (U+{ord(char):04X})")
                continue
            records.append(KanjiRecord.from_catalog_entry(entry, self.styler))
        return records

    def get_grade(self, grade: int) -> list[KanjiRecord]:
        """Return records for every kanji at the given school grade, in file order."""
        return [
            KanjiRecord.from_catalog_entry(entry, self.styler)
            for entry in self._lookup_table.values()
            if entry.grade == grade
        ]

    def get_jlpt(self, level: int) -> list[KanjiRecord]:
        """Return records for every kanji at the given JLPT level, in file order."""
        return [
            KanjiRecord.from_catalog_entry(entry, self.styler)
            for entry in self._lookup_table.values()
            if entry.jlpt == level
        ]

    def __contains__(self, literal: str) -> bool:
        return literal in self._lookup_table

    def __len__(self) -> int:
        return len(self._lookup_table)


if __name__ == "__main__":
    # Test the parser
    print(f"Parsing {KANJIDIC_PATH}...")
    catalog = KanjiCatalog.load()
    print(f"Found {len(catalog)} total entries")

    sample = catalog.get("日本語" if len(sys.argv) < 2 else sys.argv[1])
    for r in sample:
        print(f"  {r.literal}: grade={r.grade}, strokes={r.stroke_count}, "
              f"meanings={r.meanings[:3]}, on={r.onyomi[:2]}, kun={r.kunyomi[:2]}")
