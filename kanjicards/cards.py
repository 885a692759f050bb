#!/usr/bin/env python3
"""
cards.py

Format kanji records as two-sided study cards.

Front: literal, stroke count, school level.
Back:  primary meaning (upper case), other meanings, on readings,
       kun readings, example words.
"""

import html
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .adapters.kanjidic import KanjiRecord
from .examples import Example
from .lib.sequences import rest

ELLIPSIS = "…"
FULL_WIDTH_SPACE = "　"

# Field order of a card file line
CARD_COLUMNS = (
    "literal",
    "stroke_count",
    "level",
    "english",
    "meanings",
    "onyomi",
    "kunyomi",
    "examples",
)


def grade_label(grade: Optional[int]) -> str:
    """小1..小6 for primary school grades, 中学 for anything above, '' if ungraded."""
    if grade is None:
        return ""
    if grade <= 6:
        return f"小{grade}"
    return "中学"


def jlpt_label(level: Optional[int]) -> str:
    """N1..N5 for JLPT levels, '' if the kanji has none."""
    if level is None:
        return ""
    return f"N{level}"


# Which record attribute labels the card front
LEVEL_LABELS = {
    "grade": lambda record: grade_label(record.grade),
    "jlpt": lambda record: jlpt_label(record.jlpt),
}


def join_bounded(
    items: Iterable[str],
    separator: str,
    bound: int,
    ellipsis: str = ELLIPSIS,
) -> str:
    """
    Join whole items until the next one would push the text past bound.

    When an item does not fit, the ellipsis is appended and the rest are
    dropped; an item is never cut in half.
    """
    parts: list[str] = []
    for item in items:
        if len(separator.join(parts + [item])) > bound:
            return separator.join(parts) + ellipsis
        parts.append(item)
    return separator.join(parts)


def format_example(example: Example) -> str:
    return f"{example.word} ({example.reading}) — {example.gloss}"


@dataclass
class Card:
    """Rendered text of one card, unescaped."""
    literal: str
    stroke_count: str
    level: str
    english: str
    meanings: str
    onyomi: str
    kunyomi: str
    examples: list[str] = field(default_factory=list)

    @property
    def front(self) -> tuple[str, str, str]:
        return (self.literal, self.stroke_count, self.level)

    @property
    def back(self) -> tuple[str, str, str, str, list[str]]:
        return (self.english, self.meanings, self.onyomi, self.kunyomi, self.examples)

    def fields(self) -> list[str]:
        """Flat, HTML-escaped field list in CARD_COLUMNS order."""
        texts = [html.escape(text, quote=False) for text in self.front + self.back[:-1]]
        examples = "<br>".join(html.escape(line, quote=False) for line in self.examples)
        return texts + [examples]

    def to_line(self, separator: str = "\t") -> str:
        """One card-file line; separators and newlines inside fields become spaces."""
        cleaned = [
            " ".join(text.replace(separator, " ").splitlines())
            for text in self.fields()
        ]
        return separator.join(cleaned)

    def to_dict(self) -> dict:
        return {
            "literal": self.literal,
            "strokeCount": self.stroke_count,
            "level": self.level,
            "english": self.english,
            "meanings": self.meanings,
            "onyomi": self.onyomi,
            "kunyomi": self.kunyomi,
            "examples": list(self.examples),
        }


class CardRenderer:
    """
    Turns a KanjiRecord into a Card, bounding the long back-side fields.

    level_kind picks the front label: school grade (小1, 中学) for grade decks
    or JLPT level (N3) for JLPT decks.
    """

    MAX_MEANING_SIZE = 50  # Max character width for the meaning line.
    MAX_READING_SIZE = 55  # Max character width for onyomi and kunyomi lines.

    def __init__(
        self,
        max_meaning_size: int = MAX_MEANING_SIZE,
        max_reading_size: int = MAX_READING_SIZE,
        meaning_separator: str = ", ",
        reading_separator: str = FULL_WIDTH_SPACE,
        ellipsis: str = ELLIPSIS,
        level_kind: str = "grade",
    ):
        if level_kind not in LEVEL_LABELS:
            raise ValueError(
                f"Unknown level kind: {level_kind}. Available: {list(LEVEL_LABELS)}"
            )
        self.max_meaning_size = max_meaning_size
        self.max_reading_size = max_reading_size
        self.meaning_separator = meaning_separator
        self.reading_separator = reading_separator
        self.ellipsis = ellipsis
        self.level_kind = level_kind

    def render(self, record: KanjiRecord) -> Card:
        english = record.meanings[0].upper() if record.meanings else ""
        stroke_count = "" if record.stroke_count is None else str(record.stroke_count)

        return Card(
            literal=record.literal,
            stroke_count=stroke_count,
            level="" if record.is_blank else LEVEL_LABELS[self.level_kind](record),
            english=english,
            meanings=join_bounded(
                rest(record.meanings),
                self.meaning_separator,
                self.max_meaning_size,
                self.ellipsis,
            ),
            onyomi=join_bounded(
                record.onyomi,
                self.reading_separator,
                self.max_reading_size,
                self.ellipsis,
            ),
            kunyomi=join_bounded(
                record.kunyomi,
                self.reading_separator,
                self.max_reading_size,
                self.ellipsis,
            ),
            examples=[format_example(ex) for ex in record.examples],
        )

    def render_all(self, records: Iterable[KanjiRecord]) -> list[Card]:
        return [self.render(record) for record in records]
