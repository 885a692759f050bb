#!/usr/bin/env python3
"""
examples.py

Find example words for a kanji: the most common words containing it that
EDICT can define and that fit on a card.
"""

from dataclasses import dataclass
from typing import Iterable

from .adapters.edict import DefinitionDictionary
from .adapters.kanjidic import KanjiRecord
from .adapters.wordfreq import WordFrequencyIndex


@dataclass(frozen=True)
class Example:
    """An example word, written in kanji (plus kana), kana, and English."""
    word: str
    reading: str
    gloss: str
    frequency_rank: int

    @property
    def display_size(self) -> int:
        """Characters taken by word, reading and gloss together."""
        return len(self.word) + len(self.reading) + len(self.gloss)


class ExampleResolver:
    """
    Greedy, single-pass example selection.

    Candidates are visited most common first. Words missing from the
    dictionary and examples wider than max_size are skipped without using up
    a slot; selection stops once max_count examples are accepted.
    """

    MAX_EXAMPLE_COUNT = 3   # The maximum number of examples to store.
    MAX_EXAMPLE_SIZE = 50   # Max example width.

    def __init__(
        self,
        wordfreq: WordFrequencyIndex,
        dictionary: DefinitionDictionary,
        max_count: int = MAX_EXAMPLE_COUNT,
        max_size: int = MAX_EXAMPLE_SIZE,
    ):
        self.wordfreq = wordfreq
        self.dictionary = dictionary
        self.max_count = max_count
        self.max_size = max_size

        # Counters for the run summary
        self.undefined_words = 0
        self.oversize_examples = 0

    def resolve(self, literal: str) -> list[Example]:
        """Return up to max_count examples for the kanji, most common first."""
        examples: list[Example] = []
        if self.max_count <= 0 or not self.wordfreq.contains(literal):
            return examples

        for word, rank in self.wordfreq.lookup(literal):
            definition = self.dictionary.define(word)
            if definition is None:
                self.undefined_words += 1
                continue

            example = Example(word, definition.reading, definition.gloss, rank)
            if example.display_size > self.max_size:
                self.oversize_examples += 1
                continue

            examples.append(example)
            if len(examples) == self.max_count:
                break

        return examples

    def attach(self, records: Iterable[KanjiRecord]) -> None:
        """Look up examples for each record and store them on it."""
        for record in records:
            record.examples = self.resolve(record.literal)
