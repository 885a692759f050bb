#!/usr/bin/env python3
"""
wordfreq.py

Word frequency list, indexed by character.

File format (one word per line, most common first):
    rank<TAB>...<TAB>word|reading

Lines starting with '#', lines without a tab, lines whose first field is not
an integer rank, and lines with undecodable bytes are skipped. Words that are
too short or too long to make a good example are excluded.
"""

from pathlib import Path
from typing import Iterable, NamedTuple

from ..lib.corpus_io import is_undecodable, read_lines, require_decodable
from ..lib.paths import WORDFREQ_PATH


class FrequencyEntry(NamedTuple):
    """A word and its frequency rank (lower is more common)."""
    word: str
    rank: int


def parse_wordfreq_line(line: str) -> FrequencyEntry | None:
    """
    Parse one line of the frequency list.

    Returns:
        FrequencyEntry, or None if the line is a comment or malformed
    """
    if line.startswith("#") or "\t" not in line or is_undecodable(line):
        return None

    fields = line.rstrip("\r\n").split("\t")
    try:
        rank = int(fields[0])
    except ValueError:
        return None

    word = fields[-1].split("|")[0].strip()
    if not word:
        return None

    return FrequencyEntry(word, rank)


class WordFrequencyIndex:
    """
    Character -> frequency-ordered example words.

    Buckets keep the file order, so they are sorted most to least common as
    long as the source list is.
    """

    # The maximum character count for a sample word.
    MAX_EXAMPLE_WORD_WIDTH = 3
    MIN_EXAMPLE_WORD_WIDTH = 2

    def __init__(self, max_word_width: int = MAX_EXAMPLE_WORD_WIDTH):
        self.max_word_width = max_word_width
        self._lookup_table: dict[str, list[FrequencyEntry]] = {}
        self.word_count = 0

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        max_word_width: int = MAX_EXAMPLE_WORD_WIDTH,
    ) -> "WordFrequencyIndex":
        index = cls(max_word_width)
        for line in lines:
            entry = parse_wordfreq_line(line)
            if entry is None:
                continue
            index.add(entry)
        return index

    @classmethod
    def load(
        cls,
        path: Path = WORDFREQ_PATH,
        max_word_width: int = MAX_EXAMPLE_WORD_WIDTH,
        encoding: str = "utf-8",
    ) -> "WordFrequencyIndex":
        """
        Read a frequency list file in full and index it.

        Args:
            path: Path to the frequency list
            max_word_width: Longest usable word, in characters
            encoding: File encoding; lines with undecodable bytes are skipped

        Returns:
            WordFrequencyIndex
        """
        lines = read_lines(path, encoding)
        index = cls.from_lines(lines, max_word_width)
        require_decodable(path, encoding, lines, len(index))
        return index

    def add(self, entry: FrequencyEntry) -> bool:
        """
        Index a word under each distinct character it contains.

        Returns:
            True if the word was kept, False if its length was out of range
        """
        length = len(entry.word)
        if length < self.MIN_EXAMPLE_WORD_WIDTH or length > self.max_word_width:
            return False

        for char in dict.fromkeys(entry.word):
            self._lookup_table.setdefault(char, []).append(entry)
        self.word_count += 1
        return True

    def lookup(self, kanji: str) -> tuple[FrequencyEntry, ...]:
        """Return the words containing the kanji, most to least common."""
        return tuple(self._lookup_table.get(kanji, ()))

    def contains(self, kanji: str) -> bool:
        """True if the kanji appears in at least one usable word."""
        return kanji in self._lookup_table

    __contains__ = contains

    def __len__(self) -> int:
        return self.word_count


if __name__ == "__main__":
    print(f"Parsing {WORDFREQ_PATH}...")
    index = WordFrequencyIndex.load()
    print(f"Usable words: {len(index)}")
    for kanji in "日本人学生":
        words = index.lookup(kanji)[:5]
        print(f"  {kanji}: {', '.join(f'{w} ({r})' for w, r in words)}")
