#!/usr/bin/env python3
"""
deck_generator.py

Generate a kanji flashcard file from a list of target kanji (or a whole
school grade), with example words chosen by real-world frequency.

Sources (see lib/paths.py for default locations):
    kanjidic2.xml     kanji readings, meanings, stroke counts, grades
    edict.txt         word readings and English glosses
    distribution.txt  word frequency list, most common first

Usage:
    python -m kanjicards.generators.deck_generator --input kanji.txt [--dry-run]
    python -m kanjicards.generators.deck_generator --grade 2 --format json
    python -m kanjicards.generators.deck_generator --jlpt 3
"""

import argparse
import sys
from pathlib import Path
from xml.sax import SAXParseException

from ..adapters.edict import DefinitionDictionary
from ..adapters.kanjidic import KanjiCatalog, KanjiRecord
from ..adapters.wordfreq import WordFrequencyIndex
from ..analyzers.example_frequencies import (
    count_example_frequencies,
    print_example_frequencies,
)
from ..cards import CardRenderer
from ..examples import ExampleResolver
from ..lib.card_io import build_deck_document, write_card_file, write_json_document
from ..lib.paths import (
    DEFAULT_JSON_PATH,
    DEFAULT_TSV_PATH,
    EDICT_PATH,
    KANJIDIC_PATH,
    WORDFREQ_PATH,
    require_sources,
)
from ..lib.styler import StyleNormalizer
from ..targets import TargetSetBuilder, read_target_file

# A source that is missing, unreadable, in the wrong encoding or not well-formed
# XML aborts the run before any output is written
SOURCE_ERRORS = (OSError, UnicodeError, SAXParseException)

JLPT_LEVELS = (1, 2, 3, 4, 5)


def positive_int(value: str) -> int:
    """argparse type for integers >= 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def build_parser(description: str = "Generate kanji flashcards with frequency-ranked examples") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)

    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--input", "-i", type=Path, help="File listing the kanji to study")
    target.add_argument("--grade", "-g", type=positive_int, help="Use every kanji of this kanjidic2 grade")
    target.add_argument("--jlpt", "-j", type=int, choices=JLPT_LEVELS, help="Use every kanji of this kanjidic2 JLPT level")

    parser.add_argument("--kanjidic", type=Path, default=KANJIDIC_PATH, help="Path to kanjidic2.xml")
    parser.add_argument("--edict", type=Path, default=EDICT_PATH, help="Path to the EDICT file")
    parser.add_argument("--edict-encoding", default="utf-8", help="EDICT file encoding (classic EDICT is euc-jp)")
    parser.add_argument("--wordfreq", type=Path, default=WORDFREQ_PATH, help="Path to the word frequency list")

    parser.add_argument("--max-examples", type=int, default=ExampleResolver.MAX_EXAMPLE_COUNT,
                        help="Maximum example words per kanji")
    parser.add_argument("--max-example-size", type=positive_int, default=ExampleResolver.MAX_EXAMPLE_SIZE,
                        help="Maximum characters of word + reading + gloss")
    parser.add_argument("--max-word-width", type=positive_int, default=WordFrequencyIndex.MAX_EXAMPLE_WORD_WIDTH,
                        help="Maximum characters in an example word")

    parser.add_argument("--verbose", "-v", action="store_true", help="Report every skipped kanji")
    return parser


def build_records(args: argparse.Namespace) -> list[KanjiRecord]:
    """
    Load all sources, then resolve the target kanji and their examples.

    Raises:
        FileNotFoundError: if any source file (or the input file) is missing
        UnicodeError, SAXParseException: if a source cannot be decoded or parsed
    """
    sources = [args.kanjidic, args.edict, args.wordfreq]
    if args.input is not None:
        sources.append(args.input)
    require_sources(*sources)

    styler = StyleNormalizer()

    # Step 1: Parse sources
    print("\n1. Parsing sources...")
    print(f"   Parsing {args.wordfreq.name}...")
    wordfreq = WordFrequencyIndex.load(args.wordfreq, max_word_width=args.max_word_width)
    print(f"   Usable words in {args.wordfreq.name}: {len(wordfreq)}")

    print(f"   Parsing {args.edict.name}...")
    edict = DefinitionDictionary.load(args.edict, styler, encoding=args.edict_encoding)
    print(f"   Words in {args.edict.name}: {len(edict)}")

    print(f"   Parsing {args.kanjidic.name}...")
    catalog = KanjiCatalog.load(args.kanjidic, styler, verbose=args.verbose)
    print(f"   Kanji in {args.kanjidic.name}: {len(catalog)}")

    resolver = ExampleResolver(
        wordfreq,
        edict,
        max_count=args.max_examples,
        max_size=args.max_example_size,
    )

    # Step 2: Resolve targets
    print("\n2. Looking up kanji and example words...")
    if args.input is not None:
        raw = read_target_file(args.input)
        records = TargetSetBuilder(catalog, resolver).build(raw)
    elif args.jlpt is not None:
        print(f"   Filtering kanjidic2 for JLPT level {args.jlpt}...")
        records = catalog.get_jlpt(args.jlpt)
        resolver.attach(records)
    else:
        print(f"   Filtering kanjidic2 for grade {args.grade}...")
        records = catalog.get_grade(args.grade)
        resolver.attach(records)

    print(f"   Kanji found: {len(records)}")
    if catalog.misses:
        print(f"   Skipped (not in kanjidic2): {len(catalog.misses)}")
    without_examples = sum(1 for r in records if not r.examples)
    if without_examples:
        print(f"   Without examples: {without_examples}")
    if args.verbose:
        print(f"   Candidate words not in dictionary: {resolver.undefined_words}")
        print(f"   Candidate examples too long: {resolver.oversize_examples}")

    return records


def deck_name(args: argparse.Namespace) -> str:
    if args.input is not None:
        return args.input.stem
    if args.jlpt is not None:
        return f"jlpt-{args.jlpt}"
    return f"grade-{args.grade}"


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    parser.add_argument("--output", "-o", type=Path, help="Output file (default depends on --format)")
    parser.add_argument("--format", choices=("tsv", "json"), default="tsv", help="Output format")
    parser.add_argument("--dry-run", action="store_true", help="Show what would be done without writing files")
    args = parser.parse_args(argv)

    if args.max_examples < 0:
        parser.error("--max-examples must be >= 0")

    print("Generating Kanji Cards")
    print("=" * 40)

    try:
        records = build_records(args)
    except SOURCE_ERRORS as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1

    # Step 3: Render cards
    print("\n3. Rendering cards...")
    level_kind = "jlpt" if args.jlpt is not None else "grade"
    cards = CardRenderer(level_kind=level_kind).render_all(records)
    print(f"   Cards: {len(cards)}")

    # Step 4: Write output
    output = args.output
    if output is None:
        output = DEFAULT_JSON_PATH if args.format == "json" else DEFAULT_TSV_PATH

    if args.dry_run:
        print(f"\n4. DRY RUN - would write {len(cards)} cards to {output}")
    elif args.format == "json":
        print("\n4. Writing JSON deck...")
        doc = build_deck_document(cards, deck_name(args))
        if write_json_document(doc, output):
            print(f"   Written {len(cards)} cards to {output}")
        else:
            print(f"   Unchanged: {output}")
    else:
        print("\n4. Writing card file...")
        written = write_card_file(cards, output)
        print(f"   Written {written} cards to {output}")

    if args.verbose:
        print("\nExample frequencies:")
        print_example_frequencies(count_example_frequencies(records))

    print("\nDone.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
