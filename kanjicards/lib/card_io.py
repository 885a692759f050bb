#!/usr/bin/env python3
"""
card_io.py

Write rendered cards as an Anki plain-text import file or as a JSON deck
document.
"""

import json
from pathlib import Path
from typing import Iterable

from ..cards import CARD_COLUMNS, Card


# ---------------------------------------------------------------------------
# Plain-text (Anki import) Output
# ---------------------------------------------------------------------------

def format_card_file(cards: Iterable[Card], separator: str = "\t") -> str:
    """
    Build the full text of a card file.

    The header lines tell Anki which separator is used, that fields hold
    HTML, and the column names.
    """
    separator_name = "tab" if separator == "\t" else separator
    lines = [
        f"#separator:{separator_name}",
        "#html:true",
        "#columns:" + separator.join(CARD_COLUMNS),
    ]
    lines.extend(card.to_line(separator) for card in cards)
    return "\n".join(lines) + "\n"


def write_card_file(cards: Iterable[Card], filepath: Path, separator: str = "\t") -> int:
    """
    Write cards to filepath, replacing any previous file.

    Returns:
        Number of cards written
    """
    cards = list(cards)
    text = format_card_file(cards, separator)

    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w", encoding="utf-8", newline="\n") as f:
        f.write(text)

    return len(cards)


# ---------------------------------------------------------------------------
# JSON Deck Documents
# ---------------------------------------------------------------------------

def build_deck_document(cards: Iterable[Card], name: str) -> dict:
    """
    Build a JSON deck document.

    Args:
        cards: Rendered cards, in deck order
        name: Deck name, also used in $id

    Returns:
        Document dict matching kanji-card-deck.schema.json
    """
    return {
        "$id": f"kanji-card-deck:{name}",
        "name": name,
        "cards": [card.to_dict() for card in cards],
    }


def write_json_document(doc: dict, filepath: Path) -> bool:
    """
    Write a JSON document with standard formatting.

    Uses ensure_ascii=False, indent=2, and adds trailing newline.

    Args:
        doc: The document to write
        filepath: Path to write to

    Returns:
        True if file was created or content changed, False if unchanged
    """
    # Check if content changed
    if filepath.exists():
        with open(filepath, "r", encoding="utf-8") as f:
            try:
                existing = json.load(f)
                if existing == doc:
                    return False  # No change
            except json.JSONDecodeError:
                pass  # File is corrupted, overwrite it

    # Ensure parent directory exists
    filepath.parent.mkdir(parents=True, exist_ok=True)

    # Write the document
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(doc, f, ensure_ascii=False, indent=2)
        f.write("\n")

    return True
