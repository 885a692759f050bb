#!/usr/bin/env python3
"""
paths.py

Centralized path configuration for the kanji card scripts.
All scripts should import paths from this module rather than defining them locally.
"""

from pathlib import Path

# ---------------------------------------------------------------------------
# Base Directories
# ---------------------------------------------------------------------------

LIB_DIR = Path(__file__).resolve().parent
PACKAGE_DIR = LIB_DIR.parent
PROJECT_ROOT = PACKAGE_DIR.parent

# ---------------------------------------------------------------------------
# Source Data (External Datasets)
# ---------------------------------------------------------------------------

SOURCE_DIR = PROJECT_ROOT / "source"

# Kanjidic2
KANJIDIC_PATH = SOURCE_DIR / "kanjidic2.xml"

# EDICT (word -> [reading] /gloss/.../)
EDICT_PATH = SOURCE_DIR / "edict.txt"

# Word frequency distribution (rank<TAB>...<TAB>word|reading)
WORDFREQ_PATH = SOURCE_DIR / "distribution.txt"

# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

SCHEMA_DIR = PACKAGE_DIR / "schemas"
DECK_SCHEMA_PATH = SCHEMA_DIR / "kanji-card-deck.schema.json"

# ---------------------------------------------------------------------------
# Output Directories
# ---------------------------------------------------------------------------

OUTPUT_DIR = PROJECT_ROOT / "output"
DEFAULT_TSV_PATH = OUTPUT_DIR / "kanji_cards.txt"
DEFAULT_JSON_PATH = OUTPUT_DIR / "kanji_cards.json"


def require_sources(*paths: Path) -> None:
    """
    Check that every source file exists before any parsing starts.

    Raises:
        FileNotFoundError: naming all missing files at once
    """
    missing = [str(p) for p in paths if not Path(p).is_file()]
    if missing:
        raise FileNotFoundError(
            "Missing source file(s): " + ", ".join(missing)
        )
