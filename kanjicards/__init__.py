"""
kanjicards

Build kanji study cards from kanjidic2, EDICT and a word-frequency list.
"""

__version__ = "0.1.0"
