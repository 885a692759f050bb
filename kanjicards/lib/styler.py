#!/usr/bin/env python3
"""
styler.py

Fixes style quirks in EDICT and kanjidic2 English text.

The rule table is an ordered list of literal (phrase, replacement) pairs.
Each rule replaces only the first occurrence of its phrase, and rules run in
the order declared here.
"""

from typing import Iterable

# Sorted by lower case, then by initial letter capitalized, then by all caps,
# then by phrases to remove.
STYLE_RULES: tuple[tuple[str, str], ...] = (
    ('acknowledgement', 'acknowledgment'),
    ('aeroplane', 'airplane'),
    ('centre', 'center'),
    ('colour', 'color'),
    ('defence', 'defense'),
    ('e.g. ', 'e.g., '),
    ('economising', 'economizing'),
    ('electro-magnetic', 'electromagnetic'),
    ('favourable', 'favorable'),
    ('favourite', 'favorite'),
    ('honour', 'honor'),
    ('i.e. ', 'i.e., '),
    ('judgement', 'judgment'),
    ('lakeshore', 'lake shore'),
    ('metre', 'meter'),
    ('neighbourhood', 'neighborhood'),
    ('speciality', 'specialty'),
    ('storeys', 'stories'),
    ('theatre', 'theater'),
    ('traveller', 'traveler'),
    ('Ph.D', 'PhD'),
    ('Philipines', 'Philippines'),
    ('JUDGEMENT', 'JUDGMENT'),
    ('(kokuji)', 'kokuji'),
    (' (endeavour)', ''),
    (' (labourer)', ''),
    (' (theater, theater)', '(theater)'),
    (' (theatre, theater)', '(theater)'),
)


class StyleNormalizer:
    """Applies STYLE_RULES (or a custom rule list) to a line of text."""

    def __init__(self, rules: Iterable[tuple[str, str]] = STYLE_RULES):
        self.rules: tuple[tuple[str, str], ...] = tuple(rules)

    def normalize(self, text: str) -> str:
        """Return re-styled text, one substitution per rule."""
        for phrase, replacement in self.rules:
            text = text.replace(phrase, replacement, 1)
        return text

    __call__ = normalize


_default = StyleNormalizer()


def fix_style(text: str) -> str:
    """Re-style text with the default rule table."""
    return _default.normalize(text)


if __name__ == "__main__":
    samples = [
        "colour of the centre",
        "theatre (theatre, theater)",
        "e.g. a Ph.D in the Philipines",
        "(kokuji) to work hard (endeavour)",
    ]

    print("Style Normalizer")
    print("=" * 60)
    for sample in samples:
        print(f"{sample!r:<40} -> {fix_style(sample)!r}")
