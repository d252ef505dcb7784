"""Character classification for word segmentation."""

import unicodedata

# Lowercase, uppercase, titlecase and "other" letters. Modifier letters (Lm) are excluded.
LETTER_CATEGORIES = frozenset({"Lu", "Ll", "Lt", "Lo"})

# Characters allowed inside a word but never at its start or end
WORD_JOINERS = "'-"

# CJK Unified Ideographs; also covers the common Kanji block U+4E00-U+9FBF
CJK_IDEOGRAPH_FIRST = 0x4E00
CJK_IDEOGRAPH_LAST = 0x9FFF


def is_letter(ch: str) -> bool:
    """Check if a character may start or end a word."""
    return unicodedata.category(ch) in LETTER_CATEGORIES


def is_word_middle(ch: str) -> bool:
    """Check if a character may appear inside a word."""
    return ch in WORD_JOINERS or is_letter(ch)


def is_single_char_word(ch: str) -> bool:
    """Check if a character always forms a word on its own.

    Every CJK ideograph is counted separately, regardless of its neighbours.
    """
    return CJK_IDEOGRAPH_FIRST <= ord(ch) <= CJK_IDEOGRAPH_LAST and is_letter(ch)
