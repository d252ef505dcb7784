"""Single-pass word segmentation and frequency aggregation."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from .chars import WORD_JOINERS, is_letter, is_single_char_word, is_word_middle


@dataclass
class WordCount:
    """A distinct word and the number of times it occurred."""

    word: str  # spelling of the first occurrence
    count: int = 0


@dataclass
class FrequencyTable:
    """Case-insensitive word counts, kept in discovery order."""

    entries: dict[str, WordCount] = field(default_factory=dict)
    total: int = 0

    def add(self, word: str) -> None:
        """Record one occurrence of a word."""
        key = word.lower()
        entry = self.entries.get(key)
        if entry is None:
            entry = WordCount(word)
            self.entries[key] = entry
        entry.count += 1
        self.total += 1

    def get(self, word: str) -> int:
        """Return the count of a word, compared case-insensitively."""
        entry = self.entries.get(word.lower())
        return entry.count if entry else 0

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[WordCount]:
        return iter(self.entries.values())


def iter_words(document_text: str | None) -> Iterator[str]:
    """Yield every word occurrence in document order.

    Runs of letters form a word; apostrophes and hyphens may continue a word
    but are trimmed from its end. Each CJK ideograph is a word of its own and
    closes any word in progress. Everything else is a boundary.
    """
    if not document_text:
        return

    in_word = False
    start = 0
    for i, ch in enumerate(document_text):
        single = is_single_char_word(ch)
        if in_word:
            if single or not is_word_middle(ch):
                in_word = False
                yield document_text[start:i].rstrip(WORD_JOINERS)
        elif not single and is_letter(ch):
            in_word = True
            start = i
        if single:
            yield ch

    if in_word:
        yield document_text[start:].rstrip(WORD_JOINERS)


def count_words(document_text: str | None) -> FrequencyTable:
    """Segment a document and count its words in one pass."""
    table = FrequencyTable()
    for word in iter_words(document_text):
        table.add(word)
    return table
