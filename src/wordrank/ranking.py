"""Rank words by frequency with a counting sort.

Counts are bounded by the total number of word occurrences, which is itself
bounded by the document length, so the histogram stays linear in the input.
"""

from .tokenizer import FrequencyTable, WordCount


def counting_sort(entries: list[WordCount], max_count: int) -> list[WordCount]:
    """Stable ascending sort of entries by count.

    Args:
        entries: Entries to sort, in discovery order.
        max_count: Largest count any entry can have.

    Returns:
        New list ordered by ascending count; equal counts keep input order.

    Raises:
        RuntimeError: If a count falls outside [1, max_count].
    """
    histogram = [0] * (max_count + 1)
    for entry in entries:
        if not 1 <= entry.count <= max_count:
            raise RuntimeError(
                f"Count {entry.count} for {entry.word!r} is outside 1..{max_count}"
            )
        histogram[entry.count] += 1

    # Turn the histogram into the first output slot for each count
    position = 0
    for count, seen in enumerate(histogram):
        histogram[count] = position
        position += seen

    output: list[WordCount | None] = [None] * len(entries)
    for entry in entries:
        output[histogram[entry.count]] = entry
        histogram[entry.count] += 1
    return output  # type: ignore[return-value]


def rank(table: FrequencyTable, num_words: int) -> list[WordCount]:
    """Return the num_words most frequent entries, most frequent first.

    The ascending sort is reversed, so among equal counts the word discovered
    last comes first.
    """
    ordered = counting_sort(list(table), table.total)
    ordered.reverse()
    return ordered[:num_words]
