"""Most frequent words of a document."""

from .ranking import rank
from .tokenizer import WordCount, count_words


def _check_num_words(num_words: int) -> None:
    if num_words <= 0:
        raise ValueError(f"num_words must be a positive integer, got {num_words}")


def most_common(document_text: str | None, num_words: int) -> list[WordCount]:
    """Return the most frequent words of a document together with their counts.

    Args:
        document_text: Document to analyse. None and "" give an empty result.
        num_words: Maximum number of words to return.

    Returns:
        Up to num_words entries ordered by descending count.

    Raises:
        ValueError: If num_words is not positive.
    """
    _check_num_words(num_words)
    if not document_text:
        return []
    return rank(count_words(document_text), num_words)


def identify_common_words(document_text: str | None, num_words: int) -> list[str]:
    """Return the num_words most frequent words, most frequent first.

    Words are compared case-insensitively and reported with the casing of
    their first occurrence. Runs in time linear in the document length.

    Raises:
        ValueError: If num_words is not positive.
    """
    return [entry.word for entry in most_common(document_text, num_words)]
