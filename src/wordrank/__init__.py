"""Linear-time ranking of the most frequent words in a text."""

from .batch import BatchRanker, DocumentResult
from .chars import is_letter, is_single_char_word, is_word_middle
from .cli import main
from .config import DocumentConfig, JobConfig, parse_parameter_overrides
from .counter import identify_common_words, most_common
from .ranking import counting_sort, rank
from .sources import SourceError, download_url, is_url, read_document
from .tokenizer import FrequencyTable, WordCount, count_words, iter_words

__all__ = [
    "identify_common_words",
    "most_common",
    "count_words",
    "iter_words",
    "FrequencyTable",
    "WordCount",
    "counting_sort",
    "rank",
    "is_letter",
    "is_word_middle",
    "is_single_char_word",
    "JobConfig",
    "DocumentConfig",
    "parse_parameter_overrides",
    "BatchRanker",
    "DocumentResult",
    "SourceError",
    "download_url",
    "is_url",
    "read_document",
    "main",
]
