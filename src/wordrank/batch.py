"""Ranking several documents, one at a time or in parallel."""

import sys
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from .config import DocumentConfig, JobConfig
from .ranking import rank
from .sources import SourceError, read_document
from .tokenizer import WordCount, count_words

# Lock for thread-safe printing in parallel execution
_print_lock = threading.Lock()


@dataclass
class DocumentResult:
    """Outcome of ranking a single document."""

    name: str
    source: str
    top_n: int
    words: list[WordCount] = field(default_factory=list)
    total_words: int = 0
    distinct_words: int = 0
    success: bool = True
    error: str | None = None

    def to_dict(self) -> dict:
        """JSON-friendly representation."""
        return {
            "name": self.name,
            "source": self.source,
            "top_n": self.top_n,
            "total_words": self.total_words,
            "unique_words": self.distinct_words,
            "words": [{"word": w.word, "count": w.count} for w in self.words],
        }


class BatchRanker:
    """Ranks every document of a job.

    Documents share nothing, so parallel mode simply hands each one to a
    worker thread. Results always come back in configuration order.
    """

    def __init__(self, config: JobConfig) -> None:
        self.config = config

    def rank_document(self, doc: DocumentConfig) -> DocumentResult:
        """Read and rank one document. I/O failures give a failed result."""
        source = self.config.resolve_source(doc)
        top = self.config.top_for(doc)
        try:
            text = read_document(
                source, self.config.get_cache_dir(), encoding=self.config.encoding_for(doc)
            )
        except SourceError as e:
            with _print_lock:
                print(f"[FAILED] {doc.name}: {e}", file=sys.stderr)
            return DocumentResult(
                name=doc.name, source=source, top_n=top, success=False, error=str(e)
            )

        table = count_words(text)
        return DocumentResult(
            name=doc.name,
            source=source,
            top_n=top,
            words=rank(table, top),
            total_words=table.total,
            distinct_words=len(table),
        )

    def run(self) -> list[DocumentResult]:
        """Rank all documents."""
        if self.config.parallel and len(self.config.documents) > 1:
            return self._run_parallel()
        return [self.rank_document(doc) for doc in self.config.documents]

    def _run_parallel(self) -> list[DocumentResult]:
        with ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
            futures = [pool.submit(self.rank_document, doc) for doc in self.config.documents]
            return [future.result() for future in futures]
