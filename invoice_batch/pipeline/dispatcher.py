"""
Job Dispatcher Module.

This module provides the WorkerPool that runs text extraction and field
extraction over a batch of documents with a fixed number of threads.

Flow:
    job queue (documents + one stop sentinel per worker)
        -> W worker threads: extract text -> extract_record
        -> result queue
        -> drained after every worker has been joined

A document whose text cannot be extracted is logged and counted as an
error; it produces no record and is never retried. Nothing a single
document does can stop the pool.

Author: ML Engineering Team
"""

import queue
import threading
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

from config import get_config
from invoice_batch.utils.logger import get_logger
from invoice_batch.utils.exceptions import ConfigurationError, UnreadableDocumentError
from invoice_batch.extraction import ExtractedRecord, RuleSet, extract_record

# Initialize module logger
logger = get_logger(__name__)

DocumentHandle = Union[str, Path]
TextExtractor = Callable[[DocumentHandle], str]

# Marks the end of the job queue; one is queued per worker
_STOP = object()


class RunStatistics:
    """
    Processed and error counters shared by the worker threads.

    Increments are serialized by a lock. The counters are only meaningful
    once every worker has been joined; ``finish`` freezes the elapsed time
    at that point.

    Example:
        >>> stats = RunStatistics()
        >>> stats.record_processed()
        >>> stats.record_error()
        >>> stats.finish()
        >>> stats.total
        2
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._processed = 0
        self._errors = 0
        self._started = time.perf_counter()
        self._elapsed: Optional[float] = None

    def record_processed(self) -> None:
        with self._lock:
            self._processed += 1

    def record_error(self) -> None:
        with self._lock:
            self._errors += 1

    def finish(self) -> None:
        """Stop the wall-clock timer."""
        self._elapsed = time.perf_counter() - self._started

    @property
    def processed(self) -> int:
        return self._processed

    @property
    def errors(self) -> int:
        return self._errors

    @property
    def total(self) -> int:
        return self._processed + self._errors

    @property
    def elapsed(self) -> float:
        """Seconds since the pool started, frozen once finished."""
        if self._elapsed is None:
            return time.perf_counter() - self._started
        return self._elapsed

    def __repr__(self) -> str:
        return (
            f"RunStatistics(processed={self._processed}, "
            f"errors={self._errors}, elapsed={self.elapsed:.2f}s)"
        )


@dataclass
class PoolResult:
    """
    Outcome of a worker pool run.

    Attributes:
        records: Records in completion order (not meaningful)
        statistics: Final counters
    """
    records: List[ExtractedRecord] = field(default_factory=list)
    statistics: RunStatistics = field(default_factory=RunStatistics)


class WorkerPool:
    """
    Fixed-size thread pool over a shared job queue.

    Attributes:
        rules: Compiled pattern rules shared by all workers
        extract_text: Callable returning the text of a document or
            raising UnreadableDocumentError
        workers: Maximum number of concurrently active workers

    Example:
        >>> pool = WorkerPool(rules, PDFProcessor().extract_text, workers=8)
        >>> result = pool.run(documents)
        >>> print(result.statistics.processed, result.statistics.errors)
    """

    def __init__(
        self,
        rules: RuleSet,
        extract_text: TextExtractor,
        workers: Optional[int] = None
    ) -> None:
        """
        Initialize the worker pool.

        Args:
            rules: Compiled pattern rules.
            extract_text: Text extraction collaborator.
            workers: Worker count. Defaults to ``pipeline.workers``.

        Raises:
            ConfigurationError: If the worker count is below 1.
        """
        if workers is None:
            workers = get_config("pipeline.workers", 8)

        if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
            raise ConfigurationError(
                "Worker count must be a positive integer",
                {"workers": workers}
            )

        self.rules = rules
        self.extract_text = extract_text
        self.workers = workers

    def run(self, documents: Sequence[DocumentHandle]) -> PoolResult:
        """
        Process every document exactly once.

        Blocks until all workers have terminated.

        Args:
            documents: Document handles to process.

        Returns:
            PoolResult with the produced records and final statistics.
        """
        statistics = RunStatistics()
        jobs: queue.Queue = queue.Queue()
        results: queue.Queue = queue.Queue()

        worker_count = min(self.workers, len(documents))

        for document in documents:
            jobs.put(document)
        for _ in range(worker_count):
            jobs.put(_STOP)

        logger.info(f"Starting {worker_count} worker(s) for {len(documents)} document(s)")

        threads = [
            threading.Thread(
                target=self._work,
                args=(jobs, results, statistics),
                name=f"worker-{index}",
                daemon=True
            )
            for index in range(1, worker_count + 1)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        statistics.finish()

        records = []
        while True:
            try:
                records.append(results.get_nowait())
            except queue.Empty:
                break

        logger.debug(f"Worker pool finished: {statistics}")
        return PoolResult(records=records, statistics=statistics)

    def _work(
        self,
        jobs: queue.Queue,
        results: queue.Queue,
        statistics: RunStatistics
    ) -> None:
        """Worker loop: claim jobs until the stop sentinel is reached."""
        while True:
            document = jobs.get()
            if document is _STOP:
                return

            name = Path(document).name
            try:
                text = self.extract_text(document)
            except UnreadableDocumentError as e:
                logger.error(f"Error reading {name}: {e}")
                statistics.record_error()
                continue
            except Exception as e:
                logger.exception(f"Unexpected error reading {name}: {e}")
                statistics.record_error()
                continue

            record = extract_record(text, self.rules, source_file=str(document))
            results.put(record)
            statistics.record_processed()

            logger.debug(f"Processed {name}: invoice {record.invoice_id or 'N/A'}")
