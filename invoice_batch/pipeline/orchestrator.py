"""
Pipeline Orchestrator Module.

This module wires the extraction pipeline together:

    load rules -> discover documents -> worker pool -> collate -> write

Fatal errors (invalid rules, missing input, failed write) propagate as
InvoiceBatchError subclasses. Per-document failures are only visible in
the summary counts and the log.

Author: ML Engineering Team
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from config import get_config, get_rules_path
from invoice_batch.utils.logger import get_logger
from invoice_batch.utils.helpers import format_duration
from invoice_batch.extraction import ExtractedRecord, RuleSet, load_rules
from invoice_batch.input_handler import InputHandler, PDFProcessor
from invoice_batch.output_handler import OutputHandler
from .collator import ResultCollator
from .dispatcher import TextExtractor, WorkerPool

# Initialize module logger
logger = get_logger(__name__)


@dataclass
class PipelineSummary:
    """
    Advisory summary of a completed run.

    Attributes:
        total: Documents attempted
        processed: Documents that yielded a record
        errors: Documents whose text could not be extracted
        elapsed: Wall-clock seconds for the whole run
        output_path: File the records were written to
        records: Records in output order
    """
    total: int = 0
    processed: int = 0
    errors: int = 0
    elapsed: float = 0.0
    output_path: Optional[str] = None
    records: List[ExtractedRecord] = field(default_factory=list)

    def __str__(self) -> str:
        return (
            f"Processed {self.processed} PDFs with {self.errors} errors "
            f"in {format_duration(self.elapsed)}"
        )


class InvoicePipeline:
    """
    End-to-end batch extraction.

    Attributes:
        rules_path: Pattern rule file
        workers: Worker thread count
        input_handler: Document discovery

    Example:
        >>> pipeline = InvoicePipeline(workers=4)
        >>> summary = pipeline.run("pdfs", "invoices.csv")
        >>> print(summary)
    """

    def __init__(
        self,
        rules_path: Optional[Union[str, Path]] = None,
        workers: Optional[int] = None,
        pattern: Optional[str] = None,
        text_extractor: Optional[TextExtractor] = None,
        input_handler: Optional[InputHandler] = None,
        output_handler: Optional[OutputHandler] = None
    ) -> None:
        """
        Initialize the pipeline.

        Args:
            rules_path: Rule file. Defaults to the configured/bundled one.
            workers: Worker count. Defaults to ``pipeline.workers``.
            pattern: Glob pattern for directory inputs.
            text_extractor: Replaces PDF text extraction.
            input_handler: Replaces document discovery.
            output_handler: Replaces the output sink.
        """
        self.rules_path = Path(rules_path) if rules_path else get_rules_path()
        self.workers = workers if workers is not None else get_config("pipeline.workers", 8)
        self.input_handler = input_handler or InputHandler(pattern)
        self.text_extractor = text_extractor or PDFProcessor().extract_text
        self.output_handler = output_handler or OutputHandler()
        self.collator = ResultCollator()

    def load_rules(self) -> RuleSet:
        """Load the rule set; raises RuleSetError."""
        return load_rules(self.rules_path)

    def run(
        self,
        input_path: Union[str, Path],
        output_path: Union[str, Path]
    ) -> PipelineSummary:
        """
        Run the full pipeline.

        Args:
            input_path: Document file or directory.
            output_path: Destination .csv or .xlsx file.

        Returns:
            PipelineSummary of the run.

        Raises:
            RuleSetError: Rules invalid; no document is processed.
            InputError: Input path missing.
            ConfigurationError: Invalid worker count.
            WriteFailedError: Output could not be written; results are lost.
        """
        started = time.perf_counter()
        rules = self.load_rules()
        pool = WorkerPool(rules, self.text_extractor, workers=self.workers)

        documents = self.input_handler.discover(input_path)
        logger.info(f"Processing {len(documents)} documents and writing to {output_path}")

        result = pool.run(documents)
        statistics = result.statistics

        ordered = self.collator.collate(result.records)
        written = self.output_handler.write(ordered, output_path)

        summary = PipelineSummary(
            total=len(documents),
            processed=statistics.processed,
            errors=statistics.errors,
            elapsed=time.perf_counter() - started,
            output_path=written,
            records=ordered
        )

        logger.info(f"Processing complete. {summary}")
        return summary
