#!/usr/bin/env python3
"""
Invoice Batch Extractor - Main Entry Point.

Extracts invoice fields from every PDF in a directory with a pool of
worker threads and writes one CSV (or Excel) file sorted by invoice
number.

Usage:
    Command Line:
        python main.py
        python main.py --input ./pdfs/ --output invoices.csv --workers 8
        python main.py --template rules.json --output results/invoices.xlsx

    Python:
        from main import run_extraction
        summary = run_extraction("pdfs/", "invoices.csv")

Author: ML Engineering Team
Version: 1.0.0
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import ConfigurationManager, get_config
from invoice_batch.utils.logger import setup_logger_from_config, get_logger
from invoice_batch.utils.exceptions import InvoiceBatchError


def parse_arguments(argv: Optional[list] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: Argument list; defaults to sys.argv.

    Returns:
        Parsed argument namespace.
    """
    parser = argparse.ArgumentParser(
        description="Invoice Batch Extractor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    Process ./pdfs with the bundled rules:
        python main.py

    Custom rules, more workers:
        python main.py --template template.json --workers 16

    Excel output:
        python main.py --input ./invoices/ --output invoices.xlsx
        """
    )

    parser.add_argument(
        "--input", "-i",
        type=str,
        default=None,
        help="Input PDF file or directory (default: pdfs)"
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output .csv or .xlsx file (default: invoices.csv)"
    )

    parser.add_argument(
        "--workers", "-w",
        type=int,
        default=None,
        help="Number of worker threads (default: 8)"
    )

    parser.add_argument(
        "--template", "-t",
        type=str,
        default=None,
        help="Path to the JSON/YAML pattern rule file (default: bundled template.json)"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to custom configuration file"
    )

    # Logging options
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only show warnings and errors on the console"
    )

    return parser.parse_args(argv)


def initialize_system(args: argparse.Namespace) -> ConfigurationManager:
    """
    Initialize configuration and logging.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Initialized configuration manager.
    """
    config = ConfigurationManager(args.config)

    logger = setup_logger_from_config(
        level="DEBUG" if args.debug else None,
        console_level="WARNING" if args.quiet else None
    )

    logger.info("=" * 60)
    logger.info("INVOICE BATCH EXTRACTOR")
    logger.info("=" * 60)
    logger.info(f"Version: {config.get('project.version', '1.0.0')}")

    return config


def run_extraction(
    input_path: Optional[str] = None,
    output_path: Optional[str] = None,
    rules_path: Optional[str] = None,
    workers: Optional[int] = None
):
    """
    Run the invoice extraction pipeline.

    This is the main programmatic entry point. Unset arguments fall back
    to the configuration file.

    Args:
        input_path: PDF file or directory.
        output_path: Destination .csv or .xlsx file.
        rules_path: Pattern rule file.
        workers: Worker thread count.

    Returns:
        PipelineSummary with counts, elapsed time and ordered records.

    Raises:
        InvoiceBatchError: On fatal configuration, input or output errors.

    Example:
        >>> summary = run_extraction("pdfs/", "invoices.csv", workers=4)
        >>> print(summary.processed, summary.errors)
    """
    from invoice_batch.pipeline import InvoicePipeline

    pipeline = InvoicePipeline(rules_path=rules_path, workers=workers)

    return pipeline.run(
        input_path or get_config("paths.input_dir", "pdfs"),
        output_path or get_config("paths.output_file", "invoices.csv")
    )


def main(argv: Optional[list] = None) -> int:
    """
    Main function - entry point for command-line execution.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    args = parse_arguments(argv)

    try:
        initialize_system(args)
        logger = get_logger(__name__)

        summary = run_extraction(
            input_path=args.input,
            output_path=args.output,
            rules_path=args.template,
            workers=args.workers
        )

        logger.info("=" * 60)
        logger.info(f"Output: {summary.output_path}")
        logger.info("=" * 60)

        return 0

    except InvoiceBatchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 130

    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        if args.debug:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
