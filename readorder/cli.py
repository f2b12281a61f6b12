"""
Command-line interface for the reading-order pipeline
Reads detected page layouts from JSON, recovers reading order with XY-Cut++ and writes Markdown/JSON
"""

from __future__ import annotations

import argparse
import logging
import sys
import textwrap
from pathlib import Path
from typing import TYPE_CHECKING

# Pipeline imports are moved to function-level so --help stays fast
if TYPE_CHECKING:
    from readorder import ReadingOrderPipeline
    from readorder.types import Document


def setup_logging(level: str = "INFO") -> None:
    """Setup logging configuration with timestamped log files."""
    from readorder.misc import timestamp_slug  # noqa: PLC0415 - lazy import for startup performance

    logs_dir = Path(".logs")
    logs_dir.mkdir(exist_ok=True)

    log_filename = logs_dir / f"{timestamp_slug()}_readorder.log"

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout), logging.FileHandler(log_filename, encoding="utf-8")],
    )


def main() -> int:
    """CLI entry point."""
    parser = _build_argument_parser()
    args = parser.parse_args()

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    return _execute_command(args, logger)


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Reading order recovery - order detected layout regions with XY-Cut++ and render Markdown/JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent(
            """
            Examples:
              # Basic usage (XY-Cut++, direction auto-detected)
              python main.py --input layout.json

              # Vertical (CJK) pages, wider column gaps
              python main.py --input layout.json --direction vertical --min-gap-ratio 0.08

              # Baseline ordering, JSON content list only
              python main.py --input layout.json --sorter position --json-only

              # Plain text of text-like regions plus the full document result
              python main.py --input layout.json --renderer text --save-document

              # Custom config and output
              python main.py --input layout.json --config settings/config.yaml --output /custom/output/
            """
        ),
    )

    parser.add_argument(
        "--input",
        "-i",
        type=str,
        required=True,
        help="Detector output JSON (single page or {name, pages})",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output directory (default: from config, else 'output')",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML config file (default: settings/config.yaml when present)",
    )

    ordering = parser.add_argument_group("ordering")
    ordering.add_argument(
        "--sorter",
        type=str,
        default=None,
        help="Sorter name (xycut-plus, position; default: xycut-plus)",
    )
    ordering.add_argument(
        "--direction",
        type=str,
        choices=["auto", "horizontal", "vertical"],
        default=None,
        help="Reading direction (default: auto)",
    )
    ordering.add_argument(
        "--min-gap-ratio",
        type=float,
        default=None,
        help="Minimum valley width as a fraction of the page dimension (default: 0.05)",
    )
    ordering.add_argument(
        "--min-value-ratio",
        type=float,
        default=None,
        help="Projection values at or below this count as empty (default: 0)",
    )

    output = parser.add_argument_group("output")
    output.add_argument(
        "--renderer",
        type=str,
        choices=["markdown", "text", "json"],
        default=None,
        help="Document rendering written next to the content list (default: markdown)",
    )
    output.add_argument(
        "--json-only",
        action="store_true",
        help="Write only the JSON content list (same as --renderer json)",
    )
    output.add_argument(
        "--save-document",
        action="store_true",
        help="Also write the full document result (pixel bboxes) as <name>_document.json",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    return parser


def _execute_command(args: argparse.Namespace, logger: logging.Logger) -> int:
    # Lazy import: only load the pipeline when actually processing input
    from readorder import ReadingOrderPipeline  # noqa: PLC0415
    from readorder.config import OrderingConfig  # noqa: PLC0415
    from readorder.exceptions import PipelineError  # noqa: PLC0415

    try:
        config = OrderingConfig.from_cli(args)
        pipeline = ReadingOrderPipeline(config=config)
        return _run_pipeline(pipeline, args, logger)
    except PipelineError as exc:
        logger.error("%s", exc)
        return 1
    except KeyboardInterrupt:
        logger.info("Process interrupted by user")
        return 1
    except Exception as exc:  # noqa: BLE001 - retain broad logging for CLI
        logger.error("Unexpected error: %s", exc, exc_info=True)
        return 1


def _run_pipeline(pipeline: ReadingOrderPipeline, args: argparse.Namespace, logger: logging.Logger) -> int:
    from readorder.conversion.input import load_pages_from_json  # noqa: PLC0415

    input_path = Path(args.input)
    logger.info("Starting reading-order pipeline")
    logger.info("Input: %s", input_path)
    logger.info("Output: %s", pipeline.config.output_dir)
    logger.info("Sorter: %s (direction: %s)", pipeline.sorter_name, pipeline.config.direction)

    if not input_path.exists():
        logger.error("Input path does not exist: %s", input_path)
        return 1

    name, pages = load_pages_from_json(input_path)
    document = pipeline.process_document(pages, name=name)
    written = pipeline.save_outputs(document)

    _print_summary(document, written)
    logger.info("Reading-order pipeline completed successfully")
    return 0


def _print_summary(document: Document, written: list[Path]) -> None:
    print(f"\nDocument: {document.name}")
    print(f"  Pages processed: {document.processed_pages}")
    print(f"  Elements: {sum(len(p.elements) for p in document.pages)}")
    print(f"  Skipped elements: {document.skipped_elements}")
    print(f"  Ordered by: {document.ordered_by}")
    for path in written:
        print(f"  Wrote: {path}")

