#!/usr/bin/env python
"""
Command-line interface for the IEEE paper formatter.

Usage:
    python src/cli.py --input <docx_or_labels_json> --output <output_dir> [options]

Examples:
    # Classify a paper and write the labeled paragraphs for review
    python src/cli.py --input paper.docx --output ./output --format labels

    # Classify and export straight to IEEE format
    python src/cli.py --input paper.docx --output ./output --format docx

    # Export a reviewed labels file
    python src/cli.py --input ./output/paper.labels.json --output ./output --format docx
"""

import sys
from pathlib import Path

# Add src directory to path for imports when running as script
_src_dir = Path(__file__).parent
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

import argparse
import logging
import time
from typing import List, Optional

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger("ieee_formatter")

LABELS_SUFFIX = ".labels.json"


def setup_argparser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        description="IEEE Paper Formatter - Classify paper paragraphs and export two-column IEEE DOCX",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Classify a paper for review:
    python -m src.cli --input paper.docx --output ./output --format labels

  Classify and export in one step:
    python -m src.cli --input paper.docx --output ./output --format labels docx

  Export a reviewed labels file:
    python -m src.cli --input ./output/paper.labels.json --output ./output
        """
    )

    # Required arguments
    parser.add_argument(
        "--input", "-i",
        required=True,
        help="Input .docx document or reviewed labels JSON"
    )

    parser.add_argument(
        "--output", "-o",
        required=True,
        help="Output directory for generated files"
    )

    # Optional arguments
    parser.add_argument(
        "--format", "-f",
        nargs="+",
        default=["docx"],
        choices=["labels", "structure", "docx", "all"],
        help="Output format(s) (default: docx)"
    )

    parser.add_argument(
        "--explain",
        action="store_true",
        help="Print the rule that produced each label"
    )

    parser.add_argument(
        "--max-upload-mb",
        type=float,
        default=None,
        help="Reject documents larger than this (default: from config, 50 MB)"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress non-error output"
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 1.0.0"
    )

    return parser


def resolve_formats(formats: List[str]) -> List[str]:
    if "all" in formats:
        return ["labels", "structure", "docx"]
    return formats


def output_stem(input_path: Path) -> str:
    name = input_path.name
    if name.endswith(LABELS_SUFFIX):
        return name[:-len(LABELS_SUFFIX)]
    return input_path.stem


def run_pipeline(args) -> int:
    """Run classification and export."""
    from ieee_formatter.assembler import PaperAssembler
    from ieee_formatter.classifier import explain
    from ieee_formatter.errors import InvalidInputError
    from ieee_formatter.io import ensure_dir, load_document_bytes, load_json, save_json
    from config import get_config, JSON_SCHEMA_VERSION

    start_time = time.time()
    config = get_config()
    if args.max_upload_mb is not None:
        config.upload.max_upload_mb = args.max_upload_mb

    output_dir = ensure_dir(Path(args.output))
    input_path = Path(args.input)
    stem = output_stem(input_path)
    formats = resolve_formats(args.format)

    assembler = PaperAssembler(max_upload_bytes=config.upload.max_upload_bytes)

    if input_path.name.endswith(".json"):
        logger.info(f"Loading reviewed labels: {input_path}")
        try:
            reviewed = load_json(input_path)
        except ValueError as e:
            raise InvalidInputError(f"Invalid labels file {input_path.name}: {e}")
        paragraphs = assembler.update_labels(reviewed)
    else:
        logger.info(f"Classifying document: {input_path}")
        data = load_document_bytes(input_path)
        result = assembler.classify(data)
        paragraphs = result.paragraphs

        if args.explain and not args.quiet:
            for raw in result.raw_paragraphs:
                label = paragraphs[raw.index].label.value
                print(f"{raw.index:4d}  {label:<15} {explain(raw):<16} {raw.text[:60]}")

        if "labels" in formats:
            labels_path = output_dir / f"{stem}{LABELS_SUFFIX}"
            save_json({
                "schema_version": JSON_SCHEMA_VERSION,
                "source_file": str(input_path),
                **result.to_dict(),
            }, labels_path)
            logger.info(f"Saved labels: {labels_path}")

    payload = {"paragraphs": [p.to_dict() for p in paragraphs]}
    model = None

    if "structure" in formats:
        structure_path = output_dir / f"{stem}.structure.json"
        save_json(assembler.preview(payload), structure_path)
        logger.info(f"Saved structure: {structure_path}")

    if "docx" in formats:
        export = assembler.export(payload)
        model = export.model
        docx_path = output_dir / f"{stem}_IEEE.docx"
        docx_path.write_bytes(export.content)
        logger.info(f"Exported DOCX: {docx_path}")

    elapsed = time.time() - start_time

    if not args.quiet:
        print("\n" + "=" * 60)
        print("IEEE FORMATTING COMPLETE")
        print("=" * 60)
        print(f"Source: {input_path}")
        print(f"Output: {output_dir}")
        print(f"Paragraphs: {len(paragraphs)}")
        if model is not None:
            print(f"Sections: {len(model.sections)}")
            print(f"References: {len(model.references)}")
        print(f"Processing time: {elapsed:.2f}s")
        print("=" * 60)

    return 0


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    from ieee_formatter.errors import FormatterError

    parser = setup_argparser()
    args = parser.parse_args(argv)

    # Configure logging level
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    elif args.quiet:
        logging.getLogger().setLevel(logging.ERROR)

    try:
        exit_code = run_pipeline(args)
        sys.exit(exit_code)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)
    except (FormatterError, FileNotFoundError) as e:
        logger.error(f"{e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if args.verbose:
            raise
        sys.exit(1)


if __name__ == "__main__":
    main()
