"""
CLI main entry point.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from ..config import Config, ConfigValidationError, create_default_config, load_config
from ..extractors import extract_travel_info
from ..ocr_client import OCRClient
from ..schemas.travel_document import ParseResult
from ..services import DocumentParser

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def create_cli() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="tripdocs",
        description="Extract structured travel information from flight and hotel documents",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("config.yaml"),
        help="Path to config file (default: config.yaml)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # extract command
    extract_parser = subparsers.add_parser(
        "extract", help="Extract travel info from OCR text (file or stdin)"
    )
    extract_parser.add_argument(
        "file",
        type=Path,
        nargs="?",
        help="Text file with OCR output (default: read stdin)",
    )

    # parse command
    parse_parser = subparsers.add_parser(
        "parse", help="OCR a document via the configured server and extract travel info"
    )
    parse_parser.add_argument(
        "file",
        type=Path,
        help="Image or PDF document",
    )
    parse_parser.add_argument(
        "--type",
        dest="file_type",
        type=str,
        default=None,
        help="MIME type of the document (default: guessed from file name)",
    )

    # init-config command
    subparsers.add_parser("init-config", help="Write a default config file")

    return parser


def print_result(result: ParseResult) -> int:
    print(json.dumps(result.to_dict(), indent=2))
    return 0 if result.success else 1


def cmd_extract(config: Config, file: Path | None) -> int:
    """Extract travel info from OCR text."""
    if file is None:
        text = sys.stdin.read()
    else:
        try:
            text = file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"❌ Failed to read {file}: {e}", file=sys.stderr)
            return 1

    result = extract_travel_info(text, trip_days=config.extraction.default_trip_days)
    return print_result(result)


def cmd_parse(config: Config, file: Path, file_type: str | None) -> int:
    """OCR a document and extract travel info."""
    if not file.exists():
        print(f"❌ File not found: {file}", file=sys.stderr)
        return 1

    client = OCRClient(
        base_url=config.ocr.base_url,
        timeout=config.ocr.timeout_seconds,
        max_retries=config.ocr.max_retries,
    )
    parser = DocumentParser(
        client,
        min_text_length=config.extraction.min_text_length,
        trip_days=config.extraction.default_trip_days,
    )

    result = parser.parse(file, file_type)
    return print_result(result)


def cmd_init_config(config_path: Path) -> int:
    """Write a default config file."""
    if config_path.exists():
        print(f"⚠️  Config already exists: {config_path}", file=sys.stderr)
        return 1

    create_default_config(config_path)
    print(f"✓ Wrote default config to {config_path}")
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_cli()
    parsed = parser.parse_args(args)

    setup_logging(parsed.verbose)

    if not parsed.command:
        parser.print_help()
        return 1

    if parsed.command == "init-config":
        return cmd_init_config(parsed.config)

    # Load config
    try:
        config = load_config(parsed.config)
        errors = config.validate()
        if errors:
            raise ConfigValidationError("; ".join(errors))
    except Exception as e:
        print(f"❌ Failed to load config: {e}", file=sys.stderr)
        return 1

    # Route to command
    if parsed.command == "extract":
        return cmd_extract(config, parsed.file)
    elif parsed.command == "parse":
        return cmd_parse(config, parsed.file, parsed.file_type)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
