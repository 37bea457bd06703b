"""Command line entry point: shelf page in, JSON records out."""

import argparse
import json
import logging
import sys

from shelfreader.config import load_config
from shelfreader.errors import InvalidDocument
from shelfreader.extraction.pipeline import ShelfParser
from shelfreader.extraction.source import decode_document, read_document

logger = logging.getLogger("shelfreader.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shelfreader",
        description="Extract book records from a saved Goodreads shelf page.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="Saved shelf HTML file, or '-' to read standard input",
    )
    parser.add_argument("--config", default="config.yaml", help="YAML configuration file")
    parser.add_argument("--output", help="Write JSON here instead of standard output")
    parser.add_argument("--indent", type=int, help="Pretty-print JSON with this indent")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the extractor. Returns the process exit status."""
    args = _build_parser().parse_args(argv)
    config = load_config(args.config)

    logging.basicConfig(
        level=config.logging.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.path == "-":
        document = decode_document(sys.stdin.buffer.read(), "<stdin>")
    else:
        try:
            document = read_document(args.path)
        except FileNotFoundError as e:
            logger.error("%s", e)
            return 1

    try:
        records = ShelfParser(config.extraction).parse(document)
    except InvalidDocument:
        logger.exception("Could not read shelf rows from %s", args.path)
        return 1

    indent = args.indent if args.indent is not None else config.output.indent
    payload = json.dumps([record.to_json_dict() for record in records], indent=indent, ensure_ascii=False)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(payload + "\n")
        logger.info("Wrote %d records to %s", len(records), args.output)
    else:
        sys.stdout.write(payload + "\n")

    return 0
