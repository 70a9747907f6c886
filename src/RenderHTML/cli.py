from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml

from . import markdown_parser, renderer_html, yaml_parser
from .utils import configure_logging, read_source, resolve_output_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="renderhtml",
        description="Convert a Markdown (or structured YAML) document into HTML.",
    )
    parser.add_argument("input", type=str, nargs="?", help="Path to Markdown file")
    parser.add_argument("-o", "--output", type=str, help="Output HTML path (default: stdout)")
    parser.add_argument("--yaml", action="store_true", help="Read the input as a structured YAML document")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.input is None:
        parser.print_usage(sys.stdout)
        print("Example: renderhtml notes.md")
        return

    configure_logging(verbose=args.verbose)
    input_path = Path(args.input).expanduser()
    if not input_path.exists():
        logging.critical("File does not exist: %s", input_path)
        raise SystemExit(1)
    output_path = resolve_output_path(input_path, args.output)

    logging.info("Reading %s", input_path)
    try:
        source = read_source(input_path)
    except (OSError, UnicodeDecodeError) as exc:
        logging.critical("Could not read %s: %s", input_path, exc)
        raise SystemExit(1) from exc
    logging.debug("Source length: %d chars", len(source))

    if args.yaml:
        logging.info("Parsing YAML...")
        try:
            document = yaml_parser.parse_yaml_document(source)
        except (ValueError, yaml.YAMLError) as exc:
            logging.critical("Invalid YAML document %s: %s", input_path, exc)
            raise SystemExit(1) from exc
    else:
        logging.info("Parsing markdown...")
        document = markdown_parser.parse_markdown(source)
    logging.debug("Parsed %d blocks", len(document.blocks))

    html = renderer_html.render_document(document, output_path=output_path)
    if output_path is None:
        sys.stdout.write(html)
    else:
        logging.info("Done. Saved to %s", output_path)


if __name__ == "__main__":
    main()
