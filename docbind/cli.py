"""CLI entrypoint for docbind."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import load_config
from .errors import DocbindError, SinkError
from .logging import configure_logging
from .pipeline import Binder
from .sink import DocumentSink, PandocSink, StdoutSink


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docbind",
        description="Render markdown documents as templates and bind them into one document.",
    )
    parser.add_argument(
        "files_glob",
        help=(
            "Glob of documents to bind, single quoted to avoid shell expansion, "
            "or a directory to bind every markdown file beneath it."
        ),
    )
    parser.add_argument(
        "-c",
        "--custom-pandoc-flags",
        action="append",
        default=[],
        metavar="FLAG",
        help="Extra flag passed verbatim to pandoc; repeatable. Use -c=--toc for dashed values.",
    )
    parser.add_argument(
        "-o",
        "--output-pdf",
        action="store_true",
        help="Convert to PDF with pandoc instead of printing to stdout.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="PDF destination (defaults to output.pdf).",
    )
    parser.add_argument(
        "-r",
        "--root-dir",
        type=Path,
        default=None,
        help="Search for embedded files below this directory (defaults to the current directory).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("."),
        help="Path to .docbind.yml or the directory containing it.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for docbind."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
        config = load_config(args.config)
        binder = Binder(config, root_dir=args.root_dir)
        sink: DocumentSink
        if args.output_pdf:
            sink = PandocSink(
                config.pdf,
                output=args.output,
                extra_flags=args.custom_pandoc_flags,
            )
        else:
            sink = StdoutSink()
        binder.run(args.files_glob, sink)
    except SinkError as exc:
        parser.exit(1, f"Error: {exc.stderr or exc}\n")
    except DocbindError as exc:
        parser.exit(1, f"docbind failed: {exc}\nRun with --verbose for more details.\n")
    except OSError as exc:
        parser.exit(1, f"docbind failed: {exc}\n")

    if args.output_pdf:
        print("Success!")


if __name__ == "__main__":
    main(sys.argv[1:])
