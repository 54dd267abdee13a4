"""line-by-line markdown to HTML converter."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from mdline.converter import split_lines
from mdline.preview import PreviewTarget, TextChangeHandler
from mdline.renderers import RenderContext

logger = logging.getLogger(__name__)


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: Optional[list[str]] = None) -> int:
    """
    main entry point for mdline CLI.

    Args:
        argv: command line arguments (defaults to sys.argv[1:])

    Returns:
        exit code (0 success, 2 fatal error)
    """
    parser = argparse.ArgumentParser(
        description="Convert markdown headers, rules and paragraphs to HTML"
    )
    parser.add_argument(
        "source",
        help="markdown text file, or - for stdin",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="write HTML to this file instead of stdout",
    )
    parser.add_argument(
        "--drop-rule-text",
        action="store_true",
        help="discard text following a --- horizontal rule marker",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="pretty-print the generated HTML on stderr",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="only log warnings and errors",
    )

    args = parser.parse_args(argv)

    # configures logging
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(message)s",
    )

    if args.source != "-" and not Path(args.source).exists():
        logger.error("Source not found: %s", args.source)
        return 2

    ctx = RenderContext(drop_rule_text=args.drop_rule_text)
    target = PreviewTarget()

    try:
        text = _read_source(args.source)
        html = TextChangeHandler(target, ctx).on_input_changed(text)

        if args.output:
            Path(args.output).write_text(html + "\n", encoding="utf-8")
            logger.info("Wrote %d line(s) to %s", len(split_lines(text)), args.output)
        else:
            sys.stdout.write(html + "\n")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Fatal error: %s", e)
        return 2

    if args.preview:
        target.show()

    return 0
