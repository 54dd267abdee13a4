"""conversion entry points for lines and text buffers."""

import re
from collections.abc import Iterable
from typing import Optional

from mdline.renderers import RenderContext
from mdline.renderers.chain import build_chain

EMPTY_HTML = "<p></p>"

# markdown line endings only, not every unicode line break
LINE_ENDING = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """
    splits text on markdown line endings.

    Args:
        text: buffer contents

    Returns:
        lines without their endings; a trailing line ending adds no line
    """
    lines = LINE_ENDING.split(text)
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def convert_line(text: str, ctx: Optional[RenderContext] = None) -> str:
    """
    converts a single markdown line to HTML.

    Args:
        text: input line (possibly empty)
        ctx: render context

    Returns:
        HTML for exactly one block
    """
    chain = build_chain(ctx=ctx)
    chain.handle_text(text)
    return chain.document.html


def convert_lines(lines: Iterable[str], ctx: Optional[RenderContext] = None) -> str:
    """converts lines through one chain, concatenating blocks in input order."""
    chain = build_chain(ctx=ctx)
    for text in lines:
        chain.handle_text(text)
    return chain.document.html


def convert_text(text: str, ctx: Optional[RenderContext] = None) -> str:
    """
    converts a whole buffer, one block per line.

    Args:
        text: buffer contents
        ctx: render context

    Returns:
        concatenated HTML, or an empty paragraph for an empty buffer
    """
    if not text:
        return EMPTY_HTML
    return convert_lines(split_lines(text), ctx)
