"""block rendering and render configuration."""

from dataclasses import dataclass
from typing import Optional

from mdline.core.document import OutputDocument
from mdline.core.models import BlockType, Line
from mdline.core.tags import TagCatalog


@dataclass
class RenderContext:
    """context passed down the chain during rendering."""

    drop_rule_text: bool = False


_catalog = TagCatalog()


def render_block(
    line: Line,
    block_type: BlockType,
    document: OutputDocument,
    ctx: Optional[RenderContext] = None,
) -> None:
    """
    appends a block element for line to document.

    Args:
        line: matched line, already stripped of its marker
        block_type: block type the line was classified as
        document: document to append to
        ctx: render context (defaults to RenderContext())
    """
    ctx = ctx or RenderContext()

    text = line.current
    if block_type is BlockType.HORIZONTAL_RULE and ctx.drop_rule_text:
        text = ""

    document.append(_catalog.opening_tag(block_type))
    document.append(text)
    document.append(_catalog.closing_tag(block_type))
