"""ordered line classification chain."""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from mdline.core.document import OutputDocument
from mdline.core.matcher import match_marker
from mdline.core.models import BlockType, Line
from mdline.renderers import RenderContext, render_block

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlockRule:
    """marker that classifies a line as block_type."""

    block_type: BlockType
    marker: str


# headers come before any marker that is a prefix of theirs
DEFAULT_RULES: tuple[BlockRule, ...] = (
    BlockRule(BlockType.HEADER1, "# "),
    BlockRule(BlockType.HEADER2, "## "),
    BlockRule(BlockType.HEADER3, "### "),
    BlockRule(BlockType.HORIZONTAL_RULE, "---"),
)


class LineChain:
    """first-match-wins chain of block rules ending in a paragraph fallback."""

    def __init__(
        self,
        document: OutputDocument,
        rules: Sequence[BlockRule] = DEFAULT_RULES,
        ctx: Optional[RenderContext] = None,
    ) -> None:
        self.document = document
        self.rules: list[BlockRule] = list(rules)
        self.ctx = ctx or RenderContext()

    def add_rule(self, rule: BlockRule) -> None:
        """appends a rule after the existing ones, before the paragraph fallback."""
        self.rules.append(rule)

    def handle(self, line: Line) -> BlockType:
        """
        classifies line and renders it into the document.

        Args:
            line: line to classify; stripped in place when a marker matches

        Returns:
            block type the line was rendered as
        """
        for rule in self.rules:
            matched, remainder = match_marker(line.current, rule.marker)
            if matched:
                line.current = remainder
                logger.debug("matched %r as %s", rule.marker, rule.block_type.name)
                render_block(line, rule.block_type, self.document, self.ctx)
                return rule.block_type

        # paragraph always matches, including empty lines
        logger.debug("no marker matched, rendering paragraph")
        render_block(line, BlockType.PARAGRAPH, self.document, self.ctx)
        return BlockType.PARAGRAPH

    def handle_text(self, text: str) -> BlockType:
        """wraps text in a Line and handles it."""
        return self.handle(Line(text))


def build_chain(
    document: Optional[OutputDocument] = None,
    rules: Sequence[BlockRule] = DEFAULT_RULES,
    ctx: Optional[RenderContext] = None,
) -> LineChain:
    """
    builds a fresh chain bound to document.

    Args:
        document: output document (a new one when omitted)
        rules: ordered marker table; the paragraph fallback is always last
        ctx: render context

    Returns:
        entry point of the chain
    """
    if document is None:
        document = OutputDocument()
    return LineChain(document, rules, ctx)
