"""HTML tag lookup for block types."""

from typing import Any

from mdline.core.models import BlockType

DEFAULT_TAG = "p"


class TagCatalog:
    """maps block types to HTML element names."""

    def __init__(self) -> None:
        self._tags: dict[Any, str] = {
            BlockType.HEADER1: "h1",
            BlockType.HEADER2: "h2",
            BlockType.HEADER3: "h3",
            BlockType.PARAGRAPH: "p",
            BlockType.HORIZONTAL_RULE: "hr",
        }

    def _tag(self, block_type: Any, prefix: str) -> str:
        # unknown types degrade to a paragraph
        name = self._tags.get(block_type, DEFAULT_TAG)
        return f"{prefix}{name}>"

    def opening_tag(self, block_type: Any) -> str:
        """returns the opening tag for block_type, e.g. <h1>."""
        return self._tag(block_type, "<")

    def closing_tag(self, block_type: Any) -> str:
        """returns the closing tag for block_type, e.g. </h1>."""
        return self._tag(block_type, "</")
