"""tests for tag catalog."""

import pytest

from mdline.core.models import BlockType
from mdline.core.tags import TagCatalog


@pytest.mark.parametrize(
    ("block_type", "opening", "closing"),
    [
        (BlockType.HEADER1, "<h1>", "</h1>"),
        (BlockType.HEADER2, "<h2>", "</h2>"),
        (BlockType.HEADER3, "<h3>", "</h3>"),
        (BlockType.PARAGRAPH, "<p>", "</p>"),
        (BlockType.HORIZONTAL_RULE, "<hr>", "</hr>"),
    ],
)
def test_tags_for_known_types(
    block_type: BlockType, opening: str, closing: str
) -> None:
    """each block type maps to its element."""
    catalog = TagCatalog()
    assert catalog.opening_tag(block_type) == opening
    assert catalog.closing_tag(block_type) == closing


@pytest.mark.parametrize("invalid", [99, None, "h1", -1])
def test_unknown_type_falls_back_to_paragraph(invalid: object) -> None:
    """out-of-range types degrade to paragraph tags."""
    catalog = TagCatalog()
    assert catalog.opening_tag(invalid) == "<p>"
    assert catalog.closing_tag(invalid) == "</p>"
