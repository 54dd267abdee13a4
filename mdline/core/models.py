"""data models for line conversion."""

from dataclasses import dataclass
from enum import Enum


class BlockType(Enum):
    """block category a line renders as."""

    PARAGRAPH = 0
    HEADER1 = 1
    HEADER2 = 2
    HEADER3 = 3
    HORIZONTAL_RULE = 4


@dataclass
class Line:
    """single line of input, stripped in place once its marker matches."""

    current: str
