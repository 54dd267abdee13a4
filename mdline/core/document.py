"""append-only HTML output buffer."""


class OutputDocument:
    """accumulates HTML fragments for one conversion."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, fragment: str) -> None:
        """appends a fragment to the end of the document."""
        self._parts.append(fragment)

    def __len__(self) -> int:
        return len(self._parts)

    @property
    def html(self) -> str:
        """concatenated HTML of every fragment appended so far."""
        return "".join(self._parts)
