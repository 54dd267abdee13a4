"""literal marker matching for single lines."""


def match_marker(line: str, marker: str) -> tuple[bool, str]:
    """
    checks whether line starts with marker.

    Markers are literal prefixes: no regex, no trimming, case-sensitive.

    Args:
        line: input line
        marker: literal prefix such as "# " or "---"

    Returns:
        (matched, remainder) where remainder is the line without the marker
        on a match, the original line otherwise, and "" for an empty line
    """
    if not line:
        return False, ""

    if line.startswith(marker):
        return True, line[len(marker) :]

    return False, line
