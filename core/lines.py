# =============================================================================
# core/lines.py  —  Line Slicer
# =============================================================================
# Long prompts can be read in pieces: start_line=100 skips the first 100
# lines of the root-context record.
# =============================================================================


def extract_lines(content: str, start_line: int = 0) -> str:
    """Return content from the zero-based start_line onward.

    >>> extract_lines("a\\nb\\nc", 1)
    'b\\nc'
    >>> extract_lines("a\\nb\\nc", 5)
    ''
    """
    if start_line == 0:
        return content

    lines = content.split("\n")
    if start_line >= len(lines):
        return ""
    return "\n".join(lines[start_line:])
