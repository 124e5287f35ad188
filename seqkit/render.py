"""Text renderings of a sequence for console output."""

from seqkit.config import INDENT


def format_sequence(seq) -> str:
    """Bracketed rendering, one element per line with a trailing comma.

    >>> print(format_sequence([1, 4]))
    [
      1,
      4,
    ]
    """
    lines = ["["]
    for item in seq:
        lines.append(f"{INDENT}{item},")
    lines.append("]")
    return "\n".join(lines)


def format_inline(seq) -> str:
    """Single-line rendering, every element followed by ``", "``."""
    return "".join(f"{item}, " for item in seq)
