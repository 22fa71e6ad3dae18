"""
Text helpers for chart labels: percentage formatting and word wrapping.

Label widths are estimated from the font size since there is no browser to
measure rendered text on the Python side. A custom measure function can be
passed to wrap_words when exact metrics are available.
"""

from typing import Callable, List, Optional

# Average glyph advance as a fraction of the font size for sans-serif text
AVERAGE_CHAR_WIDTH = 0.6


def format_percent(value: float) -> str:
    """Format a value as an integer percentage, e.g. 0.35 -> '35%'."""
    return f"{float(value):.0%}"


def estimate_text_width(text: str, font_size: float = 11) -> float:
    return len(text) * font_size * AVERAGE_CHAR_WIDTH


def wrap_words(text: str, width: float,
               measure: Optional[Callable[[str], float]] = None) -> List[str]:
    """
    Greedy word wrap of `text` into lines no wider than `width` pixels.

    A single word wider than `width` is kept whole on its own line.
    """
    measure = measure or estimate_text_width
    lines: List[str] = []
    line: List[str] = []

    for word in text.split():
        line.append(word)
        if measure(" ".join(line)) > width and len(line) > 1:
            line.pop()
            lines.append(" ".join(line))
            line = [word]

    if line:
        lines.append(" ".join(line))
    return lines
