from typing import Callable, Sequence

# d3 category10 palette
CATEGORY10 = (
    '#1f77b4', '#ff7f0e', '#2ca02c', '#d62728', '#9467bd',
    '#8c564b', '#e377c2', '#7f7f7f', '#bcbd22', '#17becf',
)


def category10(index: int) -> str:
    """Color for a model index, cycling through the category10 palette."""
    return CATEGORY10[index % len(CATEGORY10)]


def palette_from(colors: Sequence[str]) -> Callable[[int], str]:
    """
    Turn a list of hex colors into a color strategy for ChartConfig.color.
    Indexes past the end of the list wrap around.
    """
    colors = tuple(colors)
    if not colors:
        raise ValueError("palette needs at least one color")

    def color(index: int) -> str:
        return colors[index % len(colors)]
    return color

