"""
Text rendering for a minefield.

Maps each cell's (kind, status) pair to a display glyph. Holds no game
logic: it only reads the field's observation array.
"""
from typing import List

from .field import Field

CLOSED_GLYPH = "-"
FLAG_GLYPH = "F"
MINE_GLYPH = "*"
EMPTY_GLYPH = " "


def glyph(value: int) -> str:
    """
    Get the display glyph for an observation value.

    Args:
        value: -1 closed, -2 flagged, 9 opened mine, 0-8 opened hint.
    """
    if value == -1:
        return CLOSED_GLYPH
    if value == -2:
        return FLAG_GLYPH
    if value == 9:
        return MINE_GLYPH
    if value == 0:
        return EMPTY_GLYPH
    return str(value)


def render(field: Field, coordinates: bool = False) -> str:
    """
    Render the field as text, one line per row.

    Args:
        field: Field to draw.
        coordinates: Also draw column indices on top and row indices on
            the left.

    Returns:
        Rendered board with cells separated by single spaces.
    """
    obs = field.get_observation()
    label_width = len(str(max(field.height, field.width) - 1))
    lines: List[str] = []

    if coordinates:
        header = " ".join(
            str(col).rjust(label_width) for col in range(field.width)
        )
        lines.append(" " * (label_width + 1) + header)

    for row in range(field.height):
        cells = [
            glyph(int(obs[row, col])).rjust(label_width if coordinates else 1)
            for col in range(field.width)
        ]
        row_str = " ".join(cells)
        if coordinates:
            row_str = f"{str(row).rjust(label_width)} {row_str}"
        lines.append(row_str)

    return "\n".join(lines)
