"""
Cell module for the minefield.

Represents individual cells of the grid: what they hide (empty, a hint
number, or a mine) and what the player currently sees (closed, flagged,
or opened).
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


# ============================================================================
# Constants
# ============================================================================

MAX_HINT = 8


class CellStatus(Enum):
    """Possible visual states of a cell."""

    CLOSED = auto()
    FLAGGED = auto()
    OPENED = auto()


# ============================================================================
# Cell Kinds
# ============================================================================

@dataclass(frozen=True)
class Empty:
    """Safe cell with no mines around it."""

    def __str__(self) -> str:
        return "Empty"


@dataclass(frozen=True)
class Adjacent:
    """
    Safe cell bordering at least one mine.

    Attributes:
        count: Number of mines in the Moore neighborhood (1-8).
    """

    count: int

    def __post_init__(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise ValueError(
                f"Adjacent count must be an integer, got {self.count!r}"
            )
        if not 1 <= self.count <= MAX_HINT:
            raise ValueError(
                f"Adjacent count must be between 1 and {MAX_HINT}, "
                f"got {self.count}"
            )

    def __str__(self) -> str:
        return f"Adjacent({self.count})"


@dataclass(frozen=True)
class Mine:
    """Cell hiding a mine."""

    def __str__(self) -> str:
        return "Mine"


CellKind = Union[Empty, Adjacent, Mine]

EMPTY = Empty()
MINE = Mine()


def kind_for_count(count: int) -> CellKind:
    """Map a neighbor mine count to the matching safe kind."""
    if count == 0:
        return EMPTY
    return Adjacent(count)


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the minefield grid.

    Attributes:
        kind: Content of the cell, fixed once the field is generated.
        status: Current visual state (closed, flagged, or opened).
    """

    kind: CellKind = EMPTY
    status: CellStatus = CellStatus.CLOSED

    def open(self) -> bool:
        """
        Open this cell.

        Returns:
            True if the cell changed state, False if it was already opened.
        """
        if self.status == CellStatus.OPENED:
            return False
        self.status = CellStatus.OPENED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is opened.
        """
        if self.status == CellStatus.OPENED:
            return False
        if self.status == CellStatus.CLOSED:
            self.status = CellStatus.FLAGGED
        else:
            self.status = CellStatus.CLOSED
        return True

    @property
    def is_mine(self) -> bool:
        """Check if cell hides a mine."""
        return isinstance(self.kind, Mine)

    @property
    def is_empty(self) -> bool:
        """Check if cell has no neighboring mines."""
        return isinstance(self.kind, Empty)

    @property
    def hint(self) -> int:
        """Neighbor mine count; 0 for empty cells and mines."""
        if isinstance(self.kind, Adjacent):
            return self.kind.count
        return 0

    @property
    def is_closed(self) -> bool:
        """Check if cell is closed."""
        return self.status == CellStatus.CLOSED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.status == CellStatus.FLAGGED

    @property
    def is_opened(self) -> bool:
        """Check if cell is opened."""
        return self.status == CellStatus.OPENED

    def to_observation(self) -> int:
        """
        Convert cell to a numeric observation value.

        Returns:
            -1: Closed cell
            -2: Flagged cell
            0-8: Opened cell with adjacent mine count
            9: Opened mine
        """
        if self.status == CellStatus.CLOSED:
            return -1
        if self.status == CellStatus.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.hint
