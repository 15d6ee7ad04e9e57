"""
Field module for the minefield.

Implements the game grid with mine placement, hint computation,
flood-fill opening, flagging, and win/lose state management.
"""
import logging
import random
from dataclasses import InitVar, dataclass, field, replace
from enum import Enum, auto
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from .cell import MINE, Cell, kind_for_count
from .placement import Position, get_strategy, validate_positions

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    RUNNING = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class FieldConfig:
    """
    Configuration for a minefield.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def safe_cells(self) -> int:
        """Number of cells without a mine."""
        return self.width * self.height - self.num_mines


# Preset difficulty levels
BEGINNER = FieldConfig(9, 9, 10)
INTERMEDIATE = FieldConfig(16, 16, 40)
EXPERT = FieldConfig(30, 16, 99)

PRESETS: Dict[str, FieldConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


# ============================================================================
# Field Class
# ============================================================================

@dataclass
class Field:
    """
    Minefield game grid.

    Mines are placed and hints computed as soon as the field is created.
    Opening and flagging out-of-bounds cells, cells in the wrong state,
    or any cell once the game is over are silent no-ops.

    Attributes:
        config: Dimensions and mine count.
        seed: Optional seed for reproducible placement. When omitted the
            generator is seeded from OS entropy.
        placement: Name of the placement strategy ("sample" or "rejection").
        mine_positions: Explicit (row, col) mine layout; overrides random
            placement when given.
    """

    config: FieldConfig = field(default_factory=lambda: FieldConfig())
    seed: Optional[int] = None
    placement: str = "sample"
    mine_positions: InitVar[Optional[Iterable[Position]]] = None
    _grid: List[List[Cell]] = field(
        default_factory=list, init=False, repr=False
    )
    _state: GameState = field(default=GameState.RUNNING, init=False)
    _opened_count: int = field(default=0, init=False)
    _flag_count: int = field(default=0, init=False)

    def __post_init__(
        self, mine_positions: Optional[Iterable[Position]]
    ) -> None:
        """Build the grid, place mines, and compute hints."""
        self._init_grid()
        if mine_positions is None:
            strategy = get_strategy(self.placement)
            rng = random.Random(self.seed)
            mines = strategy(
                self.config.width, self.config.height,
                self.config.num_mines, rng,
            )
        else:
            mines = validate_positions(
                mine_positions, self.config.width,
                self.config.height, self.config.num_mines,
            )
        self._place_mines(mines)
        self._calculate_hints()
        logger.debug(
            "Generated %dx%d field with %d mines",
            self.config.width, self.config.height, self.config.num_mines,
        )

    @classmethod
    def create(
        cls, width: int, height: int, mine_count: int, **kwargs
    ) -> "Field":
        """
        Create a field from raw dimensions.

        Args:
            width: Number of columns.
            height: Number of rows.
            mine_count: Number of mines, below width * height.
            **kwargs: Forwarded to the constructor (seed, placement,
                mine_positions).

        Raises:
            ValueError: If the dimensions or mine count are invalid.
        """
        return cls(FieldConfig(width, height, mine_count), **kwargs)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create a grid of closed empty cells."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    def _place_mines(self, positions: Iterable[Position]) -> None:
        for row, col in positions:
            self._grid[row][col].kind = MINE

    def _calculate_hints(self) -> None:
        """Set the kind of every safe cell from its neighbor mine count."""
        for row in range(self.config.height):
            for col in range(self.config.width):
                cell = self._grid[row][col]
                if not cell.is_mine:
                    count = self._count_adjacent_mines(row, col)
                    cell.kind = kind_for_count(count)

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(
        self, row: int, col: int
    ) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for the in-bounds Moore neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.height and 0 <= col < self.config.width

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def open(self, row: int, col: int) -> int:
        """
        Open the cell at the given position.

        Opening a mine loses the game and reveals the whole field. Opening
        an empty cell floods out to every connected safe cell, stopping at
        hint cells. Opening the last safe cell wins the game and reveals
        the whole field.

        Args:
            row: Row index to open.
            col: Column index to open.

        Returns:
            Number of safe cells opened by this move; 0 if nothing
            happened or a mine was hit.
        """
        if not self._can_open(row, col):
            return 0

        if self._grid[row][col].is_mine:
            self._finish(GameState.LOST)
            return 0

        opened = self._flood_open(row, col)
        self._check_win_condition()
        return opened

    def _can_open(self, row: int, col: int) -> bool:
        """Check if a cell can be opened."""
        if self._state != GameState.RUNNING:
            return False
        if not self._is_valid_position(row, col):
            return False
        return self._grid[row][col].is_closed

    def _flood_open(self, row: int, col: int) -> int:
        """Open a safe cell and spread through empty cells."""
        opened = 0
        pending = [(row, col)]
        while pending:
            current_row, current_col = pending.pop()
            cell = self._grid[current_row][current_col]
            if cell.is_opened or cell.is_mine:
                continue
            self._open_cell(cell)
            opened += 1
            if not cell.is_empty:
                continue
            for neighbor_row, neighbor_col in self._get_neighbors(
                current_row, current_col
            ):
                neighbor = self._grid[neighbor_row][neighbor_col]
                if not neighbor.is_opened and not neighbor.is_mine:
                    pending.append((neighbor_row, neighbor_col))
        logger.debug("Opened %d cells from (%d, %d)", opened, row, col)
        return opened

    def _open_cell(self, cell: Cell) -> None:
        """Open a single cell, keeping the counters in sync."""
        if cell.is_flagged:
            self._flag_count -= 1
        if cell.open():
            self._opened_count += 1

    def _check_win_condition(self) -> None:
        """Win once every safe cell is opened."""
        if self._opened_count == self.config.safe_cells:
            self._finish(GameState.WON)

    def _finish(self, state: GameState) -> None:
        """Reveal the whole field and enter a terminal state."""
        for row in self._grid:
            for cell in row:
                if not cell.is_opened:
                    self._open_cell(cell)
        self._state = state
        logger.debug("Game over: %s", state.name)

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if self._state != GameState.RUNNING:
            return False
        if not self._is_valid_position(row, col):
            return False
        cell = self._grid[row][col]
        if not cell.toggle_flag():
            return False
        self._flag_count += 1 if cell.is_flagged else -1
        return True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        """Number of columns."""
        return self.config.width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self.config.height

    @property
    def mine_count(self) -> int:
        """Number of mines on the field."""
        return self.config.num_mines

    @property
    def flag_count(self) -> int:
        """Number of currently flagged cells."""
        return self._flag_count

    @property
    def opened_count(self) -> int:
        """Number of currently opened cells."""
        return self._opened_count

    @property
    def remaining_mines(self) -> int:
        """Mines minus flags, as shown by a mine counter."""
        return self.config.num_mines - self._flag_count

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self._state

    @property
    def is_running(self) -> bool:
        """Check if game is still in progress."""
        return self._state == GameState.RUNNING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._state == GameState.LOST

    @property
    def grid(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Detached snapshot of every cell, row by row."""
        return self.snapshot()

    def snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        """
        Copy the grid.

        Returns:
            Tuple of rows, each a tuple of Cell copies. Changing the copies
            does not affect the field.
        """
        return tuple(
            tuple(replace(cell) for cell in row) for row in self._grid
        )

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get a copy of the cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return replace(self._grid[row][col])

    def get_observation(self) -> np.ndarray:
        """
        Get field state as a numpy array.

        Returns:
            2D numpy array where:
                -1 = closed
                -2 = flagged
                0-8 = opened with adjacent count
                9 = opened mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for row in range(self.config.height):
            for col in range(self.config.width):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def closed_positions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can still be opened.

        Returns:
            List of (row, col) positions whose cell is closed.
        """
        positions = []
        for row in range(self.config.height):
            for col in range(self.config.width):
                if self._grid[row][col].is_closed:
                    positions.append((row, col))
        return positions
