"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Adjacent, Cell, CellStatus, Field, FieldConfig, MINE


# ============================================================================
# Field Fixtures
# ============================================================================

@pytest.fixture
def default_field() -> Field:
    """Create a default 9x9 field with 10 random mines."""
    return Field()


@pytest.fixture
def corner_mine_field() -> Field:
    """
    2x2 field with a single mine in the top-left corner.

        * 1
        1 1
    """
    return Field.create(2, 2, 1, mine_positions=[(0, 0)])


@pytest.fixture
def walled_field() -> Field:
    """
    5x5 field with a vertical wall of mines in column 2.

        . 2 * 2 .
        . 3 * 3 .
        . 3 * 3 .
        . 3 * 3 .
        . 2 * 2 .
    """
    return Field.create(
        5, 5, 5, mine_positions=[(row, 2) for row in range(5)]
    )


@pytest.fixture
def diagonal_field() -> Field:
    """
    4x4 field whose two empty regions touch only diagonally.

        . . 1 *
        . . 1 1
        1 1 . .
        * 1 . .
    """
    return Field.create(4, 4, 2, mine_positions=[(0, 3), (3, 0)])


@pytest.fixture
def empty_field() -> Field:
    """Create a field with no mines for cascade testing."""
    return Field(FieldConfig(5, 5, 0))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def closed_cell() -> Cell:
    """Create a closed empty cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(kind=MINE)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create an opened cell with adjacent mines."""
    return Cell(kind=Adjacent(3), status=CellStatus.OPENED)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> FieldConfig:
    """Create a valid field configuration."""
    return FieldConfig(9, 9, 10)
