"""
Mine placement strategies.

Each strategy picks ``num_mines`` distinct positions on a
``height x width`` grid using the given random generator.
"""
import operator
import random
from typing import Callable, Dict, Iterable, List, Set, Tuple

Position = Tuple[int, int]
PlacementStrategy = Callable[[int, int, int, random.Random], List[Position]]


# ============================================================================
# Strategies
# ============================================================================

def place_by_rejection(
    width: int, height: int, num_mines: int, rng: random.Random
) -> List[Position]:
    """
    Draw random coordinates, discarding draws that hit an existing mine.

    Expected draw count grows quickly as the mine density approaches
    100%; prefer ``place_by_sample`` for dense boards.
    """
    mines: List[Position] = []
    taken: Set[Position] = set()
    while len(mines) < num_mines:
        position = (rng.randrange(height), rng.randrange(width))
        if position in taken:
            continue
        taken.add(position)
        mines.append(position)
    return mines


def place_by_sample(
    width: int, height: int, num_mines: int, rng: random.Random
) -> List[Position]:
    """Sample mine positions without replacement in linear time."""
    indices = rng.sample(range(width * height), num_mines)
    return [divmod(index, width) for index in indices]


STRATEGIES: Dict[str, PlacementStrategy] = {
    "sample": place_by_sample,
    "rejection": place_by_rejection,
}


def get_strategy(name: str) -> PlacementStrategy:
    """Look up a placement strategy by name."""
    try:
        return STRATEGIES[name]
    except KeyError:
        choices = ", ".join(sorted(STRATEGIES))
        raise ValueError(
            f"Unknown placement strategy {name!r} (choose from {choices})"
        ) from None


# ============================================================================
# Explicit Layouts
# ============================================================================

def _coordinate(value) -> int:
    """Accept whole-number indices only, numpy integers included."""
    if not isinstance(value, bool):
        try:
            return operator.index(value)
        except TypeError:
            pass
    raise ValueError(f"Mine coordinate must be an integer, got {value!r}")


def validate_positions(
    positions: Iterable[Position], width: int, height: int, num_mines: int
) -> List[Position]:
    """
    Check an explicit mine layout against the board dimensions.

    Args:
        positions: (row, col) pairs to mine.
        width: Number of columns.
        height: Number of rows.
        num_mines: Expected number of mines.

    Returns:
        The positions as a list of tuples.

    Raises:
        ValueError: If a coordinate is not an integer, a position is out
            of bounds or repeated, or the count does not match
            ``num_mines``.
    """
    mines = [(_coordinate(row), _coordinate(col)) for row, col in positions]
    for row, col in mines:
        if not (0 <= row < height and 0 <= col < width):
            raise ValueError(f"Mine position ({row}, {col}) is out of bounds")
    if len(set(mines)) != len(mines):
        raise ValueError("Mine positions must be distinct")
    if len(mines) != num_mines:
        raise ValueError(
            f"Expected {num_mines} mine positions, got {len(mines)}"
        )
    return mines
