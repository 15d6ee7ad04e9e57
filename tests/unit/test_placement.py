"""
Unit tests for mine placement strategies.
"""
import random

import numpy as np
import pytest
from minefield.placement import (
    STRATEGIES,
    get_strategy,
    place_by_rejection,
    place_by_sample,
    validate_positions,
)


# ============================================================================
# Strategy Tests
# ============================================================================

class TestStrategies:
    """Test both placement strategies."""

    @pytest.mark.parametrize("strategy", [place_by_sample, place_by_rejection])
    @pytest.mark.parametrize("width,height,mines", [
        (9, 9, 10),
        (3, 3, 8),
        (10, 1, 5),
        (1, 10, 0),
    ])
    def test_distinct_in_bounds_positions(
        self, strategy, width: int, height: int, mines: int
    ) -> None:
        """Strategies return the right number of distinct cells."""
        positions = strategy(width, height, mines, random.Random(0))
        assert len(positions) == mines
        assert len(set(positions)) == mines
        for row, col in positions:
            assert 0 <= row < height
            assert 0 <= col < width

    @pytest.mark.parametrize("strategy", [place_by_sample, place_by_rejection])
    def test_same_seed_same_positions(self, strategy) -> None:
        """Equal seeds produce equal placements."""
        first = strategy(16, 16, 40, random.Random(3))
        second = strategy(16, 16, 40, random.Random(3))
        assert first == second

    @pytest.mark.parametrize("strategy", [place_by_sample, place_by_rejection])
    def test_every_position_reachable(self, strategy) -> None:
        """Each cell of a small grid is eventually picked."""
        rng = random.Random(11)
        seen = set()
        for _ in range(200):
            seen.update(strategy(3, 2, 1, rng))
        assert seen == {(r, c) for r in range(2) for c in range(3)}

    def test_sample_is_row_major(self) -> None:
        """Flat indices map to (row, col) with row = index // width."""
        positions = place_by_sample(4, 2, 8, random.Random(0))
        assert sorted(positions) == [(r, c) for r in range(2) for c in range(4)]

    def test_get_strategy(self) -> None:
        """Strategies are looked up by name."""
        assert get_strategy("sample") is place_by_sample
        assert get_strategy("rejection") is place_by_rejection
        assert set(STRATEGIES) == {"sample", "rejection"}

    def test_get_unknown_strategy(self) -> None:
        """Unknown names list the valid choices."""
        with pytest.raises(ValueError, match="choose from rejection, sample"):
            get_strategy("reservoir")


# ============================================================================
# Explicit Layout Tests
# ============================================================================

class TestValidatePositions:
    """Test validation of explicit mine layouts."""

    def test_accepts_valid_layout(self) -> None:
        """Valid layouts come back as tuples."""
        assert validate_positions([[0, 1], (2, 2)], 3, 3, 2) == [(0, 1), (2, 2)]

    def test_accepts_empty_layout(self) -> None:
        """A field without mines takes an empty layout."""
        assert validate_positions([], 3, 3, 0) == []

    @pytest.mark.parametrize("position", [(-1, 0), (0, 3), (3, 0)])
    def test_rejects_out_of_bounds(self, position) -> None:
        """Positions off the grid are rejected."""
        with pytest.raises(ValueError, match="out of bounds"):
            validate_positions([position], 3, 3, 1)

    def test_rejects_duplicates(self) -> None:
        """Repeated positions are rejected."""
        with pytest.raises(ValueError, match="distinct"):
            validate_positions([(0, 0), (0, 0)], 3, 3, 2)

    def test_rejects_wrong_count(self) -> None:
        """Layout size must equal the mine count."""
        with pytest.raises(ValueError, match="Expected 1 mine positions, got 2"):
            validate_positions([(0, 0), (1, 1)], 3, 3, 1)

    @pytest.mark.parametrize(
        "position", [(0.7, 0), (0, 1.0), ("1", 0), (True, 0)]
    )
    def test_rejects_non_integer_coordinates(self, position) -> None:
        """Coordinates are never truncated or coerced."""
        with pytest.raises(ValueError, match="must be an integer"):
            validate_positions([position], 3, 3, 1)

    def test_accepts_numpy_integers(self) -> None:
        """Integer scalars from numpy arrays are valid coordinates."""
        position = (np.int64(1), np.int8(2))
        assert validate_positions([position], 3, 3, 1) == [(1, 2)]
