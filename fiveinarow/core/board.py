"""
Board implementation for Five-in-a-Row.
"""
import logging

import numpy as np

from .errors import ConstructionError, InvalidCoordinateError
from .selection import RandomSelector
from .symbols import Cell, Symbol

logger = logging.getLogger(__name__)

WIN_LENGTH = 5

# Adjacency metric -> number of stones removed
REMOVAL_COUNTS = {3: 1, 4: 2}

DIRECTIONS = [
    (1, 0),   # Vertical
    (0, 1),   # Horizontal
    (1, 1),   # Diagonal (↘)
    (1, -1),  # Anti-diagonal (↙)
]


class Board:
    """
    Represents a square Five-in-a-Row board.

    Board state representation (see Cell):
    - 0: empty cell
    - 1: X
    - -1: O
    """

    def __init__(self, size, selector=None):
        """
        Initialize an empty board.

        Args:
            size (int): Side length of the grid. Sizes below 5 are allowed,
                a five-in-a-row just cannot happen on them.
            selector: Object with a pick(candidates, k) method used by the
                removal rule. Defaults to an unseeded RandomSelector.
        """
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise ConstructionError(f"Board size must be an integer, got {size!r}")
        if size < 1:
            raise ConstructionError(f"Board size must be positive, got {size}")

        self.size = int(size)
        self.state = np.zeros((self.size, self.size), dtype=np.int8)
        self.selector = selector if selector is not None else RandomSelector()

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def _require_in_bounds(self, row, col):
        if not self.in_bounds(row, col):
            raise InvalidCoordinateError(row, col, self.size)

    def place_sign(self, row, col, symbol):
        """
        Place a symbol on the board.

        Args:
            row (int): Row position
            col (int): Column position
            symbol (Symbol): Symbol to place

        Returns:
            bool: True if the symbol was placed, False if the cell is taken

        Raises:
            InvalidCoordinateError: If (row, col) is outside the board
        """
        self._require_in_bounds(row, col)
        if not isinstance(symbol, Symbol):
            raise ValueError(f"Expected a Symbol, got {symbol!r}")

        if self.state[row, col] != Cell.EMPTY:
            return False

        self.state[row, col] = symbol
        return True

    def get_symbol_at(self, row, col):
        """
        Get the cell at a position.

        Returns:
            Cell: EMPTY, X or O
        """
        self._require_in_bounds(row, col)
        return Cell(int(self.state[row, col]))

    def get_legal_moves(self):
        """
        Get all empty positions on the board.

        Returns:
            list: List of (row, col) tuples, row-major
        """
        return [(int(r), int(c)) for r, c in np.argwhere(self.state == Cell.EMPTY)]

    def positions_of(self, symbol):
        """List of (row, col) tuples holding the symbol, row-major."""
        return [(int(r), int(c)) for r, c in np.argwhere(self.state == symbol)]

    def count(self, symbol):
        return int(np.count_nonzero(self.state == symbol))

    def is_full(self):
        return not np.any(self.state == Cell.EMPTY)

    def _check_window(self, row, col, dr, dc, symbol):
        """
        Check whether the WIN_LENGTH cells starting at (row, col) and
        advancing by (dr, dc) all hold the symbol.
        """
        for k in range(WIN_LENGTH):
            r, c = row + k * dr, col + k * dc
            if not self.in_bounds(r, c) or self.state[r, c] != symbol:
                return False
        return True

    def check_five_in_a_row(self, symbol):
        """
        Check whether the symbol has five in a row anywhere on the board.

        Every cell is tried as the start of a window in each direction.
        Runs longer than five contain a matching window, so they win too.

        Args:
            symbol (Symbol): Symbol to check

        Returns:
            bool: True if a five-cell window of the symbol exists
        """
        for row in range(self.size):
            for col in range(self.size):
                if self.state[row, col] != symbol:
                    continue
                for dr, dc in DIRECTIONS:
                    if self._check_window(row, col, dr, dc, symbol):
                        return True
        return False

    def _count_in_direction(self, row, col, dr, dc, symbol):
        """Count consecutive symbols from (row, col) inclusive."""
        count = 0
        r, c = row, col
        while self.in_bounds(r, c) and self.state[r, c] == symbol:
            count += 1
            r, c = r + dr, c + dc
        return count

    def count_adjacent(self, row, col, symbol):
        """
        Longest run of the symbol passing through (row, col) on any axis.

        Returns:
            int: Run length, 0 if the cell does not hold the symbol
        """
        self._require_in_bounds(row, col)
        longest = 0
        for dr, dc in DIRECTIONS:
            forward = self._count_in_direction(row, col, dr, dc, symbol)
            backward = self._count_in_direction(row, col, -dr, -dc, symbol)
            # The start cell is counted by both walks
            longest = max(longest, forward + backward - 1)
        return longest

    def handle_adjacent_count(self, row, col, symbol):
        """
        Apply the removal rule after a stone was placed at (row, col).

        A run of exactly 3 through the placed stone removes one stone of
        the symbol, a run of exactly 4 removes two. Stones are chosen by the
        selector among every stone of that symbol on the board, the placed
        one included. If fewer stones exist than requested, all are removed.

        Args:
            row (int): Row of the placed stone
            col (int): Column of the placed stone
            symbol (Symbol): Symbol that was placed

        Returns:
            list: (row, col) positions that were cleared
        """
        adjacent = self.count_adjacent(row, col, symbol)
        remove_count = REMOVAL_COUNTS.get(adjacent, 0)
        logger.debug("Adjacent count for %s at (%d, %d): %d", symbol, row, col, adjacent)
        if remove_count == 0:
            return []

        candidates = self.positions_of(symbol)
        removed = self.selector.pick(candidates, remove_count)
        for r, c in removed:
            self.state[r, c] = Cell.EMPTY
        logger.debug("Removed %s stones at %s", symbol, removed)
        return removed

    def __str__(self):
        return '\n'.join(
            ' '.join(str(Cell(int(value))) for value in row) for row in self.state
        )
