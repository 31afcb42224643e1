"""
Symbols and cell states for the Five-in-a-Row board.
"""
from enum import IntEnum


class Symbol(IntEnum):
    """
    The two marks a player can own.

    Values double as the numbers stored in the board array.
    """
    X = 1
    O = -1

    @property
    def opponent(self):
        """The other symbol."""
        return Symbol(-self.value)

    def __str__(self):
        return self.name


class Cell(IntEnum):
    """
    State of a single board position: empty, or occupied by X or O.
    """
    EMPTY = 0
    X = 1
    O = -1

    @classmethod
    def of(cls, symbol):
        """Occupied cell holding the given symbol."""
        return cls(int(symbol))

    @property
    def is_empty(self):
        return self is Cell.EMPTY

    @property
    def symbol(self):
        """
        Symbol held by the cell.

        Returns:
            Symbol or None: None for an empty cell
        """
        if self is Cell.EMPTY:
            return None
        return Symbol(self.value)

    def __str__(self):
        return '.' if self is Cell.EMPTY else self.name
