"""
Exceptions raised by the Five-in-a-Row engine.

An occupied target cell is not an error: placement reports it through its
return value.
"""


class InvalidCoordinateError(ValueError):
    """A row or column outside the board was passed in."""

    def __init__(self, row, col, size):
        super().__init__(f"Position ({row}, {col}) is outside the {size}x{size} board")
        self.row = row
        self.col = col
        self.size = size


class ConstructionError(ValueError):
    """A board or game was built from arguments that cannot make a game."""
