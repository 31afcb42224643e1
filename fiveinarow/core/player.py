"""
Player implementation for Five-in-a-Row.
"""
from .symbols import Symbol


class Player:
    """
    A participant with a display name and a fixed symbol.

    The name may be changed at any time; the symbol is set once.
    """

    def __init__(self, name, symbol):
        if not isinstance(symbol, Symbol):
            raise ValueError(f"Expected a Symbol, got {symbol!r}")
        self.name = name
        self._symbol = symbol

    @property
    def symbol(self):
        return self._symbol

    def __repr__(self):
        return f"Player(name={self.name!r}, symbol={self._symbol})"
