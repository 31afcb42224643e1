"""
Game implementation for Five-in-a-Row.
"""
import logging
from enum import Enum

from .board import Board
from .errors import ConstructionError
from .player import Player
from .symbols import Symbol

logger = logging.getLogger(__name__)


class MoveResult(Enum):
    """
    Outcome of Game.make_move.

    INVALID is falsy and every other outcome is truthy, so the result can
    be used directly as a success flag.
    """
    INVALID = 'invalid'
    CONTINUE = 'continue'
    WIN = 'win'
    DRAW = 'draw'

    def __bool__(self):
        return self is not MoveResult.INVALID

    @property
    def is_terminal(self):
        return self in (MoveResult.WIN, MoveResult.DRAW)


class Game:
    """
    Manages a Five-in-a-Row game session.

    Handles turn management and game state, and coordinates between
    the board and the two players. Player 1 always plays X and starts.

    Each move runs in a fixed order: placement, then the removal rule,
    then the win check on the board left after removal, then the draw
    check. The turn never advances inside make_move; the caller invokes
    next_turn after a non-terminal move.
    """

    def __init__(self, board_size, player1_name, player2_name, selector=None):
        """
        Initialize a new game.

        Args:
            board_size (int): Side length of the board
            player1_name (str): Display name of the X player
            player2_name (str): Display name of the O player
            selector: Position selector for the removal rule, see Board
        """
        board = Board(board_size, selector=selector)
        self._setup(board, Player(player1_name, Symbol.X), Player(player2_name, Symbol.O))

    @classmethod
    def with_players(cls, board, player1, player2):
        """
        Build a game around an existing board and players.

        Raises:
            ConstructionError: If both players hold the same symbol
        """
        game = cls.__new__(cls)
        game._setup(board, player1, player2)
        return game

    def _setup(self, board, player1, player2):
        if player1.symbol == player2.symbol:
            raise ConstructionError(
                f"Players must have different symbols, both have {player1.symbol}"
            )
        self.board = board
        self.player1 = player1
        self.player2 = player2
        self.current_player = player1
        self.move_count = 0
        self.last_removed = []
        self._winner = None
        self._is_draw = False

    @property
    def other_player(self):
        return self.player2 if self.current_player is self.player1 else self.player1

    @property
    def is_game_over(self):
        return self._winner is not None or self._is_draw

    @property
    def game_state(self):
        """
        Get the current game state.

        Returns:
            str: One of 'ongoing', 'win', 'draw'
        """
        if self._winner is not None:
            return 'win'
        elif self._is_draw:
            return 'draw'
        else:
            return 'ongoing'

    @property
    def winner(self):
        """
        Get the winner of the game.

        Returns:
            Symbol or None: Winning symbol, None while ongoing or on a draw
        """
        return self._winner

    def make_move(self, row, col):
        """
        Make a move for the current player.

        Args:
            row (int): Row position
            col (int): Column position

        Returns:
            MoveResult: INVALID if the cell is taken or the game is over,
                otherwise WIN, DRAW or CONTINUE

        Raises:
            InvalidCoordinateError: If (row, col) is outside the board
        """
        # Won and draw are final
        if self.is_game_over:
            return MoveResult.INVALID

        symbol = self.current_player.symbol
        if not self.board.place_sign(row, col, symbol):
            return MoveResult.INVALID

        self.move_count += 1
        self.last_removed = self.board.handle_adjacent_count(row, col, symbol)

        if self.board.check_five_in_a_row(symbol):
            self._winner = symbol
            logger.debug("%s (%s) wins after %d moves", self.current_player.name, symbol, self.move_count)
            return MoveResult.WIN
        elif self.board.is_full():
            self._is_draw = True
            logger.debug("Draw after %d moves", self.move_count)
            return MoveResult.DRAW

        return MoveResult.CONTINUE

    def next_turn(self):
        """Switch the current player."""
        self.current_player = self.other_player
