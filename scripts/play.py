#!/usr/bin/env python3
"""
CLI interface for playing Five-in-a-Row between two humans.
"""
import sys
import os
import argparse

# Add the parent directory to Python path so we can import fiveinarow
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from fiveinarow.core.errors import InvalidCoordinateError
from fiveinarow.core.game import Game, MoveResult
from fiveinarow.core.selection import RandomSelector

BOARD_SIZES = (6, 10, 14)
DEFAULT_NAMES = ("Player 1", "Player 2")


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Play Five-in-a-Row in the terminal')
    parser.add_argument('--size', type=int, choices=BOARD_SIZES, default=None,
                        help='Board size (prompted if omitted)')
    parser.add_argument('--player1', type=str, default=None,
                        help='Name of the X player (prompted if omitted)')
    parser.add_argument('--player2', type=str, default=None,
                        help='Name of the O player (prompted if omitted)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the stone-removal rule (default: random)')
    return parser.parse_args(argv)


def display_board(game):
    """Display the current board state in ASCII format."""
    size = game.board.size
    header = "   " + "".join(f"{col:3d}" for col in range(size))
    print("\n" + header)
    print("   " + "---" * size)
    for row in range(size):
        cells = "".join(f"{str(game.board.get_symbol_at(row, col)):>3}" for col in range(size))
        print(f"{row:2d}|{cells} |{row:2d}")
    print("   " + "---" * size)
    print(header)


def resolve_name(raw, default):
    """Blank names fall back to the default."""
    name = (raw or '').strip()
    return name if name else default


def parse_move(move_input, size):
    """
    Parse move input from user.

    Args:
        move_input (str): User input like "3 4" or "3,4"
        size (int): Board size

    Returns:
        tuple: (row, col) or None if invalid
    """
    try:
        # Handle both space and comma separated input
        if ',' in move_input:
            parts = move_input.split(',')
        else:
            parts = move_input.split()

        if len(parts) != 2:
            return None

        row = int(parts[0].strip())
        col = int(parts[1].strip())

        if 0 <= row < size and 0 <= col < size:
            return (row, col)
        else:
            return None

    except ValueError:
        return None


def select_board_size():
    """Prompt for one of the supported board sizes."""
    options = ", ".join(str(size) for size in BOARD_SIZES)
    while True:
        choice = input(f"Select board size ({options}): ").strip()
        if choice.isdigit() and int(choice) in BOARD_SIZES:
            return int(choice)
        print(f"Invalid choice! Please enter one of {options}.")


def get_human_move(game):
    """
    Get move input from the current player.

    Returns:
        tuple: (row, col) or None if quit
    """
    player = game.current_player
    while True:
        move_input = input(f"{player.name} ({player.symbol}), enter your move (row col) or 'quit': ").strip()

        if move_input.lower() in ['quit', 'exit', 'q']:
            return None

        move = parse_move(move_input, game.board.size)
        if move is None:
            print("Invalid input! Please enter: row col (e.g., '2 3')")
            continue

        if game.board.get_symbol_at(*move).is_empty:
            return move
        print(f"Position {move} is already occupied!")


def main(argv=None):
    """Main game loop."""
    args = parse_args(argv)

    print("=" * 60)
    print("                 FIVE IN A ROW")
    print("=" * 60)
    print("Get five of your symbols in a row to win.")
    print("Making exactly 3 in a row removes one of your symbols at random,")
    print("exactly 4 in a row removes two.")
    print("=" * 60)

    try:
        size = args.size if args.size is not None else select_board_size()
        name1 = args.player1 if args.player1 is not None else input("Name of player 1 (X): ")
        name2 = args.player2 if args.player2 is not None else input("Name of player 2 (O): ")
    except (KeyboardInterrupt, EOFError):
        print("\nExiting...")
        return

    game = Game(size,
                resolve_name(name1, DEFAULT_NAMES[0]),
                resolve_name(name2, DEFAULT_NAMES[1]),
                selector=RandomSelector(args.seed))
    result = MoveResult.CONTINUE

    try:
        while not game.is_game_over:
            display_board(game)
            print(f"\nTurn #{game.move_count + 1}")
            print(f"Current player: {game.current_player.name} ({game.current_player.symbol})")

            move = get_human_move(game)
            if move is None:
                print("\nThanks for playing!")
                return

            try:
                result = game.make_move(*move)
            except InvalidCoordinateError as e:
                print(f"ERROR: {e}")
                continue

            if not result:
                print(f"Position {move} is already occupied!")
                continue
            if game.last_removed:
                removed = ", ".join(str(pos) for pos in game.last_removed)
                print(f"Penalty! Removed {game.current_player.symbol} at {removed}")
            if not result.is_terminal:
                game.next_turn()

    except (KeyboardInterrupt, EOFError):
        print("\nThanks for playing!")
        return

    # Game ended - show final state
    display_board(game)
    print("\n" + "=" * 60)
    if result is MoveResult.WIN:
        print(f"GAME OVER - {game.current_player.name} ({game.winner}) wins!")
    elif result is MoveResult.DRAW:
        print("GAME OVER - It's a draw!")
        print("The board is full with no winner.")
    print(f"Game completed in {game.move_count} moves.")
    print("=" * 60)


if __name__ == "__main__":
    main()
