"""
Console front end for the TicTacToe engine.

This script ties together:
- Board (state, validation, win checking)
- Search (negamax AI)

Run this script to play TicTacToe against the computer!
"""

from typing import Optional

from board import BoardState, Cell, Move, MoveValidator, Outcome, WinChecker
from search import AIPlayer, SearchConfig


class GameSession:
    """
    Owns the live board and the score counters for a run of games.

    Game flow:
    1. Human (X) picks a cell
    2. Session validates and commits the move
    3. Computer (O) searches for the best reply and commits it
    4. Repeat until someone wins or it's a draw
    """

    def __init__(self, max_depth: int = SearchConfig.MAX_DEPTH, computer_first: bool = False):
        """
        Initialize the session.

        Args:
            max_depth: Search depth for the computer.
            computer_first: If True, the computer makes the first move of each game.
        """
        self.computer_first = computer_first
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(Cell.COMPUTER, max_depth=max_depth)
        self.advisor = AIPlayer(Cell.HUMAN, max_depth=max_depth)

        # Scores, from the human's point of view
        self.wins = 0
        self.losses = 0
        self.draws = 0

        self.board = self._new_board()
        self.is_game_over = False

    def _new_board(self) -> BoardState:
        return BoardState.new(Cell.COMPUTER if self.computer_first else Cell.HUMAN)

    def new_game(self):
        """Reset the board for a new round. Scores are kept."""
        self.board = self._new_board()
        self.is_game_over = False

    def play_human(self, row: int, col: int) -> bool:
        """
        Play the human's chosen cell.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            True if the move was made, False if it was rejected.
        """
        if self.board.turn != Cell.HUMAN:
            print("It's not your turn!")
            return False

        result = self.validator.validate_move(self.board, row, col)
        if not result.is_valid:
            print(result.error_message)
            return False

        self.board.commit_move(Move(row, col))
        self._check_game_over()
        return True

    def play_computer(self) -> Optional[Move]:
        """
        Let the computer search for and play its move.

        Returns:
            The move played, or None if the computer could not move.
        """
        move = self.ai.get_best_move(self.board)

        if move is None:
            return None

        self.board.commit_move(move)
        self._check_game_over()
        return move

    def hint(self) -> str:
        """Suggest a move for the human."""
        return self.advisor.get_move_suggestion(self.board)

    def _check_game_over(self):
        """Record the result once, when the game ends."""
        if self.is_game_over or not self.board.is_terminal():
            return

        self.is_game_over = True
        if self.board.winner == Outcome.HUMAN:
            self.wins += 1
        elif self.board.winner == Outcome.COMPUTER:
            self.losses += 1
        else:
            self.draws += 1

    def score_line(self) -> str:
        return f"Wins: {self.wins}  Losses: {self.losses}  Draws: {self.draws}"

    def show_result(self):
        """Show the final game result."""
        print("\n" + "="*40)
        print("   GAME OVER!")
        print("="*40)

        self.board.print_board()

        line = self.win_checker.get_winning_line(self.board.grid)
        if line:
            print(f"Winning line: {line}")

        if self.board.winner == Outcome.HUMAN:
            print("\nYou Win!")
        elif self.board.winner == Outcome.COMPUTER:
            print("\nYou Lose.")
        else:
            print("\nCat's Game.")

        print(self.score_line())
        print("="*40)


def parse_cell(text: str) -> Optional[Move]:
    """
    Parse "row col" (or "row,col") typed by the player.

    Returns:
        The Move, or None if the text isn't two integers.
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return Move(int(parts[0]), int(parts[1]))
    except ValueError:
        return None


def play_game(session: GameSession) -> bool:
    """
    Play one game on the console.

    Returns:
        False if the player quit, True if the game finished.
    """
    while not session.is_game_over:
        if session.board.turn == Cell.COMPUTER:
            print("\n>>> Computer is thinking...")
            move = session.play_computer()
            if move is None:
                print("ERROR: AI could not find a move!")
                return False
            print(f">>> Computer plays ({move.row}, {move.col})")
            continue

        session.board.print_board()
        text = input("Your move (row col, h for hint, q to quit): ").strip().lower()

        if text == "q":
            return False
        if text == "h":
            print(session.hint())
            continue

        move = parse_cell(text)
        if move is None:
            print("Please type two numbers from 0 to 2, like: 1 1")
            continue

        session.play_human(move.row, move.col)

    session.show_result()
    return True


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against a negamax AI")
    parser.add_argument(
        "--depth",
        type=int,
        default=SearchConfig.MAX_DEPTH,
        help="How many plies the computer looks ahead (default: %(default)s)"
    )
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer make the first move"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print search statistics after every computer move"
    )

    args = parser.parse_args()

    if args.depth < 1:
        parser.error("--depth must be at least 1")

    SearchConfig.DEBUG_MODE = args.debug

    session = GameSession(max_depth=args.depth, computer_first=args.computer_first)

    print("\n" + "="*40)
    print("   TicTacToe: you are X, computer is O")
    print("="*40)

    try:
        while play_game(session):
            again = input("Play again? [y/N] ").strip().lower()
            if again != "y":
                break
            session.new_game()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print(session.score_line())
        print("Goodbye!")


if __name__ == "__main__":
    main()
