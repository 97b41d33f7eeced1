"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default, or a console game with --no-ui.

Console commands:
    0-8          place the next mark on that cell
    j N, jump N  jump to history step N
    h, history   list the move history
    r, restart   start a new game
    q, quit      leave the game
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from logic.config import GameConfig
from logic.game_engine import GameEngine

logger = logging.getLogger(__name__)

HELP_TEXT = "Commands: 0-8 to play, 'j N' to jump, 'h' history, 'r' restart, 'q' quit"


@dataclass
class Command:
    """A parsed console command."""
    action: str             # "place", "jump", "history", "restart" or "quit"
    argument: Optional[int] = None


def parse_command(text: str) -> Optional[Command]:
    """
    Parse one line of console input.

    Returns:
        The command, or None if the line is not understood.
    """
    words = text.strip().lower().split()
    if not words:
        return None

    head, args = words[0], words[1:]

    if head.isdecimal() and not args:
        return Command("place", int(head))

    if head in ("j", "jump") and len(args) == 1 and args[0].isdecimal():
        return Command("jump", int(args[0]))

    if args:
        return None

    if head in ("h", "history"):
        return Command("history")
    if head in ("r", "restart"):
        return Command("restart")
    if head in ("q", "quit", "exit"):
        return Command("quit")

    return None


def render_board(engine: GameEngine) -> str:
    """
    Draw the current board as text.

    Empty cells show their index so the player knows what to type.
    Cells of the winning line are wrapped in brackets.
    """
    board = engine.board
    winning_line = engine.winning_line or ()
    size = GameConfig.BOARD_SIZE

    rows = []
    for row in range(size):
        cells = []
        for col in range(size):
            index = row * size + col
            mark = board[index]
            text = str(mark) if mark is not None else str(index)
            cells.append(f"[{text}]" if index in winning_line else f" {text} ")
        rows.append("|".join(cells))

    return ("\n" + "---+" * (size - 1) + "---\n").join(rows)


def render_history(engine: GameEngine) -> str:
    """List every history step, marking the one being shown."""
    lines = []
    for step in range(len(engine.history)):
        marker = ">" if step == engine.current_step else " "
        lines.append(f"{marker} {step}: {engine.describe_step(step)}")
    return "\n".join(lines)


def run_console(
    engine: GameEngine,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print
):
    """
    Play in the terminal until the player quits or input runs out.

    Args:
        engine: Game to drive.
        input_fn: Reads one line, given a prompt.
        output_fn: Writes one block of text.
    """
    output_fn(HELP_TEXT)

    while True:
        output_fn("\n" + render_board(engine))
        output_fn(engine.status_text)

        try:
            line = input_fn("> ")
        except EOFError:
            return

        command = parse_command(line)
        if command is None:
            logger.debug("Unrecognised command: %r", line)
            output_fn(HELP_TEXT)
        elif command.action == "quit":
            return
        elif command.action == "place":
            engine.place_mark(command.argument)
        elif command.action == "jump":
            engine.jump_to(command.argument)
        elif command.action == "restart":
            engine.restart()
        elif command.action == "history":
            output_fn(render_history(engine))


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Two-player TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log ignored moves and jumps"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=GameConfig.LOG_FORMAT
    )

    try:
        # Launch UI by default
        if not args.no_ui:
            from ui import TicTacToeUI
            print("\n" + "="*60)
            print("   TicTacToe UI")
            print("="*60 + "\n")
            ui = TicTacToeUI()
            ui.run()
            return

        print("\n" + "="*60)
        print("   TicTacToe - Console Mode")
        print("="*60)

        run_console(GameEngine())
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
