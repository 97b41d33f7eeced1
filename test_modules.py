"""
Smoke tests for the TicTacToe modules.
Run this to verify all components work before playing:

    pytest test_modules.py
    python test_modules.py
"""

import sys

import pytest


def test_game_config():
    """Test game configuration."""
    print("\n=== Testing Game Config ===")
    from logic.config import GameConfig

    print(f"  Board size: {GameConfig.BOARD_SIZE}x{GameConfig.BOARD_SIZE}")
    assert GameConfig.CELL_COUNT == 9
    assert GameConfig.FIRST_PLAYER == "X"


def test_game_logic():
    """Test game logic components together."""
    print("\n=== Testing Game Logic ===")
    from logic import GameEngine, Mark, MoveValidator, WinChecker

    engine = GameEngine()
    print(f"  Initial player: {engine.next_player}")
    assert engine.next_player == Mark.X

    engine.place_mark(4)
    print(f"  Made move at 4, status: {engine.status_text}")
    assert engine.status_text == "Next Player: O"

    validator = MoveValidator()
    result = validator.validate_move(engine.board, 4)
    print(f"  Validate 4: valid={result.is_valid}, error={result.error_message}")
    assert not result.is_valid
    assert result.error_message == "Cell 4 is already occupied by X"

    result = validator.validate_move(engine.board, 9)
    assert result.error_message == "Invalid cell 9. Must be 0-8."

    checker = WinChecker()
    winner = checker.check_winner(engine.board)
    print(f"  Winner check: {winner}")
    assert winner is None


def test_validator_reports_game_over():
    from logic import GameEngine, MoveValidator

    engine = GameEngine()
    for index in (0, 4, 1, 5, 2):
        engine.place_mark(index)

    result = MoveValidator().validate_move(engine.board, 8)
    assert result.error_message == "Game is already over!"


def test_validator_steps():
    from logic import MoveValidator

    validator = MoveValidator()
    assert validator.validate_step(0, 1).is_valid
    assert not validator.validate_step(1, 1).is_valid
    assert validator.validate_step(-1, 3).error_message == "Invalid step -1. Must be 0-2."


def test_main_console_mode(monkeypatch, capsys):
    """--no-ui starts a console game on a fresh engine."""
    print("\n=== Testing Entry Point ===")
    import main
    from logic import GameEngine

    engines = []
    monkeypatch.setattr(main, "run_console", engines.append)

    main.main(["--no-ui"])

    assert len(engines) == 1
    assert isinstance(engines[0], GameEngine)
    assert "Goodbye!" in capsys.readouterr().out


def test_main_ui_mode_interrupted(monkeypatch, capsys):
    """Ctrl-C in the window ends the game cleanly."""
    pytest.importorskip("tkinter")
    import main
    import ui

    class InterruptedUI:
        def run(self):
            raise KeyboardInterrupt

    monkeypatch.setattr(ui, "TicTacToeUI", InterruptedUI)

    main.main([])

    out = capsys.readouterr().out
    assert "Game interrupted by user." in out
    assert "Goodbye!" in out


def test_ui_config():
    """Test UI configuration (needs tkinter, not a display)."""
    print("\n=== Testing UI Config ===")
    pytest.importorskip("tkinter")
    from ui import UIConfig

    assert UIConfig.TITLE == "Tic Tac Toe"
    assert UIConfig.ACCENT == '#ffca28'


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - Module Tests")
    print("="*60)
    return pytest.main([__file__, "-v"])


if __name__ == "__main__":
    sys.exit(run_all_tests())
