"""
Tests for the console front end in main.py.
"""

import pytest

from logic.game_engine import GameEngine
from main import Command, parse_command, render_board, render_history, run_console


@pytest.mark.parametrize("text, expected", [
    ("4", Command("place", 4)),
    ("  0 ", Command("place", 0)),
    ("j 2", Command("jump", 2)),
    ("JUMP 0", Command("jump", 0)),
    ("h", Command("history")),
    ("restart", Command("restart")),
    ("q", Command("quit")),
])
def test_parse_command(text, expected):
    assert parse_command(text) == expected


@pytest.mark.parametrize("text", ["", "hello", "j", "j x", "4 5", "r now", "-1", "²", "³", "j ²"])
def test_parse_command_rejects_garbage(text):
    assert parse_command(text) is None


def test_render_board_shows_marks_and_free_cells():
    engine = GameEngine()
    engine.place_mark(4)

    assert render_board(engine) == (
        " 0 | 1 | 2 \n"
        "---+---+---\n"
        " 3 | X | 5 \n"
        "---+---+---\n"
        " 6 | 7 | 8 "
    )


def test_render_board_brackets_winning_line():
    engine = GameEngine()
    for index in (0, 4, 1, 5, 2):
        engine.place_mark(index)

    first_row = render_board(engine).splitlines()[0]
    assert first_row == "[X]|[X]|[X]"


def test_render_history_marks_current_step():
    engine = GameEngine()
    engine.place_mark(0)
    engine.place_mark(4)
    engine.jump_to(1)

    assert render_history(engine).splitlines() == [
        "  0: Go to game start",
        "> 1: Go to move #1 (r1, c1)",
        "  2: Go to move #2 (r2, c2)",
    ]


def test_run_console_plays_a_game():
    engine = GameEngine()
    lines = iter(["0", "4", "1", "5", "2", "8", "h", "q"])
    output = []

    run_console(engine, input_fn=lambda prompt: next(lines), output_fn=output.append)

    assert engine.status_text == "Winner: X"
    assert len(engine.history) == 6
    assert "Winner: X" in output
    assert any("Go to move #5 (r1, c3)" in text for text in output)


def test_run_console_time_travel_and_restart():
    engine = GameEngine()
    lines = iter(["0", "4", "j 1", "8", "r"])
    output = []

    def read(prompt):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    run_console(engine, input_fn=read, output_fn=output.append)

    assert len(engine.history) == 1
    assert engine.current_step == 0


def test_run_console_unknown_command_prints_help():
    engine = GameEngine()
    lines = iter(["what", "q"])
    output = []

    run_console(engine, input_fn=lambda prompt: next(lines), output_fn=output.append)

    assert output.count(output[0]) == 2  # help at start and after "what"
    assert len(engine.history) == 1


def test_run_console_survives_non_decimal_digits():
    engine = GameEngine()
    lines = iter(["²", "j ³", "4", "q"])
    output = []

    run_console(engine, input_fn=lambda prompt: next(lines), output_fn=output.append)

    assert len(engine.history) == 2
    assert engine.board[4] is not None
