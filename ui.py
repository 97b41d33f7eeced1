"""
TicTacToe UI
A graphical interface for two-player TicTacToe using Tkinter.

Shows:
- Status bar (winner, draw, or next player)
- The 3x3 board, with the winning line highlighted
- Restart button
- Move history; click an entry to jump back to it
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import List, Optional

from logic.config import GameConfig
from logic.game_engine import GameEngine
from logic.game_state import Outcome

logger = logging.getLogger(__name__)


class UIConfig:
    """
    Look and feel of the window.
    Change these values to restyle the game.
    """

    # ==================== WINDOW ====================
    TITLE = "Tic Tac Toe"
    GEOMETRY = "420x640"
    MIN_WIDTH = 360
    MIN_HEIGHT = 560

    # ==================== COLORS ====================
    PRIMARY = '#1976d2'
    SECONDARY = '#424242'
    ACCENT = '#ffca28'
    BACKGROUND = '#f9fafb'
    SURFACE = '#ffffff'
    WIN_COLOR = '#2e7d32'
    DRAW_COLOR = SECONDARY
    ONGOING_COLOR = PRIMARY

    # ==================== FONTS ====================
    FONT_FAMILY = 'Segoe UI'
    TITLE_FONT = (FONT_FAMILY, 18, 'bold')
    STATUS_FONT = (FONT_FAMILY, 13, 'bold')
    CELL_FONT = (FONT_FAMILY, 24, 'bold')
    BUTTON_FONT = (FONT_FAMILY, 10)


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    The UI keeps no game state of its own: every click is forwarded to
    the engine and the whole window is redrawn from the engine afterwards.
    """

    def __init__(self, engine: Optional[GameEngine] = None):
        """Initialize the UI."""
        self.engine = engine or GameEngine()
        self.history_buttons: List[tk.Button] = []

        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(UIConfig.TITLE)
        self.root.configure(bg=UIConfig.BACKGROUND)
        self.root.geometry(UIConfig.GEOMETRY)
        self.root.minsize(UIConfig.MIN_WIDTH, UIConfig.MIN_HEIGHT)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=UIConfig.BACKGROUND)
        style.configure('Title.TLabel', background=UIConfig.BACKGROUND,
                        foreground=UIConfig.SECONDARY, font=UIConfig.TITLE_FONT)
        style.configure('Status.TLabel', background=UIConfig.BACKGROUND,
                        font=UIConfig.STATUS_FONT)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=16, pady=16)

        ttk.Label(main_frame, text=UIConfig.TITLE, style='Title.TLabel').pack(pady=(0, 8))

        # Status bar
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=(0, 12))

        # Board
        board_frame = ttk.Frame(main_frame)
        board_frame.pack()

        self.board_cells: List[tk.Button] = []
        for index in range(GameConfig.CELL_COUNT):
            row, col = divmod(index, GameConfig.BOARD_SIZE)
            cell = tk.Button(
                board_frame,
                text="",
                font=UIConfig.CELL_FONT,
                width=3,
                height=1,
                bg=UIConfig.SURFACE,
                fg=UIConfig.SECONDARY,
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        # Controls
        tk.Button(
            main_frame,
            text="Restart",
            font=UIConfig.BUTTON_FONT,
            bg=UIConfig.PRIMARY,
            fg='white',
            width=12,
            command=self._on_restart
        ).pack(pady=12)

        # Move history
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=8)
        ttk.Label(main_frame, text="Move History", style='Status.TLabel').pack()

        self.history_frame = ttk.Frame(main_frame)
        self.history_frame.pack(fill=tk.X, pady=8)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    # ==================== INTENTS ====================

    def _on_cell_click(self, index: int):
        self.engine.place_mark(index)
        self._refresh()

    def _on_jump(self, step: int):
        self.engine.jump_to(step)
        self._refresh()

    def _on_restart(self):
        self.engine.restart()
        self._refresh()

    # ==================== RENDERING ====================

    def _refresh(self):
        """Redraw everything from engine state."""
        self._update_status()
        self._update_board()
        self._update_history()

    def _update_status(self):
        status = self.engine.get_status()
        if status.outcome == Outcome.WINNER:
            color = UIConfig.WIN_COLOR
        elif status.outcome == Outcome.DRAW:
            color = UIConfig.DRAW_COLOR
        else:
            color = UIConfig.ONGOING_COLOR
        self.status_label.configure(text=status.text, foreground=color)

    def _update_board(self):
        board = self.engine.board
        winning_line = self.engine.winning_line or ()

        for index, cell in enumerate(self.board_cells):
            mark = board[index]
            cell.configure(
                text=str(mark) if mark is not None else "",
                bg=UIConfig.ACCENT if index in winning_line else UIConfig.SURFACE
            )

    def _update_history(self):
        """Rebuild the history list; it changes length as moves are made."""
        for button in self.history_buttons:
            button.destroy()
        self.history_buttons = []

        for step in range(len(self.engine.history)):
            is_current = step == self.engine.current_step
            button = tk.Button(
                self.history_frame,
                text=self.engine.describe_step(step),
                font=UIConfig.BUTTON_FONT,
                anchor='w',
                relief='sunken' if is_current else 'flat',
                bg=UIConfig.PRIMARY if is_current else UIConfig.BACKGROUND,
                fg='white' if is_current else UIConfig.SECONDARY,
                command=lambda s=step: self._on_jump(s)
            )
            button.pack(fill=tk.X, pady=1)
            self.history_buttons.append(button)

    def _quit(self):
        """Quit the application."""
        logger.info("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    logging.basicConfig(level=logging.INFO, format=GameConfig.LOG_FORMAT)
    ui = TicTacToeUI()
    ui.run()


if __name__ == "__main__":
    main()
