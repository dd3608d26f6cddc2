"""
TicTacToe UI
A graphical interface for the TicTacToe engine using Tkinter.

Shows:
- The 3x3 board (click a cell to play)
- Game status (turn, winner, draw)
- Restart / Reset All / Play vs Computer controls
- Running score for X and O
"""

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from engine.config import GameConfig
from engine.game_state import Mark
from engine.game_engine import GameEngine
from engine.ai_player import RandomPlayer


class TkScheduler:
    """Runs engine callbacks on the Tk event loop via root.after()."""

    def __init__(self, root: tk.Misc):
        self.root = root

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self.root.after(delay_ms, callback)


class TicTacToeUI:
    """
    Main UI class. Renders engine snapshots and forwards clicks.
    """

    def __init__(self, config: Optional[GameConfig] = None, opponent_mode: bool = False):
        """Initialize the UI."""
        self.config = config or GameConfig()

        # Create UI first so the scheduler has a root to attach to
        self._create_ui()

        self.engine = GameEngine(
            config=self.config,
            scheduler=TkScheduler(self.root),
            player=RandomPlayer(seed=self.config.AI_SEED),
            on_change=lambda _engine: self._refresh()
        )
        if opponent_mode:
            self.engine.set_opponent_mode(True)

        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        cfg = self.config

        self.root = tk.Tk()
        self.root.title("Tic Tac Toe")
        self.root.configure(bg=cfg.COLOR_SECONDARY)
        self.root.resizable(False, False)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=cfg.COLOR_SECONDARY)
        style.configure('TLabel', background=cfg.COLOR_SECONDARY, font=cfg.LABEL_FONT)
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground=cfg.COLOR_PRIMARY)
        style.configure('Status.TLabel', font=('Segoe UI', 13), foreground=cfg.COLOR_PRIMARY)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=15)

        ttk.Label(main_frame, text="Tic Tac Toe", style='Title.TLabel').pack(pady=(0, 10))

        # Board grid
        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        self.cell_buttons = []
        for idx in range(cfg.CELL_COUNT):
            row, col = divmod(idx, cfg.BOARD_SIZE)
            btn = tk.Button(
                board_frame,
                text="",
                font=cfg.CELL_FONT,
                width=3,
                height=1,
                bg=cfg.COLOR_SECONDARY,
                relief='ridge',
                borderwidth=2,
                highlightbackground=cfg.COLOR_GRID,
                command=lambda i=idx: self._on_cell(i)
            )
            btn.grid(row=row, column=col, padx=3, pady=3)
            self.cell_buttons.append(btn)

        # Game status
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=8)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=5)

        tk.Button(
            control_frame,
            text="Restart",
            font=('Segoe UI', 10, 'bold'),
            bg=cfg.COLOR_PRIMARY,
            fg=cfg.COLOR_SECONDARY,
            width=10,
            command=self._on_restart
        ).pack(side=tk.LEFT, padx=4)

        tk.Button(
            control_frame,
            text="Reset All",
            font=('Segoe UI', 10, 'bold'),
            bg=cfg.COLOR_SECONDARY,
            fg=cfg.COLOR_ACCENT,
            width=10,
            command=self._on_reset_all
        ).pack(side=tk.LEFT, padx=4)

        self.ai_btn = tk.Button(
            control_frame,
            text="Play vs Computer",
            font=('Segoe UI', 10, 'bold'),
            width=16,
            command=self._on_toggle_ai
        )
        self.ai_btn.pack(side=tk.LEFT, padx=4)

        # Score panel
        score_frame = ttk.Frame(main_frame)
        score_frame.pack(fill=tk.X, pady=(12, 0))

        self.score_x_label = ttk.Label(score_frame, text="X: 0", foreground=cfg.COLOR_PRIMARY)
        self.score_x_label.pack(side=tk.LEFT, padx=20)
        self.score_o_label = ttk.Label(score_frame, text="O: 0", foreground=cfg.COLOR_ACCENT)
        self.score_o_label.pack(side=tk.RIGHT, padx=20)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    # ==================== USER INTENTS ====================

    def _on_cell(self, index: int):
        # Cells belong to the computer while it is thinking
        if self.engine.is_computer_turn():
            return
        self.engine.place_mark(index)

    def _on_restart(self):
        print("Restarting round...")
        self.engine.restart_round()

    def _on_reset_all(self):
        print("Resetting game...")
        self.engine.reset_all()

    def _on_toggle_ai(self):
        if self.engine.set_opponent_mode(not self.engine.opponent_mode):
            print(f"Computer opponent: {'ON' if self.engine.opponent_mode else 'OFF'}")

    # ==================== RENDERING ====================

    def _refresh(self):
        """Redraw everything from an engine snapshot."""
        cfg = self.config
        state = self.engine.snapshot()
        line = self.engine.winning_line() or ()
        locked = state.result is not None or self.engine.is_computer_turn()

        for idx, btn in enumerate(self.cell_buttons):
            cell = state.board[idx]
            if cell is None:
                btn.configure(
                    text="",
                    bg=cfg.COLOR_SECONDARY,
                    state='disabled' if locked else 'normal'
                )
                continue

            fg = cfg.COLOR_PRIMARY if cell == Mark.X else cfg.COLOR_ACCENT
            btn.configure(
                text=cell.value,
                fg=fg,
                disabledforeground=fg,
                bg=cfg.COLOR_GRID if idx in line else cfg.COLOR_TILE,
                state='disabled'
            )

        self.status_label.configure(text=self.engine.status_text())

        self.score_x_label.configure(text=f"X: {state.score[Mark.X]}")
        self.score_o_label.configure(text=f"O: {state.score[Mark.O]}")

        if state.opponent_mode:
            self.ai_btn.configure(text="AI: ON", bg='#ffe0e0', fg='#e14b4b')
        else:
            self.ai_btn.configure(text="Play vs Computer", bg='#f2f2f2', fg='#334155')
        self.ai_btn.configure(state='normal' if self.engine.can_toggle_opponent_mode() else 'disabled')

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
