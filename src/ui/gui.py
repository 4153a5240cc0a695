"""
Lights Out GUI
Implements the game window, tile grid and controls using tkinter
"""

import tkinter as tk
from tkinter import messagebox
from typing import Callable, List, Optional

from lightsout import (
    Click, Difficulty, GameSession, GameState, NewGame, Reset, Resize, SetDifficulty,
    dispatch, elapsed_seconds, format_time, new_session
)
from lightsout.grid import DEFAULT_DIFFICULTY, DEFAULT_SIZE, MAX_SIZE, MIN_SIZE

HELP_TEXT = """How to Play Lights Out:

Objective: Turn every light off

Controls:
- Click a tile to toggle it and its up/down/left/right neighbours
- New Game shuffles a fresh puzzle
- Reset returns to the start of the current puzzle

Every puzzle is generated from a dark board, so it can always be solved."""


class TileButton(tk.Frame):
    """Individual tile on the Lights Out grid"""

    ON_COLOR = '#ffd54f'
    OFF_COLOR = '#37474f'
    TILE_SIZE = 56

    def __init__(self, parent, row: int, col: int, click_callback: Callable):
        super().__init__(
            parent,
            width=self.TILE_SIZE,
            height=self.TILE_SIZE,
            relief='raised',
            bd=2,
            bg=self.OFF_COLOR
        )
        # Keep the frame at a fixed size
        self.pack_propagate(False)
        self.grid_propagate(False)

        self.row = row
        self.col = col
        self.is_on = False
        self.click_callback = click_callback

        self.bind('<Button-1>', self._on_click)

    def _on_click(self, event):
        """Handle left mouse click"""
        self.click_callback(self.row, self.col)
        return "break"

    def update_display(self, is_on: bool):
        """Update tile colour from its on/off state"""
        self.is_on = is_on
        self.config(bg=self.ON_COLOR if is_on else self.OFF_COLOR,
                    relief='sunken' if is_on else 'raised')


class Toast(tk.Label):
    """Short-lived notification shown under the board"""

    DURATION_MS = 2200

    def __init__(self, parent):
        super().__init__(parent, text='', bg='lightgray', fg='darkgreen',
                         font=('TkDefaultFont', 11, 'bold'))
        self._hide_id: Optional[str] = None

    def show(self, message: str):
        """Display a message and schedule it to disappear"""
        if self._hide_id:
            self.after_cancel(self._hide_id)
        self.config(text=message)
        self._hide_id = self.after(self.DURATION_MS, self.hide)

    def hide(self):
        """Clear the message"""
        self._hide_id = None
        self.config(text='')


class LightsOutGUI:
    """Main GUI class for the Lights Out game"""

    def __init__(self, size: int = DEFAULT_SIZE, difficulty: Optional[str] = None,
                 rng=None):
        self.root = tk.Tk()
        self.root.title('Lights Out')
        self.root.resizable(False, False)
        self.rng = rng

        # Game components
        difficulty = Difficulty.parse(difficulty) or DEFAULT_DIFFICULTY
        self.session: GameSession = new_session(size, difficulty, rng)
        self.tile_buttons: List[List[TileButton]] = []
        self.timer_id: Optional[str] = None

        # GUI components
        self.moves_label: Optional[tk.Label] = None
        self.time_label: Optional[tk.Label] = None
        self.board_frame: Optional[tk.Frame] = None
        self.toast: Optional[Toast] = None
        self.size_var = tk.IntVar(value=size)
        self.difficulty_var = tk.StringVar(value=difficulty.value)
        self._setup_gui()
        self._refresh_board()

    def _setup_gui(self):
        """Setup the main GUI components"""
        main_frame = tk.Frame(self.root, bg='lightgray', relief='raised', bd=3)
        main_frame.pack(padx=5, pady=5)

        # Controls row
        controls = tk.Frame(main_frame, bg='lightgray')
        controls.pack(fill='x', padx=5, pady=5)

        tk.Label(controls, text='Size', bg='lightgray').pack(side='left')
        tk.Spinbox(
            controls, from_=MIN_SIZE, to=MAX_SIZE, width=3, state='readonly',
            textvariable=self.size_var, command=self._on_size_change
        ).pack(side='left', padx=(2, 8))

        tk.Label(controls, text='Difficulty', bg='lightgray').pack(side='left')
        tk.OptionMenu(
            controls, self.difficulty_var, *[d.value for d in Difficulty],
            command=self._on_difficulty_change
        ).pack(side='left', padx=(2, 8))

        tk.Button(controls, text='New Game', command=self._new_game).pack(side='left')
        tk.Button(controls, text='Reset', command=self._reset_game).pack(side='left', padx=4)
        tk.Button(controls, text='How to Play', command=self._show_help).pack(side='left')

        # Stats row
        stats = tk.Frame(main_frame, bg='lightgray')
        stats.pack(fill='x', padx=5)
        self.moves_label = tk.Label(stats, text='Moves: 0', bg='lightgray')
        self.moves_label.pack(side='left')
        self.time_label = tk.Label(stats, text='Time: 00:00', bg='lightgray')
        self.time_label.pack(side='right')

        # Board
        self.board_frame = tk.Frame(main_frame, bg='black')
        self.board_frame.pack(padx=5, pady=5)

        self.toast = Toast(main_frame)
        self.toast.pack(fill='x', pady=(0, 5))

    def _apply(self, command):
        """Run a command through the game core and redraw"""
        self.session = dispatch(self.session, command, rng=self.rng)

    def _new_game(self):
        """Shuffle a new puzzle"""
        self._stop_timer()
        self._apply(NewGame())
        self._refresh_board()

    def _reset_game(self):
        """Restart the current puzzle"""
        self._stop_timer()
        self._apply(Reset())
        self._refresh_board()

    def _on_size_change(self):
        """Handle a new board size from the spinbox"""
        self._stop_timer()
        self._apply(Resize(int(self.size_var.get())))
        self._refresh_board()

    def _on_difficulty_change(self, value: str):
        """Handle a new difficulty from the option menu"""
        self._stop_timer()
        self._apply(SetDifficulty(value))
        self._refresh_board()

    def _on_tile_click(self, row: int, col: int):
        """Handle click on a tile"""
        was_ready = self.session.state == GameState.READY
        self._apply(Click(row, col))

        # Start polling the clock on the first move
        if was_ready and self.session.is_timer_running():
            self._update_timer()

        self._update_display()

        if self.session.state == GameState.WON:
            self._end_game()

    def _update_display(self):
        """Update tiles and statistics from the session"""
        for row in range(self.session.size):
            for col in range(self.session.size):
                self.tile_buttons[row][col].update_display(self.session.grid[row][col])
        self.moves_label.config(text=f'Moves: {self.session.moves}')
        self.time_label.config(text=f'Time: {format_time(elapsed_seconds(self.session))}')

    def _update_timer(self):
        """Update the game timer"""
        if self.session.is_timer_running():
            self.time_label.config(text=f'Time: {format_time(elapsed_seconds(self.session))}')
            self.timer_id = self.root.after(1000, self._update_timer)

    def _stop_timer(self):
        """Cancel the scheduled timer refresh"""
        if self.timer_id:
            self.root.after_cancel(self.timer_id)
            self.timer_id = None

    def _end_game(self):
        """Handle a cleared board"""
        self._stop_timer()
        if self.session.message:
            self.toast.show(self.session.message)

    def _show_help(self):
        """Show help dialog"""
        messagebox.showinfo("How to Play", HELP_TEXT)

    def _refresh_board(self):
        """Rebuild tiles when the size changed, then redraw"""
        current_size = len(self.tile_buttons)
        if current_size != self.session.size:
            self._recreate_buttons(self.session.size)
        self._update_display()

    def _recreate_buttons(self, size: int):
        """Create new tiles for the given board size"""
        for widget in self.board_frame.winfo_children():
            widget.destroy()

        self.tile_buttons = []
        for row in range(size):
            button_row = []
            for col in range(size):
                button = TileButton(self.board_frame, row, col, self._on_tile_click)
                button.grid(row=row, column=col, padx=1, pady=1)
                button_row.append(button)
            self.tile_buttons.append(button_row)

    def run(self):
        """Start the GUI main loop"""
        self.root.mainloop()
