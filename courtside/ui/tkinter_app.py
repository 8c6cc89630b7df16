"""
Tkinter application module for the Courtside Scoreboard.

This module contains the desktop scoreboard window. The window is both the
Presentation the game session drives and the input surface the operator
uses to start games and record points.
"""
import logging
import tkinter as tk
from tkinter import ttk
from typing import Dict, Optional, Union

from ..models import ConfigurationError, GameConfiguration, Team
from ..services import GameSession, TkScheduler
from ..utils import (
    fmt_mmss,
    APP_TITLE,
    DEFAULT_QUARTER_COUNT,
    DEFAULT_QUARTER_DURATION_SEC,
    DEFAULT_TIMEOUT_SEC,
)
from ..utils.constants import RESULT_DRAW_TEXT, RESULT_PENDING_TEXT, SCORE_INCREMENTS

logger = logging.getLogger(__name__)

WINNER_COLOR = "#2e7d32"
DRAW_COLOR = "#c62828"
ERROR_COLOR = "#c62828"
DEFAULT_COLOR = "black"


class ScoreboardApp(tk.Tk):
    """Main scoreboard window."""

    def __init__(self):
        super().__init__()
        self.title(APP_TITLE)
        self.geometry("640x420")
        self.session: Optional[GameSession] = None

        self.quarters_var = tk.StringVar(value=str(DEFAULT_QUARTER_COUNT))
        self.duration_var = tk.StringVar(value=str(DEFAULT_QUARTER_DURATION_SEC))
        self.timeout_var = tk.StringVar(value=str(DEFAULT_TIMEOUT_SEC))

        self.score_vars: Dict[str, tk.StringVar] = {t.value: tk.StringVar(value="0") for t in Team}
        self.foul_vars: Dict[str, tk.StringVar] = {t.value: tk.StringVar(value="0") for t in Team}
        self.clock_var = tk.StringVar(value=fmt_mmss(0))
        self.quarter_var = tk.StringVar(value="Q-")
        self.error_var = tk.StringVar()
        self.pause_var = tk.StringVar()
        self.result_var = tk.StringVar(value=RESULT_PENDING_TEXT)

        self.title_labels: Dict[str, ttk.Label] = {}
        self.score_labels: Dict[str, ttk.Label] = {}

        self._build_ui()
        self.protocol("WM_DELETE_WINDOW", self.close)

    # ---------- UI Scaffolding ---------- #
    def _build_ui(self):
        settings = ttk.Frame(self)
        settings.pack(fill="x", padx=10, pady=10)
        for label, var in (
            ("Quarters", self.quarters_var),
            ("Quarter (s)", self.duration_var),
            ("Timeout (s)", self.timeout_var),
        ):
            ttk.Label(settings, text=label).pack(side="left")
            ttk.Entry(settings, textvariable=var, width=6).pack(side="left", padx=(2, 10))
        ttk.Button(settings, text="New Game", command=self.request_new_game).pack(side="right")

        center = ttk.Frame(self)
        center.pack(fill="x")
        ttk.Label(center, textvariable=self.quarter_var, font=("Helvetica", 16)).pack()
        ttk.Label(center, textvariable=self.clock_var, font=("Helvetica", 36, "bold")).pack()
        self.pause_label = ttk.Label(center, textvariable=self.pause_var)
        self.error_label = ttk.Label(center, textvariable=self.error_var, foreground=ERROR_COLOR)

        teams = ttk.Frame(self)
        teams.pack(fill="both", expand=True, padx=10)
        for column, team in enumerate(Team):
            self._build_team_panel(teams, team).grid(row=0, column=column, sticky="nsew", padx=10)
            teams.columnconfigure(column, weight=1)

        self.result_label = ttk.Label(self, textvariable=self.result_var, font=("Helvetica", 14))
        self.result_label.pack(pady=10)

    def _build_team_panel(self, parent, team: Team) -> ttk.Frame:
        panel = ttk.Frame(parent)
        title = ttk.Label(panel, text=team.value.upper(), font=("Helvetica", 16, "bold"))
        title.pack()
        score = ttk.Label(panel, textvariable=self.score_vars[team.value], font=("Helvetica", 40))
        score.pack()
        fouls = ttk.Frame(panel)
        fouls.pack()
        ttk.Label(fouls, text="Fouls").pack(side="left")
        ttk.Label(fouls, textvariable=self.foul_vars[team.value]).pack(side="left")

        buttons = ttk.Frame(panel)
        buttons.pack(pady=5)
        for points in SCORE_INCREMENTS:
            ttk.Button(
                buttons,
                text=f"+{points}",
                width=4,
                command=lambda p=points: self.request_score_increment(team, p),
            ).pack(side="left", padx=2)

        self.title_labels[team.value] = title
        self.score_labels[team.value] = score
        return panel

    # ---------- Input ---------- #
    def attach_session(self, session: GameSession) -> None:
        self.session = session

    def read_configuration(self) -> GameConfiguration:
        """
        Read the three settings fields.

        Raises:
            ConfigurationError: If a field does not hold a usable value
        """
        return GameConfiguration.from_inputs(
            self.quarters_var.get(), self.duration_var.get(), self.timeout_var.get()
        )

    def request_new_game(self):
        try:
            config = self.read_configuration()
        except ConfigurationError as exc:
            logger.info("Rejected game settings: %s", exc)
            self.show_error(str(exc))
            return
        self.session.new_game(config, presentation=self)

    def request_score_increment(self, team: Team, points: int):
        self.session.increment_score(team, points)

    def close(self):
        if self.session is not None:
            self.session.shutdown()
        self.destroy()

    # ---------- Presentation ---------- #
    def reset_display(self) -> None:
        for team in Team:
            self.set_score(team.value, 0)
            self.set_fouls(team.value, 0)
        self.set_clock(0)
        self.set_quarter_label("-")
        self.reset_winner_display()

    def clear_error(self) -> None:
        self.error_var.set("")
        self.error_label.pack_forget()

    def show_error(self, message: str) -> None:
        self.error_var.set(message)
        self.error_label.pack()

    def set_quarter_label(self, quarter: Union[int, str]) -> None:
        self.quarter_var.set(f"Q{quarter}")

    def set_clock(self, seconds: int) -> None:
        self.clock_var.set(fmt_mmss(seconds))

    def set_score(self, team: str, value: int) -> None:
        self.score_vars[team].set(str(value))

    def set_fouls(self, team: str, value: int) -> None:
        self.foul_vars[team].set(str(value))

    def show_pause_indicator(self) -> None:
        self.pause_label.pack()

    def hide_pause_indicator(self) -> None:
        self.pause_label.pack_forget()

    def set_pause_remaining(self, seconds: int) -> None:
        self.pause_var.set(f"TIMEOUT {seconds}")

    def announce_winner(self, team: str) -> None:
        if team:
            self.result_var.set(f"WINNER : {team}")
            self.result_label.configure(foreground=WINNER_COLOR)
            self.title_labels[team].configure(foreground=WINNER_COLOR)
            self.score_labels[team].configure(foreground=WINNER_COLOR)
        else:
            self.result_var.set(RESULT_DRAW_TEXT)
            self.result_label.configure(foreground=DRAW_COLOR)

    def reset_winner_display(self) -> None:
        self.result_var.set(RESULT_PENDING_TEXT)
        self.result_label.configure(foreground=DEFAULT_COLOR)
        for team in Team:
            self.title_labels[team.value].configure(foreground=DEFAULT_COLOR)
            self.score_labels[team.value].configure(foreground=DEFAULT_COLOR)


def create_tkinter_app() -> ScoreboardApp:
    """
    Create the scoreboard window and wire it to a game session.

    Returns:
        Configured ScoreboardApp instance
    """
    app = ScoreboardApp()
    session = GameSession(TkScheduler(app), presentation=app)
    app.attach_session(session)
    return app


def run_tkinter_app() -> None:
    """Run the Tkinter application."""
    app = create_tkinter_app()
    app.mainloop()


if __name__ == "__main__":
    run_tkinter_app()
