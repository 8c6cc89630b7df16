"""
In-memory scoreboard display for the Courtside Scoreboard.

ScoreboardDisplay implements the Presentation interface by keeping the text
each element of the board would show. The web front end serves it as JSON.
"""
from typing import Dict, Union

from ..models import Team
from ..utils import fmt_mmss
from ..utils.constants import RESULT_DRAW_TEXT, RESULT_PENDING_TEXT


class ScoreboardDisplay:
    """Rendered state of the scoreboard, element by element."""

    def __init__(self):
        self.scores: Dict[str, str] = {}
        self.fouls: Dict[str, str] = {}
        self.clock = ""
        self.quarter = ""
        self.error = ""
        self.error_visible = False
        self.pause_visible = False
        self.pause_remaining = ""
        self.result = ""
        self.result_class = ""
        self.winner = ""
        self.reset_display()

    def reset_display(self) -> None:
        for team in Team:
            self.set_score(team.value, 0)
            self.set_fouls(team.value, 0)
        self.set_clock(0)
        self.set_quarter_label("-")
        self.reset_winner_display()

    def clear_error(self) -> None:
        self.error = ""
        self.error_visible = False

    def show_error(self, message: str) -> None:
        self.error = message
        self.error_visible = True

    def set_quarter_label(self, quarter: Union[int, str]) -> None:
        self.quarter = f"Q{quarter}"

    def set_clock(self, seconds: int) -> None:
        self.clock = fmt_mmss(seconds)

    def set_score(self, team: str, value: int) -> None:
        self.scores[Team(team).value] = str(value)

    def set_fouls(self, team: str, value: int) -> None:
        self.fouls[Team(team).value] = str(value)

    def show_pause_indicator(self) -> None:
        self.pause_visible = True

    def hide_pause_indicator(self) -> None:
        self.pause_visible = False

    def set_pause_remaining(self, seconds: int) -> None:
        self.pause_remaining = str(seconds)

    def announce_winner(self, team: str) -> None:
        if team:
            self.winner = Team(team).value
            self.result = f"WINNER : {self.winner}"
            self.result_class = "has-winner"
        else:
            self.winner = ""
            self.result = RESULT_DRAW_TEXT
            self.result_class = "no-winner"

    def reset_winner_display(self) -> None:
        self.result = RESULT_PENDING_TEXT
        self.result_class = ""
        self.winner = ""

    def to_json(self) -> dict:
        return {
            "scores": dict(self.scores),
            "fouls": dict(self.fouls),
            "clock": self.clock,
            "quarter": self.quarter,
            "error": self.error if self.error_visible else "",
            "pause": {
                "visible": self.pause_visible,
                "remaining": self.pause_remaining,
            },
            "result": self.result,
            "result_class": self.result_class,
            "winner": self.winner,
        }
