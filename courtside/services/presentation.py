"""
Presentation interface for the Courtside Scoreboard application.

GameSession pushes every visible change through this interface and never
reads anything back from it.
"""
from typing import Protocol, Union


class Presentation(Protocol):
    """Anything able to render the scoreboard."""

    def reset_display(self) -> None:
        """Zero scores and fouls, clear clock, quarter and result."""
        ...

    def clear_error(self) -> None:
        ...

    def show_error(self, message: str) -> None:
        ...

    def set_quarter_label(self, quarter: Union[int, str]) -> None:
        """Show the quarter number, or "-" when no quarter has started."""
        ...

    def set_clock(self, seconds: int) -> None:
        ...

    def set_score(self, team: str, value: int) -> None:
        ...

    def set_fouls(self, team: str, value: int) -> None:
        ...

    def show_pause_indicator(self) -> None:
        ...

    def hide_pause_indicator(self) -> None:
        ...

    def set_pause_remaining(self, seconds: int) -> None:
        ...

    def announce_winner(self, team: str) -> None:
        """Show the result; an empty team means a draw."""
        ...

    def reset_winner_display(self) -> None:
        ...
