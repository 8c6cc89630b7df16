"""
UI package for the Courtside Scoreboard.

This package contains the user interface implementations: the in-memory
board display, the Flask web server and the Tkinter desktop window
(``courtside.ui.tkinter_app``, imported on demand since it needs Tk).
"""
from .board_display import ScoreboardDisplay
from .web_app import create_app, run_web_app

__all__ = ["ScoreboardDisplay", "create_app", "run_web_app"]
