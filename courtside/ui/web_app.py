"""
Web application module for the Courtside Scoreboard.

This module contains the Flask web server that serves the HTML scoreboard
and provides JSON API endpoints to start games and record points.
"""
import os
from typing import Optional

from flask import Flask, current_app, jsonify, request, send_from_directory

from ..models import ConfigurationError, GameConfiguration, Team
from ..services import GameSession, Scheduler, ThreadedScheduler
from ..utils.constants import (
    DEFAULT_QUARTER_COUNT,
    DEFAULT_QUARTER_DURATION_SEC,
    DEFAULT_TIMEOUT_SEC,
    DEFAULT_WEB_HOST,
    DEFAULT_WEB_PORT,
    SCORE_INCREMENTS,
)
from .board_display import ScoreboardDisplay

EXTENSION_KEY = "courtside"
BODY_NOT_OBJECT_MSG = "Request body must be a JSON object"
DEFAULT_STATIC_FOLDER = os.path.join(os.path.dirname(os.path.dirname(__file__)), "static")


class WebAppState:
    """
    State holder for one web application instance.

    Wires the display, the scheduler and the game session together.
    """

    def __init__(self, scheduler: Scheduler):
        self.scheduler = scheduler
        self.display = ScoreboardDisplay()
        self.session = GameSession(scheduler, presentation=self.display)

    def snapshot(self) -> dict:
        state = self.session.state
        return {
            "phase": self.session.phase.value,
            "display": self.display.to_json(),
            "game": state.to_json() if state is not None else None,
            "pause_remaining": self.session.pause_remaining,
        }


def get_app_state() -> WebAppState:
    return current_app.extensions[EXTENSION_KEY]


def create_app(
    scheduler: Optional[Scheduler] = None,
    static_folder: Optional[str] = None,
) -> Flask:
    """
    Create and configure the Flask application with API endpoints.

    Args:
        scheduler: Scheduler driving the game clock; a background
                   ThreadedScheduler is started when omitted
        static_folder: Directory to serve index.html from

    Returns:
        Configured Flask application instance
    """
    static_folder = static_folder or DEFAULT_STATIC_FOLDER
    app = Flask(__name__, static_folder=static_folder, static_url_path="")

    if scheduler is None:
        scheduler = ThreadedScheduler()
        scheduler.start()
    app.extensions[EXTENSION_KEY] = WebAppState(scheduler)

    @app.route("/")
    def index():
        """Serve the scoreboard page."""
        response = send_from_directory(static_folder, "index.html")
        response.headers['Cache-Control'] = 'no-cache, no-store, must-revalidate'
        return response

    # ==================== API Endpoints ==================== #

    @app.route("/api/state", methods=["GET"])
    def get_state():
        """Current board, game data and session phase."""
        app_state = get_app_state()
        with app_state.scheduler.lock:
            data = app_state.snapshot()
        return jsonify({"success": True, **data})

    @app.route("/api/game", methods=["POST"])
    def new_game():
        """Start a new game, replacing any game in progress."""
        app_state = get_app_state()
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"success": False, "error": BODY_NOT_OBJECT_MSG}), 400
        try:
            config = GameConfiguration.from_inputs(
                data.get("quarters", DEFAULT_QUARTER_COUNT),
                data.get("quarter_duration", DEFAULT_QUARTER_DURATION_SEC),
                data.get("timeout", DEFAULT_TIMEOUT_SEC),
            )
        except ConfigurationError as e:
            app.logger.info("Rejected game settings: %s", e)
            with app_state.scheduler.lock:
                app_state.display.show_error(str(e))
            return jsonify({"success": False, "error": str(e), "field": e.field_name}), 400

        with app_state.scheduler.lock:
            app_state.session.new_game(config)
            data = app_state.snapshot()
        return jsonify({"success": True, "config": config.to_json(), **data})

    @app.route("/api/score", methods=["POST"])
    def add_score():
        """Add 1, 2 or 3 points to a team."""
        app_state = get_app_state()
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"success": False, "error": BODY_NOT_OBJECT_MSG}), 400

        team = data.get("team")
        if not isinstance(team, str) or team not in {t.value for t in Team}:
            return jsonify({"success": False, "error": f"Unknown team: {team!r}"}), 400
        points = data.get("points")
        if isinstance(points, bool) or not isinstance(points, int) or points not in SCORE_INCREMENTS:
            return jsonify({
                "success": False,
                "error": f"Points must be one of {', '.join(map(str, SCORE_INCREMENTS))}",
            }), 400

        result = app_state.session.increment_score(team, points)
        if not result.accepted:
            return jsonify({
                "success": False,
                "error": result.rejection.message,
                "reason": result.rejection.name.lower(),
            }), 409
        return jsonify({"success": True, "team": result.team.value, "score": result.score})

    return app


def run_web_app(
    host: str = DEFAULT_WEB_HOST,
    port: int = DEFAULT_WEB_PORT,
    static_folder: Optional[str] = None,
) -> None:
    """
    Run the Flask web application.

    Args:
        host: Host address to bind to
        port: Port number to listen on
        static_folder: Directory to serve index.html from
    """
    app = create_app(static_folder=static_folder)
    try:
        app.run(host=host, port=port, threaded=True, use_reloader=False)
    finally:
        app_state = app.extensions[EXTENSION_KEY]
        app_state.session.shutdown()
        app_state.scheduler.stop()
