#!/usr/bin/env python3
"""
Main entry point for the Courtside Scoreboard web application.

This script launches the Flask-based web server. COURTSIDE_HOST and
COURTSIDE_PORT override the bind address.
"""
import logging
import os

from courtside.ui.web_app import run_web_app
from courtside.utils.constants import DEFAULT_WEB_HOST, DEFAULT_WEB_PORT

if __name__ == "__main__":
    logging.basicConfig(
        level=os.environ.get("COURTSIDE_LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_web_app(
        host=os.environ.get("COURTSIDE_HOST", DEFAULT_WEB_HOST),
        port=int(os.environ.get("COURTSIDE_PORT", DEFAULT_WEB_PORT)),
    )
