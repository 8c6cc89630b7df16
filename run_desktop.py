#!/usr/bin/env python3
"""
Main entry point for the Courtside Scoreboard desktop application.

This script launches the Tkinter-based desktop interface.
"""
import logging
import os

from courtside.ui.tkinter_app import run_tkinter_app

if __name__ == "__main__":
    logging.basicConfig(
        level=os.environ.get("COURTSIDE_LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_tkinter_app()
