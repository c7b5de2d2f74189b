#!/usr/bin/env python3
"""
Main entry point for the Eagles Roster Manager web application.

This script launches the Flask-based web server.
"""
from roster_manager.ui.web_app import run_web_app

if __name__ == "__main__":
    run_web_app()
