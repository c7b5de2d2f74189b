"""
UI package for the Eagles Roster Manager.

This package contains user interface implementations: the Tkinter desktop
app (``ui.tkinter_app``) and the Flask web server (``ui.web_app``). Only the
web server is imported here so it can run where Tk is not installed.
"""
from .web_app import create_app, run_web_app

__all__ = ["create_app", "run_web_app"]
