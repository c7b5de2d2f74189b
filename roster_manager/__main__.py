"""Allow ``python -m roster_manager`` to launch the desktop app."""
from .ui.tkinter_app import run_tkinter_app

if __name__ == "__main__":
    run_tkinter_app()
