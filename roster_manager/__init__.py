"""
Eagles Roster Manager

A roster viewer for the Philadelphia Eagles: browse players, coaches and
staff loaded from a CSV file, with search, role/type filters and sorting.

This package provides both desktop (Tkinter) and web (Flask) interfaces
over the same roster query engine.
"""
from .models import RosterEntry, QueryCriteria, SortKey
from .services import RosterStore, VisitorLogService, query
from .utils import AppConfig, APP_TITLE

__version__ = "1.0.0"

__all__ = [
    "RosterEntry", "QueryCriteria", "SortKey", "RosterStore", "VisitorLogService",
    "query", "AppConfig", "APP_TITLE"
]
