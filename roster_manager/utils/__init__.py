"""
Utilities package for the Eagles Roster Manager.

This package contains constants, configuration and helper functions used
throughout the application.
"""
from .constants import (
    APP_TITLE, TEAM_INFO, ROSTER_HEADER, VISITOR_LOG_HEADER,
    ROLE_OPTIONS, TYPE_OPTIONS, SORT_OPTIONS
)
from .config import AppConfig
from .default_roster import DEFAULT_ROSTER_ROWS
from .formatting import format_entry_label, format_entry_details, format_team_stats, icon_pixels
from .logging_utils import configure_logging

__all__ = [
    "APP_TITLE", "TEAM_INFO", "ROSTER_HEADER", "VISITOR_LOG_HEADER",
    "ROLE_OPTIONS", "TYPE_OPTIONS", "SORT_OPTIONS", "AppConfig", "DEFAULT_ROSTER_ROWS",
    "format_entry_label", "format_entry_details", "format_team_stats", "icon_pixels",
    "configure_logging"
]
