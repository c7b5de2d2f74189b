"""
Models package for the Eagles Roster Manager.

This package contains the core data models used throughout the application.
"""
from .roster_entry import RosterEntry, NOT_AVAILABLE
from .criteria import QueryCriteria, SortKey, normalize_filter
from .visitor import VisitorEntry, LOGIN_TIME_FORMAT
from .team_info import TeamInfo, SeasonStats

__all__ = [
    "RosterEntry", "NOT_AVAILABLE", "QueryCriteria", "SortKey", "normalize_filter",
    "VisitorEntry", "LOGIN_TIME_FORMAT", "TeamInfo", "SeasonStats"
]
