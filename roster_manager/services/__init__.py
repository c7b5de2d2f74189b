"""
Services package for the Eagles Roster Manager.

This package contains the roster query engine and the file-backed services
for the roster and visitor log.
"""
from .roster_query import query, matches_criteria, sort_entries, compare_jersey_numbers
from .roster_store import RosterStore, RosterLoadError, parse_roster_lines
from .visitor_log import (
    VisitorLogService, VisitorLogError, VisitorValidationError,
    escape_csv_field, validate_visitor
)
from .service_factory import ServiceFactory

__all__ = [
    "query", "matches_criteria", "sort_entries", "compare_jersey_numbers",
    "RosterStore", "RosterLoadError", "parse_roster_lines",
    "VisitorLogService", "VisitorLogError", "VisitorValidationError",
    "escape_csv_field", "validate_visitor", "ServiceFactory"
]
