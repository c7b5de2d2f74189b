"""
Visitor log service for the Eagles Roster Manager application.

The welcome form collects a visitor's name, email and favorite team; this
module validates those values and appends them to the visitor log CSV.
"""
import csv
import io
import logging
import os
from datetime import datetime
from typing import List, Optional

from ..models import VisitorEntry
from ..utils.constants import DEFAULT_VISITOR_LOG_FILE, VISITOR_LOG_HEADER

logger = logging.getLogger(__name__)


class VisitorValidationError(Exception):
    """Raised when the welcome form is missing required values."""
    pass


class VisitorLogError(Exception):
    """Raised when the visitor log cannot be written."""
    pass


def _csv_line(fields: List[str]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(fields)
    return buffer.getvalue()[:-1]


def escape_csv_field(value: Optional[str]) -> str:
    """
    Escape a value for the visitor log.

    Values containing a comma, a double quote or a newline are wrapped in
    double quotes with inner quotes doubled. Empty values stay empty.
    """
    if not value:
        return ""
    return _csv_line([value])


def validate_visitor(name: Optional[str], email: Optional[str], favorite_team: Optional[str]) -> List[str]:
    """
    Validate welcome form values.

    Args:
        name: Visitor name (required)
        email: Visitor email (optional)
        favorite_team: Visitor's favorite team (required)

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []
    if not (name or "").strip():
        errors.append("Name is required")
    if not (favorite_team or "").strip():
        errors.append("Favorite team is required")
    return errors


def visitor_row(visitor: VisitorEntry) -> List[str]:
    """Return the visitor log columns for one visitor."""
    return [
        visitor.name,
        visitor.email,
        visitor.favorite_team,
        visitor.formatted_login_time(),
    ]


def format_visitor_row(visitor: VisitorEntry) -> str:
    """Format one visitor log line, without the line terminator."""
    return _csv_line(visitor_row(visitor))


class VisitorLogService:
    """
    Service for appending welcome form submissions to the visitor log.

    The header row is written only when the log file is first created.
    """

    def __init__(self, log_path: str = DEFAULT_VISITOR_LOG_FILE):
        """
        Initialize VisitorLogService.

        Args:
            log_path: Location of the visitor log CSV file
        """
        self.log_path = log_path

    def record_visit(
        self,
        name: str,
        email: Optional[str],
        favorite_team: str,
        now: Optional[datetime] = None
    ) -> VisitorEntry:
        """
        Validate a welcome form submission and append it to the log.

        Args:
            name: Visitor name
            email: Visitor email (may be empty)
            favorite_team: Visitor's favorite team
            now: Login time; defaults to the current time

        Returns:
            The VisitorEntry that was written

        Raises:
            VisitorValidationError: If a required value is missing
            VisitorLogError: If the log file cannot be written
        """
        errors = validate_visitor(name, email, favorite_team)
        if errors:
            raise VisitorValidationError("; ".join(errors))

        visitor = VisitorEntry(
            name=name.strip(),
            email=(email or "").strip(),
            favorite_team=favorite_team.strip(),
            login_time=now or datetime.now(),
        )
        self.append(visitor)
        return visitor

    def append(self, visitor: VisitorEntry) -> None:
        """
        Append a visitor row, writing the header first for a new file.

        Raises:
            VisitorLogError: If the log file cannot be written
        """
        file_exists = os.path.exists(self.log_path)
        try:
            with open(self.log_path, "a", encoding="utf-8", newline="") as f:
                if not file_exists:
                    f.write(VISITOR_LOG_HEADER + "\n")
                writer = csv.writer(f, lineterminator="\n")
                writer.writerow(visitor_row(visitor))
        except OSError as e:
            raise VisitorLogError(f"Error saving user info: {e}") from e

        logger.info("Recorded visit from %s", visitor.name)
