"""
Roster store for the Eagles Roster Manager application.

This module reads the roster CSV file and, when it is missing, seeds it with
the default roster.
"""
import logging
import os
from typing import Iterable, List

from ..models import RosterEntry
from ..utils.constants import DEFAULT_ROSTER_FILE, ROSTER_HEADER
from ..utils.default_roster import DEFAULT_ROSTER_ROWS

logger = logging.getLogger(__name__)


class RosterLoadError(Exception):
    """Raised when the roster file cannot be created or read."""
    pass


def _split_fields(line: str) -> List[str]:
    # Trailing empty fields are dropped, so "a,b,c,d," has four fields
    fields = line.split(",")
    while fields and fields[-1] == "":
        fields.pop()
    return fields


def parse_roster_lines(lines: Iterable[str]) -> List[RosterEntry]:
    """
    Parse roster file lines into entries.

    The first line is a header and is discarded. Blank lines and lines with
    fewer than five comma-separated fields are skipped.

    Args:
        lines: Lines of the roster file, header first

    Returns:
        Entries in file order
    """
    entries = []
    for line_number, raw in enumerate(lines, start=1):
        if line_number == 1:
            continue
        line = raw.strip()
        if not line:
            continue
        entry = RosterEntry.from_csv_fields(_split_fields(line))
        if entry is None:
            logger.debug("Skipping roster line %d: too few fields", line_number)
            continue
        entries.append(entry)
    return entries


class RosterStore:
    """
    Service for loading the team roster from its CSV file.

    The roster is read once at startup and treated as read-only afterwards.
    """

    def __init__(self, roster_path: str = DEFAULT_ROSTER_FILE):
        """
        Initialize RosterStore.

        Args:
            roster_path: Location of the roster CSV file
        """
        self.roster_path = roster_path

    def ensure_roster_file(self) -> bool:
        """
        Create the roster file with the default roster if it does not exist.

        Returns:
            True if the file was created, False if it already existed

        Raises:
            RosterLoadError: If the file cannot be written
        """
        if os.path.exists(self.roster_path):
            return False

        directory = os.path.dirname(self.roster_path)
        try:
            if directory and not os.path.exists(directory):
                os.makedirs(directory)
            with open(self.roster_path, "w", encoding="utf-8", newline="") as f:
                f.write(ROSTER_HEADER + "\n")
                for row in DEFAULT_ROSTER_ROWS:
                    f.write(row + "\n")
        except OSError as e:
            raise RosterLoadError(f"Error creating {self.roster_path}: {e}") from e

        logger.info("Created %s with %d default entries", self.roster_path, len(DEFAULT_ROSTER_ROWS))
        return True

    def load_roster(self) -> List[RosterEntry]:
        """
        Read and parse the roster file.

        Returns:
            Entries in file order

        Raises:
            RosterLoadError: If the file is missing or unreadable
        """
        try:
            with open(self.roster_path, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except OSError as e:
            raise RosterLoadError(f"Error loading players: {e}") from e

        entries = parse_roster_lines(lines)
        logger.info("Loaded %d roster entries from %s", len(entries), self.roster_path)
        return entries

    def load_or_create(self) -> List[RosterEntry]:
        """
        Seed the roster file if needed, then load it.

        Raises:
            RosterLoadError: If the file cannot be created or read
        """
        self.ensure_roster_file()
        return self.load_roster()
