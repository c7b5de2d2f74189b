"""
Roster entry model for the Eagles Roster Manager application.

This module contains the RosterEntry dataclass which represents a single
player, coach, or staff member listed on the team roster.
"""
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Any

# Sentinel used in the roster file for fields with no value
NOT_AVAILABLE = "N/A"

CSV_FIELD_COUNT = 5


@dataclass(frozen=True)
class RosterEntry:
    """
    Represents one roster entry (player, coach or staff member).

    Entries are immutable once loaded; views over the roster only select and
    reorder references to them.

    Attributes:
        name: Display name
        role: Roster role, commonly "Player", "Coach" or "Staff"
        position: Free-text position or title
        number: Jersey number as text; may be empty or "N/A"
        side: Offense/defense affiliation (the "type" column of the roster file)
    """
    name: str
    role: str = ""
    position: str = ""
    number: str = ""
    side: str = ""

    @property
    def type(self) -> str:
        """Alias for ``side`` matching the roster file's column name."""
        return self.side

    def has_unknown_number(self) -> bool:
        """
        Check whether this entry has no usable jersey number.

        Returns:
            True if the number is empty or the "N/A" sentinel (any case)
        """
        return not self.number or self.number.upper() == NOT_AVAILABLE

    @classmethod
    def from_csv_fields(cls, fields: Sequence[str]) -> Optional['RosterEntry']:
        """
        Build an entry from positional roster file fields.

        Fields are read as name, role, position, number, type. Extra fields
        are ignored and every field is trimmed.

        Args:
            fields: Split fields of one roster file line

        Returns:
            RosterEntry, or None if fewer than five fields were given
        """
        if len(fields) < CSV_FIELD_COUNT:
            return None
        name, role, position, number, side = (f.strip() for f in fields[:CSV_FIELD_COUNT])
        return cls(name=name, role=role, position=position, number=number, side=side)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "role": self.role,
            "position": self.position,
            "number": self.number,
            "type": self.side,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RosterEntry':
        """Create from dictionary for JSON deserialization."""
        return cls(
            name=data.get("name", ""),
            role=data.get("role", ""),
            position=data.get("position", ""),
            number=data.get("number", ""),
            side=data.get("type", ""),
        )
