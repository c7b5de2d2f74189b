"""
Query criteria model for the Eagles Roster Manager application.

QueryCriteria captures the search box, the two filter dropdowns and the sort
dropdown at a single point in time. A fresh value is built on every UI event.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Dropdown labels that mean "do not filter"
NO_FILTER_LABELS = frozenset({"", "All", "All Roles", "All Types"})


class SortKey(Enum):
    """Sort orders offered by the roster view."""
    ALPHABETICAL = "Alphabetical"
    JERSEY_NUMBER = "Jersey Number"
    POSITION = "Position"

    @classmethod
    def from_label(cls, label: Optional[str]) -> 'SortKey':
        """
        Resolve a dropdown label or enum name to a SortKey.

        Unrecognized values fall back to alphabetical order.
        """
        if not label:
            return cls.ALPHABETICAL
        text = label.strip()
        for key in cls:
            if text == key.value or text.upper() == key.name:
                return key
        normalized = text.replace(" ", "_").replace("-", "_").upper()
        if normalized in ("JERSEYNUMBER", "NUMBER"):
            return cls.JERSEY_NUMBER
        return cls.__members__.get(normalized, cls.ALPHABETICAL)


def normalize_filter(value: Optional[str]) -> Optional[str]:
    """Map "All ..." dropdown labels and blanks to None (no filter)."""
    if value is None or value in NO_FILTER_LABELS:
        return None
    return value


@dataclass(frozen=True)
class QueryCriteria:
    """
    Current search/filter/sort selection for the roster view.

    Attributes:
        search_text: Free text matched against name, number and position
        role_filter: Exact role to keep, or None for all roles
        type_filter: Exact offense/defense value to keep, or None for all
        sort_key: Order of the resulting view
    """
    search_text: str = ""
    role_filter: Optional[str] = None
    type_filter: Optional[str] = None
    sort_key: SortKey = SortKey.ALPHABETICAL

    @classmethod
    def from_ui(
        cls,
        search_text: Optional[str] = "",
        role: Optional[str] = None,
        side: Optional[str] = None,
        sort_label: Optional[str] = None,
    ) -> 'QueryCriteria':
        """
        Build criteria from raw widget or request values.

        Args:
            search_text: Contents of the search box
            role: Selected role dropdown label
            side: Selected type dropdown label
            sort_label: Selected sort dropdown label

        Returns:
            Normalized QueryCriteria
        """
        return cls(
            search_text=search_text or "",
            role_filter=normalize_filter(role),
            type_filter=normalize_filter(side),
            sort_key=SortKey.from_label(sort_label),
        )
