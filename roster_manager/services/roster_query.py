"""
Roster query engine for the Eagles Roster Manager application.

Turns the full roster and the current QueryCriteria into the ordered list the
roster view displays. Every function here is pure: inputs are never mutated
and each call returns a new list, so the views can re-run a query on every
keystroke or dropdown change.
"""
import re
from functools import cmp_to_key
from typing import Iterable, List, Optional

from ..models import RosterEntry, QueryCriteria, SortKey, normalize_filter

_INTEGER_RE = re.compile(r"[+-]?\d+")

# Jersey numbers are 32-bit signed integers; larger values do not parse
JERSEY_MIN = -(2 ** 31)
JERSEY_MAX = 2 ** 31 - 1


def _parse_jersey(number: str) -> Optional[int]:
    if not _INTEGER_RE.fullmatch(number):
        return None
    value = int(number)
    if value < JERSEY_MIN or value > JERSEY_MAX:
        return None
    return value


def compare_jersey_numbers(a: RosterEntry, b: RosterEntry) -> int:
    """
    Compare two entries by jersey number.

    Entries without a number ("" or "N/A") sort after numbered entries and
    tie with each other. Numbered entries compare as integers. A number that
    is neither unknown nor a 32-bit integer (e.g. "12a" or "2147483648")
    ties with anything it is compared to.

    Args:
        a: First entry
        b: Second entry

    Returns:
        Negative, zero or positive in the usual comparator convention
    """
    a_unknown = a.has_unknown_number()
    b_unknown = b.has_unknown_number()
    if a_unknown and b_unknown:
        return 0
    if a_unknown:
        return 1
    if b_unknown:
        return -1

    a_num = _parse_jersey(a.number)
    b_num = _parse_jersey(b.number)
    if a_num is None or b_num is None:
        return 0
    return (a_num > b_num) - (a_num < b_num)


def matches_criteria(entry: RosterEntry, criteria: QueryCriteria) -> bool:
    """
    Check whether an entry passes the search box and both filters.

    Search text is trimmed and matched case-insensitively as a substring of
    the name or position, or exactly against the jersey number. Role and type
    filters require exact equality unless unset or set to an "All ..."
    dropdown label.

    Args:
        entry: Roster entry to test
        criteria: Current query criteria

    Returns:
        True if the entry belongs in the view
    """
    query = (criteria.search_text or "").strip().lower()
    if query:
        matches_search = (
            query in entry.name.lower()
            or entry.number == query
            or query in entry.position.lower()
        )
        if not matches_search:
            return False

    role_filter = normalize_filter(criteria.role_filter)
    if role_filter is not None and entry.role != role_filter:
        return False
    type_filter = normalize_filter(criteria.type_filter)
    if type_filter is not None and entry.side != type_filter:
        return False
    return True


def sort_entries(entries: Iterable[RosterEntry], sort_key: SortKey) -> List[RosterEntry]:
    """
    Return entries in the requested order using a stable sort.

    Names and positions compare as plain case-sensitive strings.
    """
    if sort_key is SortKey.JERSEY_NUMBER:
        return sorted(entries, key=cmp_to_key(compare_jersey_numbers))
    if sort_key is SortKey.POSITION:
        return sorted(entries, key=lambda e: e.position)
    return sorted(entries, key=lambda e: e.name)


def query(records: Iterable[RosterEntry], criteria: Optional[QueryCriteria] = None) -> List[RosterEntry]:
    """
    Filter and order the roster for display.

    Args:
        records: Full roster in load order
        criteria: Current search/filter/sort selection; None means defaults

    Returns:
        New list of the matching entries in display order
    """
    criteria = criteria or QueryCriteria()
    filtered = [entry for entry in records if matches_criteria(entry, criteria)]
    return sort_entries(filtered, criteria.sort_key)
