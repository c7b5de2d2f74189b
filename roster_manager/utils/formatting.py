"""
Display formatting helpers for the Eagles Roster Manager application.

These functions produce the text shown in the roster list, the details
panel and the team statistics panel, independent of any UI toolkit.
"""
from typing import List, Optional

from ..models import RosterEntry, TeamInfo

DETAILS_RULE = "═" * 39


def format_entry_label(entry: RosterEntry) -> str:
    """
    Format a roster entry for the roster list.

    Example:
        >>> format_entry_label(RosterEntry("Jalen Hurts", "Player", "Quarterback", "1", "Offense"))
        '#1 - Jalen Hurts (Quarterback)'
    """
    return f"#{entry.number} - {entry.name} ({entry.position})"


def format_entry_details(entry: RosterEntry) -> str:
    """
    Format the details panel text for a selected roster entry.

    Args:
        entry: Selected roster entry

    Returns:
        Multi-line details block framed by horizontal rules
    """
    lines = [
        DETAILS_RULE,
        "  PLAYER INFORMATION",
        DETAILS_RULE,
        "",
        f"  Number:     #{entry.number}",
        f"  Name:       {entry.name}",
        f"  Position:   {entry.position}",
        f"  Role:       {entry.role}",
        f"  Type:       {entry.side}",
        "",
        DETAILS_RULE,
    ]
    return "\n".join(lines) + "\n"


def format_team_stats(team: TeamInfo, roster_size: int) -> str:
    """
    Format the team statistics panel text.

    Args:
        team: Team metadata
        roster_size: Number of loaded roster entries

    Returns:
        Bulleted statistics block
    """
    stats = team.stats
    lines = [
        f"  • Total Players: {roster_size}",
        f"  • Total Points (This Season): {stats.total_points}",
        f"  • Total Touchdowns (This Season): {stats.total_touchdowns}",
        f"  • Super Bowls Won: {stats.super_bowls_won}",
        f"  • Total Seasons: {stats.total_seasons}",
        f"  • Record (W/L/T): {stats.record()}",
    ]
    return "\n".join(lines) + "\n"


def icon_pixels(size: int, fill: str, ring: str, ring_width: int = 3) -> List[List[Optional[str]]]:
    """
    Build a pixel map for the window icon: a filled disc with a ring.

    Args:
        size: Icon width and height in pixels
        fill: Disc color
        ring: Ring color
        ring_width: Ring thickness in pixels

    Returns:
        Rows of colors, with None for transparent pixels
    """
    radius = size / 2.0
    ring_outer = radius - 2 + ring_width / 2.0
    ring_inner = radius - 2 - ring_width / 2.0
    rows = []
    for y in range(size):
        row: List[Optional[str]] = []
        for x in range(size):
            dx = x + 0.5 - radius
            dy = y + 0.5 - radius
            distance = (dx * dx + dy * dy) ** 0.5
            if ring_inner <= distance <= ring_outer:
                row.append(ring)
            elif distance < radius:
                row.append(fill)
            else:
                row.append(None)
        rows.append(row)
    return rows
