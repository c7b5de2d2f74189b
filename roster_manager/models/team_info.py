"""
Team metadata model for the Eagles Roster Manager application.

Team name, staff headline and season statistics are static configuration
shown above and below the roster.
"""
from dataclasses import dataclass, field
from typing import Dict, Any


@dataclass(frozen=True)
class SeasonStats:
    """Headline team statistics shown in the statistics panel."""
    total_points: int = 0
    total_touchdowns: int = 0
    super_bowls_won: int = 0
    total_seasons: int = 0
    wins: int = 0
    losses: int = 0
    ties: int = 0

    def record(self) -> str:
        """All-time record formatted as W/L/T."""
        return f"{self.wins}/{self.losses}/{self.ties}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "total_points": self.total_points,
            "total_touchdowns": self.total_touchdowns,
            "super_bowls_won": self.super_bowls_won,
            "total_seasons": self.total_seasons,
            "record": self.record(),
        }


@dataclass(frozen=True)
class TeamInfo:
    """Descriptive information about the team whose roster is displayed."""
    name: str
    coach: str
    stadium: str
    description: str = ""
    stats: SeasonStats = field(default_factory=SeasonStats)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "coach": self.coach,
            "stadium": self.stadium,
            "description": self.description,
            "stats": self.stats.to_dict(),
        }
