"""
Visitor model for the Eagles Roster Manager application.

A VisitorEntry is one row of the visitor log written by the welcome form.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any

LOGIN_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class VisitorEntry:
    """
    Contact details supplied on the welcome form.

    Attributes:
        name: Visitor's name (required)
        favorite_team: Visitor's favorite team (required)
        email: Visitor's email address (optional)
        login_time: When the visitor passed the welcome form
    """
    name: str
    favorite_team: str
    email: str = ""
    login_time: datetime = field(default_factory=datetime.now)

    def formatted_login_time(self) -> str:
        """Login time as ``yyyy-MM-dd HH:mm:ss``."""
        return self.login_time.strftime(LOGIN_TIME_FORMAT)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "email": self.email,
            "favorite_team": self.favorite_team,
            "login_time": self.formatted_login_time(),
        }
