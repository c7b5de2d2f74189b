"""
Constants for the Eagles Roster Manager application.

This module contains configuration constants used throughout the application.
"""
from ..models.team_info import TeamInfo, SeasonStats

# Application metadata
APP_TITLE = "Eagles Roster Manager"

# Data files
DEFAULT_ROSTER_FILE = "team.csv"
DEFAULT_VISITOR_LOG_FILE = "userinfo.csv"
ROSTER_HEADER = "Name,Role,Position,Number,Offense/Defense"
VISITOR_LOG_HEADER = "Name,Email,Favorite Team,Login Date/Time"

# Web server defaults
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 7122

TEAM_INFO = TeamInfo(
    name="Philadelphia Eagles",
    coach="Nick Sirianni",
    stadium="Lincoln Financial Field",
    description=(
        "Based in Philadelphia, Pennsylvania, the Philadelphia Eagles are a professional "
        "football team that plays in the National Football League's (NFL) East division "
        "of the National Football Conference (NFC). Explore the roster below!"
    ),
    stats=SeasonStats(
        total_points=379,
        total_touchdowns=45,
        super_bowls_won=2,
        total_seasons=93,
        wins=649,
        losses=645,
        ties=27,
    ),
)

WINDOW_TITLE = f"{TEAM_INFO.name} - Roster Manager"
WINDOW_GEOMETRY = "1000x700"

# Team colors
MIDNIGHT_GREEN = "#004C54"  # primary
SILVER = "#A5ACAF"          # secondary
BLACK = "#000000"
WHITE = "#FFFFFF"
DARK_GREEN = "#003238"
LIGHT_GREEN = "#005F6A"
CHARCOAL = "#202020"

FONT_FAMILY = "Arial"

# Dropdown options; the first entry of the filter lists means "no filter"
ROLE_OPTIONS = ["All Roles", "Player", "Coach", "Staff"]
TYPE_OPTIONS = ["All Types", "Offense", "Defense"]
SORT_OPTIONS = ["Alphabetical", "Jersey Number", "Position"]

# Dialog text
WELCOME_TITLE = "Welcome - Eagles Roster Manager"
WELCOME_HEADING = "🦅 Welcome to the Philadelphia Eagles Roster Manager!"
WELCOME_HINT = "Please provide your Name, Email, and Favorite Team to continue."
INPUT_REQUIRED_TITLE = "Input Required"
INPUT_REQUIRED_MESSAGE = "Please enter your Name, Email, and Favorite Team to continue."
FAREWELL_TITLE = "Goodbye - Eagles Roster Manager"
FAREWELL_HEADING = "Thanks for using the Philadelphia Eagles Roster Manager!"
FAREWELL_SUBTITLE = "We hope you enjoyed managing the roster."
FAREWELL_TAGLINE = "Go Birds! 🦅"
