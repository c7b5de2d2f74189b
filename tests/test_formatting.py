"""Tests for display formatting and configuration helpers."""

import logging

from roster_manager.models import RosterEntry
from roster_manager.utils import (
    AppConfig, TEAM_INFO, configure_logging,
    format_entry_label, format_entry_details, format_team_stats, icon_pixels
)
from roster_manager.utils.constants import DEFAULT_PORT


def test_format_entry_label():
    entry = RosterEntry("Nick Sirianni", "Coach", "Head Coach", "N/A", "N/A")

    assert format_entry_label(entry) == "#N/A - Nick Sirianni (Head Coach)"


def test_format_entry_details():
    entry = RosterEntry("Jalen Hurts", "Player", "Quarterback", "1", "Offense")

    lines = format_entry_details(entry).splitlines()

    assert lines[0] == "═" * 39
    assert lines[1] == "  PLAYER INFORMATION"
    assert lines[4:9] == [
        "  Number:     #1",
        "  Name:       Jalen Hurts",
        "  Position:   Quarterback",
        "  Role:       Player",
        "  Type:       Offense",
    ]
    assert lines[-1] == "═" * 39


def test_format_team_stats():
    text = format_team_stats(TEAM_INFO, 107)

    assert text.splitlines() == [
        "  • Total Players: 107",
        "  • Total Points (This Season): 379",
        "  • Total Touchdowns (This Season): 45",
        "  • Super Bowls Won: 2",
        "  • Total Seasons: 93",
        "  • Record (W/L/T): 649/645/27",
    ]


def test_icon_pixels_disc_and_ring():
    pixels = icon_pixels(64, "#004C54", "#A5ACAF")

    assert len(pixels) == 64
    assert all(len(row) == 64 for row in pixels)
    assert pixels[0][0] is None
    assert pixels[32][32] == "#004C54"
    assert pixels[32][1] == "#A5ACAF"


def test_app_config_from_env():
    config = AppConfig.from_env({
        "ROSTER_MANAGER_ROSTER_PATH": "/data/team.csv",
        "ROSTER_MANAGER_VISITOR_LOG": "/data/visitors.csv",
        "ROSTER_MANAGER_HOST": "0.0.0.0",
        "ROSTER_MANAGER_PORT": "8080",
        "ROSTER_MANAGER_LOG_LEVEL": "debug",
    })

    assert config.roster_path == "/data/team.csv"
    assert config.visitor_log_path == "/data/visitors.csv"
    assert config.host == "0.0.0.0"
    assert config.port == 8080
    assert config.log_level == "DEBUG"


def test_app_config_defaults_and_bad_port(caplog):
    with caplog.at_level(logging.WARNING):
        config = AppConfig.from_env({"ROSTER_MANAGER_PORT": "eighty"})

    assert config.port == DEFAULT_PORT
    assert config.roster_path == "team.csv"
    assert config.visitor_log_path == "userinfo.csv"
    assert "Invalid port" in caplog.text


def test_configure_logging_is_idempotent():
    logger = configure_logging("DEBUG")
    handlers = list(logger.handlers)

    again = configure_logging("WARNING")

    assert again is logger
    assert again.handlers == handlers
    assert again.level == logging.WARNING
