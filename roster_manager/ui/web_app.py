"""
Web application module for the Eagles Roster Manager.

This module contains the Flask server exposing the roster view, team
information and the welcome form as JSON API endpoints.
"""
import logging
from typing import Dict, List, Optional

from flask import Flask, jsonify, request

from ..models import RosterEntry, QueryCriteria
from ..services import (
    ServiceFactory, RosterLoadError, VisitorLogError, VisitorValidationError, query
)
from ..utils import (
    AppConfig,
    TEAM_INFO,
    ROLE_OPTIONS,
    TYPE_OPTIONS,
    SORT_OPTIONS,
    configure_logging,
    format_entry_label,
    format_entry_details,
    format_team_stats,
)

logger = logging.getLogger(__name__)


class WebAppState:
    """
    State holder for the web application.

    Loads the roster once when the application is created; the list is
    read-only afterwards.
    """

    def __init__(self, factory: ServiceFactory):
        self.factory = factory
        services = factory.create_complete_service_suite()
        self.roster_store = services['roster_store']
        self.visitor_log = services['visitor_log']
        self.roster: List[RosterEntry] = []
        self._positions: Dict[int, int] = {}
        self.load_error: Optional[str] = None

    def load_roster(self) -> None:
        """Seed and load the roster, keeping an empty roster on failure."""
        try:
            self.roster = self.roster_store.load_or_create()
            self.load_error = None
        except RosterLoadError as e:
            logger.exception("Could not load roster")
            self.roster = []
            self.load_error = str(e)
        self._positions = {id(entry): i for i, entry in enumerate(self.roster)}

    def index_of(self, entry: RosterEntry) -> int:
        """Position of an entry in the full roster, for /api/roster/<index>."""
        return self._positions[id(entry)]


def _entry_payload(entry: RosterEntry, index: int) -> dict:
    payload = entry.to_dict()
    payload["index"] = index
    payload["label"] = format_entry_label(entry)
    return payload


def create_app(config: Optional[AppConfig] = None) -> Flask:
    """
    Create and configure the Flask application with API endpoints.

    Args:
        config: Application configuration; defaults to AppConfig.from_env()

    Returns:
        Configured Flask application instance
    """
    config = config or AppConfig.from_env()
    app_state = WebAppState(ServiceFactory(config))
    app_state.load_roster()

    app = Flask(__name__)

    # ==================== API Endpoints ==================== #

    @app.route("/api/team", methods=["GET"])
    def get_team():
        """Get team information and statistics."""
        return jsonify({
            "success": True,
            "team": TEAM_INFO.to_dict(),
            "roster_size": len(app_state.roster),
            "stats_text": format_team_stats(TEAM_INFO, len(app_state.roster)),
            "load_error": app_state.load_error,
        })

    @app.route("/api/filters", methods=["GET"])
    def get_filters():
        """Get dropdown options for the roster view."""
        return jsonify({
            "success": True,
            "roles": ROLE_OPTIONS,
            "types": TYPE_OPTIONS,
            "sort": SORT_OPTIONS,
        })

    @app.route("/api/roster", methods=["GET"])
    def get_roster():
        """Get the roster filtered and ordered by query parameters."""
        try:
            criteria = QueryCriteria.from_ui(
                request.args.get("search", ""),
                request.args.get("role"),
                request.args.get("type"),
                request.args.get("sort"),
            )
            results = query(app_state.roster, criteria)
            return jsonify({
                "success": True,
                "players": [_entry_payload(entry, app_state.index_of(entry)) for entry in results],
                "count": len(results),
                "total": len(app_state.roster),
                "sort": criteria.sort_key.value,
            })
        except Exception as e:
            logger.exception("Roster query failed")
            return jsonify({"success": False, "error": str(e)}), 500

    @app.route("/api/roster/<int:index>", methods=["GET"])
    def get_roster_entry(index: int):
        """Get one entry of the full roster with its details text."""
        if index >= len(app_state.roster):
            return jsonify({"success": False, "error": "Roster entry not found"}), 404
        entry = app_state.roster[index]
        return jsonify({
            "success": True,
            "player": _entry_payload(entry, index),
            "details": format_entry_details(entry),
        })

    @app.route("/api/visitors", methods=["POST"])
    def record_visitor():
        """Record a welcome form submission in the visitor log."""
        data = request.get_json(silent=True) or {}
        try:
            visitor = app_state.visitor_log.record_visit(
                data.get("name", ""),
                data.get("email", ""),
                data.get("favorite_team", ""),
            )
        except VisitorValidationError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        except VisitorLogError as e:
            logger.exception("Visitor entry not saved")
            return jsonify({"success": False, "error": str(e)}), 500

        return jsonify({"success": True, "visitor": visitor.to_dict()}), 201

    return app


def run_web_app(config: Optional[AppConfig] = None) -> None:
    """
    Run the web application.

    Args:
        config: Application configuration; host and port are taken from it
    """
    config = config or AppConfig.from_env()
    configure_logging(config.log_level)
    app = create_app(config)
    # Bind only to localhost by default
    app.run(host=config.host, port=config.port, debug=False)


if __name__ == "__main__":
    run_web_app()
