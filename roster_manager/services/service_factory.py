"""
Service factory for the Eagles Roster Manager application.

Builds the roster store and visitor log from a single AppConfig so the
desktop and web shells are wired the same way.
"""
from typing import Optional

from ..utils.config import AppConfig
from .roster_store import RosterStore
from .visitor_log import VisitorLogService


class ServiceFactory:
    """
    Factory for creating service instances from configuration.

    Each service is created once and reused for the factory's lifetime.
    """

    def __init__(self, config: Optional[AppConfig] = None):
        """
        Initialize factory.

        Args:
            config: Application configuration; defaults to AppConfig.from_env()
        """
        self.config = config or AppConfig.from_env()
        self._roster_store: Optional[RosterStore] = None
        self._visitor_log: Optional[VisitorLogService] = None

    def get_roster_store(self) -> RosterStore:
        """Get singleton roster store."""
        if self._roster_store is None:
            self._roster_store = RosterStore(self.config.roster_path)
        return self._roster_store

    def get_visitor_log(self) -> VisitorLogService:
        """Get singleton visitor log service."""
        if self._visitor_log is None:
            self._visitor_log = VisitorLogService(self.config.visitor_log_path)
        return self._visitor_log

    def create_complete_service_suite(self) -> dict:
        """
        Create all services.

        Returns:
            Dictionary containing the configured services
        """
        return {
            'roster_store': self.get_roster_store(),
            'visitor_log': self.get_visitor_log(),
        }
