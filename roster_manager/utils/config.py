"""
Runtime configuration for the Eagles Roster Manager application.

Defaults come from the constants module; each value can be overridden with a
``ROSTER_MANAGER_*`` environment variable.
"""
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import DEFAULT_ROSTER_FILE, DEFAULT_VISITOR_LOG_FILE, DEFAULT_HOST, DEFAULT_PORT

logger = logging.getLogger(__name__)

ENV_PREFIX = "ROSTER_MANAGER_"


@dataclass
class AppConfig:
    """
    File locations, web server binding and log level.

    Attributes:
        roster_path: Roster CSV read at startup
        visitor_log_path: CSV the welcome form appends to
        host: Web server bind address
        port: Web server port
        log_level: Name of the logging level for the application logger
    """
    roster_path: str = DEFAULT_ROSTER_FILE
    visitor_log_path: str = DEFAULT_VISITOR_LOG_FILE
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'AppConfig':
        """
        Build configuration from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            AppConfig with overrides applied
        """
        env = os.environ if environ is None else environ
        config = cls()
        config.roster_path = env.get(f"{ENV_PREFIX}ROSTER_PATH", config.roster_path)
        config.visitor_log_path = env.get(f"{ENV_PREFIX}VISITOR_LOG", config.visitor_log_path)
        config.host = env.get(f"{ENV_PREFIX}HOST", config.host)
        config.log_level = env.get(f"{ENV_PREFIX}LOG_LEVEL", config.log_level).upper()

        raw_port = env.get(f"{ENV_PREFIX}PORT")
        if raw_port:
            try:
                config.port = int(raw_port)
            except ValueError:
                logger.warning("Invalid port %r; using default %d", raw_port, config.port)
        return config
