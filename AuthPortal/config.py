"""
Configuration module for AuthPortal.
Stores the endpoint, storage and routing settings shared by both workflows.
"""

import os
from typing import Dict, Any, Optional

from AuthPortal.core.logging import get_logger

logger = get_logger(__name__)


def _read_timeout(raw: Optional[str]) -> Optional[float]:
    """Parse AUTHPORTAL_REQUEST_TIMEOUT; unusable values mean no timeout."""
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric AUTHPORTAL_REQUEST_TIMEOUT=%r", raw)
        return None
    if not timeout > 0:
        logger.warning("Ignoring non-positive AUTHPORTAL_REQUEST_TIMEOUT=%r", raw)
        return None
    return timeout


class Config:
    """Application configuration class."""

    # Remote authentication service
    API_BASE_URL = os.environ.get("AUTHPORTAL_API_BASE_URL", "http://localhost:8000/api").rstrip("/")
    LOGIN_ENDPOINT = "/auth/login"
    REGISTER_ENDPOINT = "/user/register"

    # No timeout unless explicitly configured
    REQUEST_TIMEOUT = _read_timeout(os.environ.get("AUTHPORTAL_REQUEST_TIMEOUT"))

    # Session storage
    TOKEN_STORAGE_KEY = "token"
    SESSION_STORE_FILE = os.environ.get("AUTHPORTAL_SESSION_FILE", "authportal_session.json")

    # Navigation
    DASHBOARD_ROUTE = "/dashboard"

    @classmethod
    def get_config(cls) -> Dict[str, Any]:
        """Get all configuration values as a dictionary."""
        return {
            "API_BASE_URL": cls.API_BASE_URL,
            "LOGIN_ENDPOINT": cls.LOGIN_ENDPOINT,
            "REGISTER_ENDPOINT": cls.REGISTER_ENDPOINT,
            "REQUEST_TIMEOUT": cls.REQUEST_TIMEOUT,
            "TOKEN_STORAGE_KEY": cls.TOKEN_STORAGE_KEY,
            "SESSION_STORE_FILE": cls.SESSION_STORE_FILE,
            "DASHBOARD_ROUTE": cls.DASHBOARD_ROUTE,
        }


# Create config instance
config = Config()
