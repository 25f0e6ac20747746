"""
HTTP access to the remote authentication service.
"""

from .client import AuthAPIClient, ApiResponse, close_session
from .models import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse

__all__ = [
    'AuthAPIClient',
    'ApiResponse',
    'close_session',
    'LoginRequest',
    'LoginResponse',
    'RegisterRequest',
    'RegisterResponse',
]
