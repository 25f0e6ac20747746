"""
Utility constants and exceptions for the authentication client.
"""

from .constants import (
    LOGIN_FAILED,
    NETWORK_ERROR,
    REGISTRATION_FAILED,
)
from .exceptions import (
    ClientError,
    CredentialError,
    RegistrationError,
    TransportError,
    ValidationError,
)

__all__ = [
    'ClientError',
    'CredentialError',
    'RegistrationError',
    'TransportError',
    'ValidationError',
    'LOGIN_FAILED',
    'NETWORK_ERROR',
    'REGISTRATION_FAILED',
]
