"""
Authentication module for AuthPortal.
Handles sign-in, sign-up and session bootstrap.
"""

from .auth_flow import AuthResult, LoginFlow, RegistrationFlow
from .classification import classify_login_error
from .navigation import HistoryNavigator, NavigationEvent, NavigationKind, Navigator
from .session_store import FileSessionStore, MemorySessionStore, SessionStore
from .state import FormState, SubmissionState
from .validation import (
    LoginCredentials,
    RegistrationCredentials,
    validate_email,
    validate_login,
    validate_password,
    validate_registration,
    validate_username,
)

__all__ = [
    'AuthResult',
    'LoginFlow',
    'RegistrationFlow',
    'classify_login_error',
    'Navigator',
    'HistoryNavigator',
    'NavigationEvent',
    'NavigationKind',
    'SessionStore',
    'MemorySessionStore',
    'FileSessionStore',
    'FormState',
    'SubmissionState',
    'LoginCredentials',
    'RegistrationCredentials',
    'validate_username',
    'validate_email',
    'validate_password',
    'validate_login',
    'validate_registration',
]
