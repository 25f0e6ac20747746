"""
Exceptions raised while submitting the authentication forms.
"""

from typing import Dict, Optional


class ClientError(Exception):
    """Base exception for client errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ValidationError(ClientError):
    """Local validation failed; the submission never reached the network."""

    def __init__(self, field_errors: Dict[str, str]):
        super().__init__("Validation failed", {"fields": sorted(field_errors)})
        self.field_errors = dict(field_errors)


class CredentialError(ClientError):
    """
    The auth service rejected a login.

    ``field`` names the input the message belongs to, or is None for a
    form-level message.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, {"field": field} if field else None)
        self.field = field


class RegistrationError(ClientError):
    """The registration service rejected the account; never field-routed."""
    pass


class TransportError(ClientError):
    """The request did not complete or the response could not be decoded."""
    pass
