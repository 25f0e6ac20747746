"""
Request and response bodies exchanged with the auth service.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class LoginRequest(BaseModel):
    username: str
    password: str


class RegisterRequest(BaseModel):
    username: str
    email: str
    password: str


class ServiceResponse(BaseModel):
    """
    Fields every reply may carry.

    ``message`` is free-form: services send strings, lists of strings or
    structured objects, and none of them may invalidate the rest of the body.
    """
    model_config = ConfigDict(extra="ignore")

    message: Any = None

    @property
    def message_text(self) -> Optional[str]:
        """The message as display text, or None when it has no usable text."""
        if isinstance(self.message, str):
            return self.message or None
        if isinstance(self.message, (list, tuple)):
            parts = [str(part) for part in self.message if isinstance(part, (str, int, float)) and str(part)]
            return "\n".join(parts) or None
        return None


class LoginResponse(ServiceResponse):
    token: Optional[str] = None


class RegisterResponse(ServiceResponse):
    # Only its truthiness matters
    id: Any = None
