"""
Builders for canned auth service responses.
"""

from typing import Any, Optional

from AuthPortal.api.client import ApiResponse
from AuthPortal.api.models import LoginResponse, RegisterResponse

VALID_PASSWORD = "Secret1!"


def login_response(status: int = 200, token: Optional[str] = None,
                   message: Any = None) -> ApiResponse:
    return ApiResponse(status=status, body=LoginResponse(token=token, message=message))


def register_response(status: int = 200, user_id: Any = None,
                      message: Any = None) -> ApiResponse:
    return ApiResponse(status=status, body=RegisterResponse(id=user_id, message=message))
