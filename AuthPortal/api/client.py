"""
API client for the remote authentication service.
Uses a shared aiohttp.ClientSession so both workflows reuse one connection pool.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, Tuple, Type, TypeVar

import aiohttp
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from AuthPortal.api.models import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse
from AuthPortal.config import config
from AuthPortal.core.client.utils.exceptions import TransportError
from AuthPortal.core.logging import get_logger
from AuthPortal.core.logging.utils import LogTimer

logger = get_logger(__name__)

BodyT = TypeVar("BodyT", bound=BaseModel)


class SessionManager:
    """
    Singleton manager for aiohttp.ClientSession.

    Provides one session shared by every API client instance.
    """

    _instance: Optional['SessionManager'] = None
    _session: Optional[aiohttp.ClientSession] = None
    _lock = asyncio.Lock()

    def __new__(cls) -> 'SessionManager':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    async def get_session(self) -> aiohttp.ClientSession:
        """Get or create the shared aiohttp session."""
        if self._session is None or self._session.closed:
            async with self._lock:
                if self._session is None or self._session.closed:
                    # No total timeout by default: a hung request stays pending
                    timeout = aiohttp.ClientTimeout(total=config.REQUEST_TIMEOUT)
                    self._session = aiohttp.ClientSession(
                        timeout=timeout,
                        headers={"Content-Type": "application/json"},
                    )
        return self._session

    async def close(self) -> None:
        """Close the shared session."""
        async with self._lock:
            if self._session and not self._session.closed:
                await self._session.close()
            self._session = None

    @property
    def is_closed(self) -> bool:
        return self._session is None or self._session.closed


_session_manager = SessionManager()


@dataclass
class ApiResponse(Generic[BodyT]):
    """HTTP status plus the decoded response body."""
    status: int
    body: BodyT

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class AuthAPIClient:
    """
    Client for the login and registration endpoints.

    Every call either returns an ``ApiResponse`` (whatever the HTTP status)
    or raises ``TransportError`` when the request does not complete or the
    body is not a JSON object of the expected shape.
    """

    def __init__(self, base_url: Optional[str] = None, session: Optional[aiohttp.ClientSession] = None):
        """
        Initialize the API client.

        Args:
            base_url: Service root, defaults to ``config.API_BASE_URL``
            session: Session to use instead of the shared one
        """
        self.base_url = (base_url or config.API_BASE_URL).rstrip("/")
        self._session = session

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is not None:
            return self._session
        return await _session_manager.get_session()

    async def _post(self, endpoint: str, payload: BaseModel) -> Tuple[int, Dict[str, Any]]:
        url = f"{self.base_url}{endpoint}"
        session = await self._get_session()
        request_options: Dict[str, Any] = {}
        if config.REQUEST_TIMEOUT is not None:
            request_options["timeout"] = aiohttp.ClientTimeout(total=config.REQUEST_TIMEOUT)
        status = None
        try:
            with LogTimer(f"POST {endpoint}", logger):
                async with session.post(url, json=payload.model_dump(), **request_options) as response:
                    status = response.status
                    data = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"Request to {endpoint} failed: {e}") from e
        except ValueError as e:
            raise TransportError(f"Malformed response from {endpoint}", {"status": status}) from e

        if not isinstance(data, dict):
            raise TransportError(f"Malformed response from {endpoint}", {"status": status})
        logger.debug("POST %s -> %s", endpoint, status)
        return status, data

    async def _call(self, endpoint: str, payload: BaseModel, body_type: Type[BodyT]) -> ApiResponse[BodyT]:
        status, data = await self._post(endpoint, payload)
        try:
            body = body_type.model_validate(data)
        except PydanticValidationError as e:
            raise TransportError(f"Unexpected response body from {endpoint}", {"status": status}) from e
        return ApiResponse(status=status, body=body)

    async def login(self, username: str, password: str) -> ApiResponse[LoginResponse]:
        """
        Exchange credentials for a session token.

        Args:
            username: Account name
            password: Account password

        Returns:
            ApiResponse wrapping a LoginResponse
        """
        return await self._call(
            config.LOGIN_ENDPOINT,
            LoginRequest(username=username, password=password),
            LoginResponse,
        )

    async def register(self, username: str, email: str, password: str) -> ApiResponse[RegisterResponse]:
        """
        Create a new account.

        Returns:
            ApiResponse wrapping a RegisterResponse
        """
        return await self._call(
            config.REGISTER_ENDPOINT,
            RegisterRequest(username=username, email=email, password=password),
            RegisterResponse,
        )


async def close_session() -> None:
    """
    Close the shared aiohttp session.

    Should be called when the application shuts down.
    """
    await _session_manager.close()


__all__ = ["AuthAPIClient", "ApiResponse", "SessionManager", "close_session"]
