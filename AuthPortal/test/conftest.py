"""
Test configuration and fixtures for AuthPortal tests.

Provides:
- In-memory session store and recording navigator
- A mocked auth API client with canned responses
- An in-process aiohttp application standing in for the auth service
"""

import asyncio
from typing import Any, Dict, List
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from AuthPortal.core.client.auth import HistoryNavigator, MemorySessionStore
from AuthPortal.core.logging import configure_logging, create_testing_config
from AuthPortal.test.helpers import VALID_PASSWORD, login_response, register_response


@pytest.fixture(scope="session", autouse=True)
def testing_logging():
    """Route log output to the console only."""
    configure_logging(create_testing_config())


@pytest.fixture
def store() -> MemorySessionStore:
    return MemorySessionStore()


@pytest.fixture
def navigator() -> HistoryNavigator:
    return HistoryNavigator(start="/login")


@pytest.fixture
def api_client() -> MagicMock:
    """API client whose login/register calls are AsyncMocks."""
    client = MagicMock()
    client.login = AsyncMock(return_value=login_response(token="abc"))
    client.register = AsyncMock(return_value=register_response(user_id="u1"))
    return client


class FakeAuthService:
    """
    aiohttp application mimicking the remote auth service.

    Behaviour is keyed on the submitted username so a single server covers
    every response shape the client must handle.
    """

    def __init__(self):
        self.requests: List[Dict[str, Any]] = []
        self.app = web.Application()
        self.app.router.add_post("/api/auth/login", self.login)
        self.app.router.add_post("/api/user/register", self.register)

    async def login(self, request: web.Request) -> web.StreamResponse:
        body = await request.json()
        self.requests.append({"path": request.path, "body": body})
        username = body.get("username")
        if username == "broken":
            return web.Response(text="<html>Bad gateway</html>", status=502)
        if username == "listy":
            return web.json_response(["not", "an", "object"])
        if username == "slow":
            await asyncio.sleep(0.5)
            return web.json_response({"token": "tok-slow"})
        if username == "structured":
            return web.json_response({"token": "tok-structured", "message": {"code": 0}})
        if username == "alice" and body.get("password") == VALID_PASSWORD:
            return web.json_response({"token": "tok-alice", "expires": 3600})
        return web.json_response({"message": "Invalid username or password"}, status=401)

    async def register(self, request: web.Request) -> web.StreamResponse:
        body = await request.json()
        self.requests.append({"path": request.path, "body": body})
        if body.get("username") == "taken":
            return web.json_response({"message": "Username already exists"}, status=409)
        if body.get("username") == "taken_list":
            return web.json_response({"message": ["username already exists"]}, status=409)
        return web.json_response({"id": 42, "username": body.get("username")}, status=201)


@pytest_asyncio.fixture
async def auth_service():
    """Start the fake auth service; yields (service, base_url)."""
    service = FakeAuthService()
    server = TestServer(service.app)
    await server.start_server()
    try:
        yield service, str(server.make_url("/api"))
    finally:
        await server.close()


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: test talks to an in-process HTTP server"
    )
