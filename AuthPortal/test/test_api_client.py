"""
Integration tests for AuthAPIClient against an in-process aiohttp server.
"""

import aiohttp
import pytest

from AuthPortal.api.client import AuthAPIClient, SessionManager, close_session
from AuthPortal.config import Config
from AuthPortal.core.client.auth import (
    AuthResult,
    HistoryNavigator,
    LoginFlow,
    MemorySessionStore,
    RegistrationFlow,
)
from AuthPortal.core.client.utils.constants import NETWORK_ERROR
from AuthPortal.core.client.utils.exceptions import TransportError
from AuthPortal.test.helpers import VALID_PASSWORD

pytestmark = pytest.mark.integration


class TestAuthAPIClient:
    """Wire behaviour of the login and register calls."""

    @pytest.mark.asyncio
    async def test_login_success(self, auth_service):
        service, base_url = auth_service
        async with aiohttp.ClientSession() as session:
            client = AuthAPIClient(base_url, session=session)
            response = await client.login("alice", VALID_PASSWORD)

        assert response.ok
        assert response.body.token == "tok-alice"
        assert service.requests == [
            {"path": "/api/auth/login", "body": {"username": "alice", "password": VALID_PASSWORD}}
        ]

    @pytest.mark.asyncio
    async def test_login_rejection_keeps_status_and_message(self, auth_service):
        _, base_url = auth_service
        async with aiohttp.ClientSession() as session:
            response = await AuthAPIClient(base_url, session=session).login("alice", "nope")

        assert response.status == 401
        assert not response.ok
        assert response.body.token is None
        assert response.body.message == "Invalid username or password"

    @pytest.mark.asyncio
    async def test_register_sends_only_three_fields(self, auth_service):
        service, base_url = auth_service
        async with aiohttp.ClientSession() as session:
            response = await AuthAPIClient(base_url, session=session).register(
                "new_user", "new@example.com", VALID_PASSWORD
            )

        assert response.status == 201
        assert response.body.id == 42
        assert set(service.requests[0]["body"]) == {"username", "email", "password"}

    @pytest.mark.asyncio
    async def test_non_json_body_is_transport_error(self, auth_service):
        _, base_url = auth_service
        async with aiohttp.ClientSession() as session:
            with pytest.raises(TransportError) as exc_info:
                await AuthAPIClient(base_url, session=session).login("broken", "x")

        assert exc_info.value.details == {"status": 502}

    @pytest.mark.asyncio
    async def test_non_object_body_is_transport_error(self, auth_service):
        _, base_url = auth_service
        async with aiohttp.ClientSession() as session:
            with pytest.raises(TransportError):
                await AuthAPIClient(base_url, session=session).login("listy", "x")

    @pytest.mark.asyncio
    async def test_unreachable_service_is_transport_error(self, unused_tcp_port):
        async with aiohttp.ClientSession() as session:
            client = AuthAPIClient(f"http://127.0.0.1:{unused_tcp_port}/api", session=session)
            with pytest.raises(TransportError):
                await client.login("alice", VALID_PASSWORD)


class TestWorkflowsOverHttp:
    """Both forms driven end to end through the real client."""

    @pytest.mark.asyncio
    async def test_login_form(self, auth_service):
        _, base_url = auth_service
        store = MemorySessionStore()
        navigator = HistoryNavigator()
        async with aiohttp.ClientSession() as session:
            form = LoginFlow(AuthAPIClient(base_url, session=session), store, navigator)
            form.update_field("username", "alice")
            form.update_field("password", "wrong")
            assert await form.submit() is AuthResult.INVALID_CREDENTIALS
            assert form.state.field_errors == {"username": "Invalid username or password"}

            form.update_field("password", VALID_PASSWORD)
            assert await form.submit() is AuthResult.SUCCESS

        assert await store.get("token") == "tok-alice"
        assert navigator.current == "/dashboard"

    @pytest.mark.asyncio
    async def test_registration_form_without_session(self, auth_service):
        service, base_url = auth_service
        store = MemorySessionStore()
        navigator = HistoryNavigator()
        async with aiohttp.ClientSession() as session:
            form = RegistrationFlow(AuthAPIClient(base_url, session=session), store, navigator)
            form.update_field("username", "new_user")
            form.update_field("email", "new@example.com")
            form.update_field("password", VALID_PASSWORD)
            form.update_field("confirm_password", VALID_PASSWORD)

            # The fake service only knows alice, so the follow-up login is refused
            result = await form.submit()

        assert result is AuthResult.REGISTERED_NOT_AUTHENTICATED
        assert [r["path"] for r in service.requests] == ["/api/user/register", "/api/auth/login"]
        assert form.state.success is True
        assert await store.get("token") is None
        assert navigator.history == []


class TestLenientResponseBodies:
    """Replies whose message is not a plain string."""

    @pytest.mark.asyncio
    async def test_structured_message_does_not_discard_token(self, auth_service):
        _, base_url = auth_service
        store = MemorySessionStore()
        navigator = HistoryNavigator()
        async with aiohttp.ClientSession() as session:
            form = LoginFlow(AuthAPIClient(base_url, session=session), store, navigator)
            form.update_field("username", "structured")
            form.update_field("password", "x")
            result = await form.submit()

        assert result is AuthResult.SUCCESS
        assert await store.get("token") == "tok-structured"
        assert navigator.current == "/dashboard"
        assert form.state.error == ""

    @pytest.mark.asyncio
    async def test_list_message_shown_as_registration_error(self, auth_service):
        _, base_url = auth_service
        async with aiohttp.ClientSession() as session:
            form = RegistrationFlow(AuthAPIClient(base_url, session=session),
                                    MemorySessionStore(), HistoryNavigator())
            form.update_field("username", "taken_list")
            form.update_field("email", "new@example.com")
            form.update_field("password", VALID_PASSWORD)
            form.update_field("confirm_password", VALID_PASSWORD)
            result = await form.submit()

        assert result is AuthResult.REGISTRATION_FAILED
        assert form.state.error == "username already exists"
        assert form.state.field_errors == {}


class TestSharedSession:
    """Clients that do not bring their own aiohttp session."""

    @pytest.mark.asyncio
    async def test_shared_session_is_reused_and_closed(self, auth_service):
        _, base_url = auth_service
        manager = SessionManager()
        try:
            first = AuthAPIClient(base_url)
            second = AuthAPIClient(base_url)
            response = await first.login("alice", VALID_PASSWORD)
            assert response.body.token == "tok-alice"
            assert not manager.is_closed
            assert await first._get_session() is await second._get_session()
        finally:
            await close_session()

        assert manager.is_closed


class TestRequestTimeout:
    """AUTHPORTAL_REQUEST_TIMEOUT applied to each request."""

    @pytest.mark.asyncio
    async def test_expired_timeout_is_network_error(self, auth_service, monkeypatch):
        _, base_url = auth_service
        monkeypatch.setattr(Config, "REQUEST_TIMEOUT", 0.05)
        store = MemorySessionStore()
        navigator = HistoryNavigator()
        async with aiohttp.ClientSession() as session:
            form = LoginFlow(AuthAPIClient(base_url, session=session), store, navigator)
            transitions = []
            form.state.add_listener(lambda state: transitions.append(state.loading))
            form.update_field("username", "slow")
            form.update_field("password", "x")
            result = await form.submit()

        assert result is AuthResult.NETWORK_ERROR
        assert form.state.error == NETWORK_ERROR
        assert transitions == [True, False]
        assert await store.get("token") is None
        assert navigator.history == []

    @pytest.mark.asyncio
    async def test_client_call_raises_transport_error(self, auth_service, monkeypatch):
        _, base_url = auth_service
        monkeypatch.setattr(Config, "REQUEST_TIMEOUT", 0.05)
        async with aiohttp.ClientSession() as session:
            with pytest.raises(TransportError):
                await AuthAPIClient(base_url, session=session).login("slow", "x")
