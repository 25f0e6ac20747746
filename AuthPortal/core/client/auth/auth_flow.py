"""
Sign-in and sign-up workflows.

Each form object owns its credentials and its FormState; the only things
shared between forms are the API client and the session store.
"""

from dataclasses import fields
from enum import Enum, auto
from typing import Optional, TYPE_CHECKING

from AuthPortal.config import Config, config as default_config
from AuthPortal.core.client.auth.classification import classify_login_error
from AuthPortal.core.client.auth.navigation import Navigator
from AuthPortal.core.client.auth.session_store import SessionStore
from AuthPortal.core.client.auth.state import FormState
from AuthPortal.core.client.auth.validation import (
    LoginCredentials,
    RegistrationCredentials,
    validate_login,
    validate_registration,
)
from AuthPortal.core.client.utils.constants import NETWORK_ERROR, REGISTRATION_FAILED
from AuthPortal.core.client.utils.exceptions import (
    CredentialError,
    RegistrationError,
    TransportError,
    ValidationError,
)
from AuthPortal.core.logging import get_logger

if TYPE_CHECKING:
    from AuthPortal.api.client import AuthAPIClient

logger = get_logger(__name__)


class AuthResult(Enum):
    """Result of one form submission."""
    SUCCESS = auto()
    INVALID_INPUT = auto()
    INVALID_CREDENTIALS = auto()
    REGISTRATION_FAILED = auto()
    # Account created but the follow-up login did not produce a session
    REGISTERED_NOT_AUTHENTICATED = auto()
    NETWORK_ERROR = auto()
    BUSY = auto()


class _AuthForm:
    """Collaborators and the login exchange shared by both forms."""

    def __init__(
        self,
        api_client: 'AuthAPIClient',
        store: SessionStore,
        navigator: Navigator,
        settings: Optional[Config] = None,
    ):
        """
        Args:
            api_client: Client for the auth service
            store: Where the session token is persisted
            navigator: Moves the user to the dashboard on success
            settings: Configuration, defaults to the module-level config
        """
        self._api_client = api_client
        self._store = store
        self._navigator = navigator
        self._settings = settings or default_config
        self.state = FormState()

    async def _authenticate(self, username: str, password: str) -> str:
        """
        Perform one login request.

        Returns:
            The session token

        Raises:
            CredentialError: the service rejected the credentials
            TransportError: the request did not complete
        """
        response = await self._api_client.login(username, password)
        if response.ok and response.body.token:
            return response.body.token
        field, text = classify_login_error(response.body.message_text)
        raise CredentialError(text, field)

    async def _store_token(self, token: str) -> None:
        await self._store.set(self._settings.TOKEN_STORAGE_KEY, token)

    def _set_credential(self, name: str, value: str) -> None:
        if name not in {f.name for f in fields(self.credentials)}:
            raise ValueError(f"Unknown form field: {name!r}")
        setattr(self.credentials, name, value)


class LoginFlow(_AuthForm):
    """
    Sign-in form.

    Only checks that both fields are filled in; whether they are correct is
    decided by the auth service.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.credentials = LoginCredentials()
        # Rendered but not acted upon
        self.remember_me = False

    def update_field(self, name: str, value: str) -> None:
        """Set an input value and drop that field's error."""
        self._set_credential(name, value)
        self.state.field_errors.pop(name, None)

    async def submit(self) -> AuthResult:
        """
        Validate and submit the sign-in form.

        Returns:
            AuthResult indicating the outcome
        """
        if self.state.is_submitting:
            return AuthResult.BUSY

        self.state.clear_errors()
        try:
            self._validate()
        except ValidationError as e:
            self.state.field_errors = e.field_errors
            return AuthResult.INVALID_INPUT

        username = self.credentials.username
        logger.info("Login submitted for %s", username)
        self.state.begin_submission()
        try:
            token = await self._authenticate(username, self.credentials.password)
            await self._store_token(token)
            self.state.settle(True)
            self._navigator.navigate(self._settings.DASHBOARD_ROUTE)
            logger.info("Login succeeded for %s", username)
            return AuthResult.SUCCESS

        except CredentialError as e:
            self.state.settle(False)
            if e.field:
                self.state.field_errors = {e.field: e.message}
            else:
                self.state.error = e.message
            logger.warning("Login rejected for %s: %s", username, e.message)
            return AuthResult.INVALID_CREDENTIALS

        except TransportError as e:
            self.state.settle(False)
            self.state.error = NETWORK_ERROR
            logger.warning("Login request failed: %s", e)
            return AuthResult.NETWORK_ERROR

        finally:
            self.state.end_submission()

    def _validate(self) -> None:
        errors = validate_login(self.credentials)
        if errors:
            raise ValidationError(errors)


class RegistrationFlow(_AuthForm):
    """
    Sign-up form.

    Registers the account, then signs in with the same credentials. When
    the sign-in step fails the registration still counts as successful and
    the user is left on the form without a session.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.credentials = RegistrationCredentials()

    def update_field(self, name: str, value: str) -> None:
        """Set an input value and drop the form-level error."""
        self._set_credential(name, value)
        self.state.error = ""

    def clear_form(self) -> None:
        self.credentials = RegistrationCredentials()

    async def submit(self) -> AuthResult:
        """
        Validate, register and sign in.

        Returns:
            AuthResult indicating the outcome
        """
        if self.state.is_submitting:
            return AuthResult.BUSY

        errors = validate_registration(self.credentials)
        self.state.field_errors = errors
        if errors:
            self.state.error = "\n".join(errors.values())
            return AuthResult.INVALID_INPUT

        self.state.error = ""
        self.state.success = False
        username = self.credentials.username
        password = self.credentials.password
        logger.info("Registration submitted for %s", username)
        self.state.begin_submission()
        try:
            await self._register(username, self.credentials.email, password)
            return await self._login_after_registration(username, password)

        except RegistrationError as e:
            self.state.settle(False)
            self.state.error = e.message
            logger.warning("Registration rejected for %s: %s", username, e.message)
            return AuthResult.REGISTRATION_FAILED

        except TransportError as e:
            self.state.settle(False)
            self.state.error = NETWORK_ERROR
            logger.warning("Registration request failed: %s", e)
            return AuthResult.NETWORK_ERROR

        finally:
            self.state.end_submission()

    async def _register(self, username: str, email: str, password: str) -> None:
        response = await self._api_client.register(username, email, password)
        if not response.ok or not response.body.id:
            raise RegistrationError(response.body.message_text or REGISTRATION_FAILED)
        logger.info("Account created for %s", username)

    async def _login_after_registration(self, username: str, password: str) -> AuthResult:
        try:
            token = await self._authenticate(username, password)
        except (CredentialError, TransportError) as e:
            self.state.settle(True)
            self.state.success = True
            self.clear_form()
            logger.warning("Automatic login after registration failed for %s: %s", username, e)
            return AuthResult.REGISTERED_NOT_AUTHENTICATED

        await self._store_token(token)
        self.state.settle(True)
        self.state.success = True
        self.clear_form()
        self._navigator.redirect(self._settings.DASHBOARD_ROUTE)
        logger.info("Registration and login succeeded for %s", username)
        return AuthResult.SUCCESS
