"""
Client-side credential validation.

Registration checks every field against its format; login only checks that
both fields are present and leaves the rest to the auth service. None of
these functions raise or touch the network.
"""

import re
from dataclasses import dataclass
from typing import Dict

from AuthPortal.core.client.utils.constants import (
    EMAIL_FORMAT,
    FIELD_CONFIRM_PASSWORD,
    FIELD_EMAIL,
    FIELD_PASSWORD,
    FIELD_USERNAME,
    PASSWORD_FORMAT,
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
    PASSWORD_REQUIRED,
    PASSWORD_SYMBOLS,
    PASSWORDS_DO_NOT_MATCH,
    USERNAME_FORMAT,
    USERNAME_REQUIRED,
)

USERNAME_PATTERN = re.compile(r"[A-Za-z0-9_]{4,20}")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
# Any characters except line terminators (\n, \r, U+2028, U+2029)
PASSWORD_LENGTH_PATTERN = re.compile(r"[^\n\r\u2028\u2029]{%d,%d}" % (PASSWORD_MIN_LENGTH, PASSWORD_MAX_LENGTH))

FieldErrors = Dict[str, str]


@dataclass
class LoginCredentials:
    username: str = ""
    password: str = ""


@dataclass
class RegistrationCredentials:
    username: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""


def validate_username(username: str) -> bool:
    """Letters, digits and underscore only, 4-20 characters."""
    return USERNAME_PATTERN.fullmatch(username) is not None


def validate_email(email: str) -> bool:
    """Loose ``local@domain.tld`` shape: one @, no whitespace, a dot after the @."""
    return EMAIL_PATTERN.fullmatch(email) is not None


def validate_password(password: str) -> bool:
    """
    8-32 characters containing at least one uppercase letter, one digit and
    one symbol from ``PASSWORD_SYMBOLS``, in any order.
    """
    if PASSWORD_LENGTH_PATTERN.fullmatch(password) is None:
        return False
    has_upper = any("A" <= ch <= "Z" for ch in password)
    has_digit = any("0" <= ch <= "9" for ch in password)
    has_symbol = any(ch in PASSWORD_SYMBOLS for ch in password)
    return has_upper and has_digit and has_symbol


def validate_login(credentials: LoginCredentials) -> FieldErrors:
    """
    Presence checks for the sign-in form.

    Returns:
        Mapping of field name to message, empty when the form may be submitted
    """
    errors: FieldErrors = {}
    if not credentials.username:
        errors[FIELD_USERNAME] = USERNAME_REQUIRED
    if not credentials.password:
        errors[FIELD_PASSWORD] = PASSWORD_REQUIRED
    return errors


def validate_registration(credentials: RegistrationCredentials) -> FieldErrors:
    """
    Full format checks for the sign-up form.

    Every field is checked so that all problems are reported together.

    Returns:
        Mapping of field name to message, empty when the form may be submitted
    """
    errors: FieldErrors = {}
    if not validate_username(credentials.username):
        errors[FIELD_USERNAME] = USERNAME_FORMAT
    if not validate_email(credentials.email):
        errors[FIELD_EMAIL] = EMAIL_FORMAT
    if not validate_password(credentials.password):
        errors[FIELD_PASSWORD] = PASSWORD_FORMAT
    if credentials.password != credentials.confirm_password:
        errors[FIELD_CONFIRM_PASSWORD] = PASSWORDS_DO_NOT_MATCH
    return errors
