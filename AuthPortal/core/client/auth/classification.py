"""
Routing of server-supplied login error messages to form fields.

The auth service reports failures as free text. A message mentioning
"username" belongs under the username input, one mentioning "password"
under the password input, and anything else is shown for the whole form.
The match is a case-insensitive substring test and "username" is checked
first, so a message naming both fields lands on the username.
"""

from typing import Optional, Tuple

from AuthPortal.core.client.utils.constants import (
    FIELD_PASSWORD,
    FIELD_USERNAME,
    LOGIN_FAILED,
)


def classify_login_error(message: Optional[str]) -> Tuple[Optional[str], str]:
    """
    Decide where a login failure message is displayed.

    Args:
        message: Message from the auth service, possibly missing or empty

    Returns:
        (field, text) where field is ``"username"``, ``"password"`` or None
        for a form-level error
    """
    if not message:
        return None, LOGIN_FAILED

    lowered = message.lower()
    if FIELD_USERNAME in lowered:
        return FIELD_USERNAME, message
    if FIELD_PASSWORD in lowered:
        return FIELD_PASSWORD, message
    return None, message
