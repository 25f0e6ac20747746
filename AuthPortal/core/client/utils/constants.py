"""
Constants shared by the sign-in and sign-up workflows.
"""

# Form field names
FIELD_USERNAME = "username"
FIELD_EMAIL = "email"
FIELD_PASSWORD = "password"
FIELD_CONFIRM_PASSWORD = "confirm_password"

# Local validation messages
USERNAME_REQUIRED = "Username is required"
PASSWORD_REQUIRED = "Password is required"
USERNAME_FORMAT = "Username must be 4-20 characters, no special characters except _"
EMAIL_FORMAT = "Invalid email address"
PASSWORD_FORMAT = "Password must be 8-32 chars, 1 special, 1 number, 1 uppercase"
PASSWORDS_DO_NOT_MATCH = "Passwords do not match"

# Generic form-level messages
LOGIN_FAILED = "Login failed"
REGISTRATION_FAILED = "Registration failed"
NETWORK_ERROR = "Network error"

# Password policy
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 32
PASSWORD_SYMBOLS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?"
