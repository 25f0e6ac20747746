"""
AuthPortal Project - Client-side sign-in and sign-up workflows.

Validates credentials locally, exchanges them with a remote authentication
service over HTTP and bootstraps an authenticated session.

License: Apache-2.0 License
"""

__version__ = "1.0.0"
