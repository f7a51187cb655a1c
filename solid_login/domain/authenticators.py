"""Credential verification rules.

Mental model refresher:
- Domain modules hold the business rule only: does this pair match?
- They never print, notify, or keep state between calls.
- Each class is one interchangeable Authenticator; callers must not care
  which one they were handed.
"""

from __future__ import annotations

_ADMIN_USERNAME = "admin"
_ADMIN_PASSWORD = "password123"

_OAUTH_USERNAME = "oauthUser"
_OAUTH_PASSWORD = "oauthPassword"


class SimpleAuthenticator:
    """Accepts the single built-in admin account."""

    def authenticate(self, username: str, password: str) -> bool:
        return username == _ADMIN_USERNAME and password == _ADMIN_PASSWORD


class OAuthAuthenticator:
    """Token-style stand-in, added without touching SimpleAuthenticator."""

    def authenticate(self, username: str, password: str) -> bool:
        return username == _OAUTH_USERNAME and password == _OAUTH_PASSWORD
