"""Domain layer: credential verification rules."""

from .authenticators import OAuthAuthenticator, SimpleAuthenticator

__all__ = [
    "OAuthAuthenticator",
    "SimpleAuthenticator",
]
