"""Login demo built from swappable authenticator and notifier capabilities."""

from .services import (
    LOGIN_FAILURE_MESSAGE,
    LOGIN_SUCCESS_MESSAGE,
    AuthenticationService,
    Authenticator,
    EmailNotifier,
    Notifier,
    OAuthAuthenticator,
    SMSNotifier,
    SimpleAuthenticator,
    build_demo_services,
    run_login_demo,
)

__all__ = [
    "LOGIN_FAILURE_MESSAGE",
    "LOGIN_SUCCESS_MESSAGE",
    "AuthenticationService",
    "Authenticator",
    "EmailNotifier",
    "Notifier",
    "OAuthAuthenticator",
    "SMSNotifier",
    "SimpleAuthenticator",
    "build_demo_services",
    "run_login_demo",
]
