"""Facade for the login package.

Module layout by abstraction layer:
- adapters: console notifier channels and demo wiring
- domain: credential verification rules
- application: login orchestration across capabilities
"""

from .adapters.console_notifiers import EmailNotifier, SMSNotifier
from .adapters.console_runtime import build_demo_services, run_login_demo
from .application.login import (
    LOGIN_FAILURE_MESSAGE,
    LOGIN_SUCCESS_MESSAGE,
    AuthenticationService,
)
from .domain.authenticators import OAuthAuthenticator, SimpleAuthenticator
from .types import Authenticator, Notifier

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
