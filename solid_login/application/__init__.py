"""Application layer: login orchestration."""

from .login import LOGIN_FAILURE_MESSAGE, LOGIN_SUCCESS_MESSAGE, AuthenticationService

__all__ = [
    "LOGIN_FAILURE_MESSAGE",
    "LOGIN_SUCCESS_MESSAGE",
    "AuthenticationService",
]
