"""Application orchestration for the login use-case.

Mental model refresher:
- Application layer coordinates use-case flow across injected capabilities.
- In this project it:
  1) asks the bound Authenticator about the credentials
  2) tells the bound Notifier how it went
- It never checks which Authenticator or Notifier variant it was given.
"""

from __future__ import annotations

from ..types import Authenticator, Notifier

LOGIN_SUCCESS_MESSAGE = "Login Successful!"
LOGIN_FAILURE_MESSAGE = "Login Failed."


class AuthenticationService:
    """Compose one Authenticator and one Notifier into a login operation."""

    def __init__(self, authenticator: Authenticator, notifier: Notifier) -> None:
        if authenticator is None:
            raise ValueError("AuthenticationService requires an authenticator")
        if notifier is None:
            raise ValueError("AuthenticationService requires a notifier")
        self._authenticator = authenticator
        self._notifier = notifier

    @property
    def authenticator(self) -> Authenticator:
        return self._authenticator

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    def login(self, username: str, password: str) -> None:
        """Authenticate once, then notify once with the outcome."""
        if self._authenticator.authenticate(username, password):
            self._notifier.notify(LOGIN_SUCCESS_MESSAGE)
        else:
            self._notifier.notify(LOGIN_FAILURE_MESSAGE)
