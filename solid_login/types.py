"""Shared type aliases and capability contracts for the login package."""

from __future__ import annotations

from typing import Callable, Protocol

Credentials = tuple[str, str]
EmitFn = Callable[[str], None]
ReadLineFn = Callable[[], str]


class Authenticator(Protocol):
    """Anything that can verify a username/password pair."""

    def authenticate(self, username: str, password: str) -> bool: ...


class Notifier(Protocol):
    """Anything that can deliver a text message to the user."""

    def notify(self, message: str) -> None: ...
