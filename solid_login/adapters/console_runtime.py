"""Console runtime that wires the demo login services together.

Mental model refresher:
- This module is the composition root: it picks concrete variants and
  injects them into AuthenticationService instances.
- Waiting for a keypress is console glue and stays here, never in the
  application or domain layers.
"""

from __future__ import annotations

import sys

from ..application.login import AuthenticationService
from ..domain.authenticators import OAuthAuthenticator, SimpleAuthenticator
from ..types import Credentials, EmitFn, ReadLineFn
from .console_notifiers import EmailNotifier, SMSNotifier


def build_demo_services(
    *,
    emit: EmitFn = print,
) -> list[tuple[AuthenticationService, Credentials]]:
    """Pair each demo service with the credentials it is expected to accept."""
    simple_service = AuthenticationService(SimpleAuthenticator(), EmailNotifier(emit))
    oauth_service = AuthenticationService(OAuthAuthenticator(), SMSNotifier(emit))
    return [
        (simple_service, ("admin", "password123")),
        (oauth_service, ("oauthUser", "oauthPassword")),
    ]


def run_login_demo(
    *,
    emit: EmitFn = print,
    wait_for_input: bool = True,
    read_line: ReadLineFn | None = None,
) -> int:
    """Run both demo logins, then optionally block on one line of input.

    Always returns 0: a failed login is an expected outcome, not an error.
    """
    for service, (username, password) in build_demo_services(emit=emit):
        service.login(username, password)

    if wait_for_input:
        (read_line or sys.stdin.readline)()
    return 0
