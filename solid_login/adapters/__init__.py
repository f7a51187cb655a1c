"""Adapter layer: console notifiers and console runtime wiring."""

from .console_notifiers import EmailNotifier, SMSNotifier
from .console_runtime import build_demo_services, run_login_demo

__all__ = [
    "EmailNotifier",
    "SMSNotifier",
    "build_demo_services",
    "run_login_demo",
]
