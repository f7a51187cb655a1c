#!/usr/bin/env python3
"""Log in once with each demo service, then wait for Enter."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from solid_login.adapters.console_runtime import run_login_demo  # noqa: E402


def main() -> int:
    parse_args()
    return run_login_demo()


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Log in with the simple (email) and OAuth (SMS) demo services."
    )
    return parser.parse_args()


if __name__ == "__main__":
    sys.exit(main())
