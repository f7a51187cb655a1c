from __future__ import annotations

import importlib.util
import io
import sys
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

from solid_login.adapters import console_runtime

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "run_login_demo.py"


def load_demo_script():
    spec = importlib.util.spec_from_file_location("run_login_demo", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class BuildDemoServicesTests(unittest.TestCase):
    def test_pairs_services_with_their_accepted_credentials(self) -> None:
        lines: list[str] = []

        pairs = console_runtime.build_demo_services(emit=lines.append)

        self.assertEqual(len(pairs), 2)
        self.assertIsNot(pairs[0][0], pairs[1][0])
        for service, (username, password) in pairs:
            self.assertTrue(service.authenticator.authenticate(username, password))
        self.assertEqual(lines, [])


class RunLoginDemoTests(unittest.TestCase):
    def test_emits_both_success_lines_and_exits_zero(self) -> None:
        lines: list[str] = []

        exit_code = console_runtime.run_login_demo(emit=lines.append, wait_for_input=False)

        self.assertEqual(exit_code, 0)
        self.assertEqual(
            lines,
            [
                "Email Notification: Login Successful!",
                "SMS Notification: Login Successful!",
            ],
        )

    def test_prints_to_stdout_by_default(self) -> None:
        buffer = io.StringIO()

        with redirect_stdout(buffer):
            console_runtime.run_login_demo(wait_for_input=False)

        self.assertEqual(
            buffer.getvalue(),
            "Email Notification: Login Successful!\nSMS Notification: Login Successful!\n",
        )

    def test_waits_for_one_line_after_logins(self) -> None:
        events: list[str] = []

        def read_line() -> str:
            events.append("read")
            return "\n"

        console_runtime.run_login_demo(
            emit=events.append, wait_for_input=True, read_line=read_line
        )

        self.assertEqual(events[-1], "read")
        self.assertEqual(events.count("read"), 1)

    def test_waits_by_default(self) -> None:
        read_line = mock.Mock(return_value="")

        console_runtime.run_login_demo(emit=lambda _line: None, read_line=read_line)

        read_line.assert_called_once_with()

    def test_skips_wait_when_disabled(self) -> None:
        read_line = mock.Mock(return_value="")

        console_runtime.run_login_demo(
            emit=lambda _line: None, wait_for_input=False, read_line=read_line
        )

        read_line.assert_not_called()


class DemoScriptTests(unittest.TestCase):
    def test_main_prints_both_logins_and_exits_zero_on_empty_stdin(self) -> None:
        script = load_demo_script()
        buffer = io.StringIO()

        with mock.patch.object(sys, "argv", ["run_login_demo.py"]), mock.patch.object(
            sys, "stdin", io.StringIO("")
        ), redirect_stdout(buffer):
            exit_code = script.main()

        self.assertEqual(exit_code, 0)
        self.assertEqual(
            buffer.getvalue(),
            "Email Notification: Login Successful!\nSMS Notification: Login Successful!\n",
        )

    def test_main_ignores_environment(self) -> None:
        script = load_demo_script()
        buffer = io.StringIO()

        with mock.patch.dict(
            "os.environ", {"LOGIN_DEMO_WAIT_FOR_INPUT": "maybe"}
        ), mock.patch.object(sys, "argv", ["run_login_demo.py"]), mock.patch.object(
            sys, "stdin", io.StringIO("")
        ), redirect_stdout(buffer):
            exit_code = script.main()

        self.assertEqual(exit_code, 0)
        self.assertIn("SMS Notification: Login Successful!", buffer.getvalue())


if __name__ == "__main__":
    unittest.main()
