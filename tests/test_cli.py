from __future__ import annotations

import builtins
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from rbdb import cli
from rbdb.session import Session


class ConsoleModeTests(unittest.TestCase):
    def test_console_session_prints_banner_and_results(self) -> None:
        inputs = ["INSERT username alice", "SELECT username", "exit"]
        with mock.patch.object(builtins, "input", side_effect=inputs) as fake_input:
            with mock.patch.object(builtins, "print") as fake_print:
                code = cli.main([])

        self.assertEqual(code, 0)
        printed = [c.args[0] for c in fake_print.call_args_list if c.args]
        self.assertEqual(
            printed,
            [
                "Database has started...",
                "SUCCESS: Inserted username:alice into database",
                "alice",
            ],
        )
        fake_input.assert_called_with("RBDB -> ")

    def test_end_of_input_exits_cleanly(self) -> None:
        with mock.patch.object(builtins, "input", side_effect=EOFError):
            with mock.patch.object(builtins, "print"):
                self.assertEqual(cli.main(["--prompt", "db> "]), 0)

    def test_unexpected_failure_returns_one(self) -> None:
        with mock.patch.object(Session, "run", side_effect=RuntimeError("boom")):
            with mock.patch.object(builtins, "print"):
                with self.assertLogs("rbdb.cli", level="ERROR"):
                    self.assertEqual(cli.main([]), 1)

    def test_missing_config_file_returns_one(self) -> None:
        with mock.patch.object(builtins, "print") as fake_print:
            code = cli.main(["--config", "/nonexistent/rbdb.yaml"])

        self.assertEqual(code, 1)
        self.assertIn("Application Error", fake_print.call_args.args[0])

    def test_malformed_config_file_returns_one(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            path = Path(d) / "bad.yaml"
            path.write_text("prompt: [unclosed\n", encoding="utf-8")
            with mock.patch.object(builtins, "print") as fake_print:
                code = cli.main(["--config", str(path)])

        self.assertEqual(code, 1)
        self.assertIn("Invalid YAML", fake_print.call_args.args[0])


if __name__ == "__main__":
    unittest.main()
