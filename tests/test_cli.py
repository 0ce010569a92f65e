import os
import tempfile
import textwrap
import types
import unittest
from unittest.mock import MagicMock, patch

import lazyrange.cli as cli
from lazyrange.lib.config import Config
from lazyrange.lib.logger import Logger


class TestCLI(unittest.TestCase):
    def setUp(self):
        fd, path = tempfile.mkstemp(prefix="lazyrange_", suffix=".cfg")
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(
                textwrap.dedent(
                    """
                    [demo]
                    count = 6
                    tile_length = 2

                    [dev]
                    log_level = debug
                    stack_trace_errors = false
                """
                ).lstrip()
            )

        self.path = path
        Config.load(self.path)
        Logger.setup(Logger.DEBUG)
        Logger._logger.handlers.clear()  # Silence std logs

    def tearDown(self):
        if os.path.exists(self.path):
            os.remove(self.path)

    def test_version_command(self):
        parser = cli._build_parser()
        ns = parser.parse_args(["version"])
        with patch("builtins.print") as mock_print:
            rc = ns.handler(ns)
        self.assertEqual(rc, 0)
        mock_print.assert_called_once_with(cli.__version__)

    def test_demo_valid(self):
        fake_mod = types.SimpleNamespace(execute=MagicMock())
        with patch("lazyrange.cli._resolve_demo", return_value=fake_mod):
            parser = cli._build_parser()
            ns = parser.parse_args(["demo", "tiling"])
            rc = ns.handler(ns)

        self.assertEqual(rc, 0)
        fake_mod.execute.assert_called_once()

    def test_demo_missing(self):
        with (
            self.assertLogs(Logger._logger.name, level="ERROR") as cm,
            patch("lazyrange.cli._resolve_demo", side_effect=cli.DemoNotFoundError("No demo named 'foo'")),
        ):
            parser = cli._build_parser()
            ns = parser.parse_args(["demo", "foo"])
            rc = ns.handler(ns)

        self.assertEqual(rc, 1)
        self.assertTrue(any("No demo named 'foo'" in line for line in cm.output))

    def test_resolve_unknown_demo(self):
        with self.assertRaises(cli.DemoNotFoundError):
            cli._resolve_demo("no_such_demo")

    def test_demo_invalid(self):
        fake_mod = types.SimpleNamespace()  # missing execute()
        with (
            self.assertLogs(Logger._logger.name, level="ERROR") as cm,
            patch("lazyrange.cli._resolve_demo", return_value=fake_mod),
        ):
            parser = cli._build_parser()
            ns = parser.parse_args(["demo", "foo"])
            rc = ns.handler(ns)

        self.assertEqual(rc, 1)
        self.assertTrue(any("missing callable execute()" in line for line in cm.output))

    def test_demo_failure_is_reported(self):
        fake_mod = types.SimpleNamespace(execute=MagicMock(side_effect=ValueError("boom")))
        with (
            self.assertLogs(Logger._logger.name, level="ERROR") as cm,
            patch("lazyrange.cli._resolve_demo", return_value=fake_mod),
        ):
            ns = cli._build_parser().parse_args(["demo", "foo"])
            rc = ns.handler(ns)

        self.assertEqual(rc, 1)
        self.assertTrue(any("Failed to run demo 'foo': boom" in line for line in cm.output))

    def test_demo_failure_reraised_with_stack_traces(self):
        fake_mod = types.SimpleNamespace(execute=MagicMock(side_effect=ValueError("boom")))
        with (
            patch.dict(Config._data["dev"], {"stack_trace_errors": True}),
            patch("lazyrange.cli._resolve_demo", return_value=fake_mod),
        ):
            ns = cli._build_parser().parse_args(["demo", "foo"])
            with self.assertRaises(ValueError):
                ns.handler(ns)

    def test_main_runs_version(self):
        with patch("sys.argv", ["lazyrange", "version"]), patch("builtins.print") as mock_print:
            rc = cli.main()
        self.assertEqual(rc, 0)
        mock_print.assert_called_once_with(cli.__version__)

    def test_main_runs_demo_with_config(self):
        with patch("builtins.print") as mock_print:
            rc = cli.main(["--config", self.path, "demo", "tiling"])

        self.assertEqual(rc, 0)
        mock_print.assert_any_call("0 1")
        mock_print.assert_any_call("4 5")
        self.assertEqual(mock_print.call_count, 3)

    def test_demo_logs_progress_only(self):
        fake_mod = types.SimpleNamespace(execute=MagicMock())
        with (
            self.assertLogs(Logger._logger.name, level="DEBUG") as cm,
            patch("lazyrange.cli._resolve_demo", return_value=fake_mod),
        ):
            ns = cli._build_parser().parse_args(["demo", "tiling"])
            cli.cmd_demo(ns)

        self.assertEqual(len(cm.output), 2)
        self.assertIn("Running demo 'tiling'...", cm.output[0])
        self.assertIn("Demo complete.", cm.output[1])

    def test_resolve_demo_propagates_inner_import_errors(self):
        missing = ModuleNotFoundError("No module named 'numpy'", name="numpy")
        with patch("importlib.import_module", side_effect=missing):
            with self.assertRaises(ModuleNotFoundError):
                cli._resolve_demo("tiling")

    def test_main_applies_configured_level(self):
        with patch("builtins.print"):
            cli.main(["--config", self.path, "version"])
        self.assertEqual(Logger._logger.level, Logger.DEBUG)
