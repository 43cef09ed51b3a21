import io
import unittest
from contextlib import redirect_stdout
from pathlib import Path

import yaml

from pgservice.cli import cli

DATA_DIR = Path(__file__).parent / "data"
SERVICE_FILE = str(DATA_DIR / "pg_service.conf")


class TestCli(unittest.TestCase):
    """Test the command line interface."""

    def run_cli(self, *args):
        output = io.StringIO()
        with redirect_stdout(output):
            exit_code = cli(list(args))
        return exit_code, output.getvalue()

    def test_path(self):
        exit_code, output = self.run_cli("--service-file", SERVICE_FILE, "path")
        self.assertEqual(exit_code, 0)
        self.assertEqual(output.strip(), SERVICE_FILE)

    def test_list(self):
        exit_code, output = self.run_cli("-f", SERVICE_FILE, "list")
        self.assertEqual(exit_code, 0)
        self.assertEqual(output.splitlines(), ["dev", "prod"])

    def test_show(self):
        exit_code, output = self.run_cli("-f", SERVICE_FILE, "show", "dev")
        self.assertEqual(exit_code, 0)
        self.assertEqual(yaml.safe_load(output), {"host": "devhost", "port": "5433"})

    def test_conninfo(self):
        exit_code, output = self.run_cli("-f", SERVICE_FILE, "conninfo", "dev")
        self.assertEqual(exit_code, 0)
        self.assertIn("host=devhost", output)
        self.assertIn("port=5433", output)

    def test_conninfo_connection_string(self):
        exit_code, output = self.run_cli("-f", SERVICE_FILE, "conninfo", "service=dev port=7000")
        self.assertEqual(exit_code, 0)
        self.assertIn("host=devhost", output)
        self.assertIn("port=7000", output)
        self.assertNotIn("service=", output)

    def test_errors(self):
        exit_code, _ = self.run_cli("-f", SERVICE_FILE, "show", "missing")
        self.assertEqual(exit_code, 1)
        exit_code, _ = self.run_cli("-f", str(DATA_DIR / "bad_syntax.conf"), "list")
        self.assertEqual(exit_code, 1)
        exit_code, _ = self.run_cli("-f", str(DATA_DIR / "does_not_exist.conf"), "list")
        self.assertEqual(exit_code, 1)


if __name__ == "__main__":
    unittest.main()
