import os
import unittest
from unittest import mock

from pydantic import ValidationError

from pgservice.location import ServiceFileLocation, find_path


class TestLocation(unittest.TestCase):
    """Test the resolution of the service file path."""

    def test_override_first(self):
        path = find_path(
            override="/etc/override.conf",
            environ={"PGSERVICEFILE": "/env/service.conf"},
            home="/home/user",
        )
        self.assertEqual(path, "/etc/override.conf")

    def test_environment(self):
        path = find_path(environ={"PGSERVICEFILE": "/env/service.conf"}, home="/home/user")
        self.assertEqual(path, "/env/service.conf")

    def test_home_default(self):
        path = find_path(environ={}, home="/home/user")
        self.assertEqual(path, "/home/user" + os.sep + ".pg_service.conf")

    def test_empty_values_are_set(self):
        self.assertEqual(find_path(override="", environ={"PGSERVICEFILE": "x"}, home="h"), "")
        self.assertEqual(find_path(environ={"PGSERVICEFILE": ""}, home="h"), "")

    def test_process_environment(self):
        with mock.patch.dict(os.environ, {"PGSERVICEFILE": "/from/os/environ.conf"}):
            self.assertEqual(find_path(), "/from/os/environ.conf")

    def test_location_model(self):
        location = ServiceFileLocation.from_environment(
            environ={"PGSERVICEFILE": "/env/service.conf"}, home="/home/user"
        )
        self.assertIsNone(location.override)
        self.assertEqual(location.environment_file, "/env/service.conf")
        self.assertEqual(location.path(), "/env/service.conf")

        with self.assertRaises(ValidationError):
            ServiceFileLocation(home="/home/user", unknown="value")
        with self.assertRaises(ValidationError):
            ServiceFileLocation(override="/x")


if __name__ == "__main__":
    unittest.main()
