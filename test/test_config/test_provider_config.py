import unittest
from pathlib import Path

from dirconf.config import FileConfig, LoggingConfig, get_debug_logging_config
from dirconf.core.exceptions import ConfigurationError


class TestFileConfig(unittest.TestCase):
    """
    Test construction and validation of directory provider settings.
    """

    def test_defaults(self):
        config = FileConfig(directory="/etc/app")
        self.assertEqual(config.directory, "/etc/app")
        self.assertFalse(config.watch)

    def test_path_is_stored_as_string(self):
        config = FileConfig(directory=Path("/etc/app"), watch=True)
        self.assertEqual(config.directory, "/etc/app")
        self.assertTrue(config.watch)

    def test_from_dict(self):
        config = FileConfig.from_dict({"directory": "/etc/app", "watch": True})
        self.assertEqual(config, FileConfig("/etc/app", True))

    def test_from_dict_missing_directory(self):
        with self.assertRaises(ConfigurationError) as ctx:
            FileConfig.from_dict({"watch": True})
        self.assertEqual(ctx.exception.config_key, "directory")

    def test_from_dict_requires_mapping(self):
        with self.assertRaises(ConfigurationError):
            FileConfig.from_dict(["/etc/app"])

    def test_empty_directory(self):
        with self.assertRaises(ConfigurationError):
            FileConfig(directory="")

    def test_watch_must_be_bool(self):
        with self.assertRaises(ConfigurationError) as ctx:
            FileConfig(directory="/etc/app", watch="yes")
        self.assertIn("must be a boolean", str(ctx.exception))

    def test_frozen(self):
        config = FileConfig(directory="/etc/app")
        with self.assertRaises(Exception):
            config.watch = True


class TestLoggingConfig(unittest.TestCase):
    """
    Test logging settings and presets.
    """

    def test_level_is_normalised(self):
        self.assertEqual(LoggingConfig(level="debug").level, "DEBUG")

    def test_invalid_level(self):
        with self.assertRaises(ConfigurationError):
            LoggingConfig(level="verbose")

    def test_debug_preset(self):
        config = get_debug_logging_config()
        self.assertEqual(config.level, "DEBUG")
        self.assertFalse(config.json_logs)


if __name__ == "__main__":
    unittest.main()
