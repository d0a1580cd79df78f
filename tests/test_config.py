import logging
import unittest
from decimal import Decimal

from application.services import deposit
from config.logging import configure_logging
from config.settings import Settings, load_settings
from domain.models import User
from infrastructure.providers import StaticUserProvider


class SettingsTests(unittest.TestCase):
    def test_defaults(self):
        settings = load_settings({})
        self.assertEqual(settings, Settings(log_level="WARNING", log_json=False))
        self.assertEqual(settings.level, logging.WARNING)

    def test_reads_environment_values(self):
        settings = load_settings({"LOG_LEVEL": " debug ", "LOG_JSON": "True"})
        self.assertEqual(settings.log_level, "DEBUG")
        self.assertEqual(settings.level, logging.DEBUG)
        self.assertTrue(settings.log_json)

    def test_unknown_level(self):
        with self.assertRaises(ValueError):
            load_settings({"LOG_LEVEL": "chatty"})

    def test_direct_construction_normalises_level(self):
        settings = Settings(log_level="debug")
        self.assertEqual(settings.log_level, "DEBUG")
        self.assertEqual(settings.level, logging.DEBUG)

    def test_direct_construction_rejects_unknown_level(self):
        with self.assertRaises(ValueError):
            Settings(log_level="chatty")


class LoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self._handlers = list(root.handlers)
        self._level = root.level

    def tearDown(self) -> None:
        root = logging.getLogger()
        root.handlers = self._handlers
        root.setLevel(self._level)

    def test_configure_logging_sets_root_level(self):
        configure_logging(Settings(log_level="ERROR"))
        self.assertEqual(logging.getLogger().level, logging.ERROR)

    def test_configure_logging_accepts_lower_case_level(self):
        configure_logging(Settings(log_level="debug"))
        self.assertEqual(logging.getLogger().level, logging.DEBUG)

    def test_configure_logging_is_repeatable(self):
        configure_logging(Settings(log_level="INFO"))
        configure_logging(Settings(log_level="INFO", log_json=True))
        count = len(logging.getLogger().handlers)
        configure_logging(Settings(log_level="INFO"))
        self.assertEqual(len(logging.getLogger().handlers), count)

    def test_deposit_emits_debug_event(self):
        configure_logging(Settings(log_level="DEBUG"))
        user = User(id=9, name="Lee", email="lee@gmail.com", balance=Decimal("1"))

        with self.assertLogs("application.services", level="DEBUG") as captured:
            deposit(StaticUserProvider(user), Decimal("2"))

        self.assertTrue(any("deposit_applied" in line for line in captured.output))


if __name__ == "__main__":
    unittest.main()
