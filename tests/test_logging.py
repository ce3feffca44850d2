import logging
import tempfile
import unittest
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from check_modules.config.models import FileLoggingSettings, FileRotationSettings, LoggingSettings
from check_modules.logging import init_logging


class InitLoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        root = logging.getLogger()
        self._saved = (root.level, list(root.handlers))
        self.addCleanup(self._restore)

    def _restore(self) -> None:
        root = logging.getLogger()
        level, handlers = self._saved
        for handler in list(root.handlers):
            root.removeHandler(handler)
            if handler not in handlers:
                handler.close()
        root.setLevel(level)
        for handler in handlers:
            root.addHandler(handler)

    def test_stream_only_by_default(self) -> None:
        init_logging(LoggingSettings(level="debug"))

        root = logging.getLogger()
        self.assertEqual(root.level, logging.DEBUG)
        self.assertEqual(len(root.handlers), 1)
        self.assertIsInstance(root.handlers[0], logging.StreamHandler)

    def test_file_handler_rotates_daily(self) -> None:
        log_path = Path(self._tmp.name) / "logs" / "check-modules.log"
        init_logging(
            LoggingSettings(
                file=FileLoggingSettings(path=str(log_path), rotation=FileRotationSettings(backup_count=2))
            )
        )

        file_handlers = [h for h in logging.getLogger().handlers if isinstance(h, TimedRotatingFileHandler)]
        self.assertEqual(len(file_handlers), 1)
        self.assertEqual(file_handlers[0].backupCount, 2)
        self.assertTrue(log_path.parent.is_dir())


if __name__ == "__main__":
    unittest.main()
