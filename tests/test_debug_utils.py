import unittest
import logging
import sys
import os
import tempfile

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from nntextclassifier.debug_utils import log_debug, log_error, logger, setup_logging
from nntextclassifier.observer import LoggingObserver, Observable


class TestLogging(unittest.TestCase):

    def test_setup_logging_writes_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            log_file = os.path.join(tmp, "logs", "nntc.log")
            handler = setup_logging(log_file)
            try:
                log_debug("network created")
                log_error("decode failed")
                handler.flush()
            finally:
                logger.removeHandler(handler)
                handler.close()

            with open(log_file) as f:
                content = f.read()
        self.assertIn("DEBUG - network created", content)
        self.assertIn("ERROR - decode failed", content)

    def test_setup_logging_without_file(self):
        self.assertIsNone(setup_logging(None))

    def test_logging_observer(self):
        observable = Observable()
        observable.add_observer(LoggingObserver("nntc.test"))
        with self.assertLogs("nntc.test", level=logging.INFO) as logs:
            observable.notify_observers("Recognizer for Characteristics 'intent' trained. Wait...")
        self.assertEqual(len(logs.output), 1)
        self.assertIn("trained", logs.output[0])


if __name__ == '__main__':
    unittest.main()
