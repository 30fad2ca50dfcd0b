"""
Tests for the logging module.
"""

import os
import json
import logging
import tempfile
import unittest
from unittest import mock

import numpy as np

from dist_lib.distribution import Distribution
from dist_lib.logging import logger as logger_module
from dist_lib.logging import setup_logger, get_logger


def reset_logger():
    lib_logger = logging.getLogger(logger_module.LOGGER_NAME)
    for handler in list(lib_logger.handlers):
        handler.close()
        lib_logger.removeHandler(handler)
    logger_module._logger = None


class TestLogging(unittest.TestCase):
    """Test cases for the JSON logger."""

    def setUp(self):
        reset_logger()
        self.tmp = tempfile.TemporaryDirectory()
        self.log_file = os.path.join(self.tmp.name, "dist_lib.json")

    def tearDown(self):
        reset_logger()
        self.tmp.cleanup()

    def read_events(self):
        with open(self.log_file) as f:
            return [json.loads(line) for line in f if line.strip()]

    def test_debug_events_written_as_json(self):
        """Test JSON events in debug mode."""
        setup_logger(debug=True, log_level="debug", log_file=self.log_file)
        d = Distribution.zeta(1.0, 1.0, 3)
        d.empiric(10)

        events = self.read_events()
        names = [e["data"]["event"] for e in events]
        self.assertEqual(names[0], "logger_initialized")
        self.assertIn("distribution_constructed", names)
        self.assertIn("empiric_sampled", names)

        constructed = next(e for e in events if e["data"]["event"] == "distribution_constructed")
        self.assertEqual(constructed["level"], "DEBUG")
        self.assertEqual(constructed["data"]["shape"], "zeta")
        self.assertEqual(constructed["data"]["width"], 3)

    def test_info_level_skips_construction(self):
        """Test level filtering."""
        setup_logger(debug=True, log_level="info", log_file=self.log_file)
        Distribution.uniform(2).unordered_empiric(5)

        names = [e["data"]["event"] for e in self.read_events()]
        self.assertNotIn("distribution_constructed", names)
        self.assertIn("empiric_sampled", names)

    def test_quiet_without_debug(self):
        """Test default logger without debug."""
        with mock.patch.dict(os.environ, {"DIST_LIB_DEBUG": "0"}, clear=True):
            lib_logger = get_logger()
        self.assertEqual(lib_logger.level, logging.WARNING)
        self.assertTrue(all(isinstance(h, logging.NullHandler) for h in lib_logger.handlers))
        self.assertIs(get_logger(), lib_logger)

    def test_malformed_environment_does_not_break_construction(self):
        """Test that bad logging variables fall back to the defaults."""
        env = {"DIST_LIB_LOG_LEVEL": "verbose", "DIST_LIB_DEBUG": "maybe", "DIST_LIB_SEED": "abc"}
        with mock.patch.dict(os.environ, env, clear=True):
            d = Distribution.uniform(3)
            self.assertEqual(Distribution.uniform(3).width, 3)
        self.assertEqual(d.width, 3)
        self.assertEqual(get_logger().level, logging.WARNING)

    def test_env_file_not_loaded_by_library(self):
        """Test that using the library leaves the process environment alone."""
        with open(os.path.join(self.tmp.name, ".env"), "w") as f:
            f.write("DIST_LIB_UNRELATED_SECRET=leaked\n")
        cwd = os.getcwd()
        os.chdir(self.tmp.name)
        try:
            with mock.patch.dict(os.environ, {}, clear=True):
                Distribution.uniform(3).unordered_empiric(5)
                self.assertNotIn("DIST_LIB_UNRELATED_SECRET", os.environ)
        finally:
            os.chdir(cwd)

    def test_failed_construction_not_logged(self):
        """Test that only successfully built distributions are logged."""

        class Rejecting(Distribution):
            def __init__(self, probabilities, rng=None):
                raise ValueError("rejected")

        setup_logger(debug=True, log_level="debug", log_file=self.log_file)
        with self.assertRaises(ValueError):
            Rejecting.uniform(3)
        Distribution.dirac(2)

        constructed = [e["data"] for e in self.read_events()
                       if e["data"]["event"] == "distribution_constructed"]
        self.assertEqual([e["shape"] for e in constructed], ["dirac"])

    def test_serializes_numpy(self):
        """Test serialization of numpy values."""
        formatter = logger_module.JsonFormatter()
        data = formatter._serialize({
            "array": np.array([0.5, 0.5]),
            "count": np.int64(3),
            "value": np.float64(0.25),
            "large": np.zeros(500)
        })
        self.assertEqual(data["array"], [0.5, 0.5])
        self.assertEqual(data["count"], 3)
        self.assertEqual(data["value"], 0.25)
        self.assertTrue(data["large"].startswith("ndarray(500)"))
        json.dumps(data)


if __name__ == '__main__':
    unittest.main()
