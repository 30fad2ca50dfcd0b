"""
Logger implementation for the distribution library.

This module provides JSON-formatted logging for the distribution library.
When debugging is enabled, logs are written to timestamped files in a 'logs'
directory; otherwise the library stays silent below WARNING.
"""

import os
import json
import logging
import datetime
from typing import Dict, Any, Optional

import numpy as np

from dist_lib.config import TRUE_VALUES

LOGGER_NAME = "dist_lib"

# Arrays longer than this are logged as a short sample
MAX_SERIALIZED_ITEMS = 100


class JsonFormatter(logging.Formatter):
    """Formats log records as one JSON object per line."""

    def _serialize(self, obj: Any) -> Any:
        """Convert numpy values and containers to JSON-compatible types."""
        if isinstance(obj, np.ndarray):
            if obj.size > MAX_SERIALIZED_ITEMS:
                shape_str = 'x'.join(str(dim) for dim in obj.shape)
                sample = obj.flatten()[:5].tolist()
                return f"ndarray({shape_str}): sample={sample}..."
            return obj.tolist()
        elif isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, (list, tuple)):
            if len(obj) > MAX_SERIALIZED_ITEMS:
                return [self._serialize(item) for item in list(obj)[:5]] + ["..."]
            return [self._serialize(item) for item in obj]
        elif isinstance(obj, dict):
            return {k: self._serialize(v) for k, v in obj.items()}
        return obj

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as JSON."""
        log_data = {
            'timestamp': datetime.datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if isinstance(record.msg, dict):
            log_data['data'] = self._serialize(record.msg)
        else:
            log_data['message'] = record.getMessage()
            if hasattr(record, 'data'):
                log_data['data'] = self._serialize(record.data)

        return json.dumps(log_data)


# Global logger instance
_logger = None

_LEVEL_MAP = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR
}


def setup_logger(
    debug: bool = False,
    log_level: str = "info",
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up the library logger.

    The first call wins; later calls return the already configured logger.

    Args:
        debug: Whether to enable debug output
        log_level: The log level used when debug is on (debug, info, warning, error)
        log_file: Optional log file path; relative paths are placed under logs/

    Returns:
        Configured logger instance
    """
    global _logger

    if _logger is not None:
        return _logger

    logger = logging.getLogger(LOGGER_NAME)

    if debug:
        logger.setLevel(_LEVEL_MAP.get(log_level.lower(), logging.INFO))
    else:
        logger.setLevel(logging.WARNING)

    if debug or log_file is not None:
        logs_dir = os.path.join(os.getcwd(), "logs")
        if log_file is None:
            timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = os.path.join(logs_dir, f"dist_lib_{timestamp}.json")
        elif not os.path.isabs(log_file):
            log_file = os.path.join(logs_dir, log_file)
        os.makedirs(os.path.dirname(log_file), exist_ok=True)

        handler = logging.FileHandler(log_file)
        handler.setFormatter(JsonFormatter())
    else:
        handler = logging.NullHandler()

    logger.addHandler(handler)
    _logger = logger

    if debug:
        logger.info({
            "event": "logger_initialized",
            "log_level": log_level,
            "log_file": log_file
        })

    return logger


def get_logger() -> logging.Logger:
    """
    Get the configured logger instance.

    If the logger has not been set up yet, it is configured from the
    DIST_LIB_DEBUG, DIST_LIB_LOG_LEVEL and DIST_LIB_LOG_FILE environment
    variables. Unrecognized values fall back to the defaults.

    Returns:
        Logger instance
    """
    global _logger

    if _logger is None:
        debug = os.getenv("DIST_LIB_DEBUG", "").strip().lower() in TRUE_VALUES
        log_level = os.getenv("DIST_LIB_LOG_LEVEL", "info").strip().lower()
        if log_level not in _LEVEL_MAP:
            log_level = "info"
        _logger = setup_logger(
            debug=debug,
            log_level=log_level,
            log_file=os.getenv("DIST_LIB_LOG_FILE") or None
        )

    return _logger


def log_construction(shape: str, params: Dict[str, Any], width: int) -> None:
    """
    Log the construction of a named distribution shape.

    Args:
        shape: Name of the constructor (e.g. "zeta")
        params: Parameters passed to the constructor
        width: Number of outcomes of the resulting distribution
    """
    get_logger().debug({
        "event": "distribution_constructed",
        "shape": shape,
        "params": params,
        "width": width
    })


def log_empiric(sample_size: int, width: int, ordered: bool) -> None:
    """
    Log an empirical re-estimation of a distribution.

    Args:
        sample_size: Number of samples drawn
        width: Number of outcomes
        ordered: Whether the result is sorted into a new distribution
    """
    get_logger().info({
        "event": "empiric_sampled",
        "sample_size": sample_size,
        "width": width,
        "ordered": ordered
    })
