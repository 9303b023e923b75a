"""
Logging configuration for executor runs and the command-line runner.

Every module in this tree logs under ``__name__``, so the level is set
once per top-level package rather than per module.
"""

import logging
import sys
from typing import Dict

PROJECT_NAMESPACES = ('pkgs', 'apps', 'algorithms')

FORMATS: Dict[str, str] = {
    "structured": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    "simple": '%(levelname)s - %(message)s',
}


def resolve_level(level: str) -> int:
    """Map a level name to its number; unknown names mean INFO."""
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: str = "INFO", format_type: str = "structured") -> logging.Logger:
    """Send project logs to stdout at ``level`` and return the ``pkgs`` logger.

    Calling it again replaces the previous handler.
    """
    log_level = resolve_level(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(FORMATS.get(format_type, FORMATS["simple"])))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for namespace in PROJECT_NAMESPACES:
        logging.getLogger(namespace).setLevel(log_level)

    return logging.getLogger('pkgs')
