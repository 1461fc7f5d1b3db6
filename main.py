"""Application entry point for Logoff Cleanup.

Registered as a logoff scheduled task. Takes no arguments and always exits 0;
failures end up in the cleanup log or the debug log.
"""

import logging
import sys

from src.core.config import CleanupConfig, ConfigError
from src.core.logging_config import setup_logging
from src.execution.cleaner import Cleaner

logger = logging.getLogger(__name__)


def _load_config() -> tuple[CleanupConfig, ConfigError | None]:
    """Load configuration, falling back to defaults if overrides are invalid."""
    try:
        return CleanupConfig.from_env(), None
    except ConfigError as e:
        return CleanupConfig(), e


def main() -> int:
    """
    Application entry point.

    Returns:
        Exit code (always 0)
    """
    config, config_error = _load_config()

    try:
        setup_logging(config.debug_log_file, config.debug_mode)
    except OSError as e:
        logging.basicConfig(level=logging.WARNING)
        logger.warning("Debug log unavailable at %s: %s", config.debug_log_file, e)

    if config_error is not None:
        logger.warning("Ignoring invalid configuration: %s", config_error)

    if sys.platform != "win32":
        logger.warning("Logoff cleanup targets Windows; running on %s", sys.platform)

    Cleaner(config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
