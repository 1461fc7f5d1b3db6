"""Runtime configuration for Logoff Cleanup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Mapping

from src.core.constants import (
    CLEANUP_LOG_FILE,
    DEBUG_LOG_FILE,
    ENV_DEBUG,
    ENV_DEBUG_LOG_FILE,
    ENV_LOG_FILE,
    FALSY_VALUES,
    PROFILE_TARGETS,
    TRUTHY_VALUES,
)
from src.scanner.browser_paths import CLEANUP_BROWSERS, BrowserConfig

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration is invalid."""
    pass


@dataclass(frozen=True)
class CleanupConfig:
    """
    Settings for a single cleanup run.

    The defaults reproduce the fixed paths of the logoff task; tests and
    alternate deployments pass their own values in.
    """

    log_file: Path = CLEANUP_LOG_FILE
    debug_log_file: Path = DEBUG_LOG_FILE
    debug_mode: bool = False
    browsers: tuple[BrowserConfig, ...] = field(default=CLEANUP_BROWSERS)
    profile_targets: tuple[str, ...] = field(default=PROFILE_TARGETS)

    def __post_init__(self) -> None:
        errors = self.validate()
        if errors:
            raise ConfigError(f"Configuration validation failed: {'; '.join(errors)}")

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if Path(self.log_file) == Path(self.debug_log_file):
            errors.append("'log_file' and 'debug_log_file' must be different files")

        names = [browser.name for browser in self.browsers]
        if len(names) != len(set(names)):
            errors.append("Browser names must be unique")

        for target in self.profile_targets:
            if not target or Path(target).name != target:
                errors.append(f"Invalid profile target '{target}': must be a plain entry name")

        return errors

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CleanupConfig:
        """
        Build a configuration from environment overrides.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            CleanupConfig with any overridden values applied

        Raises:
            ConfigError: If an override has an invalid value
        """
        env = os.environ if environ is None else environ
        config = cls()

        log_file = env.get(ENV_LOG_FILE)
        if log_file:
            config = replace(config, log_file=Path(log_file))

        debug_log_file = env.get(ENV_DEBUG_LOG_FILE)
        if debug_log_file:
            config = replace(config, debug_log_file=Path(debug_log_file))

        debug_value = env.get(ENV_DEBUG)
        if debug_value is not None:
            config = replace(config, debug_mode=_parse_bool(ENV_DEBUG, debug_value))

        logger.debug("Configuration resolved: log_file=%s debug=%s", config.log_file, config.debug_mode)
        return config


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in TRUTHY_VALUES:
        return True
    if normalized in FALSY_VALUES:
        return False
    raise ConfigError(f"Invalid value for {name}: '{value}'")
