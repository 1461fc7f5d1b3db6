"""Cleanup location resolution package."""

from src.scanner.special_folders import (
    FolderResolver,
    SpecialFolder,
    mapping_resolver,
    resolve_special_folder,
)
from src.scanner.browser_paths import (
    BrowserConfig,
    CHROME_CONFIG,
    EDGE_CONFIG,
    CLEANUP_BROWSERS,
    profile_target_paths,
    resolve_profile_path,
)

__all__ = [
    # Special folders
    "FolderResolver",
    "SpecialFolder",
    "mapping_resolver",
    "resolve_special_folder",
    # Browser configs
    "BrowserConfig",
    "CHROME_CONFIG",
    "EDGE_CONFIG",
    "CLEANUP_BROWSERS",
    "profile_target_paths",
    "resolve_profile_path",
]
