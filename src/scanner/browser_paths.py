"""Browser profile locations for Logoff Cleanup."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from src.scanner.special_folders import FolderResolver, SpecialFolder

DEFAULT_PROFILE = "Default"


@dataclass(frozen=True)
class BrowserConfig:
    """Where a Chromium-based browser keeps its user data."""

    name: str  # "Chrome", "Edge"
    vendor_dir: str  # Folder under local app data, e.g. "Google"
    product_dir: str  # Folder under the vendor, e.g. "Chrome"
    executable_name: str  # For process detection

    def user_data_path(self, local_app_data: Path) -> Path:
        """Return the browser's User Data root under local app data."""
        return local_app_data / self.vendor_dir / self.product_dir / "User Data"

    def default_profile_path(self, local_app_data: Path) -> Path:
        """Return the browser's default profile directory."""
        return self.user_data_path(local_app_data) / DEFAULT_PROFILE

    def owns(self, path: Path) -> bool:
        """Return True if path lies under <Vendor>/<Product> (case-insensitive)."""
        parts = [part.lower() for part in path.parts]
        vendor, product = self.vendor_dir.lower(), self.product_dir.lower()
        return any(
            parts[i] == vendor and parts[i + 1] == product
            for i in range(len(parts) - 1)
        )


CHROME_CONFIG = BrowserConfig(
    name="Chrome",
    vendor_dir="Google",
    product_dir="Chrome",
    executable_name="chrome.exe",
)

EDGE_CONFIG = BrowserConfig(
    name="Edge",
    vendor_dir="Microsoft",
    product_dir="Edge",
    executable_name="msedge.exe",
)

# Cleanup order: Edge first, then Chrome
CLEANUP_BROWSERS = (EDGE_CONFIG, CHROME_CONFIG)


def resolve_profile_path(browser: BrowserConfig, resolve_folder: FolderResolver) -> Path:
    """
    Resolve a browser's default profile path.

    Args:
        browser: Browser to resolve
        resolve_folder: Special folder resolver

    Returns:
        <local app data>/<Vendor>/<Product>/User Data/Default
    """
    local_app_data = resolve_folder(SpecialFolder.LOCAL_APPLICATION_DATA)
    return browser.default_profile_path(local_app_data)


def profile_target_paths(profile_path: Path, target_names: tuple[str, ...]) -> list[Path]:
    """Return the deletion target list for a profile, in order."""
    return [profile_path / name for name in target_names]
