"""Special folder resolution for Logoff Cleanup."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Callable, Mapping


class SpecialFolder(Enum):
    """OS-provided folders the cleanup paths are derived from."""

    USER_PROFILE = "user_profile"
    LOCAL_APPLICATION_DATA = "local_application_data"


FolderResolver = Callable[[SpecialFolder], Path]


def resolve_special_folder(
    folder: SpecialFolder,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """
    Resolve a special folder to an absolute path.

    USERPROFILE and LOCALAPPDATA are used when set; otherwise the paths are
    derived from the current user's home directory.

    Args:
        folder: Folder identifier
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        Absolute path of the folder
    """
    env = os.environ if environ is None else environ

    if folder is SpecialFolder.USER_PROFILE:
        user_profile = env.get("USERPROFILE")
        return Path(user_profile) if user_profile else Path.home()

    if folder is SpecialFolder.LOCAL_APPLICATION_DATA:
        local_app_data = env.get("LOCALAPPDATA")
        if local_app_data:
            return Path(local_app_data)
        return resolve_special_folder(SpecialFolder.USER_PROFILE, env) / "AppData" / "Local"

    raise ValueError(f"Unknown special folder: {folder}")


def mapping_resolver(folders: Mapping[SpecialFolder, Path]) -> FolderResolver:
    """Build a resolver from a fixed folder mapping."""

    def resolve(folder: SpecialFolder) -> Path:
        try:
            return folders[folder]
        except KeyError:
            raise ValueError(f"Unknown special folder: {folder}") from None

    return resolve
