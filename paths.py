"""
configstore.paths
Resolve the per-application configuration directory.

Layout follows the usual platform conventions:

  Linux / other Unix  $XDG_CONFIG_HOME/<app> (default ~/.config/<app>)
  macOS               ~/Library/Application Support/<app> for graphical apps,
                      ~/.config/<app> for command line tools
  Windows             %APPDATA%\\<app>
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Optional, Union

import platformdirs
from platformdirs.unix import Unix

from .errors import PlatformError, StoreIOError

log = logging.getLogger(__name__)


class AppUI(Enum):
    """Kind of application the configuration belongs to."""

    COMMAND_LINE = "cli"
    GRAPHICAL = "gui"

    # short alias
    GUI = "gui"

    @classmethod
    def parse(cls, text: str) -> "AppUI":
        """Accept 'cli'/'gui' as well as member names ('COMMAND_LINE', 'graphical')."""
        t = (text or "").strip()
        for member in cls:
            if t.lower() == member.value or t.upper() == member.name:
                return member
        raise ValueError(f"Unknown UI type: {text!r} (expected 'cli' or 'gui')")


def _is_macos() -> bool:
    return sys.platform == "darwin"


def _native_config_dir(app_name: str) -> str:
    # appauthor=False: no vendor segment on Windows
    return platformdirs.user_config_dir(app_name, appauthor=False, roaming=True)


def _xdg_config_dir(app_name: str) -> str:
    return Unix(appname=app_name).user_config_dir


def base_config_dir(app_name: str, app_ui: AppUI) -> Path:
    """
    Return the platform configuration directory for app_name without creating it.
    Raises PlatformError when the platform root cannot be determined.
    """
    if not app_name:
        raise ValueError("app_name must be a non-empty string")
    try:
        if app_ui is AppUI.COMMAND_LINE:
            if _is_macos():
                raw = _xdg_config_dir(app_name)
            else:
                raw = _native_config_dir(app_name)
        elif app_ui is AppUI.GRAPHICAL:
            raw = _native_config_dir(app_name)
        else:
            raise TypeError(f"app_ui must be an AppUI member, got {app_ui!r}")
    except (OSError, RuntimeError, KeyError) as e:
        # Path.home() raises RuntimeError when no home directory is known
        raise PlatformError(f"Unable to find config directory for {app_name!r}: {e}") from e
    if not raw:
        raise PlatformError(f"Unable to find config directory for {app_name!r}")
    return Path(raw)


def resolve_config_dir(
    app_name: str,
    app_ui: AppUI,
    base_dir: Optional[Union[str, Path]] = None,
) -> Path:
    """
    Resolve and create the configuration directory (including parents).
    Idempotent; an existing directory is left untouched.
    """
    if base_dir is not None:
        if not app_name:
            raise ValueError("app_name must be a non-empty string")
        directory = Path(base_dir) / app_name
    else:
        directory = base_config_dir(app_name, app_ui)

    if not directory.is_dir():
        log.info("Creating config directory %s", directory)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StoreIOError(f"Cannot create config directory {directory}: {e}") from e
    return directory
