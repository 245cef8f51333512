# configstore/config.py
"""
Settings for the configstore command line tool.
Defaults below, overridable through CONFIGSTORE_* environment variables.
The library itself reads no environment variables.
"""

import logging
import os
from typing import Any, Dict, Mapping, Optional

DEFAULTS: Dict[str, Any] = {
    "app_name": "configstore",
    "app_ui": "cli",
    "format": "json",
    "log_level": "WARNING",
    "root": None,  # if None, the platform config directory is used
}

ENV_VARS: Dict[str, str] = {
    "app_name": "CONFIGSTORE_APP",
    "app_ui": "CONFIGSTORE_UI",
    "format": "CONFIGSTORE_FORMAT",
    "log_level": "CONFIGSTORE_LOG_LEVEL",
    "root": "CONFIGSTORE_ROOT",
}


def load_config(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Merge CONFIGSTORE_* variables over DEFAULTS. Raises ValueError for an unknown log level."""
    env = os.environ if environ is None else environ
    out = DEFAULTS.copy()
    for key, var in ENV_VARS.items():
        value = env.get(var)
        if value:
            out[key] = value
    out["log_level"] = str(out["log_level"]).upper()
    # getLevelName maps known names to their int level
    if not isinstance(logging.getLevelName(out["log_level"]), int):
        raise ValueError(f"Unknown log level {out['log_level']!r} ({ENV_VARS['log_level']})")
    return out
