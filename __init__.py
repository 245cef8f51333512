"""
configstore
Store values as one file per key in the platform configuration directory.
"""

from .errors import (
    ConfigstoreError,
    DeserializationError,
    NotFoundError,
    PlatformError,
    SerializationError,
    StoreIOError,
)
from .paths import AppUI, base_config_dir, resolve_config_dir
from .serializers import JsonSerializer, Serializer, get_serializer
from .store import Configstore

__version__ = "0.1.0"

__all__ = [
    "AppUI",
    "Configstore",
    "ConfigstoreError",
    "DeserializationError",
    "JsonSerializer",
    "NotFoundError",
    "PlatformError",
    "SerializationError",
    "Serializer",
    "StoreIOError",
    "base_config_dir",
    "get_serializer",
    "resolve_config_dir",
]
