"""
configstore.errors
Exceptions raised by the store and the path resolver.
"""


class ConfigstoreError(Exception):
    """Base class for every configstore failure."""


class PlatformError(ConfigstoreError):
    """The base configuration directory cannot be determined on this host."""


class StoreIOError(ConfigstoreError, OSError):
    """Creating the directory, writing or reading an entry file failed."""


class NotFoundError(ConfigstoreError, LookupError):
    """No entry file exists for the requested key."""

    def __init__(self, key, path):
        super().__init__(f"No value stored for key {key!r} ({path})")
        self.key = key
        self.path = path


class SerializationError(ConfigstoreError, ValueError):
    """The value cannot be encoded by the serializer."""


class DeserializationError(ConfigstoreError, ValueError):
    """Stored bytes cannot be decoded into the requested type."""
