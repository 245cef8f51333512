"""
configstore.store
Per-key value storage inside the application's configuration directory.

    store = Configstore("myApp", AppUI.COMMAND_LINE)
    store.set("window", {"width": 800, "height": 600})
    size = store.get("window")

Each key lives in its own file, <config dir>/<key><extension>, holding the
serialized value. Nothing is cached: every call reads or writes the file.
"""

import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from .convert import from_builtin
from .errors import DeserializationError, NotFoundError, SerializationError, StoreIOError
from .paths import AppUI, resolve_config_dir
from .serializers import JsonSerializer, Serializer
from .storage import list_files, read_bytes, remove_file, write_bytes

log = logging.getLogger(__name__)

_MISSING = object()


class Configstore:
    """
    Key/value store backed by one file per key.

    The directory is resolved and created once, in the constructor; it is
    shared with every other store opened for the same app name and UI type,
    in this process or another one. Concurrent writers are not coordinated:
    the last write wins.
    """

    def __init__(
        self,
        app_name: str,
        app_ui: AppUI = AppUI.COMMAND_LINE,
        *,
        serializer: Optional[Serializer] = None,
        base_dir: Optional[Union[str, Path]] = None,
    ):
        self._directory = resolve_config_dir(app_name, app_ui, base_dir)
        self._app_name = app_name
        self._app_ui = app_ui
        self._serializer = serializer if serializer is not None else JsonSerializer()

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def app_name(self) -> str:
        return self._app_name

    @property
    def app_ui(self) -> AppUI:
        return self._app_ui

    @property
    def serializer(self) -> Serializer:
        return self._serializer

    def __repr__(self) -> str:
        return f"Configstore({self._app_name!r}, {self._app_ui}, directory={str(self._directory)!r})"

    def path_for(self, key: str) -> Path:
        """File backing `key`. The key is used as-is, without validation."""
        return self._directory / (key + self._serializer.extension)

    def set(self, key: str, value: Any) -> None:
        """
        Serialize `value` and write it to the key's file, replacing any previous value.
        Raises SerializationError or StoreIOError.
        """
        path = self.path_for(key)
        try:
            data = self._serializer.dumps(value)
        except (TypeError, ValueError, RecursionError) as e:
            raise SerializationError(f"Cannot serialize value for key {key!r}: {e}") from e
        try:
            write_bytes(path, data)
        except (OSError, ValueError) as e:
            # ValueError: key with an embedded null byte
            raise StoreIOError(f"Cannot write {path}: {e}") from e
        log.debug("Stored %s (%d bytes)", path, len(data))

    def get(self, key: str, type_: Any = None, default: Any = _MISSING) -> Any:
        """
        Read the value stored under `key`.

        With `type_` the decoded data is rebuilt as that type (a dataclass,
        list[Item], dict[str, int], ...); without it the plain decoded data
        is returned. When `default` is given it is returned for a missing
        key instead of raising NotFoundError.

        Raises NotFoundError, StoreIOError or DeserializationError.
        """
        path = self.path_for(key)
        try:
            raw = read_bytes(path)
        except FileNotFoundError as e:
            if default is not _MISSING:
                return default
            raise NotFoundError(key, path) from e
        except (OSError, ValueError) as e:
            raise StoreIOError(f"Cannot read {path}: {e}") from e
        log.debug("Read %s (%d bytes)", path, len(raw))

        try:
            data = self._serializer.loads(raw)
        except (TypeError, ValueError) as e:
            # UnicodeDecodeError and JSONDecodeError are both ValueErrors
            raise DeserializationError(f"Cannot decode {path}: {e}") from e
        if type_ is None:
            return data
        try:
            return from_builtin(data, type_)
        except (TypeError, ValueError) as e:
            raise DeserializationError(f"Value for key {key!r} does not match {type_!r}: {e}") from e

    def delete(self, key: str) -> None:
        """Remove the key's file. Raises NotFoundError when nothing is stored."""
        path = self.path_for(key)
        try:
            remove_file(path)
        except FileNotFoundError as e:
            raise NotFoundError(key, path) from e
        except (OSError, ValueError) as e:
            raise StoreIOError(f"Cannot remove {path}: {e}") from e
        log.debug("Removed %s", path)

    def keys(self) -> List[str]:
        """Sorted keys that currently have an entry file."""
        ext = self._serializer.extension
        try:
            files = list_files(self._directory, ext)
        except OSError as e:
            raise StoreIOError(f"Cannot list {self._directory}: {e}") from e
        return sorted(p.name[: len(p.name) - len(ext)] for p in files)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.path_for(key).is_file()
