"""
configstore.serializers
Pluggable encoders turning values into the bytes stored in entry files.

A serializer is any object with:

  extension   file suffix including the dot, e.g. ".json"
  dumps(v)    -> bytes
  loads(b)    -> decoded plain data (dicts, lists, str, numbers, bool, None)
"""

import json
from typing import Any, Dict, Protocol

from .convert import to_builtin


class Serializer(Protocol):
    extension: str

    def dumps(self, value: Any) -> bytes: ...

    def loads(self, data: bytes) -> Any: ...


class JsonSerializer:
    """JSON documents, UTF-8 encoded. Default format of the store."""

    extension = ".json"

    def __init__(self, indent=None, sort_keys: bool = False, ensure_ascii: bool = False, encoding: str = "utf-8"):
        self.indent = indent
        self.sort_keys = sort_keys
        self.ensure_ascii = ensure_ascii
        self.encoding = encoding

    def dumps(self, value: Any) -> bytes:
        # allow_nan=False: NaN/Infinity are not valid JSON
        text = json.dumps(
            to_builtin(value),
            indent=self.indent,
            sort_keys=self.sort_keys,
            ensure_ascii=self.ensure_ascii,
            allow_nan=False,
        )
        return text.encode(self.encoding)

    def loads(self, data: bytes) -> Any:
        return json.loads(data.decode(self.encoding))

    def __repr__(self) -> str:
        return f"JsonSerializer(indent={self.indent!r}, sort_keys={self.sort_keys!r})"


_FORMATS: Dict[str, Any] = {
    "json": JsonSerializer,
}


def available_formats():
    return sorted(_FORMATS)


def get_serializer(name: str, **options: Any) -> Serializer:
    """Instantiate the serializer registered under `name`."""
    try:
        factory = _FORMATS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown format {name!r}; available: {', '.join(available_formats())}") from None
    return factory(**options)
