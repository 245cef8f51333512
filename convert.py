"""
configstore.convert
Turn typed Python values into JSON-compatible data and back.

to_builtin() is used when encoding; from_builtin() rebuilds the type a caller
asks for in Configstore.get() and raises TypeError/ValueError when the stored
data does not fit that type.
"""

import dataclasses
import sys
import typing
from enum import Enum
from pathlib import PurePath
from typing import Any, Dict, Optional, Set, Tuple, Union

if sys.version_info >= (3, 10):
    from types import UnionType
    _UNION_ORIGINS: Tuple[Any, ...] = (Union, UnionType)
else:
    _UNION_ORIGINS = (Union,)

_SCALARS = (str, int, float, bool, type(None))


def to_builtin(value: Any, _active: Optional[Set[int]] = None) -> Any:
    """
    Recursively convert dataclasses, enums, paths, tuples and sets to plain data.
    Raises ValueError for a value that contains itself.
    """
    if isinstance(value, Enum):
        return to_builtin(value.value, _active)
    if isinstance(value, PurePath):
        return str(value)
    is_dc = dataclasses.is_dataclass(value) and not isinstance(value, type)
    if not (is_dc or isinstance(value, (dict, list, tuple, set, frozenset))):
        return value

    # ids of the containers on the current path; shared (non-cyclic) references are fine
    active = set() if _active is None else _active
    if id(value) in active:
        raise ValueError(f"circular reference to {type(value).__name__}")
    active.add(id(value))
    try:
        if is_dc:
            return {f.name: to_builtin(getattr(value, f.name), active) for f in dataclasses.fields(value)}
        if isinstance(value, dict):
            return {_key_to_builtin(k, active): to_builtin(v, active) for k, v in value.items()}
        return [to_builtin(v, active) for v in value]
    finally:
        active.discard(id(value))


def _key_to_builtin(key: Any, active: Set[int]) -> Any:
    if isinstance(key, _SCALARS):
        return key
    return to_builtin(key, active)


def _describe(data: Any) -> str:
    return type(data).__name__


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)


def from_builtin(data: Any, tp: Any, where: str = "value") -> Any:
    """
    Build an instance of tp from decoded JSON data.
    `where` names the location in error messages (e.g. "value.items[2]").
    """
    if tp is Any or tp is object:
        return data
    if tp is None or tp is type(None):
        if data is not None:
            raise TypeError(f"{where}: expected null, got {_describe(data)}")
        return None

    origin = typing.get_origin(tp)
    args = typing.get_args(tp)

    if origin in _UNION_ORIGINS:
        errors = []
        for arg in args:
            try:
                return from_builtin(data, arg, where)
            except (TypeError, ValueError) as e:
                errors.append(str(e))
        raise TypeError(f"{where}: no member of {tp!r} matches ({'; '.join(errors)})")

    if origin is typing.Literal:
        if data not in args:
            raise ValueError(f"{where}: {data!r} is not one of {args!r}")
        return data

    if origin is not None:
        return _from_generic(data, origin, args, where)

    if not isinstance(tp, type):
        raise TypeError(f"{where}: unsupported target type {tp!r}")

    if dataclasses.is_dataclass(tp):
        return _from_dataclass(data, tp, where)
    if issubclass(tp, Enum):
        try:
            return tp(data)
        except ValueError as e:
            raise ValueError(f"{where}: {data!r} is not a valid {tp.__name__}") from e
    if tp is bool:
        if not isinstance(data, bool):
            raise TypeError(f"{where}: expected bool, got {_describe(data)}")
        return data
    if tp is int:
        if isinstance(data, bool) or not isinstance(data, int):
            raise TypeError(f"{where}: expected int, got {_describe(data)}")
        return data
    if tp is float:
        if isinstance(data, bool) or not isinstance(data, (int, float)):
            raise TypeError(f"{where}: expected float, got {_describe(data)}")
        return float(data)
    if issubclass(tp, PurePath):
        if not isinstance(data, str):
            raise TypeError(f"{where}: expected path string, got {_describe(data)}")
        return tp(data)
    if issubclass(tp, tuple) and hasattr(tp, "_fields"):
        return _from_namedtuple(data, tp, where)
    if tp in (list, tuple, set, frozenset):
        if not isinstance(data, list):
            raise TypeError(f"{where}: expected array, got {_describe(data)}")
        return tp(data)
    if isinstance(data, tp):
        return data
    raise TypeError(f"{where}: expected {_type_name(tp)}, got {_describe(data)}")


def _from_generic(data: Any, origin: Any, args: Tuple[Any, ...], where: str) -> Any:
    if origin in (list, set, frozenset):
        if not isinstance(data, list):
            raise TypeError(f"{where}: expected array, got {_describe(data)}")
        item_tp = args[0] if args else Any
        items = [from_builtin(v, item_tp, f"{where}[{i}]") for i, v in enumerate(data)]
        return origin(items)

    if origin is tuple:
        if not isinstance(data, list):
            raise TypeError(f"{where}: expected array, got {_describe(data)}")
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(from_builtin(v, args[0], f"{where}[{i}]") for i, v in enumerate(data))
        if args == ((),):
            args = ()
        if len(data) != len(args):
            raise ValueError(f"{where}: expected {len(args)} items, got {len(data)}")
        return tuple(from_builtin(v, t, f"{where}[{i}]") for i, (v, t) in enumerate(zip(data, args)))

    if origin is dict:
        if not isinstance(data, dict):
            raise TypeError(f"{where}: expected object, got {_describe(data)}")
        key_tp, val_tp = args if args else (Any, Any)
        out: Dict[Any, Any] = {}
        for k, v in data.items():
            out[_key_from_builtin(k, key_tp, where)] = from_builtin(v, val_tp, f"{where}[{k!r}]")
        return out

    raise TypeError(f"{where}: unsupported target type {origin!r}")


def _key_from_builtin(key: Any, key_tp: Any, where: str) -> Any:
    # JSON object keys always come back as strings
    if not isinstance(key, str):
        return from_builtin(key, key_tp, f"{where} key")
    if key_tp is bool:
        if key not in ("true", "false"):
            raise ValueError(f"{where}: key {key!r} is not a bool")
        return key == "true"
    if key_tp in (int, float):
        try:
            return key_tp(key)
        except ValueError as e:
            raise ValueError(f"{where}: key {key!r} is not a {key_tp.__name__}") from e
    return from_builtin(key, key_tp, f"{where} key")


def _from_namedtuple(data: Any, tp: type, where: str) -> Any:
    if not isinstance(data, list):
        raise TypeError(f"{where}: expected array for {tp.__name__}, got {_describe(data)}")
    fields = tp._fields
    defaults = getattr(tp, "_field_defaults", {})
    if len(data) > len(fields):
        raise ValueError(f"{where}: expected at most {len(fields)} items for {tp.__name__}, got {len(data)}")
    missing = [f for f in fields[len(data):] if f not in defaults]
    if missing:
        raise ValueError(f"{where}: missing field(s) for {tp.__name__}: {', '.join(missing)}")
    hints = typing.get_type_hints(tp)
    items = [from_builtin(v, hints.get(name, Any), f"{where}.{name}") for name, v in zip(fields, data)]
    return tp(*items)


def _from_dataclass(data: Any, tp: type, where: str) -> Any:
    if not isinstance(data, dict):
        raise TypeError(f"{where}: expected object for {tp.__name__}, got {_describe(data)}")
    hints = typing.get_type_hints(tp)
    init_fields = {f.name: f for f in dataclasses.fields(tp) if f.init}

    unknown = set(data) - set(init_fields)
    if unknown:
        raise ValueError(f"{where}: unexpected field(s) for {tp.__name__}: {', '.join(sorted(unknown))}")

    kwargs = {}
    for name, f in init_fields.items():
        if name not in data:
            if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
                raise ValueError(f"{where}: missing field {name!r} for {tp.__name__}")
            continue
        kwargs[name] = from_builtin(data[name], hints.get(name, Any), f"{where}.{name}")
    return tp(**kwargs)
