from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, NamedTuple, Optional, Tuple

import pytest

from configstore.convert import from_builtin, to_builtin


class Color(Enum):
    RED = "red"
    BLUE = "blue"


@dataclass
class Window:
    width: int
    height: int
    title: str = "untitled"
    color: Color = Color.RED
    recent: List[Path] = field(default_factory=list)
    parent: Optional["Window"] = None


def test_to_builtin_nested():
    w = Window(800, 600, recent=[Path("a.txt")], parent=Window(1, 2, color=Color.BLUE))
    data = to_builtin(w)
    assert data == {
        "width": 800,
        "height": 600,
        "title": "untitled",
        "color": "red",
        "recent": ["a.txt"],
        "parent": {
            "width": 1,
            "height": 2,
            "title": "untitled",
            "color": "blue",
            "recent": [],
            "parent": None,
        },
    }
    assert from_builtin(data, Window) == w


def test_defaults_fill_missing_fields():
    assert from_builtin({"width": 3, "height": 4}, Window) == Window(3, 4)


def test_missing_required_field():
    with pytest.raises(ValueError):
        from_builtin({"width": 3}, Window)


def test_unknown_field():
    with pytest.raises(ValueError):
        from_builtin({"width": 3, "height": 4, "depth": 5}, Window)


def test_scalars_are_strict():
    assert from_builtin(3, float) == 3.0
    with pytest.raises(TypeError):
        from_builtin(True, int)
    with pytest.raises(TypeError):
        from_builtin("3", int)
    with pytest.raises(TypeError):
        from_builtin(3, str)
    with pytest.raises(TypeError):
        from_builtin(1, bool)


def test_containers():
    assert from_builtin({"1": "a", "2": "b"}, Dict[int, str]) == {1: "a", 2: "b"}
    assert from_builtin([1, "x"], Tuple[int, str]) == (1, "x")
    assert from_builtin([1, 2, 3], Tuple[int, ...]) == (1, 2, 3)
    assert from_builtin([1, 2], list) == [1, 2]
    with pytest.raises(ValueError):
        from_builtin([1], Tuple[int, str])
    with pytest.raises(TypeError):
        from_builtin({"a": 1}, List[int])


def test_optional_and_enum():
    assert from_builtin(None, Optional[int]) is None
    assert from_builtin(5, Optional[int]) == 5
    assert from_builtin("blue", Color) is Color.BLUE
    with pytest.raises(ValueError):
        from_builtin("green", Color)
    with pytest.raises(TypeError):
        from_builtin("x", Optional[int])


def test_error_names_location():
    with pytest.raises(TypeError) as exc:
        from_builtin({"width": 1, "height": "tall"}, Window)
    assert "value.height" in str(exc.value)


class Point(NamedTuple):
    x: int
    y: int
    label: str = ""


def test_namedtuple_round_trip():
    data = to_builtin(Point(1, 2))
    assert data == [1, 2, ""]
    assert from_builtin(data, Point) == Point(1, 2)
    assert from_builtin([1, 2], Point) == Point(1, 2)
    with pytest.raises(ValueError):
        from_builtin([1], Point)
    with pytest.raises(TypeError):
        from_builtin([1, "two"], Point)


def test_float_and_bool_keys_from_json():
    assert from_builtin({"1.5": "a"}, Dict[float, str]) == {1.5: "a"}
    assert from_builtin({"true": 1, "false": 0}, Dict[bool, int]) == {True: 1, False: 0}
    with pytest.raises(ValueError):
        from_builtin({"yes": 1}, Dict[bool, int])


def test_circular_reference():
    d = {}
    d["self"] = d
    with pytest.raises(ValueError):
        to_builtin(d)
