"""
configstore.storage
Whole-file byte I/O for entry files.
"""

import os
from pathlib import Path
from typing import List


def write_bytes(path: Path, data: bytes) -> None:
    """
    Write bytes to 'path', creating or truncating it.
    A crash mid-write can leave a partial file; no temp-file rename is done.
    """
    with open(path, "wb") as f:
        f.write(data)


def read_bytes(path: Path) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def remove_file(path: Path) -> None:
    os.remove(path)


def list_files(directory: Path, suffix: str) -> List[Path]:
    """Regular files directly inside directory whose name ends with suffix, unordered."""
    out = []
    with os.scandir(directory) as it:
        for entry in it:
            if entry.is_file() and entry.name.endswith(suffix):
                out.append(Path(entry.path))
    return out
