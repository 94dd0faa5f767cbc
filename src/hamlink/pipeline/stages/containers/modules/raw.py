from __future__ import annotations

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def write_bytes(path: PathLike, data: bytes) -> None:
    """
    Write raw bytes: no header, no magic, no length field.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(bytes(data))


def read_bytes(path: PathLike) -> bytes:
    """
    Read a whole file as bytes. Raises OSError if missing or unreadable.
    """
    return Path(path).read_bytes()
