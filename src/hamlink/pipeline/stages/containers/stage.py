from __future__ import annotations

from typing import Optional

from .config.stage_config import Config
from .modules.raw import read_bytes, write_bytes


def tx(data: bytes, cfg: Config) -> bytes:
    """
    TX-side container operation.

    - If cfg.enabled and cfg.tx_path is set, write data to the file.
    - Always returns data unchanged (containers stage is side-effect only).
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("containers.tx: data must be bytes-like")

    x = bytes(data)
    if not cfg.enabled:
        return x

    if cfg.tx_path is None:
        # Explicit is better than implicit: if enabled, require a destination
        raise ValueError("containers.tx: cfg.tx_path is None but stage is enabled")

    write_bytes(cfg.tx_path, x)
    return x


def rx(_ignored: Optional[object], cfg: Config) -> bytes:
    """
    RX-side container operation.

    - If cfg.enabled and cfg.rx_path is set, read the whole file.
    - OSError from a missing/unreadable file propagates.
    """
    if not cfg.enabled:
        raise ValueError("containers.rx: disabled; nothing to read")

    if cfg.rx_path is None:
        raise ValueError("containers.rx: cfg.rx_path is None but stage is enabled")

    return read_bytes(cfg.rx_path)
