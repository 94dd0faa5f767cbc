from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


@dataclass(frozen=True)
class Config:
    """
    Containers stage config.

    Design:
      - tx(x, cfg): writes x (bytes) to cfg.tx_path if enabled
      - rx(x, cfg): reads bytes from cfg.rx_path (ignores x) if enabled

    Files are raw bytes; the codeword count is implied by the file size.
    """
    enabled: bool = True

    # Where to write/read
    tx_path: Optional[Union[str, Path]] = None
    rx_path: Optional[Union[str, Path]] = None
