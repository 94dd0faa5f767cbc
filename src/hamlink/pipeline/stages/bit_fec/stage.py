from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import importlib
import pkgutil


@dataclass(frozen=True)
class Config:
    """
    Bit-FEC stage config.

    module: bit-FEC module name (e.g. "hamming74")
    module_cfg: instance of that module's Config (or None -> defaults)
    """
    module: str = "hamming74"
    module_cfg: Any = None


def available_modules() -> list[str]:
    """
    Enumerate available bit-FEC modules under pipeline/stages/bit_fec/modules.
    """
    pkg = importlib.import_module(f"{__package__}.modules")
    names = [m.name for m in pkgutil.iter_modules(pkg.__path__)]
    return sorted([n for n in names if not n.startswith("_")])


def _import_bit_fec_module(name: str):
    if not isinstance(name, str) or not name:
        raise ValueError("cfg.module must be a non-empty string")
    return importlib.import_module(f"{__package__}.modules.{name}")


def _resolve_module_and_cfg(cfg: Config):
    mod = _import_bit_fec_module(cfg.module)

    if not hasattr(mod, "Config"):
        raise AttributeError(f"bit_fec module '{cfg.module}' missing Config")
    if not hasattr(mod, "tx") or not hasattr(mod, "rx"):
        raise AttributeError(f"bit_fec module '{cfg.module}' missing tx/rx")

    module_cfg = cfg.module_cfg if cfg.module_cfg is not None else mod.Config()
    return mod, module_cfg


def tx(data: bytes, *, cfg: Config) -> bytes:
    """
    Stage TX: bytes -> packed codeword bits.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("tx: data must be bytes-like")
    mod, module_cfg = _resolve_module_and_cfg(cfg)
    return mod.tx(bytes(data), cfg=module_cfg)


def rx(data: bytes, *, cfg: Config) -> bytes:
    """
    Stage RX: packed codeword bits -> corrected bytes.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("rx: data must be bytes-like")
    mod, module_cfg = _resolve_module_and_cfg(cfg)
    return mod.rx(bytes(data), cfg=module_cfg)


def encode_bits(bits: Any, *, cfg: Config):
    """
    Bit-level encode for callers that already hold an unpacked bit array.
    """
    mod, _ = _resolve_module_and_cfg(cfg)
    return mod.encode_bits(bits)


def pack_codewords(bits: Any, *, cfg: Config) -> bytes:
    """
    Pack codeword bits into bytes with the same byte-alignment rule as tx.
    """
    mod, module_cfg = _resolve_module_and_cfg(cfg)
    return mod.pack_codewords(bits, cfg=module_cfg)
