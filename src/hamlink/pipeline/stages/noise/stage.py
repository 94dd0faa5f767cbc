from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional
import importlib
import pkgutil


@dataclass(frozen=True)
class Config:
    """
    Noise (channel simulation) stage config.

    module: noise module name (e.g. "single_flip")
    module_cfg: instance of that module's Config (or None -> defaults)

    There is no rx: noise is one-way. The bit_fec stage rx is what undoes it.
    """
    module: str = "single_flip"
    module_cfg: Any = None


def available_modules() -> list[str]:
    """
    Enumerate available noise modules under pipeline/stages/noise/modules.
    """
    pkg = importlib.import_module(f"{__package__}.modules")
    names = [m.name for m in pkgutil.iter_modules(pkg.__path__)]
    return sorted([n for n in names if not n.startswith("_")])


def _import_noise_module(name: str):
    if not isinstance(name, str) or not name:
        raise ValueError("cfg.module must be a non-empty string")
    return importlib.import_module(f"{__package__}.modules.{name}")


def _resolve_module_and_cfg(cfg: Config):
    mod = _import_noise_module(cfg.module)

    if not hasattr(mod, "Config"):
        raise AttributeError(f"noise module '{cfg.module}' missing Config")
    if not hasattr(mod, "tx") or not hasattr(mod, "Injector"):
        raise AttributeError(f"noise module '{cfg.module}' missing tx/Injector")

    module_cfg = cfg.module_cfg if cfg.module_cfg is not None else mod.Config()
    return mod, module_cfg


def make_injector(cfg: Config):
    """
    Build a long-lived injector for the configured module.
    """
    mod, module_cfg = _resolve_module_and_cfg(cfg)
    return mod.Injector(module_cfg)


def tx(data: bytes, *, cfg: Config, injector: Optional[Any] = None) -> bytes:
    """
    Stage TX: flip bits in packed codeword bits (bytes).
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("tx: data must be bytes-like")
    mod, module_cfg = _resolve_module_and_cfg(cfg)
    return mod.tx(bytes(data), cfg=module_cfg, injector=injector)
