from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from hamlink.pipeline.config import PipelineConfig
from hamlink.utils.bitops import unpack

from hamlink.pipeline.stages.bit_fec import stage as bit_fec_stage
from hamlink.pipeline.stages.noise import stage as noise_stage
from hamlink.pipeline.stages.containers import stage as containers_stage
from hamlink.pipeline.stages.containers.config.stage_config import Config as ContainersConfig

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class Pipeline:
    cfg: PipelineConfig = field(default_factory=PipelineConfig)

    # Built on first noise call, then kept for the pipeline's lifetime
    _injector: Optional[Any] = field(default=None, init=False, repr=False)

    @property
    def injector(self):
        if self._injector is None:
            self._injector = noise_stage.make_injector(self.cfg.noise)
        return self._injector

    # -------------------------
    # Bytes in, bytes out
    # -------------------------

    def encode(self, payload: bytes, *, noisy: bool = False) -> bytes:
        if not isinstance(payload, (bytes, bytearray)):
            raise TypeError("Pipeline.encode: payload must be bytes-like")

        if noisy:
            # Flip bits on whole codewords before byte padding is added
            bits = bit_fec_stage.encode_bits(unpack(bytes(payload)), cfg=self.cfg.bit_fec)
            out = bit_fec_stage.pack_codewords(self.injector.inject(bits), cfg=self.cfg.bit_fec)
        else:
            out = bit_fec_stage.tx(payload, cfg=self.cfg.bit_fec)

        logger.debug("encode: %d bytes -> %d bytes (noisy=%s)", len(payload), len(out), noisy)
        return out

    def decode(self, data: bytes) -> bytes:
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError("Pipeline.decode: data must be bytes-like")

        out = bit_fec_stage.rx(data, cfg=self.cfg.bit_fec)
        logger.debug("decode: %d bytes -> %d bytes", len(data), len(out))
        return out

    def inject_noise(self, data: bytes) -> bytes:
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError("Pipeline.inject_noise: data must be bytes-like")

        out = noise_stage.tx(data, cfg=self.cfg.noise, injector=self.injector)
        logger.debug("inject_noise: %d bytes", len(out))
        return out

    # -------------------------
    # File in, file out
    # -------------------------

    def encode_file(self, src: PathLike, dst: PathLike, *, noisy: bool = False) -> bytes:
        return _write(dst, self.encode(_read(src), noisy=noisy))

    def decode_file(self, src: PathLike, dst: PathLike) -> bytes:
        return _write(dst, self.decode(_read(src)))

    def inject_noise_file(self, src: PathLike, dst: PathLike) -> bytes:
        return _write(dst, self.inject_noise(_read(src)))


def _read(path: PathLike) -> bytes:
    return containers_stage.rx(None, ContainersConfig(rx_path=path))


def _write(path: PathLike, data: bytes) -> bytes:
    return containers_stage.tx(data, ContainersConfig(tx_path=path))
