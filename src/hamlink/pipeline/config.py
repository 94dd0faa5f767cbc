from __future__ import annotations

from dataclasses import dataclass, field

from hamlink.pipeline.stages.bit_fec.stage import Config as BitFECStageConfig
from hamlink.pipeline.stages.noise.stage import Config as NoiseStageConfig


@dataclass(frozen=True)
class PipelineConfig:
    """
    File codec pipeline configuration.

    encode:       bytes -> unpack -> bit_fec tx -> pack (pad)
    decode:       bytes -> unpack -> bit_fec rx -> pack (no pad)
    inject_noise: bytes -> unpack -> noise tx -> pack

    encode(noisy=True) runs noise between bit_fec tx and packing.
    """
    bit_fec: BitFECStageConfig = field(default_factory=BitFECStageConfig)
    noise: NoiseStageConfig = field(default_factory=NoiseStageConfig)
