from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from hamlink.pipeline.config import PipelineConfig
from hamlink.pipeline.pipeline import Pipeline
from hamlink.pipeline.stages.noise.stage import Config as NoiseStageConfig
from hamlink.pipeline.stages.noise.modules.single_flip import Config as SingleFlipConfig


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="hamlink",
        description="Hamming(7,4) file codec with single-bit error injection and correction.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = ap.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encode", help="Add Hamming parity to a file.")
    enc.add_argument("input", help="File to encode.")
    enc.add_argument("output", help="Where to write the encoded file.")
    enc.add_argument("--noise", action="store_true",
                     help="Also flip one bit in roughly 1 of every 7 codewords.")
    enc.add_argument("--seed", type=int, default=None, help="Seed for --noise (default: time-based).")

    dec = sub.add_parser("decode", help="Correct single-bit errors and recover the original file.")
    dec.add_argument("input", help="Encoded file.")
    dec.add_argument("output", help="Where to write the recovered file.")

    noise = sub.add_parser("noise", help="Flip one bit in roughly 1 of every 7 codewords of an encoded file.")
    noise.add_argument("input", help="Encoded file.")
    noise.add_argument("output", help="Where to write the noisy file.")
    noise.add_argument("--seed", type=int, default=None, help="Seed (default: time-based).")

    return ap


def _make_pipeline(seed: Optional[int]) -> Pipeline:
    noise_cfg = NoiseStageConfig(module="single_flip", module_cfg=SingleFlipConfig(seed=seed))
    return Pipeline(PipelineConfig(noise=noise_cfg))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    pipe = _make_pipeline(getattr(args, "seed", None))

    try:
        if args.command == "encode":
            out = pipe.encode_file(args.input, args.output, noisy=args.noise)
            label = "Converting file to hamming format" + (" with noise" if args.noise else "")
        elif args.command == "decode":
            out = pipe.decode_file(args.input, args.output)
            label = "Recovering file from hamming format"
        else:
            out = pipe.inject_noise_file(args.input, args.output)
            label = "Generating error"
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"{label}: {args.input} -> {args.output} ({len(out)} bytes)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
