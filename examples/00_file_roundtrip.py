from pathlib import Path

from hamlink.pipeline.config import PipelineConfig
from hamlink.pipeline.pipeline import Pipeline


if __name__ == "__main__":
    out_dir = Path("tests/outputs/reference")
    out_dir.mkdir(parents=True, exist_ok=True)

    src = out_dir / "message.txt"
    src.write_text("Hamming(7,4): 4 data bits, 3 parity bits, one error fixed per codeword.\n" * 8)

    pipe = Pipeline(PipelineConfig())
    pipe.encode_file(src, out_dir / "message.ham")
    pipe.inject_noise_file(out_dir / "message.ham", out_dir / "message.err")
    pipe.decode_file(out_dir / "message.err", out_dir / "message.out.txt")

    recovered = (out_dir / "message.out.txt").read_bytes()

    # Hard correctness check
    assert recovered == src.read_bytes(), "Roundtrip mismatch: recovered != original"
    print(f"Roundtrip OK: {len(recovered)} bytes recovered through noise.")
