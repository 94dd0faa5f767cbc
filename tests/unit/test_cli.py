from pathlib import Path

import pytest

from hamlink.cli import build_parser, main


def test_cli_encode_noise_decode(tmp_path: Path, capsys):
    src = tmp_path / "in.bin"
    enc = tmp_path / "in.ham"
    err = tmp_path / "in.err"
    out = tmp_path / "in.out"
    src.write_bytes(b"\x00\xffhamlink cli\n" * 40)

    assert main(["encode", str(src), str(enc)]) == 0
    assert main(["noise", "--seed", "8", str(enc), str(err)]) == 0
    assert main(["decode", str(err), str(out)]) == 0

    assert out.read_bytes() == src.read_bytes()
    assert err.read_bytes() != enc.read_bytes()

    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("Converting file to hamming format")


def test_cli_encode_with_noise(tmp_path: Path):
    src = tmp_path / "in.bin"
    enc = tmp_path / "in.ham"
    out = tmp_path / "in.out"
    src.write_bytes(bytes(range(256)))

    assert main(["encode", "--noise", "--seed", "1", str(src), str(enc)]) == 0
    assert main(["decode", str(enc), str(out)]) == 0
    assert out.read_bytes() == src.read_bytes()


def test_cli_missing_input_exits_1(tmp_path: Path, capsys):
    rc = main(["decode", str(tmp_path / "nope.bin"), str(tmp_path / "out.bin")])
    assert rc == 1
    assert "error:" in capsys.readouterr().err
    assert not (tmp_path / "out.bin").exists()


def test_cli_requires_a_command():
    with pytest.raises(SystemExit) as e:
        build_parser().parse_args([])
    assert e.value.code == 2


def test_cli_rejects_unknown_command():
    with pytest.raises(SystemExit) as e:
        main(["scramble", "a", "b"])
    assert e.value.code == 2
