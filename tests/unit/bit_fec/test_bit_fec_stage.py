import pytest

from hamlink.pipeline.stages.bit_fec import stage as bit_fec_stage


def test_bit_fec_stage_lists_hamming74():
    assert "hamming74" in bit_fec_stage.available_modules()


@pytest.mark.parametrize("module_name", bit_fec_stage.available_modules())
def test_bit_fec_stage_roundtrip_all_modules(module_name: str):
    mod = bit_fec_stage._import_bit_fec_module(module_name)

    # Project invariant: module Config must be default-constructible
    try:
        module_cfg = mod.Config()
    except TypeError as e:
        pytest.fail(
            f"bit_fec module '{module_name}' Config() must be default-constructible. Error: {e}"
        )

    cfg = bit_fec_stage.Config(module=module_name, module_cfg=module_cfg)

    payload = b"bit fec stage test payload" * 10
    enc = bit_fec_stage.tx(payload, cfg=cfg)
    dec = bit_fec_stage.rx(enc, cfg=cfg)

    # Byte input is always a whole number of data groups, so decode is exact.
    assert dec == payload


def test_bit_fec_stage_default_config_uses_module_defaults():
    enc = bit_fec_stage.tx(b"\xA5", cfg=bit_fec_stage.Config())
    assert enc == b"\xA4\xB4"


def test_bit_fec_stage_rejects_non_bytes():
    with pytest.raises(TypeError):
        bit_fec_stage.tx([1, 0, 1], cfg=bit_fec_stage.Config())  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        bit_fec_stage.rx("abc", cfg=bit_fec_stage.Config())  # type: ignore[arg-type]


def test_bit_fec_stage_rejects_bad_module_name():
    with pytest.raises(ValueError):
        bit_fec_stage.tx(b"x", cfg=bit_fec_stage.Config(module=""))
    with pytest.raises(ModuleNotFoundError):
        bit_fec_stage.tx(b"x", cfg=bit_fec_stage.Config(module="no_such_code"))
