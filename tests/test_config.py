import pytest
from pydantic import ValidationError

from cnpjkit.codec import CnpjType
from cnpjkit.config import CnpjConfig, load_config


def test_defaults():
    cfg = load_config(None)
    assert cfg == CnpjConfig()
    assert cfg.generator.kind is CnpjType.ALPHANUMERIC
    assert cfg.generator.count == 1
    assert cfg.checksum.strict is False
    assert cfg.detector.masked and cfg.detector.bare

def test_load_yaml(tmp_path):
    path = tmp_path / "cnpjkit.yaml"
    path.write_text("generator:\n  kind: numeric\n  count: 3\n  seed: 7\nchecksum:\n  strict: true\n")
    cfg = load_config(path)
    assert cfg.generator.kind is CnpjType.NUMERIC
    assert cfg.generator.count == 3
    assert cfg.generator.seed == 7
    assert cfg.checksum.strict is True

def test_empty_yaml(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == CnpjConfig()

def test_invalid_values(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("generator:\n  count: 0\n")
    with pytest.raises(ValidationError):
        load_config(path)
