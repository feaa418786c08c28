from __future__ import annotations

import importlib.util
from pathlib import Path

import jsonschema
import pytest
import yaml

import stemcell_fips.config.configuration as config_module


@pytest.fixture
def simple_config_dict() -> dict:
    return {
        "os_name": {"description": "Reference lists to use.", "value": "ubuntu-noble"},
        "platform": {"value": "azure"},
    }


@pytest.fixture
def simple_config_yaml(simple_config_dict, tmp_path) -> Path:
    yaml_path = tmp_path / "config.yaml"
    with yaml_path.open("w") as handle:
        yaml.safe_dump(simple_config_dict, handle)
    return yaml_path


def test_default_config():
    cfg = config_module.config
    assert cfg.os_name == "ubuntu-jammy"
    assert cfg.target_host == "local://"
    assert cfg.platform is None
    assert cfg.assets_dir is None
    assert cfg.sshd_config_path == "/etc/ssh/sshd_config"
    assert cfg.grub_config_path == "/boot/grub/grub.cfg"


def test_config_from_yaml(simple_config_dict, simple_config_yaml: Path):
    config_module.config.load(simple_config_yaml)

    for key, val in simple_config_dict.items():
        assert getattr(config_module.config, key) == val["value"]
    assert config_module.config.get_description("os_name") == "Reference lists to use."
    assert config_module.config.get_description("platform") is None
    # keys absent from the file keep their values
    assert config_module.config.target_host == "local://"


@pytest.mark.parametrize(
    "content",
    [
        {"platform": {"value": "digitalocean"}},
        {"os_name": "ubuntu-jammy"},
        {"unknown_key": {"value": "x"}},
    ],
)
def test_invalid_config(content, tmp_path: Path):
    yaml_path = tmp_path / "config.yaml"
    yaml_path.write_text(yaml.safe_dump(content))
    with pytest.raises(jsonschema.exceptions.ValidationError):
        config_module.config.load(yaml_path)


def test_generate_config_page(tmp_path: Path):
    script = Path(__file__).parent.parent / "docs" / "generate_config_page.py"
    spec = importlib.util.spec_from_file_location("generate_config_page", script)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    output = tmp_path / "configuration.md"
    module.write_config_page(output)
    page = output.read_text()
    assert page.startswith("# Configuration")
    assert "`os_name`" in page
    assert "- Default value: `ubuntu-jammy`" in page
    assert "settings.yaml" in page
