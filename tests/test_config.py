# ./tests/test_config.py
# Tests for YAML configuration loading and .env overrides.

import os
import sys

import pytest
import yaml

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from quran.translation.config import ConfigObject, load_config


@pytest.fixture
def config_dir(tmp_path):
    """A temporary config directory with minimal app.yaml and data.yaml files."""
    directory = tmp_path / "config"
    directory.mkdir()
    with open(directory / "app.yaml", "w", encoding="utf-8") as f:
        yaml.dump({"logging": {"level": "INFO", "dir": None, "file_name": "alignment"}}, f)
    with open(directory / "data.yaml", "w", encoding="utf-8") as f:
        yaml.dump({"paths": {"chapters_file": None, "catalog_file": "catalog.yaml"}}, f)
    return directory


def test_load_config_namespaces(config_dir, tmp_path):
    cfg = load_config(str(config_dir), str(tmp_path / ".env"))

    assert cfg.app.logging.level == "INFO"
    assert cfg.data.paths.catalog_file == "catalog.yaml"
    assert cfg.data.paths.chapters_file is None


def test_env_overrides_are_coerced(config_dir, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# local overrides\n"
        "app.logging.level=DEBUG\n"
        "app.logging.verbose=true\n"
        "app.retries=3\n"
        "app.ratio=0.5\n"
        "data.paths.chapters_file='chapters.yaml'\n"
        "not a setting\n",
        encoding="utf-8",
    )

    cfg = load_config(str(config_dir), str(env_file))

    assert cfg.app.logging.level == "DEBUG"
    assert cfg.app.logging.verbose is True
    assert cfg.app.retries == 3
    assert cfg.app.ratio == 0.5
    assert cfg.data.paths.chapters_file == "chapters.yaml"


def test_missing_config_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path), None)


def test_malformed_yaml_raises(config_dir):
    (config_dir / "data.yaml").write_text("paths: [unclosed\n", encoding="utf-8")
    with pytest.raises(yaml.YAMLError):
        load_config(str(config_dir), None)


def test_unknown_group_raises_attribute_error(config_dir):
    cfg = load_config(str(config_dir), None)
    with pytest.raises(AttributeError):
        cfg.model


def test_config_object_skips_non_identifier_keys():
    obj = ConfigObject({"good_key": 1, "bad-key": 2, "nested": {"x": 3}})
    assert obj.good_key == 1
    assert obj.nested.x == 3
    assert obj.get("bad-key") is None
