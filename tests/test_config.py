"""
YAML config loading and validation
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from wrapmaze.config import MazeConfig, MarkerConfig, load_config
from wrapmaze.errors import ConfigError

SAMPLE_CONFIG = Path(__file__).resolve().parent.parent / "config" / "wrapmaze.yaml"


def _Write(tmp_path, text, name="wrapmaze.yaml"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults():
    cfg = MazeConfig()
    assert (cfg.markers.wall, cfg.markers.entry, cfg.markers.exit, cfg.markers.path) == ('#', 'i', 'O', '.')
    assert cfg.topology.wrap is True
    assert cfg.logging.level == "WARNING"
    assert cfg.logging.log_dir is None


def test_sample_config_matches_defaults():
    assert load_config(SAMPLE_CONFIG) == MazeConfig()


def test_partial_config(tmp_path):
    path = _Write(tmp_path, "markers:\n  entry: S\n  exit: E\ntopology:\n  wrap: false\n")
    cfg = load_config(path)
    assert cfg.markers.entry == 'S'
    assert cfg.markers.exit == 'E'
    assert cfg.markers.wall == '#'
    assert cfg.topology.wrap is False


def test_level_is_normalized(tmp_path):
    cfg = load_config(_Write(tmp_path, "logging:\n  level: debug\n"))
    assert cfg.logging.level == "DEBUG"


def test_relative_log_dir_resolved_against_config(tmp_path):
    cfg = load_config(_Write(tmp_path, "logging:\n  log_dir: logs\n"))
    assert Path(cfg.logging.log_dir) == (tmp_path / "logs").resolve()


def test_marker_must_be_single_char():
    with pytest.raises(ValidationError):
        MarkerConfig(wall='##')


def test_markers_must_be_distinct():
    with pytest.raises(ValidationError):
        MarkerConfig(entry='O')


@pytest.mark.parametrize("text", [
    "markers:\n  path: '#'\n",
    "logging:\n  level: LOUD\n",
    "topology:\n  wrap: [1, 2]\n",
])
def test_invalid_values_raise_config_error(tmp_path, text):
    with pytest.raises(ConfigError):
        load_config(_Write(tmp_path, text))


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml")


def test_bad_yaml(tmp_path):
    with pytest.raises(ConfigError):
        load_config(_Write(tmp_path, "markers: [\n"))


def test_empty_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(_Write(tmp_path, ""))


def test_non_mapping_root(tmp_path):
    with pytest.raises(ConfigError):
        load_config(_Write(tmp_path, "- a\n- b\n"))
