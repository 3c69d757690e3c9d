"""Tests for config loading."""
import dataclasses

import pytest

from agents.config import Config, load_config
from agents.errors import ConfigError


def test_defaults_without_file_or_env(tmp_path):
    config = load_config(str(tmp_path / "missing.yaml"), environ={})

    assert config == Config()
    assert config.voice_id == "21m00Tcm4TlvDq8ikWAM"
    assert config.video_codec == "libx264"


def test_yaml_sections_are_applied(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "apis:\n"
        "  stability_key: yaml-stability\n"
        "text:\n"
        "  model: claude-test\n"
        "tts:\n"
        "  voice_id: voice-123\n"
        "  stability: 0.9\n"
        "images:\n"
        "  steps: 12\n"
        "video:\n"
        "  audio_codec: libmp3lame\n"
        "output_dir: build\n"
    )

    config = load_config(str(path), environ={})

    assert config.stability_key == "yaml-stability"
    assert config.text_model == "claude-test"
    assert config.voice_id == "voice-123"
    assert config.voice_stability == 0.9
    assert config.image_steps == 12
    assert config.audio_codec == "libmp3lame"
    assert config.output_dir == "build"


def test_environment_overrides_yaml_keys(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("apis:\n  anthropic_key: from-yaml\n")

    config = load_config(str(path), environ={"ANTHROPIC_API_KEY": "from-env"})
    assert config.anthropic_key == "from-env"


def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Config().anthropic_key = "x"


def test_require_names_missing_env_variable():
    with pytest.raises(ConfigError, match="ELEVENLABS_API_KEY"):
        Config().require("elevenlabs_key")
    assert Config(elevenlabs_key="k").require("elevenlabs_key") == "k"


def test_non_mapping_yaml_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ConfigError):
        load_config(str(path), environ={})
