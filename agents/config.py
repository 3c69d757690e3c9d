"""
Config — Loads API keys and generation settings once at process start.

Sources, lowest to highest precedence:
  1. built-in defaults
  2. config.yaml (optional, see config.example.yaml)
  3. .env file / process environment (API keys only)

The result is a frozen Config that every agent receives as an argument.
"""

import os
from dataclasses import dataclass

import yaml
from dotenv import load_dotenv

from agents.errors import ConfigError


ENV_KEYS = {
    "anthropic_key": "ANTHROPIC_API_KEY",
    "elevenlabs_key": "ELEVENLABS_API_KEY",
    "stability_key": "STABILITY_API_KEY",
}


@dataclass(frozen=True)
class Config:
    anthropic_key: str = ""
    elevenlabs_key: str = ""
    stability_key: str = ""

    text_model: str = "claude-sonnet-4-20250514"

    voice_id: str = "21m00Tcm4TlvDq8ikWAM"
    tts_model: str = "eleven_multilingual_v2"
    voice_stability: float = 0.5
    voice_similarity_boost: float = 0.75

    image_engine: str = "stable-diffusion-xl-1024-v1-0"
    image_steps: int = 30
    image_width: int = 1024
    image_height: int = 1024
    image_cfg_scale: float = 7
    image_sampler: str = "K_DPMPP_2M"

    output_dir: str = "."
    video_codec: str = "libx264"
    audio_codec: str = "aac"

    def require(self, key_name):
        """Return an API key or raise ConfigError naming its env variable."""
        value = getattr(self, key_name)
        if not value:
            raise ConfigError(f"{ENV_KEYS[key_name]} not set")
        return value


def load_config(config_path="config.yaml", environ=None):
    """
    Build the Config for this run.

    Args:
        config_path: YAML file with apis/text/tts/images/video sections.
            A missing file is fine; keys can come from the environment.
        environ: mapping to read API keys from (defaults to os.environ
            after loading .env)

    Returns a frozen Config.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    raw = {}
    if config_path and os.path.exists(config_path):
        with open(config_path, "r") as f:
            raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{config_path} must contain a mapping")

    apis = raw.get("apis", {}) or {}
    text = raw.get("text", {}) or {}
    tts = raw.get("tts", {}) or {}
    images = raw.get("images", {}) or {}
    video = raw.get("video", {}) or {}

    values = {}
    for field_name, env_name in ENV_KEYS.items():
        value = environ.get(env_name) or apis.get(field_name)
        if value:
            values[field_name] = value

    _copy(text, values, {"model": "text_model"})
    _copy(tts, values, {
        "voice_id": "voice_id",
        "model_id": "tts_model",
        "stability": "voice_stability",
        "similarity_boost": "voice_similarity_boost",
    })
    _copy(images, values, {
        "engine": "image_engine",
        "steps": "image_steps",
        "width": "image_width",
        "height": "image_height",
        "cfg_scale": "image_cfg_scale",
        "sampler": "image_sampler",
    })
    _copy(video, values, {
        "video_codec": "video_codec",
        "audio_codec": "audio_codec",
    })
    if raw.get("output_dir"):
        values["output_dir"] = str(raw["output_dir"])

    return Config(**values)


def _copy(section, values, mapping):
    for yaml_key, field_name in mapping.items():
        if section.get(yaml_key) is not None:
            values[field_name] = section[yaml_key]
