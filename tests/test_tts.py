"""Tests for narration audio generation."""
import subprocess
from types import SimpleNamespace

import pytest

from agents import tts
from agents.errors import ExternalToolError


class FakeFfmpeg:
    """Writes a few bytes to the output path (last argument) like ffmpeg would."""

    def __init__(self, returncode=0, stdout="", stderr=""):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append(cmd)
        if cmd[0] == "ffmpeg" and self.returncode == 0:
            with open(cmd[-1], "wb") as f:
                f.write(b"\x00" * 2048)
        return subprocess.CompletedProcess(cmd, self.returncode, stdout=self.stdout, stderr=self.stderr)


def test_placeholder_audio_without_key(keyless_config, monkeypatch):
    fake = FakeFfmpeg()
    monkeypatch.setattr(tts.subprocess, "run", fake)

    result = tts.generate_audio("hello", keyless_config)

    assert result["audio_path"].endswith("audio/narration.mp3")
    assert result["size"] == 2048
    assert result["format"] == "mp3"
    assert result["duration_seconds"] == 30.0
    cmd = fake.calls[0]
    assert "anullsrc=r=44100:cl=mono" in cmd
    assert cmd[cmd.index("-t") + 1] == "30"


def test_placeholder_failure_raises(keyless_config, monkeypatch):
    monkeypatch.setattr(tts.subprocess, "run", FakeFfmpeg(returncode=1, stderr="lavfi missing"))

    with pytest.raises(ExternalToolError, match="lavfi missing"):
        tts.generate_audio("hello", keyless_config)


def test_elevenlabs_stream_written_to_file(config, monkeypatch):
    calls = {}

    def convert(**kwargs):
        calls.update(kwargs)
        return iter([b"abc", b"def"])

    def fake_client(api_key=None):
        calls["api_key"] = api_key
        return SimpleNamespace(text_to_speech=SimpleNamespace(convert=convert))

    monkeypatch.setattr("elevenlabs.ElevenLabs", fake_client)
    monkeypatch.setattr(tts.subprocess, "run", FakeFfmpeg(stdout="12.5\n"))

    result = tts.generate_audio("Once, in a hidden realm...", config)

    with open(result["audio_path"], "rb") as f:
        assert f.read() == b"abcdef"
    assert result["size"] == 6
    assert result["duration_seconds"] == 12.5
    assert calls["api_key"] == "test-elevenlabs"
    assert calls["voice_id"] == "21m00Tcm4TlvDq8ikWAM"
    assert calls["voice_settings"] == {"stability": 0.5, "similarity_boost": 0.75}
    assert calls["text"] == "Once, in a hidden realm..."


def test_duration_estimate_when_ffprobe_missing(tmp_path, monkeypatch):
    audio = tmp_path / "a.mp3"
    audio.write_bytes(b"\x00" * 32000)

    def missing(cmd, **kwargs):
        raise FileNotFoundError("ffprobe")

    monkeypatch.setattr(tts.subprocess, "run", missing)
    assert tts._measure_duration(str(audio)) == 2.0
