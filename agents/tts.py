"""
TTS Agent — Converts a narration script to audio via ElevenLabs.

Without an ElevenLabs key a 30-second silent placeholder is rendered with
ffmpeg, so the rest of the pipeline can still be exercised.

Usage:
    python -m agents.tts "A mysterious journey through a hidden realm"
"""

import json
import os
import subprocess
import sys
from pathlib import Path

from agents.errors import ExternalToolError, PipelineError


DEFAULT_IDEA = "A mysterious journey through a hidden realm"
PLACEHOLDER_SECONDS = 30
AUDIO_FILENAME = "narration.mp3"


def generate_audio(text, config):
    """
    Convert narration text to an .mp3 file.

    Returns a dict with:
        - audio_path: path to the generated .mp3 file
        - size: file size in bytes
        - format: "mp3"
        - duration_seconds: measured (or placeholder) duration
    """
    audio_dir = Path(config.output_dir) / "audio"
    audio_dir.mkdir(parents=True, exist_ok=True)
    audio_path = audio_dir / AUDIO_FILENAME

    if not config.elevenlabs_key:
        print("  WARNING: ELEVENLABS_API_KEY not set. Creating placeholder audio with ffmpeg.", file=sys.stderr)
        _generate_placeholder(str(audio_path))
        duration = float(PLACEHOLDER_SECONDS)
    else:
        from elevenlabs import ElevenLabs

        print(f"  Generating audio with ElevenLabs ({len(text)} characters)...", file=sys.stderr)
        client = ElevenLabs(api_key=config.elevenlabs_key)
        _generate_tts_file(client, config, text, str(audio_path))
        duration = _measure_duration(str(audio_path))

    size = os.path.getsize(audio_path)
    print(f"  ✓ Audio saved: {audio_path} ({size / 1024:.2f} KB)", file=sys.stderr)

    return {
        "audio_path": str(audio_path),
        "size": size,
        "format": "mp3",
        "duration_seconds": duration,
    }


def _generate_tts_file(client, config, text, output_path):
    """Generate a single TTS audio file."""
    audio_generator = client.text_to_speech.convert(
        voice_id=config.voice_id,
        text=text,
        model_id=config.tts_model,
        output_format="mp3_44100_128",
        voice_settings={
            "stability": config.voice_stability,
            "similarity_boost": config.voice_similarity_boost,
        },
    )

    with open(output_path, "wb") as f:
        for chunk in audio_generator:
            f.write(chunk)


def _generate_placeholder(output_path):
    """Render mono silence as a stand-in narration track."""
    try:
        result = subprocess.run(
            [
                "ffmpeg", "-y",
                "-f", "lavfi",
                "-i", "anullsrc=r=44100:cl=mono",
                "-t", str(PLACEHOLDER_SECONDS),
                "-q:a", "9",
                "-acodec", "libmp3lame",
                output_path,
            ],
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as e:
        raise ExternalToolError("ffmpeg", f"not installed ({e})")

    if result.returncode != 0:
        raise ExternalToolError("ffmpeg", (result.stderr or "").strip()[-500:])


def _measure_duration(audio_path):
    """Use ffprobe to measure audio duration in seconds."""
    try:
        result = subprocess.run(
            [
                "ffprobe",
                "-v", "quiet",
                "-show_entries", "format=duration",
                "-of", "default=noprint_wrappers=1:nokey=1",
                audio_path,
            ],
            capture_output=True,
            text=True,
        )
        return float(result.stdout.strip())
    except (ValueError, FileNotFoundError):
        print("  WARNING: ffprobe not available, estimating duration", file=sys.stderr)
        file_size = os.path.getsize(audio_path)
        return file_size / 16000


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    idea = argv[0] if argv else DEFAULT_IDEA

    from agents.config import load_config
    from agents.writer import generate_script

    try:
        config = load_config()
        print(f'Generating audio for idea: "{idea}"', file=sys.stderr)
        print("Step 1: Generating script from idea...", file=sys.stderr)
        script = generate_script(idea, config)
        print("Step 2: Converting script to audio...", file=sys.stderr)
        audio_data = generate_audio(script, config)
    except PipelineError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(audio_data, indent=2))


if __name__ == "__main__":
    main()
