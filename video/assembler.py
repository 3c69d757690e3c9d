"""
Video Assembler — Turns a descriptor of images + narration into a .mp4.

Pure ffmpeg pipeline:
  descriptor (spec.json) -> AssetSpec
  AssetSpec.images       -> fade/concat filter graph (video/timeline.py)
  graph + audio          -> one blocking ffmpeg run

Usage:
    python -m video.assembler spec.json
"""

import subprocess
import sys

from agents.errors import ExternalToolError, PipelineError
from video.asset_spec import load_asset_spec
from video.timeline import SLOT_SECONDS, build_filter_graph, total_duration


DEFAULT_VIDEO_CODEC = "libx264"
DEFAULT_AUDIO_CODEC = "aac"


def assemble(spec_path, config=None):
    """
    Assemble the video described by a descriptor file.

    Args:
        spec_path: path to the JSON descriptor
        config: optional Config supplying codec choices

    Returns the dict from encode(). Raises ValidationError for a bad
    descriptor (before ffmpeg runs) and ExternalToolError if ffmpeg fails.
    """
    spec = load_asset_spec(spec_path)
    graph = build_filter_graph(spec.images)

    video_codec = config.video_codec if config else DEFAULT_VIDEO_CODEC
    audio_codec = config.audio_codec if config else DEFAULT_AUDIO_CODEC

    return encode(spec, graph, video_codec=video_codec, audio_codec=audio_codec)


def encode(spec, graph, video_codec=DEFAULT_VIDEO_CODEC, audio_codec=DEFAULT_AUDIO_CODEC):
    """
    Run ffmpeg for a built graph and wait for it to finish.

    Returns a dict with:
        - output_path: the descriptor's output, verbatim
        - status: "succeeded"
    Raises ExternalToolError (carrying ffmpeg's stderr) on failure.
    """
    cmd = build_ffmpeg_command(spec, graph, video_codec, audio_codec)

    print(
        f"  Encoding {len(spec.images)} images ({total_duration(graph)}s) + {spec.audio} -> {spec.output}",
        file=sys.stderr,
    )

    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except FileNotFoundError as e:
        raise ExternalToolError("ffmpeg", f"not installed ({e})")

    if result.returncode != 0:
        raise ExternalToolError("ffmpeg", (result.stderr or "").strip()[-500:])

    print(f"video assembled to {spec.output}")
    return {
        "output_path": spec.output,
        "status": "succeeded",
    }


def build_ffmpeg_command(spec, graph, video_codec=DEFAULT_VIDEO_CODEC, audio_codec=DEFAULT_AUDIO_CODEC):
    """Build the ffmpeg argument list: images, then audio, then graph + maps."""
    cmd = ["ffmpeg", "-y"]

    # Each still image is looped for exactly one slot
    for image_path in spec.images:
        cmd.extend(["-loop", "1", "-t", str(SLOT_SECONDS), "-i", image_path])

    # Audio is the input right after the last image
    audio_index = len(spec.images)
    cmd.extend(["-i", spec.audio])

    cmd.extend(["-filter_complex", graph.render()])
    cmd.extend([
        "-map", f"[{graph.output_label}]",
        "-map", f"{audio_index}:a",
        "-c:v", video_codec,
        "-pix_fmt", "yuv420p",
        "-c:a", audio_codec,
        spec.output,
    ])

    return cmd


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    spec_path = argv[0] if argv else "spec.json"

    from agents.config import load_config

    try:
        config = load_config()
        assemble(spec_path, config)
    except PipelineError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
