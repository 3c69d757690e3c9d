"""
Prompt Agent — Expands a film idea into image prompts and a video prompt.

Claude is asked for JSON; the reply goes through parse_model_json so that
code fences or a stray sentence around the JSON do not break the run.

Usage:
    python -m agents.prompt_gen "A child discovers a miniature dragon"
"""

import json
import sys

import anthropic

from agents.errors import PipelineError, ValidationError
from agents.json_parse import parse_model_json


DEFAULT_IDEA = "A child discovers a miniature dragon in their backyard"

PROMPT_TEMPLATE = """You are an expert prompt engineer. Given the video concept: "{idea}", generate:
1. A list of {count} descriptive image prompts, each designed to produce a 3D-rendered cinematic still, with lighting, camera angle, and atmosphere.
2. A single concise video prompt that could be fed to an animation system or used as inspiration for transitions.

Return JSON with keys "images" (array of strings) and "video" (string)."""


def create_prompts(idea, config, count=5):
    """
    Generate image and video prompts for an idea.

    Returns a dict with:
        - images: list of image prompt strings, in story order
        - video: a single video prompt string
    """
    client = anthropic.Anthropic(api_key=config.require("anthropic_key"))

    message = client.messages.create(
        model=config.text_model,
        max_tokens=800,
        messages=[{"role": "user", "content": PROMPT_TEMPLATE.format(idea=idea, count=count)}],
    )

    text = message.content[0].text if message.content else ""
    data = parse_model_json(text)
    return _validate_prompts(data, text)


def _validate_prompts(data, raw_text):
    if not isinstance(data, dict):
        raise ValidationError(f"expected a JSON object from the model, got: {raw_text!r}")

    images = data.get("images")
    if not isinstance(images, list) or not all(isinstance(p, str) for p in images):
        raise ValidationError(f"'images' must be a list of strings in: {raw_text!r}")

    video = data.get("video")
    if not isinstance(video, str):
        raise ValidationError(f"'video' must be a string in: {raw_text!r}")

    return {"images": images, "video": video}


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    idea = argv[0] if argv else DEFAULT_IDEA

    from agents.config import load_config

    try:
        config = load_config()
        data = create_prompts(idea, config)
    except PipelineError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(data, indent=2))


if __name__ == "__main__":
    main()
