"""
Image Generation Agent — Renders one still per prompt via Stability AI SDXL.

Prompts are processed one at a time. A prompt whose request fails is
logged and left out of the result; the rest of the batch carries on.

Usage:
    python -m agents.image_gen '["prompt one", "prompt two"]'
    python -m agents.image_gen "a single prompt"
"""

import base64
import binascii
import json
import sys
from io import BytesIO
from pathlib import Path
from urllib.parse import quote

import requests
from PIL import Image, UnidentifiedImageError

from agents.errors import PerItemError


STABILITY_URL = "https://api.stability.ai/v1/generation/{engine}/text-to-image"
PLACEHOLDER_URL = "https://via.placeholder.com/1024x1024?text={text}"
DEFAULT_PROMPT = "A futuristic landscape with mountains"


def generate_images(prompts, config):
    """
    Generate an image for each prompt, in order.

    Args:
        prompts: list of prompt strings
        config: Config (stability_key, image_* settings, output_dir)

    Returns a list of dicts, one per successful prompt:
        - path: saved .png path (absent for placeholders)
        - url: file:// URL of the image, or a placeholder URL
        - prompt: the prompt used
        - index: position in the result list
    """
    if not config.stability_key:
        print("  WARNING: STABILITY_API_KEY not set. Using placeholder images.", file=sys.stderr)
        return [
            {
                "url": PLACEHOLDER_URL.format(text=quote(prompt[:30])),
                "prompt": prompt,
                "index": i,
            }
            for i, prompt in enumerate(prompts)
        ]

    frames_dir = Path(config.output_dir) / "frames"
    images = []

    for i, prompt in enumerate(prompts):
        print(f"  Generating image for: {prompt[:50]}...", file=sys.stderr)
        try:
            image_bytes = _request_image(prompt, config, i)
        except PerItemError as e:
            print(f"  WARNING: Failed to generate image for prompt \"{prompt}\": {e.reason}", file=sys.stderr)
            continue
        if image_bytes is None:
            print(f"  WARNING: No image returned for prompt \"{prompt}\"", file=sys.stderr)
            continue

        frames_dir.mkdir(parents=True, exist_ok=True)
        image_path = (frames_dir / f"frame_{len(images) + 1}.png").resolve()
        try:
            _save_png(image_bytes, image_path)
        except (UnidentifiedImageError, OSError) as e:
            print(f"  WARNING: Could not save image for prompt \"{prompt}\": {e}", file=sys.stderr)
            continue

        images.append({
            "path": str(image_path),
            "url": image_path.as_uri(),
            "prompt": prompt,
            "index": len(images),
        })
        print(f"  ✓ Saved: {image_path}", file=sys.stderr)

    return images


def _request_image(prompt, config, index):
    """
    POST one text-to-image request.

    Returns the decoded image bytes, or None if the response had no
    artifacts. Raises PerItemError on transport or response-shape errors.
    """
    try:
        response = requests.post(
            STABILITY_URL.format(engine=config.image_engine),
            headers={
                "Authorization": f"Bearer {config.stability_key}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            json={
                "text_prompts": [{"text": prompt, "weight": 1}],
                "steps": config.image_steps,
                "width": config.image_width,
                "height": config.image_height,
                "samples": 1,
                "cfg_scale": config.image_cfg_scale,
                "sampler": config.image_sampler,
            },
            timeout=120,
        )
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.RequestException as e:
        detail = str(e)
        if getattr(e, "response", None) is not None:
            detail = f"{e.response.status_code} {e.response.reason}"
        raise PerItemError(index, prompt, detail)
    except ValueError as e:
        raise PerItemError(index, prompt, f"response was not JSON ({e})")

    artifacts = data.get("artifacts") if isinstance(data, dict) else None
    if not artifacts:
        return None

    try:
        return base64.b64decode(artifacts[0]["base64"])
    except (KeyError, TypeError, binascii.Error) as e:
        raise PerItemError(index, prompt, f"unexpected artifact payload ({e})")


def _save_png(image_bytes, image_path):
    image = Image.open(BytesIO(image_bytes))
    image.save(image_path, "PNG")


def parse_prompt_argument(arg):
    """A JSON array of prompts, a JSON string, or a plain prompt."""
    if not arg:
        return [DEFAULT_PROMPT]
    try:
        prompts = json.loads(arg)
    except ValueError:
        return [arg]
    if not isinstance(prompts, list):
        prompts = [prompts]
    return [str(p) for p in prompts]


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    prompts = parse_prompt_argument(argv[0] if argv else None)

    from agents.config import load_config
    from agents.errors import PipelineError

    try:
        config = load_config()
    except PipelineError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
    images = generate_images(prompts, config)

    print(json.dumps({
        "images": images,
        "count": len(images),
        "prompts": prompts,
    }, indent=2))


if __name__ == "__main__":
    main()
