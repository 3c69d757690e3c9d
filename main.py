#!/usr/bin/env python3
"""
Cinematic Shorts — AI idea -> prompts -> images + narration -> slideshow video.
Main orchestrator: runs one stage, or chains them all.

Usage:
    python main.py --mode ideas                          # brainstorm film ideas
    python main.py --mode prompts --idea "..."           # image/video prompts for an idea
    python main.py --mode images --idea "..."            # prompts + rendered frames
    python main.py --mode audio --idea "..."             # narration script + .mp3
    python main.py --mode assemble --spec spec.json      # descriptor -> .mp4
    python main.py --mode pipeline [--idea "..."]        # everything, end to end
"""

import argparse
import json
import sys
from pathlib import Path

from agents.config import load_config
from agents.errors import PipelineError, ValidationError


def run_pipeline(config, idea=None, output_name="out.mp4"):
    """Chain every stage and assemble the final video."""
    from agents.idea_gen import generate_ideas
    from agents.prompt_gen import create_prompts
    from agents.image_gen import generate_images
    from agents.writer import generate_script
    from agents.tts import generate_audio
    from video.asset_spec import AssetSpec, write_asset_spec
    from video.assembler import assemble

    print(f"\n{'='*50}", file=sys.stderr)
    print("  CINEMATIC SHORTS — Full pipeline", file=sys.stderr)
    print(f"{'='*50}\n", file=sys.stderr)

    if not idea:
        print("[1/5] Brainstorming ideas...", file=sys.stderr)
        ideas = generate_ideas(config)
        if not ideas:
            raise ValidationError("idea generation returned nothing")
        idea = ideas[0]
    else:
        print("[1/5] Using supplied idea", file=sys.stderr)
    print(f"  Idea: {idea}", file=sys.stderr)

    print("[2/5] Writing image prompts...", file=sys.stderr)
    prompts = create_prompts(idea, config)

    print(f"[3/5] Rendering {len(prompts['images'])} frames...", file=sys.stderr)
    images = generate_images(prompts["images"], config)
    image_paths = [img["path"] for img in images if img.get("path")]
    print(f"  {len(image_paths)}/{len(prompts['images'])} frames on disk", file=sys.stderr)

    print("[4/5] Writing and voicing narration...", file=sys.stderr)
    script = generate_script(idea, config)
    audio_data = generate_audio(script, config)

    print("[5/5] Assembling video...", file=sys.stderr)
    output_dir = Path(config.output_dir)
    spec = AssetSpec.from_dict({
        "images": image_paths,
        "audio": audio_data["audio_path"],
        "output": str(output_dir / output_name),
    })
    spec_path = write_asset_spec(spec, str(output_dir / "spec.json"))
    print(f"  Descriptor written: {spec_path}", file=sys.stderr)

    return assemble(spec_path, config)


def run_stage(mode, config, idea=None, spec_path="spec.json"):
    """Run a single stage and return its JSON-serializable result."""
    if mode == "ideas":
        from agents.idea_gen import generate_ideas
        return generate_ideas(config)

    if mode == "prompts":
        from agents.prompt_gen import DEFAULT_IDEA, create_prompts
        return create_prompts(idea or DEFAULT_IDEA, config)

    if mode == "images":
        from agents.prompt_gen import DEFAULT_IDEA, create_prompts
        from agents.image_gen import generate_images
        prompts = create_prompts(idea or DEFAULT_IDEA, config)["images"]
        images = generate_images(prompts, config)
        return {"images": images, "count": len(images), "prompts": prompts}

    if mode == "audio":
        from agents.tts import DEFAULT_IDEA, generate_audio
        from agents.writer import generate_script
        return generate_audio(generate_script(idea or DEFAULT_IDEA, config), config)

    if mode == "assemble":
        from video.assembler import assemble
        return assemble(spec_path, config)

    if mode == "pipeline":
        return run_pipeline(config, idea=idea)

    raise ValidationError(f"unknown mode: {mode}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Cinematic Shorts — AI short-film generator"
    )
    parser.add_argument(
        "--mode",
        choices=["ideas", "prompts", "images", "audio", "assemble", "pipeline"],
        required=True,
        help="Stage to run, or 'pipeline' for all of them",
    )
    parser.add_argument(
        "--idea",
        default=None,
        help="Film idea (prompts/images/audio/pipeline modes)",
    )
    parser.add_argument(
        "--spec",
        default="spec.json",
        help="Descriptor path for assemble mode (default: spec.json)",
    )
    parser.add_argument(
        "--config",
        default="config.yaml",
        help="Path to config file (default: config.yaml)",
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        result = run_stage(args.mode, config, idea=args.idea, spec_path=args.spec)
    except PipelineError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    if args.mode != "assemble":
        print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
