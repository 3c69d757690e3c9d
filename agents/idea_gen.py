"""
Idea Agent — Brainstorms short-film concepts via Claude.

Prints a JSON list of one-sentence ideas to stdout.

Usage:
    python -m agents.idea_gen
"""

import json
import sys

import anthropic

from agents.errors import PipelineError


IDEA_PROMPT = """You are a creative writer specializing in short, 3D-style YouTube films in the spirit of Zack D. Films. Provide {count} unique video concepts, each no more than one sentence.

Put each concept on its own line. No numbering commentary, no preamble."""


def generate_ideas(config, count=10):
    """
    Ask the text model for short-film concepts.

    Returns a list of non-empty lines from the reply, in order.
    """
    client = anthropic.Anthropic(api_key=config.require("anthropic_key"))

    message = client.messages.create(
        model=config.text_model,
        max_tokens=500,
        messages=[{"role": "user", "content": IDEA_PROMPT.format(count=count)}],
    )

    text = message.content[0].text if message.content else ""
    ideas = [line.strip() for line in text.splitlines() if line.strip()]
    print(f"  ✓ {len(ideas)} ideas generated", file=sys.stderr)
    return ideas


def main():
    from agents.config import load_config

    try:
        config = load_config()
        ideas = generate_ideas(config)
    except PipelineError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(ideas, indent=2))


if __name__ == "__main__":
    main()
