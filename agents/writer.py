"""
Writer Agent — Turns a one-line film idea into a narration script via Claude.

The script is written for text-to-speech: plain spoken prose, no stage
directions, no markdown, 300-400 words (about 2-3 minutes of audio).
"""

import re
import sys

import anthropic


SYSTEM_MSG = """You are a screenwriter for short cinematic films. You write engaging, poetic narration scripts. You write in plain text only — no markdown, no headings, no stage directions."""

SCRIPT_PROMPT = """Write a short narration script (2-3 minutes of spoken audio, about 300-400 words) for a 3D-style cinematic short film about: "{idea}".

The script should:
- Be engaging and mysterious
- Sound natural when spoken
- Include vivid imagery descriptions
- Be suitable for text-to-speech narration
- Have natural pacing and pauses

Write ONLY the script text, no stage directions or extra formatting."""


def generate_script(idea, config):
    """
    Generate a narration script for a film idea.

    Args:
        idea: one-sentence film concept
        config: Config (needs anthropic_key)

    Returns the script text.
    """
    client = anthropic.Anthropic(api_key=config.require("anthropic_key"))

    message = client.messages.create(
        model=config.text_model,
        max_tokens=700,
        system=SYSTEM_MSG,
        messages=[{"role": "user", "content": SCRIPT_PROMPT.format(idea=idea)}],
    )

    script_text = _strip_formatting(message.content[0].text)
    print(f"  ✓ Generated script: {script_text[:100]}...", file=sys.stderr)
    return script_text


def _strip_formatting(script_text):
    """Remove markdown and bracketed stage directions, leaving spoken text."""
    cleaned = re.sub(r'\[[^\]]*\]', '', script_text)
    cleaned = re.sub(r'\*\*([^*]+)\*\*', r'\1', cleaned)
    cleaned = re.sub(r'\*([^*]+)\*', r'\1', cleaned)
    cleaned = re.sub(r'^#+\s*', '', cleaned, flags=re.MULTILINE)
    cleaned = re.sub(r'\n\s*\n', '\n\n', cleaned)
    return cleaned.strip()
