"""
Tolerant JSON extraction for free-text model replies.

Models often wrap JSON in code fences or add a sentence before it.
parse_model_json tries a strict parse first, then retries on the
bracket-delimited spans of the reply, largest first.
"""

import json
import re

from agents.errors import ValidationError


FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)


def parse_model_json(text):
    """
    Parse JSON out of a model reply.

    Stage 1: json.loads on the stripped reply.
    Stage 2: json.loads on each {...} / [...] span, longest first.

    Raises ValidationError with the raw text if every attempt fails.
    """
    raw = text or ""
    try:
        return json.loads(raw.strip())
    except ValueError:
        pass

    cleaned = FENCE_RE.sub("", raw)
    for candidate in _bracket_spans(cleaned):
        try:
            return json.loads(candidate)
        except ValueError:
            continue

    raise ValidationError(f"could not parse JSON from model output: {raw!r}")


def _bracket_spans(text):
    """Substrings running from the first { or [ to the last matching closer, longest first."""
    spans = []
    for opener, closer in (("{", "}"), ("[", "]")):
        start = text.find(opener)
        end = text.rfind(closer)
        if start == -1 or end <= start:
            continue
        spans.append(text[start:end + 1])
    return sorted(spans, key=len, reverse=True)
