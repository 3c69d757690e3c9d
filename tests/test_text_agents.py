"""Tests for the Claude-backed idea, prompt and script agents."""
import pytest

from agents.errors import ConfigError, ValidationError
from agents.idea_gen import generate_ideas
from agents.prompt_gen import create_prompts
from agents.writer import generate_script


def test_ideas_are_non_empty_lines(config, fake_anthropic):
    state = fake_anthropic("1. A robot learns to paint\n\n2. The moon files a complaint\n   \n")

    ideas = generate_ideas(config)

    assert ideas == ["1. A robot learns to paint", "2. The moon files a complaint"]
    assert state["api_key"] == "test-anthropic"
    call = state["messages"].calls[0]
    assert call["model"] == config.text_model
    assert "10 unique video concepts" in call["messages"][0]["content"]


def test_text_agents_need_anthropic_key(keyless_config):
    with pytest.raises(ConfigError, match="ANTHROPIC_API_KEY"):
        generate_ideas(keyless_config)


def test_prompts_parse_fenced_json(config, fake_anthropic):
    fake_anthropic('Here:\n```json\n{"images": ["a", "b"], "video": "slow dolly"}\n```')

    prompts = create_prompts("a tiny dragon", config)

    assert prompts == {"images": ["a", "b"], "video": "slow dolly"}


def test_prompt_request_includes_idea(config, fake_anthropic):
    state = fake_anthropic('{"images": [], "video": ""}')
    create_prompts("a lighthouse keeper's ghost", config)
    assert "a lighthouse keeper's ghost" in state["messages"].calls[0]["messages"][0]["content"]


@pytest.mark.parametrize("reply", [
    "I cannot do that.",
    '["just", "a", "list"]',
    '{"images": "not a list", "video": "v"}',
    '{"images": ["a"], "video": 5}',
])
def test_bad_prompt_replies_raise_validation_error(config, fake_anthropic, reply):
    fake_anthropic(reply)
    with pytest.raises(ValidationError):
        create_prompts("idea", config)


def test_script_strips_markdown_and_directions(config, fake_anthropic):
    fake_anthropic("# Title\n\n**The forest** breathes. [PAUSE]\n\n*Something* waits.")

    script = generate_script("a hidden realm", config)

    assert script == "Title\n\nThe forest breathes. \n\nSomething waits."
