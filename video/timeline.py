"""
Timeline Builder — Turns the ordered image list into an ffmpeg filter graph.

Every image gets the same fixed 3-second slot:
  [0s fade in 1s] [hold] [2s fade out 1s]
and the faded streams are concatenated in input order into [outv].

The slot does not depend on image count or narration length, so the
video runs N * 3 seconds whatever the audio duration.
"""

from dataclasses import dataclass

from agents.errors import ValidationError


SLOT_SECONDS = 3
FADE_SECONDS = 1
FADE_IN_START = 0
FADE_OUT_START = SLOT_SECONDS - FADE_SECONDS

OUTPUT_LABEL = "outv"


@dataclass(frozen=True)
class FadeDirective:
    index: int
    source: str
    fade_in: tuple = (FADE_IN_START, FADE_IN_START + FADE_SECONDS)
    fade_out: tuple = (FADE_OUT_START, FADE_OUT_START + FADE_SECONDS)

    @property
    def label(self):
        return f"v{self.index}"

    def render(self):
        in_start, in_end = self.fade_in
        out_start, out_end = self.fade_out
        return (
            f"[{self.index}:v]"
            f"fade=t=in:st={in_start}:d={in_end - in_start},"
            f"fade=t=out:st={out_start}:d={out_end - out_start}"
            f"[{self.label}]"
        )


@dataclass(frozen=True)
class ConcatDirective:
    labels: tuple
    output_label: str = OUTPUT_LABEL

    def render(self):
        inputs = "".join(f"[{label}]" for label in self.labels)
        return f"{inputs}concat=n={len(self.labels)}:v=1:a=0[{self.output_label}]"


@dataclass(frozen=True)
class FilterGraph:
    fades: tuple
    concat: ConcatDirective

    @property
    def directives(self):
        return self.fades + (self.concat,)

    @property
    def output_label(self):
        return self.concat.output_label

    def render(self):
        """The -filter_complex argument."""
        return ";".join(d.render() for d in self.directives)


def build_filter_graph(images):
    """
    Build the fade/concat graph for an ordered image list.

    Args:
        images: image paths in display order; position i is ffmpeg input i

    Returns a FilterGraph with len(images) fades and one concat.
    """
    images = list(images)
    if not images:
        raise ValidationError("cannot build a timeline from an empty image list")

    fades = tuple(FadeDirective(index=i, source=img) for i, img in enumerate(images))
    concat = ConcatDirective(labels=tuple(f.label for f in fades))
    return FilterGraph(fades=fades, concat=concat)


def total_duration(graph):
    """Length in seconds of the concatenated stream."""
    return len(graph.fades) * SLOT_SECONDS
