"""
Pipeline errors shared by the generation agents and the video assembler.
"""


class PipelineError(Exception):
    """Base class for failures a script reports and exits on."""


class ValidationError(PipelineError):
    """A descriptor, argument or model reply has the wrong shape."""


class ConfigError(PipelineError):
    """A required setting (usually an API key) is missing."""


class ExternalToolError(PipelineError):
    """An external binary (ffmpeg, ffprobe) reported failure."""

    def __init__(self, tool, diagnostics):
        self.tool = tool
        self.diagnostics = diagnostics
        super().__init__(f"{tool} failed: {diagnostics}")


class PerItemError(PipelineError):
    """One request in a batch failed. Caught by the batch, never fatal."""

    def __init__(self, index, item, reason):
        self.index = index
        self.item = item
        self.reason = reason
        super().__init__(f"item {index} failed: {reason}")
