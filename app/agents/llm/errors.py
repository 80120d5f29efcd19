## Failures surfaced by a generation call


class GenerationError(Exception):
    """Base class for every failure of a single generation request."""


class EndpointUnavailable(GenerationError):
    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedOutput(GenerationError):
    def __init__(self, message: str, *, raw: str | None = None):
        super().__init__(message)
        self.raw = raw


class NoToolCallsFound(GenerationError):
    """The model answered in plain text instead of calling the offered tool."""

    def __init__(self, message: str = "No tool calls found in the response", *, content: str | None = None):
        super().__init__(message)
        self.content = content
