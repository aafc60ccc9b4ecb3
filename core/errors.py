# =============================================================================
# core/errors.py  -  Error Taxonomy
# =============================================================================
#
# Every failure a tool call can hit is one of four kinds:
#
#   ValidationError  → bad or missing caller input
#   FetchError       → transport failure or non-200 status
#   DecodeError      → upstream body is not usable JSON (a FetchError)
#   FormatError      → JSON parsed but its shape is not what we expected
#
# The tools/ layer catches RedditToolError at the boundary and converts it into
# an MCP error result.  core/ never swallows these; it only raises them.
# =============================================================================


class RedditToolError(Exception):
    """Base class for all errors raised by core/."""


class ValidationError(RedditToolError):
    """Caller input failed validation.

    The message is shown to the caller verbatim, so it names the parameter.
    """

    def __init__(self, message: str, parameter: str | None = None):
        super().__init__(message)
        self.parameter = parameter


class FetchError(RedditToolError):
    """The HTTP request failed or returned a non-200 status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(FetchError):
    """The response body could not be decoded as a JSON array or object."""


class FormatError(RedditToolError):
    """The response did not have the shape a formatter expects.

    `path` is the dotted location that was missing or mistyped, e.g.
    "data.children[0].data.title".
    """

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path
