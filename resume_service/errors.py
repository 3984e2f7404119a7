"""
Exceptions raised by the resume pipeline.

Routes map UserNotFound to 404 and everything else to 500.
"""


class ResumeServiceError(Exception):
    """Base class for pipeline failures."""


class UserNotFound(ResumeServiceError):
    """GitHub reported the user as absent (HTTP 404)."""

    def __init__(self, username: str):
        self.username = username
        super().__init__("User not found")


class UpstreamError(ResumeServiceError):
    """Any other failed GitHub call: non-2xx, rate limiting, transport errors."""


class RenderError(ResumeServiceError):
    """PDF rasterization failed."""
