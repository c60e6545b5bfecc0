"""Error types surfaced to API callers."""


class ReplateError(Exception):
    """Base class for errors rendered as JSON responses."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def details(self) -> dict[str, object]:
        """Extra fields merged into the error response body."""
        return {}


class ValidationError(ReplateError):
    """A required field is missing or malformed."""

    status_code = 400


class NotFoundError(ReplateError):
    """A referenced record does not exist."""

    status_code = 404


class RateLimitedError(ReplateError):
    """An action was attempted before its cooldown elapsed."""

    status_code = 429

    def __init__(self, message: str, retry_after_seconds: int, **extra: object) -> None:
        super().__init__(message)
        self.retry_after_seconds = retry_after_seconds
        self.extra = extra

    def details(self) -> dict[str, object]:
        return {"remainingTime": self.retry_after_seconds, **self.extra}


class UpstreamError(ReplateError):
    """An external service call failed or timed out."""

    status_code = 502
