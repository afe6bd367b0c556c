"""Custom exceptions for video generation module."""


class VideoGenerationError(Exception):
    """Base exception for video generation errors."""

    def __init__(self, message: str, provider: str | None = None):
        self.message = message
        self.provider = provider
        super().__init__(message)


class InvalidPromptError(VideoGenerationError):
    """Raised when a request arrives without a usable prompt."""

    def __init__(self, message: str = "Prompt is required"):
        super().__init__(message)


class ProviderNotConfiguredError(VideoGenerationError):
    """Raised when a provider is built without credentials."""

    def __init__(self, provider: str, env_var: str | None = None):
        message = f"{provider} is not configured"
        if env_var:
            message += f" ({env_var} environment variable not set)"
        super().__init__(message, provider)


class ProviderRequestError(VideoGenerationError):
    """Raised when a provider rejects a request or returns an unusable response."""

    def __init__(self, provider: str, status_code: int | None = None, details: str | None = None):
        message = "request failed"
        if status_code:
            message += f" with HTTP {status_code}"
        if details:
            message += f": {details}"
        self.status_code = status_code
        self.details = details
        super().__init__(message, provider)


class ProviderJobFailedError(VideoGenerationError):
    """Raised when a provider reports a terminal failure for a job."""

    def __init__(self, provider: str, job_id: str, reason: str | None = None):
        self.job_id = job_id
        self.reason = reason or "unknown error"
        super().__init__(f"generation failed: {self.reason} (job {job_id})", provider)


class VideoGenerationTimeoutError(VideoGenerationError):
    """Raised when a job never reaches a terminal state within its poll budget."""

    def __init__(self, provider: str, job_id: str | None, attempts: int | None = None):
        self.job_id = job_id
        self.attempts = attempts
        message = "timed out"
        if attempts is not None:
            message += f" after {attempts} status checks"
        if job_id:
            message += f" (job {job_id})"
        super().__init__(message, provider)


class ScriptGenerationError(VideoGenerationError):
    """Raised when the script writer cannot produce a script."""

    def __init__(self, details: str):
        super().__init__(f"Script generation failed: {details}", "OpenAI")
