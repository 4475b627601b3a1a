"""Exception hierarchy for surveyhost.

All application exceptions inherit from :class:`SurveyHostError`, which
carries an optional ``provider_name`` so handlers can tell which backing
service (e.g. "redis", "yaml") was involved.

    SurveyHostError  (base)
    +-- ConfigurationError     (startup / missing or inconsistent settings)
    +-- SurveyDefinitionError  (survey file missing or not a mapping)

The survey parser and the cache wrapper raise none of these: malformed
outlines fail in pydantic validation, and errors raised by wrapped
computations or by the Redis client reach the caller unchanged.
"""


class SurveyHostError(Exception):
    """Base exception for all surveyhost errors.

    ``__str__`` prefixes the provider name in brackets, e.g.
    ``[redis] REDIS_URL is empty``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


class ConfigurationError(SurveyHostError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class SurveyDefinitionError(SurveyHostError):
    """Raised when a survey definition file cannot be read as a survey."""

    def __init__(
        self,
        message: str = "Invalid survey definition",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
