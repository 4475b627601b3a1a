"""Utility modules for surveyhost.

- **errors** -- exception hierarchy rooted at SurveyHostError.
- **logging** -- structlog setup: coloured console output in development,
  structured JSON in production.
"""

from surveyhost.utils.errors import (
    ConfigurationError,
    SurveyDefinitionError,
    SurveyHostError,
)
from surveyhost.utils.logging import configure_logging, get_logger

__all__ = [
    "ConfigurationError",
    "SurveyDefinitionError",
    "SurveyHostError",
    "configure_logging",
    "get_logger",
]
