"""surveyhost — survey definition parsing and read-through caching for the survey app."""

__version__ = "0.1.0"
