"""Data models for surveyhost."""

from surveyhost.models.context import RequestContext
from surveyhost.models.survey import (
    ParsedQuestion,
    ParsedSection,
    ParsedSurvey,
    QuestionValueType,
    SurveyDocument,
    SurveyField,
    SurveySection,
)

__all__ = [
    "ParsedQuestion",
    "ParsedSection",
    "ParsedSurvey",
    "QuestionValueType",
    "RequestContext",
    "SurveyDocument",
    "SurveyField",
    "SurveySection",
]
