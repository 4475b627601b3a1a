"""Survey definition models.

Two layers of Pydantic v2 models live here:

    Raw layer     SurveyDocument -> SurveySection -> SurveyField
                  (what the authoring pipeline produces, read from YAML/JSON)
    Parsed layer  ParsedSurvey   -> ParsedSection -> ParsedQuestion
                  (what surveyhost/services/survey_parser.py returns)

Raw outlines carry many presentation keys (templates, options, i18n ids)
that this package does not interpret, so every model keeps unknown keys
(``extra="allow"``) and hands them on untouched.  Wire names are camelCase
(``fieldType``, ``sectionSlug``, ``createdAt``); snake_case attribute names
are accepted too.  All models are frozen: the parser never mutates its
input, it builds new parsed objects.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class QuestionValueType(str, Enum):  # noqa: UP042 — StrEnum requires Python 3.11+
    """Value type of a question's answer.

    Closed set: only the ``"Number"`` field type hint selects NUMBER, every
    other hint falls back to STRING (see ``resolve_value_type``).
    """

    STRING = "string"
    NUMBER = "number"


_SURVEY_MODEL_CONFIG = ConfigDict(
    frozen=True,
    extra="allow",
    alias_generator=to_camel,
    populate_by_name=True,
    # YAML happily produces ``id: 12``; keep identifiers as strings.
    coerce_numbers_to_str=True,
)


# ---------------------------------------------------------------------------
# Raw layer
# ---------------------------------------------------------------------------


class SurveyField(BaseModel):
    """A single question spec as written in a survey outline."""

    model_config = _SURVEY_MODEL_CONFIG

    # Required by convention only; a missing id produces an empty segment
    # in the generated field name instead of an error.
    id: str | None = None
    # Free-form type hint, e.g. "Number".
    field_type: str | None = None
    # Lowercase on the wire, hence no camelCase alias.
    allowother: bool | None = None
    # Overrides the owning section's slug when building the field name.
    section_slug: str | None = None
    # Appended to the field name, e.g. "experience" / "other".
    suffix: str | None = None


class SurveySection(BaseModel):
    """An outline section; ``slug`` wins over ``id`` when both are set."""

    model_config = _SURVEY_MODEL_CONFIG

    slug: str | None = None
    id: str | None = None
    questions: list[SurveyField] | None = None


class SurveyDocument(BaseModel):
    """A persisted survey definition."""

    model_config = _SURVEY_MODEL_CONFIG

    slug: str | None = None
    created_at: datetime | None = None
    outline: list[SurveySection]


# ---------------------------------------------------------------------------
# Parsed layer
# ---------------------------------------------------------------------------


class ParsedQuestion(SurveyField):
    """A normalized question with its derived attributes."""

    slug: str | None = None
    type: QuestionValueType = QuestionValueType.STRING
    show_other: bool | None = None
    field_name: str | None = None


class ParsedSection(SurveySection):
    questions: list[ParsedQuestion] | None = None


class ParsedSurvey(SurveyDocument):
    outline: list[ParsedSection]

    def to_document(self) -> dict:
        """Return a JSON-compatible dict using the camelCase wire names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
