"""Survey outline parser.

Takes a raw survey definition and gives every question its slug, value
type, "other" flag and field name.  The field name is the key under which a
question's answer is stored, so it must be unique within a survey:

    <survey slug>__<section slug>__<question id>[__<suffix>]

Uniqueness holds as long as each ``(section slug, id, suffix)`` triple is
unique and no identifier itself contains ``__``.  Neither is checked here.

Templates and other rendering metadata are NOT attached, so the parser can
run outside the web app (CLI, offline scripts).  Callers that render forms
apply their own enrichment pass on the result.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from surveyhost.models.survey import (
    ParsedQuestion,
    ParsedSection,
    ParsedSurvey,
    QuestionValueType,
    SurveyDocument,
    SurveyField,
    SurveySection,
)
from surveyhost.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)

FIELD_NAME_SEPARATOR = "__"

# The only type hint that changes the value type.  Matched exactly.
_NUMBER_FIELD_TYPE = "Number"


def resolve_value_type(field_type: str | None) -> QuestionValueType:
    """Map a question's ``fieldType`` hint to its value type.

    ``"Number"`` gives NUMBER.  Anything else gives STRING; a non-empty hint
    other than ``"Number"`` (``"number"``, ``"Date"``...) is unsupported and
    is logged as such.
    """
    if field_type == _NUMBER_FIELD_TYPE:
        return QuestionValueType.NUMBER
    if field_type:
        _logger.warning("unsupported_field_type", field_type=field_type)
    return QuestionValueType.STRING


def get_question_object(
    question: SurveyField,
    section: SurveySection,
    number: int | None = None,
) -> ParsedQuestion:
    """Build the normalized question object for one outline entry.

    Parameters
    ----------
    question:
        The raw question spec.  It is not modified.
    section:
        The section the question belongs to.
    number:
        Optional 1-based position of the question within the survey.

    Returns
    -------
    ParsedQuestion
        All raw attributes plus ``slug``, ``type`` and ``show_other``.
        ``field_name`` is left unset; see ``get_question_field_name``.
    """
    data: dict[str, Any] = question.model_dump()
    data.update(
        slug=question.id,
        type=resolve_value_type(question.field_type),
        show_other=question.allowother,
    )
    _logger.debug(
        "question_normalized",
        question_id=question.id,
        section=section.slug or section.id,
        number=number,
    )
    return ParsedQuestion.model_validate(data)


def get_question_field_name(
    survey: SurveyDocument,
    section: SurveySection,
    question: SurveyField,
) -> str:
    """Return the unique field name of *question*.

    The question's own ``section_slug`` overrides the section's ``slug``,
    which in turn wins over the section's ``id``.  Missing identifiers are
    rendered as empty segments.
    """
    section_slug = question.section_slug or section.slug or section.id
    parts = [survey.slug, section_slug, question.id]
    if question.suffix:
        parts.append(question.suffix)
    return FIELD_NAME_SEPARATOR.join("" if part is None else part for part in parts)


def parse_survey(survey: SurveyDocument | Mapping[str, Any]) -> ParsedSurvey:
    """Normalize every question of *survey*.

    Accepts a :class:`SurveyDocument` or a raw mapping (as read from YAML),
    which is validated first.  Section and question order are preserved;
    sections without questions are copied as-is.  The input is not mutated.
    """
    if not isinstance(survey, SurveyDocument):
        survey = SurveyDocument.model_validate(survey)

    number = 0
    outline: list[ParsedSection] = []
    for section in survey.outline:
        section_data: dict[str, Any] = section.model_dump(exclude={"questions"})
        if section.questions is not None:
            parsed_questions: list[ParsedQuestion] = []
            for question in section.questions:
                number += 1
                parsed = get_question_object(question, section, number)
                field_name = get_question_field_name(survey, section, parsed)
                parsed_questions.append(parsed.model_copy(update={"field_name": field_name}))
            section_data["questions"] = parsed_questions
        outline.append(ParsedSection.model_validate(section_data))

    survey_data: dict[str, Any] = survey.model_dump(exclude={"outline"})
    survey_data["outline"] = outline
    parsed_survey = ParsedSurvey.model_validate(survey_data)

    _logger.info(
        "survey_parsed",
        survey=survey.slug,
        sections=len(outline),
        questions=number,
    )
    return parsed_survey


def list_field_names(parsed: ParsedSurvey) -> list[str]:
    """Return every field name of a parsed survey, in outline order."""
    return [
        question.field_name
        for section in parsed.outline
        for question in section.questions or []
        if question.field_name is not None
    ]
