"""Load raw survey definitions from disk.

Survey outlines are authored as YAML (``.yml`` / ``.yaml``); JSON exports of
the same documents are accepted too.  The result is a validated, still
unparsed :class:`SurveyDocument`; pass it to ``parse_survey`` next.
"""

from __future__ import annotations

import json
from pathlib import Path

import structlog
import yaml

from surveyhost.models.survey import SurveyDocument
from surveyhost.utils.errors import SurveyDefinitionError
from surveyhost.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)

_YAML_SUFFIXES = {".yml", ".yaml"}


def load_survey_file(path: str | Path) -> SurveyDocument:
    """Read a survey definition file.

    Args:
        path: Path to a YAML or JSON survey definition.

    Returns:
        The validated survey document.

    Raises:
        SurveyDefinitionError: If the file does not exist or its top level
            is not a mapping.
    """
    survey_path = Path(path)
    if not survey_path.is_file():
        raise SurveyDefinitionError(f"Survey file not found: {survey_path}")

    with open(survey_path, encoding="utf-8") as f:
        if survey_path.suffix.lower() in _YAML_SUFFIXES:
            provider_name = "yaml"
            raw = yaml.safe_load(f)
        else:
            provider_name = "json"
            raw = json.load(f)

    if not isinstance(raw, dict):
        raise SurveyDefinitionError(
            f"Expected a mapping at the top of {survey_path}, got {type(raw).__name__}",
            provider_name=provider_name,
        )

    _logger.debug("survey_file_loaded", path=str(survey_path), format=provider_name)
    return SurveyDocument.model_validate(raw)
