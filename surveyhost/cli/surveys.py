# =============================================================================
# surveyhost/cli/surveys.py — Survey definition tools
# =============================================================================
#
# Runs the survey parser outside the web app, e.g. to inspect the field
# names a new outline will produce before it is published.
#
#   parse  — print the parsed survey as JSON (camelCase keys)
#   fields — print one generated field name per line
#
# Usage examples:
#   python -m surveyhost.cli.surveys parse surveys/state_of_js_2023.yml
#   python -m surveyhost.cli.surveys fields surveys/state_of_js_2023.yml
# =============================================================================

"""Standalone CLI for parsing survey definition files."""

from __future__ import annotations

import argparse
import json
import sys

from pydantic import ValidationError

from surveyhost.config.settings import Settings
from surveyhost.main import setup_logging
from surveyhost.services.survey_loader import load_survey_file
from surveyhost.services.survey_parser import list_field_names, parse_survey
from surveyhost.utils.errors import SurveyDefinitionError


def _cmd_parse(args: argparse.Namespace) -> int:
    parsed = parse_survey(load_survey_file(args.file))
    print(json.dumps(parsed.to_document(), indent=args.indent, ensure_ascii=False))
    return 0


def _cmd_fields(args: argparse.Namespace) -> int:
    parsed = parse_survey(load_survey_file(args.file))
    for field_name in list_field_names(parsed):
        print(field_name)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m surveyhost.cli.surveys",
        description="Parse survey definitions and inspect generated field names.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Print the parsed survey as JSON")
    parse_cmd.add_argument("file", help="Path to a YAML or JSON survey definition")
    parse_cmd.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    parse_cmd.set_defaults(handler=_cmd_parse)

    fields_cmd = subparsers.add_parser("fields", help="Print generated field names")
    fields_cmd.add_argument("file", help="Path to a YAML or JSON survey definition")
    fields_cmd.set_defaults(handler=_cmd_fields)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point; returns the process exit code."""
    args = build_parser().parse_args(argv)
    setup_logging(Settings())

    try:
        return args.handler(args)
    except (SurveyDefinitionError, ValidationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
