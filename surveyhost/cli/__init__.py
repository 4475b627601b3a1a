"""Command-line tools for surveyhost.

- ``python -m surveyhost.cli.surveys`` — parse survey definition files and
  list the field names they generate.
- ``python -m surveyhost.cli.cache`` — print cache keys and clear the cache.
"""
