"""Allow ``python -m surveyhost.cli`` execution (runs the survey CLI)."""

import sys

from surveyhost.cli.surveys import main

sys.exit(main())
