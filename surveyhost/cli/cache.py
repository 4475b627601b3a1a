# =============================================================================
# surveyhost/cli/cache.py — Cache maintenance
# =============================================================================
#
#   key   — print the cache key a function name + JSON options would get
#   clear — empty the configured backing store (Redis FLUSHDB on the cache
#           database; a no-op for CACHE_TYPE=local since a fresh process
#           starts with an empty store anyway)
#
# Usage examples:
#   python -m surveyhost.cli.cache key count_responses '{"survey": "js2023"}'
#   CACHE_TYPE=redis REDIS_URL=redis://localhost:6379/3 \
#       python -m surveyhost.cli.cache clear --yes
# =============================================================================

"""Standalone CLI for inspecting and clearing the cache."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from surveyhost.config.settings import Settings
from surveyhost.main import build_cache_service, build_request_context, setup_logging
from surveyhost.services.cache_service import compute_key
from surveyhost.utils.errors import ConfigurationError


def _cmd_key(args: argparse.Namespace, app_settings: Settings) -> int:
    options = json.loads(args.options) if args.options else {}
    if not isinstance(options, dict):
        print("Error: options must be a JSON object", file=sys.stderr)
        return 1

    # compute_key only looks at the name, so a stand-in function is enough.
    def _named() -> None:
        pass

    _named.__name__ = args.name
    print(compute_key(_named, options))
    return 0


async def _clear(app_settings: Settings) -> None:
    service = build_cache_service(app_settings)
    context = build_request_context(app_settings)
    try:
        await service.clear_cache(context)
    finally:
        if context.redis_client is not None:
            await context.redis_client.aclose()


def _cmd_clear(args: argparse.Namespace, app_settings: Settings) -> int:
    if not args.yes:
        answer = input(f"Clear the {app_settings.cache_type.value} cache? [y/N] ")
        if answer.strip().lower() not in ("y", "yes"):
            print("Aborted.")
            return 1
    asyncio.run(_clear(app_settings))
    print(f"Cleared {app_settings.cache_type.value} cache.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m surveyhost.cli.cache",
        description="Inspect cache keys and clear the cache backing store.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    key_cmd = subparsers.add_parser("key", help="Print the cache key for a function call")
    key_cmd.add_argument("name", help="Function name")
    key_cmd.add_argument("options", nargs="?", default="", help="Options as a JSON object")
    key_cmd.set_defaults(handler=_cmd_key)

    clear_cmd = subparsers.add_parser("clear", help="Delete every cache entry")
    clear_cmd.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")
    clear_cmd.set_defaults(handler=_cmd_clear)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point; returns the process exit code."""
    args = build_parser().parse_args(argv)
    app_settings = Settings()
    setup_logging(app_settings)
    try:
        return args.handler(args, app_settings)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
