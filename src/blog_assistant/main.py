"""Console entrypoint for the blog assistant."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Any

import structlog
from pydantic import ValidationError

from blog_assistant.blog_client import BlogApiClient
from blog_assistant.config import Settings
from blog_assistant.console import BlogConsole
from blog_assistant.logging_config import configure_logging

log = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blog-assistant",
        description="Create and browse blog posts on a remote blog API.",
    )
    parser.add_argument(
        "--base-url", default=None, help="Blog API URL (or BLOG_API_BASE_URL env)"
    )
    parser.add_argument("--bot-name", default=None, help="Assistant name (or BOT_NAME env)")
    parser.add_argument("--log-level", default=None, help="Log level (or LOG_LEVEL env)")
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Build Settings from the environment; CLI flags take precedence."""
    overrides: dict[str, Any] = {
        key: value
        for key, value in (
            ("blog_api_base_url", args.base_url),
            ("bot_name", args.bot_name),
            ("log_level", args.log_level),
        )
        if value is not None
    }
    return Settings(**overrides)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings(args)
    except ValidationError as exc:
        print(f"Error: invalid configuration\n{exc}", file=sys.stderr)
        return 1

    configure_logging(settings.log_level)
    log.info("blog_assistant_started", base_url=settings.blog_api_base_url)

    with BlogApiClient(settings.blog_api_base_url) as client:
        BlogConsole(client, settings.bot_name).run()

    log.info("blog_assistant_stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
