#!/usr/bin/env python3
"""
strf0x's blog - Command line entry point

This module serves as the entry point for the content tooling: it checks
the site configuration and articles before a deploy, prints the exported
configuration for the site generator, and lists articles the way the blog
index pages them.
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from blogsite.checks import Severity, check_content, check_site
from blogsite.config import LogLevel, Settings, load_settings
from blogsite.consts import SITE, export_config
from blogsite.content.loader import ContentError, load_articles
from blogsite.listing import group_by_author, group_by_tag, paginate_articles

# Set up structured logger
logger = structlog.get_logger()


def setup_logging(settings: Settings) -> None:
    """Set up structured logging based on configuration."""
    log_level = settings.logging.log_level.value

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if settings.logging.structured_logging
            else structlog.dev.ConsoleRenderer()
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Log records go to stderr; stdout carries command output.
    numeric_level = getattr(logging, log_level, logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=numeric_level)
    logging.getLogger().setLevel(numeric_level)

    logger.debug("Logging initialized", level=log_level)


def cmd_check(settings: Settings, args: argparse.Namespace) -> int:
    """Check configuration and content; non-zero when any error is found."""
    content_dir = Path(args.content_dir) if args.content_dir else settings.content_dir
    authors_dir = Path(args.authors_dir) if args.authors_dir else settings.authors_dir

    issues = check_site()
    report = check_content(content_dir, authors_dir, settings.public_dir)
    issues.extend(report.issues)

    for issue in issues:
        log = logger.error if issue.severity == Severity.ERROR else logger.warning
        log(
            issue.message,
            severity=issue.severity.value,
            path=issue.path,
            field=issue.field,
        )

    errors = [i for i in issues if i.severity == Severity.ERROR]
    logger.info(
        "Check complete",
        documents=report.documents_checked,
        articles=len(report.articles),
        errors=len(errors),
        warnings=len(issues) - len(errors),
    )
    return 1 if errors else 0


def cmd_config(settings: Settings, args: argparse.Namespace) -> int:
    """Print the exported site configuration as JSON."""
    print(json.dumps(export_config(), indent=2))
    return 0


def cmd_list(settings: Settings, args: argparse.Namespace) -> int:
    """List articles in index order, optionally filtered and paged."""
    content_dir = Path(args.content_dir) if args.content_dir else settings.content_dir
    articles = load_articles(content_dir)

    if args.tag:
        articles = group_by_tag(articles).get(args.tag, [])
    if args.author:
        articles = group_by_author(articles).get(args.author, [])

    if args.page is not None:
        pages = paginate_articles(articles, SITE)
        if not 1 <= args.page <= len(pages):
            logger.error("Page out of range", page=args.page, total_pages=len(pages))
            return 1
        articles = pages[args.page - 1].items

    for article in articles:
        print(f"{article.date.isoformat()}  {article.slug}  {article.title}")
    return 0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="blogsite",
        description="strf0x's blog - site configuration and content tooling",
    )

    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        default=None,
        help="Set the log level"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Validate configuration and articles")
    check.add_argument("--content-dir", default=None, help="Directory holding the articles")
    check.add_argument("--authors-dir", default=None, help="Directory holding author profiles")
    check.set_defaults(handler=cmd_check)

    config = subparsers.add_parser("config", help="Print the site configuration as JSON")
    config.set_defaults(handler=cmd_config)

    listing = subparsers.add_parser("list", help="List articles newest first")
    listing.add_argument("--content-dir", default=None, help="Directory holding the articles")
    listing.add_argument("--tag", default=None, help="Only articles with this tag")
    listing.add_argument("--author", default=None, help="Only articles by this author id")
    listing.add_argument("--page", type=int, default=None, help="Show a single index page")
    listing.set_defaults(handler=cmd_list)

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = parse_args(argv)
    try:
        # Load settings
        settings = load_settings()

        # Override settings with command line arguments
        if args.log_level:
            settings.logging.log_level = LogLevel(args.log_level)

        # Set up logging
        setup_logging(settings)

        return args.handler(settings, args)

    except ContentError as e:
        logger.error("Content error", error=str(e))
        return 1

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130

    except Exception as e:
        logger.exception("Unhandled exception", error=str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
