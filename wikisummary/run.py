import argparse
import asyncio
import re
import sys

from .config import Settings
from .logging_setup import setup_logging
from .lookup import SummaryLookup
from .models import LookupOutcome
from .surfaces import SurfaceRegistry
from .util import word_at_point
from .wikipedia_service import LANGUAGE_PATTERN, WikipediaService


def prompt_title(default=None) -> str:
    label = f"Wikipedia title (default {default}): " if default else "Wikipedia title: "
    answer = input(label).strip()
    return answer or (default or "")


async def fetch_summary(settings: Settings, title: str, language=None) -> LookupOutcome:
    wiki = WikipediaService(user_agent=settings.user_agent, timeout=settings.timeout)
    summaries = SummaryLookup(settings, wiki, SurfaceRegistry())
    return await summaries.lookup(title, language=language)


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Show the Wikipedia summary of an article")
    ap.add_argument("title", nargs="*", help="Article title (prompted for when omitted)")
    ap.add_argument("--lang", help="Wikipedia language code (default from WIKI_LANGUAGE)")
    ap.add_argument("--context", help="Text whose word at --cursor pre-fills the prompt")
    ap.add_argument("--cursor", type=int, default=0, help="Cursor offset into --context")
    args = ap.parse_args(argv)

    if args.lang is not None and not re.fullmatch(LANGUAGE_PATTERN, args.lang):
        ap.error(f"invalid language code: {args.lang!r}")

    settings = Settings.from_env()
    setup_logging(settings.log_level)

    # the prompt runs before the event loop starts
    title = " ".join(args.title).strip()
    if not title:
        default = word_at_point(args.context, args.cursor) if args.context else None
        title = prompt_title(default)
    if not title:
        ap.error("a title is required")

    outcome = asyncio.run(fetch_summary(settings, title, args.lang))

    if not outcome.ok:
        print(outcome.message, file=sys.stderr)
        return 1
    print(outcome.text)
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
