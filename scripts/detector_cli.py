#!/usr/bin/env python3
"""
Detector CLI

Analyze text and inspect stored analyses without the HTTP layer.

All parameters read from config.json under "llm", "detector", "history"
and "database" sections; API keys may come from ANTHROPIC_API_KEY /
OPENROUTER_API_KEY.

Usage:
    python scripts/detector_cli.py analyze --platform twitter --author alice "text..."
    echo "text..." | python scripts/detector_cli.py analyze --platform linkedin -
    python scripts/detector_cli.py history --limit 20 --offset 0 [--author alice]
    python scripts/detector_cli.py authors
    python scripts/detector_cli.py health
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from common.config import config
from common.errors import DetectorError, ValidationError
from common.logging.logger import setup_logger
from common.models import AnalyzeRequest, Platform


def _print(payload) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def cmd_analyze(service, args) -> int:
    content = sys.stdin.read() if args.content == "-" else args.content
    request = AnalyzeRequest(
        content=content,
        platform=args.platform,
        post_id=args.post_id,
        author=args.author,
    )
    record, cached = asyncio.run(service.analyze_record(request))
    payload = record.result.to_dict()
    if args.verbose:
        payload['cached'] = cached
        payload['content_hash'] = record.content_hash
    _print(payload)
    return 0


def cmd_history(service, args) -> int:
    _print(service.history(limit=args.limit, offset=args.offset, author=args.author).to_dict())
    return 0


def cmd_authors(service, args) -> int:
    _print({'authors': service.authors()})
    return 0


def cmd_health(service, args) -> int:
    _print(service.health())
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="AI content detector - score posts 0-10 and browse history"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_analyze = sub.add_parser("analyze", help="Analyze one post")
    p_analyze.add_argument("content", help="Post text, or '-' to read stdin")
    p_analyze.add_argument(
        "--platform",
        choices=[p.value for p in Platform],
        default=Platform.TWITTER.value,
        help="Source platform",
    )
    p_analyze.add_argument("--post-id", default=None, help="Platform post id")
    p_analyze.add_argument("--author", default=None, help="Post author")
    p_analyze.add_argument("-v", "--verbose", action="store_true",
                           help="Include cache status and content hash")
    p_analyze.set_defaults(func=cmd_analyze)

    p_history = sub.add_parser("history", help="List stored analyses, newest first")
    p_history.add_argument(
        "--limit",
        type=int,
        default=config.get("history.default_limit", 20),
        help="Page size (clamped to history.max_limit)",
    )
    p_history.add_argument("--offset", type=int, default=0, help="Items to skip")
    p_history.add_argument("--author", default=None, help="Only this author")
    p_history.set_defaults(func=cmd_history)

    p_authors = sub.add_parser("authors", help="List distinct authors")
    p_authors.set_defaults(func=cmd_authors)

    p_health = sub.add_parser("health", help="Report version and model provider")
    p_health.set_defaults(func=cmd_health)

    args = parser.parse_args()

    # Setup logging
    logger = setup_logger("detector_cli", log_dir=config.get("paths.logs_dir"), console_output=True)

    from detection.service import DetectorService

    try:
        service = DetectorService.from_config()
        return args.func(service, args)
    except ValidationError as e:
        logger.error(str(e))
        return 2
    except DetectorError as e:
        logger.error(f"Command failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
