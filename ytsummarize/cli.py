"""
Command-line entry point: summarize one video using keys from the environment.

Usage:
  yt-summarize dQw4w9WgXcQ
  yt-summarize https://x.com/user/status/1234567890 --output-dir summaries
  yt-summarize dQw4w9WgXcQ --provider groq
"""
import argparse
import asyncio
import sys
from typing import List, Optional

import httpx
from loguru import logger
from pydantic import ValidationError

from ytsummarize.core.config import settings
from ytsummarize.core.exceptions import AppException, translate_error_message
from ytsummarize.core.logging import setup_logging
from ytsummarize.models import LLMProviderType, SummarizeRequest
from ytsummarize.services.pipeline import SummaryPipeline
from ytsummarize.services.storage import ArtifactStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yt-summarize",
        description="Summarize a YouTube video or an X/Twitter video post.",
    )
    parser.add_argument("video", help="YouTube video ID/URL or X/Twitter post URL")
    parser.add_argument(
        "--provider",
        choices=[p.value for p in LLMProviderType],
        help="AI provider (default: gemini if its key is set, else groq)",
    )
    parser.add_argument(
        "--output-dir",
        default=settings.OUTPUT_DIR,
        help=f"Directory for transcript/summary files (default: {settings.OUTPUT_DIR})",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


async def summarize(video: str, provider: Optional[str], output_dir: str) -> int:
    try:
        request = SummarizeRequest(
            video=video,
            provider=LLMProviderType(provider) if provider else None,
        )
    except ValidationError as e:
        logger.error(f"Invalid input: {e.errors()[0]['msg']}")
        return 1

    async with httpx.AsyncClient(follow_redirects=True) as client:
        pipeline = SummaryPipeline.from_settings(
            settings=settings,
            http_client=client,
            artifact_store=ArtifactStore(output_dir),
        )
        try:
            report = await pipeline.run(request)
        except AppException as e:
            logger.error(translate_error_message(e))
            return 1

    print(f"\nVideo: {report.metadata.title}")
    print("\n--- SUMMARY ---")
    print(report.summary.summary_html)
    print("--- END SUMMARY ---\n")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level="DEBUG" if args.verbose else "INFO", log_file="")
    return asyncio.run(summarize(args.video, args.provider, args.output_dir))


if __name__ == "__main__":
    sys.exit(main())
