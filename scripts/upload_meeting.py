"""Upload one meeting recording to a running service and print the notes.

Usage: python scripts/upload_meeting.py path/to/meeting.mp3 [--demo] [--database-id ID]
"""

import argparse
import asyncio
import os
import sys

import httpx

# Add project root to path so we can import app
sys.path.append(os.getcwd())

from app.client import AudioFile, UploadSession, UploadStatus
from app.config.settings import settings


def _print_status(status: UploadStatus) -> None:
    print(f"[{status.progress:3d}%] {status.message}")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("audio_path", help="MP3, WAV or M4A recording")
    parser.add_argument("--demo", action="store_true", help="Request canned demo output")
    parser.add_argument("--database-id", default=None, help="Notion database to publish into")
    parser.add_argument("--base-url", default=settings.uploader.api_base_url)
    parser.add_argument(
        "--max-duration",
        type=float,
        default=settings.uploader.max_duration_seconds,
        help="Reject recordings longer than this many seconds (0 disables the check)",
    )
    return parser.parse_args(argv)


async def main(argv: list[str]) -> int:
    args = _parse_args(argv)

    if not os.path.exists(args.audio_path):
        print(f"File '{args.audio_path}' not found.")
        return 2

    audio = AudioFile.from_path(args.audio_path)
    print(f"Uploading {audio.name} ({len(audio.content)} bytes) to {args.base_url}")

    async with httpx.AsyncClient(
        base_url=args.base_url,
        timeout=settings.uploader.request_timeout_seconds,
    ) as client:
        session = UploadSession(
            client,
            demo_mode=args.demo,
            destination_id=args.database_id,
            max_duration_seconds=args.max_duration or None,
            on_status_change=_print_status,
        )
        status = await session.submit(audio)

    if status is UploadStatus.ERROR:
        print(f"\nError: {session.error}")
        return 1

    result = session.result
    print("\n--- Summary ---")
    print(result.analysis.summary)
    print("\n--- Action Items ---")
    for item in result.analysis.action_items:
        print(f"  - {item}")
    print(f"\n--- Sentiment: {result.analysis.sentiment.value} ---")
    print(result.analysis.sentiment_explanation)
    if result.notion_page_url:
        print(f"\nView in Notion: {result.notion_page_url}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main(sys.argv[1:])))
