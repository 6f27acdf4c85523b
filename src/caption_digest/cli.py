#!/usr/bin/env python3
"""
Caption Digest
==============
Prints a video's details and a deduplicated transcript built from its
auto-generated captions.

Pipeline:
1. Fetch video metadata (yt-dlp --dump-json)
2. Download auto-generated captions into a temporary directory (yt-dlp)
3. Parse the WebVTT cues and fold scrolling repeats into single lines
4. Print "[HH:MM:SS] text" lines, optionally saving them to a file

Usage:
    caption-digest <url> [options]
    caption-digest --vtt captions.en.vtt

Examples:
    # Video info plus transcript
    caption-digest "https://youtube.com/watch?v=..."

    # Spanish auto-captions, saved to a file
    caption-digest "https://youtube.com/watch?v=..." --sub-lang es -o transcript.txt

    # Clean a caption file you already have
    caption-digest --vtt captions.en.vtt
"""

import argparse
import sys
from pathlib import Path

from caption_digest import __version__
from caption_digest.captions import clean_vtt_file
from caption_digest.display import display_transcript, display_video_info
from caption_digest.download import fetch_video_info_and_transcript, save_metadata
from caption_digest.shared import (
    tprint as print,
    DigestConfig,
    check_dependencies,
)


def _write_transcript(path: Path, transcript: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(transcript + '\n')
    print(f"Transcript saved: {path}")


def run(config: DigestConfig) -> None:
    """Run one digest: local VTT file or URL fetch, then report."""
    if config.vtt_path:
        print(f"Reading captions: {config.vtt_path}")
        transcript = clean_vtt_file(config.vtt_path)
        display_transcript(transcript)
    else:
        info, transcript = fetch_video_info_and_transcript(config)
        if config.metadata_json:
            save_metadata(config.metadata_json, config.url, info)
        display_video_info(info, transcript)

    if config.output_file:
        if transcript:
            _write_transcript(config.output_file, transcript)
        else:
            print("No transcript to save")


def main():
    parser = argparse.ArgumentParser(
        prog="caption-digest",
        description="Show video info and a deduplicated transcript from auto-captions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "https://youtube.com/watch?v=..."
  %(prog)s "https://youtube.com/watch?v=..." --sub-lang es -o transcript.txt
  %(prog)s "https://youtube.com/watch?v=..." --metadata-json meta.json
  %(prog)s --vtt captions.en.vtt
        """
    )
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")

    # Input
    input_group = parser.add_argument_group("input")
    input_group.add_argument("url", nargs="?", help="URL of the video")
    input_group.add_argument("--vtt", type=Path,
                        help="Clean a local WebVTT file instead of downloading captions")
    input_group.add_argument("--sub-lang", default="en",
                        help="Caption language to download (default: en)")

    # Output
    output_group = parser.add_argument_group("output")
    output_group.add_argument("-o", "--output", type=Path,
                        help="Also write the transcript to this file")
    output_group.add_argument("--metadata-json", type=Path,
                        help="Save video metadata as JSON (URL mode only)")

    # Execution
    run_group = parser.add_argument_group("execution")
    run_group.add_argument("--timeout", type=float, default=300.0,
                        help="Seconds allowed per yt-dlp call (default: 300)")
    run_group.add_argument("-v", "--verbose", action="store_true",
                        help="Show commands as they run")

    args = parser.parse_args()

    if bool(args.url) == bool(args.vtt):
        parser.error("provide either a video URL or --vtt FILE")

    if args.vtt and not args.vtt.exists():
        print(f"Error: Caption file not found: {args.vtt}")
        sys.exit(1)

    if args.url:
        deps = check_dependencies()
        if not deps["yt-dlp"]:
            print("Missing dependencies:")
            print("  - yt-dlp (install with: pip install yt-dlp)")
            sys.exit(1)

    config = DigestConfig(
        url=args.url,
        vtt_path=args.vtt,
        sub_lang=args.sub_lang,
        output_file=args.output,
        metadata_json=args.metadata_json,
        timeout=args.timeout,
        verbose=args.verbose,
    )

    try:
        run(config)
    except Exception as e:
        print()
        print(f"Error: {e}")
        if config.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
