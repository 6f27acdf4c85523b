"""
Download module for caption-digest.

Fetches video metadata and auto-generated captions from video URLs using
yt-dlp. Captions are staged in a temporary directory that is always
removed afterwards.
"""

import json
import subprocess
import tempfile
from pathlib import Path
from typing import Optional

from caption_digest.captions import clean_vtt_transcript
from caption_digest.shared import (
    tprint as print,
    DigestConfig,
    SUBTITLE_TEMPLATE, CAPTIONS_SUFFIX,
    run_command, _save_json,
)


def fetch_video_info(url: str, config: DigestConfig) -> dict:
    """Fetch video metadata via yt-dlp without downloading."""
    result = run_command(
        ["yt-dlp", "--dump-json", "--no-warnings", "--skip-download", url],
        "fetching video info",
        config.verbose,
        timeout=config.timeout,
    )
    return json.loads(result.stdout)


def fetch_caption_markup(url: str, config: DigestConfig, work_dir: Path) -> Optional[str]:
    """Download auto-generated captions into work_dir and return their markup.

    Returns None when yt-dlp wrote no caption file (the video has no
    captions in the requested language). An existing but empty caption
    file comes back as a string.
    """
    run_command(
        ["yt-dlp", "--skip-download", "--write-auto-sub",
         "--sub-lang", config.sub_lang, "--sub-format", "vtt",
         "-o", str(work_dir / SUBTITLE_TEMPLATE), url],
        "downloading captions",
        config.verbose,
        timeout=config.timeout,
    )

    vtt_files = sorted(work_dir.glob(f"*{CAPTIONS_SUFFIX}"))
    if not vtt_files:
        return None
    if config.verbose:
        print(f"  Captions file: {vtt_files[0].name}")
    return vtt_files[0].read_text(encoding="utf-8", errors="replace")


def fetch_video_info_and_transcript(config: DigestConfig) -> tuple[dict, Optional[str]]:
    """Fetch metadata and a cleaned transcript for config.url.

    Metadata failures propagate. Caption failures are reported and yield a
    None transcript so the metadata can still be shown.
    """
    with tempfile.TemporaryDirectory(prefix="caption-digest-") as tmp:
        work_dir = Path(tmp)

        print("Fetching video info...")
        info = fetch_video_info(config.url, config)
        print(f"  Title: {info.get('title') or 'Unknown'}")

        transcript = None
        print(f"Downloading captions ({config.sub_lang})...")
        try:
            markup = fetch_caption_markup(config.url, config, work_dir)
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError) as e:
            print(f"  No captions available: {e}")
            markup = None

        if markup is None:
            print("  No captions found")
        else:
            transcript = clean_vtt_transcript(markup)
            if transcript is None:
                print("  Captions contained no usable text")
            else:
                print(f"  Transcript: {len(transcript.splitlines())} lines")

    return info, transcript


def save_metadata(path: Path, url: str, info: dict) -> None:
    """Save the interesting subset of yt-dlp metadata as JSON."""
    metadata = {
        "url": url,
        "video_id": info.get("id"),
        "title": info.get("title"),
        "channel": info.get("channel") or info.get("uploader"),
        "upload_date": info.get("upload_date"),
        "duration_seconds": info.get("duration"),
        "description": (info.get("description") or "")[:500],
    }
    _save_json(path, metadata)
    print(f"Metadata saved: {path}")
