"""Console presentation of video info and transcripts."""

from typing import Optional

from caption_digest.shared import TRANSCRIPT_NOT_AVAILABLE

SECTION_SEPARATOR = "=" * 42


def format_upload_date(date_str: Optional[str]) -> str:
    """Format a yt-dlp YYYYMMDD upload date as YYYY-MM-DD."""
    if not date_str or len(date_str) < 8:
        return "Unknown"
    return f"{date_str[:4]}-{date_str[4:6]}-{date_str[6:8]}"


def format_duration(seconds) -> str:
    """Format seconds as H:MM:SS or M:SS."""
    if seconds is None:
        return "Unknown"
    h = int(seconds // 3600)
    m = int((seconds % 3600) // 60)
    s = int(seconds % 60)
    if h > 0:
        return f"{h}:{m:02d}:{s:02d}"
    return f"{m}:{s:02d}"


def format_video_info(info: dict) -> list[str]:
    return [
        f"Title: {info.get('title') or 'Unknown'}",
        f"Channel: {info.get('channel') or info.get('uploader') or 'Unknown'}",
        f"Duration: {format_duration(info.get('duration'))}",
        f"Published: {format_upload_date(info.get('upload_date'))}",
    ]


def display_transcript(transcript: Optional[str]) -> None:
    print()
    print("Transcript:")
    print(transcript or TRANSCRIPT_NOT_AVAILABLE)
    print(SECTION_SEPARATOR)


def display_video_info(info: dict, transcript: Optional[str]) -> None:
    """Print the video info block followed by the transcript."""
    print()
    print(SECTION_SEPARATOR)
    for line in format_video_info(info):
        print(line)
    print(SECTION_SEPARATOR)
    display_transcript(transcript)
