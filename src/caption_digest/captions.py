"""
WebVTT caption parsing and transcript formatting.

Turns raw auto-caption markup into timed segments, hands them to
reconcile.py for deduplication, and renders the surviving segments as
"[HH:MM:SS] text" lines.
"""

import re
from pathlib import Path
from typing import Optional

from caption_digest.shared import TimedSegment
from caption_digest.reconcile import reduce_segments

# "00:00:01.000 --> 00:00:03.000 align:start position:0%"
TIMING_PATTERN = re.compile(r'^(\d{2}:\d{2}:\d{2}\.\d{3}) -->')
TAG_PATTERN = re.compile(r'<[^>]+>')
SEQUENCE_NUMBER_PATTERN = re.compile(r'^\d+$')

# Structural lines that never carry caption text
SKIP_PREFIXES = ('WEBVTT', 'NOTE')


def _clean_cue_text(text: str) -> str:
    """Strip inline markup tags and collapse whitespace."""
    return ' '.join(TAG_PATTERN.sub('', text).split())


def _is_noise_line(line: str) -> bool:
    stripped = line.strip()
    return (not stripped
            or line.startswith(SKIP_PREFIXES)
            or SEQUENCE_NUMBER_PATTERN.match(stripped) is not None)


def parse_vtt_segments(markup: str) -> list[TimedSegment]:
    """Split WebVTT markup into timed segments in stream order.

    Each timing line opens a new segment; text lines that follow are
    space-joined into it. Timestamps are truncated to whole seconds.
    Segments whose text is empty after tag stripping are dropped, and
    text seen before the first timing line is ignored.
    """
    segments = []
    current_time = None
    current_text = []

    def flush():
        if current_time and current_text:
            text = _clean_cue_text(' '.join(current_text))
            if text:
                segments.append(TimedSegment(time=current_time, text=text))

    for line in markup.splitlines():
        match = TIMING_PATTERN.match(line)
        if match:
            flush()
            current_text = []
            current_time = match.group(1)[:8]
            continue

        if _is_noise_line(line):
            continue

        if current_time:
            current_text.append(line.strip())

    flush()
    return segments


def format_segments(segments: list[TimedSegment]) -> Optional[str]:
    """Render segments as "[HH:MM:SS] text" lines; None when there are none."""
    if not segments:
        return None
    return '\n'.join(f"[{seg.time}] {seg.text}" for seg in segments)


def clean_vtt_transcript(markup: str) -> Optional[str]:
    """Convert raw VTT markup into a deduplicated, timestamped transcript.

    Returns None when the markup contains no usable cues.
    """
    return format_segments(reduce_segments(parse_vtt_segments(markup)))


def clean_vtt_file(vtt_path: Path) -> Optional[str]:
    """Read a VTT file and return its cleaned transcript (or None)."""
    with open(vtt_path, 'r', encoding='utf-8', errors='replace') as f:
        content = f.read()
    return clean_vtt_transcript(content)
