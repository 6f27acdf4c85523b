"""
Shared types and utilities for caption-digest.

Contains DigestConfig and the helpers used by download.py, cli.py,
and the caption processing modules.
"""

import json
import shutil
import subprocess
import time
from pathlib import Path
from dataclasses import dataclass
from typing import Optional

import builtins


def tprint(*args, **kwargs):
    """Print with [HH:MM:SS] timestamp prefix.

    Skips the timestamp for carriage-return progress lines (end != newline)
    so that in-place progress updates remain clean.
    """
    if kwargs.get("end", "\n") != "\n":
        builtins.print(*args, flush=True, **kwargs)
        return
    stamp = time.strftime("[%H:%M:%S]")
    builtins.print(stamp, *args, flush=True, **kwargs)


print = tprint


@dataclass
class DigestConfig:
    """Configuration for a single caption-digest run."""
    url: Optional[str] = None
    vtt_path: Optional[Path] = None  # Local caption file; skips yt-dlp entirely
    sub_lang: str = "en"
    output_file: Optional[Path] = None  # Also write the transcript here
    metadata_json: Optional[Path] = None  # Save selected video metadata here
    timeout: float = 300.0  # seconds per yt-dlp invocation
    verbose: bool = False


@dataclass(frozen=True)
class TimedSegment:
    """One caption cue: start time as HH:MM:SS plus its cleaned text."""
    time: str
    text: str

    @property
    def seconds(self) -> int:
        h, m, s = (int(part) for part in self.time.split(":"))
        return h * 3600 + m * 60 + s


# Shown wherever a transcript could not be produced
TRANSCRIPT_NOT_AVAILABLE = "Transcript not available"

# yt-dlp output template inside the staging directory
SUBTITLE_TEMPLATE = "subtitle.%(ext)s"
CAPTIONS_SUFFIX = ".vtt"


def run_command(cmd: list[str], description: str, verbose: bool = False,
                timeout: Optional[float] = None) -> subprocess.CompletedProcess:
    """Run a shell command with error handling."""
    if verbose:
        print(f"  Running: {' '.join(cmd)}")
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=True,
                                timeout=timeout)
        return result
    except subprocess.CalledProcessError as e:
        print(f"  Error: {description}")
        print(f"  {e.stderr}")
        raise
    except subprocess.TimeoutExpired:
        print(f"  Error: {description} timed out after {timeout}s")
        raise


def _save_json(path: Path, data) -> None:
    """Write data to a JSON file with standard formatting."""
    with open(path, 'w') as f:
        json.dump(data, f, indent=2)


def check_dependencies() -> dict[str, bool]:
    """Check for required external tools."""
    return {"yt-dlp": shutil.which("yt-dlp") is not None}
