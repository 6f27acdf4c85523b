"""caption-digest: deduplicated transcripts from scrolling auto-captions."""

__version__ = "0.1.0"
