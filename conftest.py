"""Shared test fixtures and utilities."""

import pytest


def _build_vtt(*cues, header="WEBVTT\nKind: captions\nLanguage: en\n"):
    blocks = [header]
    for start, end, text in cues:
        blocks.append(f"{start} --> {end} align:start position:0%\n{text}\n")
    return "\n".join(blocks)


@pytest.fixture
def make_vtt():
    """Build WebVTT markup from (start, end, text) cue tuples."""
    return _build_vtt


@pytest.fixture
def scrolling_vtt():
    """Auto-caption style markup where each cue repeats the previous line."""
    return (
        "WEBVTT\n"
        "Kind: captions\n"
        "Language: en\n"
        "\n"
        "00:00:00.000 --> 00:00:02.350 align:start position:0%\n"
        " \n"
        "welcome<00:00:00.400><c> to</c><00:00:00.640><c> the</c><00:00:00.880><c> show</c>\n"
        "\n"
        "00:00:02.350 --> 00:00:02.360 align:start position:0%\n"
        "welcome to the show\n"
        " \n"
        "\n"
        "00:00:02.360 --> 00:00:04.710 align:start position:0%\n"
        "welcome to the show\n"
        "today<00:00:02.800><c> we</c><00:00:03.000><c> talk</c><00:00:03.200><c> about</c>"
        "<00:00:03.400><c> python</c>\n"
        "\n"
        "00:00:12.000 --> 00:00:14.000 align:start position:0%\n"
        "thanks for watching\n"
    )
