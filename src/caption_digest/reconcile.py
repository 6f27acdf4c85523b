"""
Reconciliation of overlapping auto-caption segments.

Auto-generated captions scroll: each new cue re-displays part of the
previous one. This module decides when two adjacent segments are the same
utterance restated, merges their text, and folds a whole segment stream
into one deduplicated, chronologically ordered list.
"""

from dataclasses import replace

from caption_digest.shared import TimedSegment

# Segments further apart than this are never treated as restatements
MERGE_WINDOW_SECONDS = 2
# Fraction of the shorter text's words that must be shared to merge
OVERLAP_RATIO = 0.5


def _tokens(text: str) -> list[str]:
    return text.split()


def segments_overlap(a: TimedSegment, b: TimedSegment) -> bool:
    """Check whether segment b restates segment a.

    True when the two start within MERGE_WINDOW_SECONDS of each other and
    either one text contains the other, or at least half of the shorter
    text's words also appear in the other (order ignored).
    """
    if abs(b.seconds - a.seconds) > MERGE_WINDOW_SECONDS:
        return False

    lower_a = a.text.lower()
    lower_b = b.text.lower()
    if lower_b in lower_a or lower_a in lower_b:
        return True

    words_a = _tokens(lower_a)
    words_b = _tokens(lower_b)
    vocabulary_b = set(words_b)
    common = sum(1 for word in words_a if word in vocabulary_b)
    return common >= min(len(words_a), len(words_b)) * OVERLAP_RATIO


def longest_common_subsequence(words1: list[str], words2: list[str]) -> list[str]:
    """Return the longest common subsequence of two token lists.

    Tokens compare case-insensitively; the returned tokens are taken from
    words1 in their original case.
    """
    folded1 = [w.lower() for w in words1]
    folded2 = [w.lower() for w in words2]
    rows, cols = len(folded1), len(folded2)

    table = [[0] * (cols + 1) for _ in range(rows + 1)]
    for i in range(1, rows + 1):
        for j in range(1, cols + 1):
            if folded1[i - 1] == folded2[j - 1]:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])

    result = []
    i, j = rows, cols
    while i > 0 and j > 0:
        if folded1[i - 1] == folded2[j - 1]:
            result.append(words1[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    result.reverse()
    return result


def merge_texts(text1: str, text2: str) -> str:
    """Combine the texts of two overlapping segments.

    A text that contains the other wins outright. Otherwise, if the word
    LCS covers at least half of the shorter text, the earlier text1 is
    kept as is; below that the two are concatenated so no words are lost.
    """
    if text2.lower() in text1.lower():
        return text1
    if text1.lower() in text2.lower():
        return text2

    words1 = _tokens(text1)
    words2 = _tokens(text2)
    common = longest_common_subsequence(words1, words2)
    if len(common) >= min(len(words1), len(words2)) * OVERLAP_RATIO:
        # Later repeats are assumed to add nothing beyond the first appearance
        return text1

    return f"{text1} {text2}"


def reduce_segments(segments: list[TimedSegment]) -> list[TimedSegment]:
    """Fold runs of overlapping segments into single segments.

    Each run keeps the timestamp of its first segment. Order is preserved
    and the input is never re-sorted.
    """
    if not segments:
        return []

    merged = []
    current = segments[0]
    for segment in segments[1:]:
        if segments_overlap(current, segment):
            current = replace(current, text=merge_texts(current.text, segment.text))
        else:
            merged.append(current)
            current = segment
    merged.append(current)
    return merged
