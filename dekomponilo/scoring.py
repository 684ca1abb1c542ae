"""
Scoring heuristic for candidate segmentations.

Counting pieces alone would over-split words into single letters, so the raw
count is adjusted:

    score = pieces
            - 1 if the last piece is not a suffix
            - 1 per radiko→radiko transition
            + 1 if any piece is a prefix
"""
from typing import Sequence

from .morphemes import PREFIX, ROOT, SUFFIX
from .segmentation import Segment


def suffix_penalty(segments: Sequence[Segment]) -> int:
    if not segments:
        return 0
    return 0 if segments[-1].kind == SUFFIX else 1


def root_chain_penalty(segments: Sequence[Segment]) -> int:
    return sum(
        1 for prev, curr in zip(segments, segments[1:])
        if prev.kind == ROOT and curr.kind == ROOT
    )


def prefix_bonus(segments: Sequence[Segment]) -> int:
    return 1 if any(seg.kind == PREFIX for seg in segments) else 0


def score(segments: Sequence[Segment]) -> int:
    """Score a full candidate segmentation; higher is better."""
    return (
        len(segments)
        - suffix_penalty(segments)
        - root_chain_penalty(segments)
        + prefix_bonus(segments)
    )


def prefer(candidate: Sequence[Segment], candidate_score: int,
           best: Sequence[Segment], best_score: int) -> bool:
    """
    Whether `candidate` should replace the current best.

    Strictly higher score wins; on a tie the shorter first piece wins.
    """
    if candidate_score != best_score:
        return candidate_score > best_score
    return len(candidate[0].surface_text) < len(best[0].surface_text)
