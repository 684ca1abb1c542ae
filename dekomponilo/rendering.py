"""
Rendering (segments -> text).

Turns decomposition results back into readable strings. `reconstruct` is the
inverse of the decomposer: it reassembles the lowercased word.
"""
from typing import Sequence

from .segmentation import Segment


def reconstruct(segments: Sequence[Segment]) -> str:
    """
    Reassemble the word from its segments, left to right.

    A failure segment is only valid on its own; mixed with genuine segments it
    means the result was built wrongly.
    """
    if len(segments) > 1 and any(seg.is_failure for seg in segments):
        raise ValueError("Nevalida dekomponaĵo: malsukceso miksita kun veraj segmentoj")
    return "".join(seg.surface_text for seg in segments)


def format_segments(result, separator: str = "·") -> str:
    """Compact form, e.g. 'nen·iu'. A failure renders as its marked text."""
    return separator.join(seg.surface_text for seg in result.segments)


def format_table(result) -> str:
    """One line per segment: surface text, kind, gloss."""
    segments = result.segments
    if not segments:
        return "(malplena)"

    width = max(len(seg.surface_text) for seg in segments)
    kind_width = max(len(seg.kind) for seg in segments)
    lines = []
    for seg in segments:
        line = f"{seg.surface_text.ljust(width)}  {seg.kind.ljust(kind_width)}"
        if seg.gloss:
            line += f"  {seg.gloss}"
        lines.append(line.rstrip())
    return "\n".join(lines)
