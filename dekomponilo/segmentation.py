"""
Segments and decomposition results.

A decomposition is either `Parsed` (an ordered run of genuine segments) or
`Failed` (no legal segmentation of a span). The two are never mixed: a failure
is always the whole result.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

from .config import DEFAULT_FAILURE_GLOSS, DEFAULT_FAILURE_MARKER
from .morphemes import Morpheme, UNKNOWN


@dataclass(frozen=True)
class Segment:
    """A matched morpheme plus its rendering record (mapado)."""

    morpheme: Optional[Morpheme]
    surface_text: str
    kind: str
    gloss: str

    @classmethod
    def for_morpheme(cls, morpheme: Morpheme) -> "Segment":
        return cls(
            morpheme=morpheme,
            surface_text=morpheme.lower_text,
            kind=morpheme.kind,
            gloss=morpheme.gloss,
        )

    @classmethod
    def failure(cls, span: str, marker: str = DEFAULT_FAILURE_MARKER,
                gloss: str = DEFAULT_FAILURE_GLOSS) -> "Segment":
        return cls(morpheme=None, surface_text=f"{marker}{span}", kind=UNKNOWN, gloss=gloss)

    @property
    def is_failure(self) -> bool:
        return self.morpheme is None

    def to_dict(self) -> Dict[str, Any]:
        """Wire form: {"komp": ..., "mapado": {"tekstero", "tipo", "difino"}}."""
        result: Dict[str, Any] = {}
        if self.morpheme is not None:
            result["komp"] = self.morpheme.to_dict()
        result["mapado"] = {
            "tekstero": self.surface_text,
            "tipo": self.kind,
            "difino": self.gloss,
        }
        return result


@dataclass(frozen=True)
class Parsed:
    """A complete segmentation of a span."""

    segments: Tuple[Segment, ...] = ()

    is_failure = False

    @property
    def surface_text(self) -> str:
        return "".join(seg.surface_text for seg in self.segments)

    @property
    def first(self) -> Optional[Segment]:
        return self.segments[0] if self.segments else None

    def prepend(self, segment: Segment) -> "Parsed":
        return Parsed((segment,) + self.segments)

    def to_list(self) -> List[Dict[str, Any]]:
        return [seg.to_dict() for seg in self.segments]

    def __len__(self) -> int:
        return len(self.segments)


@dataclass(frozen=True)
class Failed:
    """No legal segmentation exists for `span`."""

    span: str
    marker: str = DEFAULT_FAILURE_MARKER
    gloss: str = DEFAULT_FAILURE_GLOSS

    is_failure = True

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return (Segment.failure(self.span, self.marker, self.gloss),)

    @property
    def surface_text(self) -> str:
        return self.segments[0].surface_text

    def to_list(self) -> List[Dict[str, Any]]:
        return [seg.to_dict() for seg in self.segments]

    def __len__(self) -> int:
        return 1


Decomposition = Union[Parsed, Failed]
