"""
Morpheme descriptors.

A morpheme (komponento) is a known sub-word unit: a prefix, a root or a
suffix, together with the adjacency rules that say what may stand next to it.
Inventories are supplied by the caller; nothing here learns or loads them.

Wire format (as sent by the caller):
    {"id": 7, "teksto": "mal", "tipo": "prefikso",
     "antaŭpovas": [], "postpovas": ["radiko"], "difino": "opposite"}
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Hashable, Iterable, Mapping, Optional

# Canonical kinds (tipoj)
PREFIX = "prefikso"
ROOT = "radiko"
SUFFIX = "sufikso"
UNKNOWN = "???"  # Failure sentinel only, never a real morpheme

KIND_ALIASES = {
    "prefix": PREFIX,
    "root": ROOT,
    "suffix": SUFFIX,
}

# Wire keys, with the English / x-system spellings we also accept
_TEXT_KEYS = ("teksto", "text")
_KIND_KEYS = ("tipo", "kind")
_PREDECESSOR_KEYS = ("antaŭpovas", "antauxpovas", "antaupovas", "allowed_predecessors")
_SUCCESSOR_KEYS = ("postpovas", "allowed_successors")
_GLOSS_KEYS = ("difino", "gloss")
_KNOWN_KEYS = frozenset(
    ("id",) + _TEXT_KEYS + _KIND_KEYS + _PREDECESSOR_KEYS + _SUCCESSOR_KEYS + _GLOSS_KEYS
)


def normalize_kind(kind: Optional[str]) -> str:
    """Map English kind names onto the canonical Esperanto ones."""
    if kind is None:
        return ""
    return KIND_ALIASES.get(kind, kind)


def _normalize_adjacency(values: Optional[Iterable[str]]) -> FrozenSet[str]:
    if not values:
        return frozenset()
    if isinstance(values, str):
        values = [values]
    values = list(values)
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"najbaraj eroj devas esti ĉenoj, ne {value!r}")
    return frozenset(normalize_kind(v) for v in values)


def _first_present(data: Mapping[str, Any], keys, default=None):
    for key in keys:
        if key in data:
            return data[key]
    return default


@dataclass(frozen=True)
class Morpheme:
    """
    A single inventory entry.

    Matching is case-insensitive; `lower_text` is what gets compared against
    the word being decomposed.
    """

    id: Hashable
    text: str
    kind: str
    allowed_predecessors: FrozenSet[str] = frozenset()
    allowed_successors: FrozenSet[str] = frozenset()
    gloss: str = ""
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self):
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "kind", normalize_kind(self.kind))
        object.__setattr__(self, "allowed_predecessors", _normalize_adjacency(self.allowed_predecessors))
        object.__setattr__(self, "allowed_successors", _normalize_adjacency(self.allowed_successors))

    @property
    def lower_text(self) -> str:
        return self.text.lower()

    @property
    def is_prefix(self) -> bool:
        return self.kind == PREFIX

    @property
    def is_root(self) -> bool:
        return self.kind == ROOT

    @property
    def is_suffix(self) -> bool:
        return self.kind == SUFFIX

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Morpheme":
        """
        Build a morpheme from its wire dict.

        Raises:
            KeyError: if `id` or `teksto` is missing
        """
        if "id" not in data:
            raise KeyError("id")
        text = _first_present(data, _TEXT_KEYS)
        if text is None:
            raise KeyError("teksto")

        extra = {k: v for k, v in data.items() if k not in _KNOWN_KEYS}
        return cls(
            id=data["id"],
            text=str(text),
            kind=_first_present(data, _KIND_KEYS, ""),
            allowed_predecessors=_first_present(data, _PREDECESSOR_KEYS),
            allowed_successors=_first_present(data, _SUCCESSOR_KEYS),
            gloss=_first_present(data, _GLOSS_KEYS, "") or "",
            extra=extra,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize back to the wire format, keeping unknown fields."""
        result = dict(self.extra)
        result.update({
            "id": self.id,
            "teksto": self.text,
            "tipo": self.kind,
            "antaŭpovas": sorted(self.allowed_predecessors, key=str),
            "postpovas": sorted(self.allowed_successors, key=str),
            "difino": self.gloss,
        })
        return result

    def __repr__(self) -> str:
        return f"Morpheme({self.id!r}: {self.text!r}, {self.kind})"
