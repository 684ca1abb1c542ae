"""
Candidate filter.

Given what is left of the word and the morpheme placed just before it,
decide which inventory entries may legally come next.
"""
from typing import Iterable, Iterator, Optional, Tuple

from .morphemes import Morpheme, PREFIX, ROOT, SUFFIX


def sort_inventory(morphemes: Iterable[Morpheme]) -> Tuple[Morpheme, ...]:
    """
    Order the inventory: shorter texts first, then alphabetically.

    Entries sharing a text (homographs) are ordered by id, so the result does
    not depend on the order the caller listed them in.
    Returns a new tuple; the caller's collection is left untouched.
    """
    return tuple(sorted(
        morphemes,
        key=lambda m: (len(m.text), m.lower_text, m.text, str(m.id), type(m.id).__name__),
    ))


def _adjacency_ok(candidate: Morpheme, last: Morpheme) -> bool:
    """Check the explicit antaŭpovas/postpovas sets of both neighbours."""
    if candidate.allowed_predecessors and not (
        last.kind in candidate.allowed_predecessors
        or last.text in candidate.allowed_predecessors
    ):
        return False
    if last.allowed_successors and not (
        candidate.kind in last.allowed_successors
        or candidate.text in last.allowed_successors
    ):
        return False
    return True


def is_allowed(candidate: Morpheme, last: Optional[Morpheme]) -> bool:
    """
    Whether `candidate` may directly follow `last` (None = start of word).

    Text matching against the word is not checked here.
    """
    if last is None:
        # A suffix can never open a word
        return candidate.kind != SUFFIX

    if candidate.lower_text == last.lower_text:
        return False

    # Kind ordering
    if last.kind == ROOT and candidate.kind == PREFIX:
        return False
    if last.kind == SUFFIX and candidate.kind != SUFFIX:
        return False

    return _adjacency_ok(candidate, last)


def iter_candidates(remaining: str, last: Optional[Morpheme],
                    inventory: Iterable[Morpheme]) -> Iterator[Morpheme]:
    """Yield, in inventory order, every morpheme that may start `remaining`."""
    lower_remaining = remaining.lower()
    for morpheme in inventory:
        if not morpheme.lower_text or not lower_remaining.startswith(morpheme.lower_text):
            continue
        if is_allowed(morpheme, last):
            yield morpheme
