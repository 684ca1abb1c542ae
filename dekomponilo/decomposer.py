"""
Memoized segmentation search.

Decomposes one word into inventory morphemes. Every legal continuation of the
remaining text is explored depth-first; per search context only the best
scoring continuation is kept. Contexts are memoized on

    (remaining text, previous morpheme id, set of used ids)

so the otherwise exponential search only visits each reachable state once.
The cache lives for exactly one top-level decompose() call.

After the search, a correction pass checks whether a strictly longer root
could open the word instead of the piece the search picked (e.g. "nen"+"iu"
rather than a dead-end "ne"+...).
"""
import logging
from dataclasses import asdict, dataclass
from typing import Dict, FrozenSet, Generator, Hashable, Iterable, Optional, Tuple

from .candidates import is_allowed, iter_candidates, sort_inventory
from .config import DecomposerConfig
from .logging_config import log_with_context
from .morphemes import Morpheme, PREFIX, ROOT
from .scoring import prefer, score
from .segmentation import Decomposition, Failed, Parsed, Segment

logger = logging.getLogger(__name__)

# Stands in for "no previous morpheme" in cache keys; cannot collide with an id
_START = object()

CacheKey = Tuple[str, Hashable, FrozenSet[Hashable]]

# A search frame yields (suffix, last, used) requests and returns its result
Frame = Generator[Tuple[str, Morpheme, FrozenSet[Hashable]], Optional[Decomposition], Decomposition]


def _cache_key(suffix: str, last: Optional[Morpheme], used: FrozenSet[Hashable]) -> CacheKey:
    return (suffix, _START if last is None else last.id, used)


@dataclass
class SearchStats:
    """Counters for one decompose() call."""
    calls: int = 0
    cache_hits: int = 0
    pruned: int = 0
    corrections: int = 0


class Decomposer:
    """
    Splits words into morphemes from a fixed inventory.

    The inventory is sorted once on construction (shorter texts first, then
    alphabetically) into a private tuple. One instance can decompose many
    words; each call gets a fresh cache.

    Usage:
        decomposer = Decomposer(morphemes)
        result = decomposer.decompose("Neniu")
        if not result.is_failure:
            print([seg.surface_text for seg in result.segments])
    """

    def __init__(self, morphemes: Iterable[Morpheme], config: Optional[DecomposerConfig] = None):
        self.config = config or DecomposerConfig()
        self.inventory = sort_inventory(morphemes)
        self._roots = tuple(m for m in self.inventory if m.kind == ROOT)
        self._memo: Dict[CacheKey, Decomposition] = {}
        self.stats = SearchStats()
        logger.debug(
            f"Decomposer ready: {len(self.inventory)} morphemes "
            f"({len(self._roots)} roots), correction_scope={self.config.correction_scope}"
        )

    def decompose(self, word: str, trace=None) -> Decomposition:
        """
        Decompose `word` into its best-scoring segmentation.

        Args:
            word: The word to split (any case; matched in lowercase)
            trace: Optional DecompositionTrace to record the steps in

        Returns:
            Parsed with the segments, or Failed spanning the whole word
        """
        self._memo = {}
        self.stats = SearchStats()
        lower_word = word.lower()

        if trace is not None:
            trace.add_step(
                "Sort",
                inputs={"morphemes": len(self.inventory)},
                outputs={"order": [m.text for m in self.inventory]},
                description="Ordered the inventory by text length, then alphabetically.",
            )

        result = self._search(lower_word, None, frozenset())

        if trace is not None:
            trace.add_step(
                "Search",
                inputs={"word": lower_word},
                outputs={"segments": [s.surface_text for s in result.segments], **asdict(self.stats)},
                description="Memoized search over all legal continuations.",
            )

        if self.config.correction_scope == "top":
            before = result
            result = self._correct(result, lower_word, None, frozenset())
            if trace is not None:
                trace.add_step(
                    "Correction",
                    inputs={"first": before.first.surface_text if isinstance(before, Parsed) and before.first else None},
                    outputs={"replaced": result is not before,
                             "segments": [s.surface_text for s in result.segments]},
                    description="Tried a strictly longer root as the first piece.",
                )

        log_with_context(
            f"Decomposed '{word}' -> {'failure' if result.is_failure else len(result.segments)}",
            context=asdict(self.stats),
            logger=logger,
        )
        if trace is not None:
            trace.set_result(result)
        return result

    # ------------------------------------------------------------------
    # Search
    #
    # Each search context runs as a generator frame. A frame yields the
    # sub-context it needs, (suffix, last, used), and receives that
    # sub-context's result. `_run` drives the frames on an explicit stack,
    # so word length is not bounded by the interpreter's recursion limit.
    # ------------------------------------------------------------------

    def _failure(self, span: str) -> Failed:
        return Failed(span, marker=self.config.failure_marker, gloss=self.config.failure_gloss)

    def _lookup(self, suffix: str, last: Optional[Morpheme],
                used: FrozenSet[Hashable]) -> Optional[Decomposition]:
        """Memoized result for a context, or None if it has not been searched."""
        self.stats.calls += 1
        cached = self._memo.get(_cache_key(suffix, last, used))
        if cached is not None:
            self.stats.cache_hits += 1
        return cached

    def _run(self, frame: Frame) -> Decomposition:
        """Drive `frame` and every sub-search it asks for to completion."""
        stack = [frame]
        value = None
        while stack:
            try:
                request = stack[-1].send(value)
            except StopIteration as stop:
                stack.pop()
                value = stop.value
                continue
            value = self._lookup(*request)
            if value is None:
                stack.append(self._search_frame(*request))
        return value

    def _search(self, suffix: str, last: Optional[Morpheme],
                used: FrozenSet[Hashable]) -> Decomposition:
        """Best segmentation of `suffix` given the previous morpheme and used ids."""
        cached = self._lookup(suffix, last, used)
        if cached is not None:
            return cached
        return self._run(self._search_frame(suffix, last, used))

    def _search_frame(self, suffix: str, last: Optional[Morpheme],
                      used: FrozenSet[Hashable]) -> Frame:
        if not suffix:
            result: Decomposition = Parsed()
            self._memo[_cache_key(suffix, last, used)] = result
            return result

        best: Optional[Parsed] = None
        best_score = 0
        for morpheme in iter_candidates(suffix, last, self.inventory):
            tail = yield (suffix[len(morpheme.lower_text):], morpheme, used | {morpheme.id})
            if isinstance(tail, Failed):
                # Leads nowhere
                self.stats.pruned += 1
                continue

            candidate = tail.prepend(Segment.for_morpheme(morpheme))
            candidate_score = score(candidate.segments)
            if best is None or prefer(candidate.segments, candidate_score, best.segments, best_score):
                best, best_score = candidate, candidate_score

        result = best if best is not None else self._failure(suffix)
        if self.config.correction_scope == "every":
            result = yield from self._correct_frame(result, suffix, last, used)

        self._memo[_cache_key(suffix, last, used)] = result
        return result

    # ------------------------------------------------------------------
    # Correction
    # ------------------------------------------------------------------

    def _correct(self, result: Decomposition, suffix: str, last: Optional[Morpheme],
                 used: FrozenSet[Hashable]) -> Decomposition:
        return self._run(self._correct_frame(result, suffix, last, used))

    def _correct_frame(self, result: Decomposition, suffix: str, last: Optional[Morpheme],
                       used: FrozenSet[Hashable]) -> Frame:
        """
        Replace a leading prefix/root with a strictly longer root if that root
        also leads to a full parse. The first such root in inventory order wins.
        """
        if not isinstance(result, Parsed) or result.first is None:
            return result
        first = result.first
        if first.kind not in (PREFIX, ROOT):
            return result

        first_len = len(first.surface_text)
        for root in self._roots:
            root_text = root.lower_text
            if len(root_text) <= first_len or not suffix.startswith(root_text):
                continue
            if not is_allowed(root, last):
                continue

            tail = yield (suffix[len(root_text):], root, used | {root.id})
            if isinstance(tail, Failed):
                continue

            corrected = tail.prepend(Segment.for_morpheme(root))
            self.stats.corrections += 1
            logger.debug(f"Correction: '{first.surface_text}' -> longer root '{root_text}' in '{suffix}'")
            return corrected

        return result


def decompose(word: str, morphemes: Iterable[Morpheme],
              config: Optional[DecomposerConfig] = None, trace=None) -> Decomposition:
    """Decompose a single word with a throwaway Decomposer."""
    return Decomposer(morphemes, config=config).decompose(word, trace=trace)
