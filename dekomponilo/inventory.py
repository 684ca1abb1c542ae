"""
Inventory loading.

Reads morpheme inventories (komponentoj) from JSON or JSON Lines files and
validates raw descriptor dicts. The decomposer itself never touches files;
this is the only place that does.

Accepted layouts:
    [ {...}, {...} ]                       # .json, plain list
    {"komponentoj": [ {...}, {...} ]}      # .json, wrapped
    {...}\\n{...}\\n                         # .jsonl, one per line
"""
import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping

from .morphemes import Morpheme

logger = logging.getLogger(__name__)

_LIST_KEYS = ("komponentoj", "morphemes")


class InventoryError(ValueError):
    """Raised for unreadable or malformed morpheme inventories."""


def morphemes_from_dicts(items: Iterable[Any]) -> List[Morpheme]:
    """
    Validate raw descriptors and convert them to Morpheme objects.

    Raises:
        InventoryError: on a non-dict entry, a missing/empty teksto, a
            missing or unhashable id, or a duplicate id
    """
    morphemes = []
    seen_ids = set()
    for index, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise InventoryError(f"Komponento #{index} ne estas objekto: {item!r}")
        try:
            morpheme = Morpheme.from_dict(item)
        except KeyError as e:
            raise InventoryError(f"Komponento #{index} mankas la kampon {e.args[0]!r}") from e
        except TypeError as e:
            raise InventoryError(f"Komponento #{index} havas nevalidan valoron: {e}") from e

        if not morpheme.text:
            raise InventoryError(f"Komponento #{index} havas malplenan tekston")
        try:
            duplicate = morpheme.id in seen_ids
        except TypeError as e:
            raise InventoryError(f"Komponento #{index} havas nevalidan id: {morpheme.id!r}") from e
        if duplicate:
            raise InventoryError(f"Duobla id {morpheme.id!r} ĉe komponento #{index}")

        seen_ids.add(morpheme.id)
        morphemes.append(morpheme)
    return morphemes


def _extract_list(data: Any) -> List[Any]:
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for key in _LIST_KEYS:
            if isinstance(data.get(key), list):
                return data[key]
    raise InventoryError(
        "Atendis liston de komponentoj aŭ objekton kun 'komponentoj'"
    )


def load_inventory(path) -> List[Morpheme]:
    """
    Load a morpheme inventory from a .json or .jsonl file.

    Args:
        path: Path to the inventory file

    Returns:
        List of Morpheme objects in file order
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            if path.suffix == '.jsonl':
                items = []
                for line_no, line in enumerate(f, 1):
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        items.append(json.loads(line))
                    except json.JSONDecodeError as e:
                        raise InventoryError(f"{path}:{line_no}: nevalida JSON: {e}") from e
            else:
                try:
                    items = _extract_list(json.load(f))
                except json.JSONDecodeError as e:
                    raise InventoryError(f"{path}: nevalida JSON: {e}") from e
    except OSError as e:
        raise InventoryError(f"Ne povis legi {path}: {e}") from e

    morphemes = morphemes_from_dicts(items)
    logger.info(f"Loaded {len(morphemes)} morphemes from {path}")
    return morphemes


def inventory_summary(morphemes: Iterable[Morpheme]) -> Dict[str, int]:
    """Count morphemes per kind, plus a 'total' entry."""
    counts = Counter(m.kind or "(sen tipo)" for m in morphemes)
    summary = dict(sorted(counts.items()))
    summary["total"] = sum(counts.values())
    return summary
