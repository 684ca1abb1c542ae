"""
Message handler.

The request/response shim around the decomposer: a message carries the word
and the whole inventory by value, the reply is the segmentation as plain
dicts. No state survives between messages.

    handle_message({"vorto": "neniu", "komponentoj": [...]})
    -> [{"komp": {...}, "mapado": {"tekstero": "nen", "tipo": "radiko", "difino": "..."}}, ...]
"""
import logging
from typing import Any, Dict, List, Mapping, Optional

from .config import DecomposerConfig
from .decomposer import decompose
from .inventory import InventoryError, morphemes_from_dicts

logger = logging.getLogger(__name__)


def handle_message(message: Mapping[str, Any],
                   config: Optional[DecomposerConfig] = None) -> List[Dict[str, Any]]:
    """
    Decompose the word in `message` against the inventory it carries.

    Raises:
        InventoryError: if the message or its inventory is malformed
    """
    if not isinstance(message, Mapping):
        raise InventoryError(f"Mesaĝo devas esti objekto, ne {type(message).__name__}")

    word = message.get("vorto", message.get("word"))
    if not isinstance(word, str):
        raise InventoryError("Mesaĝo mankas ĉenon 'vorto'")

    items = message.get("komponentoj", message.get("morphemes"))
    if not isinstance(items, list):
        raise InventoryError("Mesaĝo mankas liston 'komponentoj'")

    morphemes = morphemes_from_dicts(items)
    logger.debug(f"Message: '{word}' with {len(morphemes)} morphemes")
    return decompose(word, morphemes, config=config).to_list()
