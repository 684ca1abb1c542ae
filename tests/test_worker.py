"""
Tests for the message handler.
"""
import json
import unittest
from dekomponilo.config import DecomposerConfig
from dekomponilo.inventory import InventoryError
from dekomponilo.worker import handle_message


KOMPONENTOJ = [
    {"id": 1, "teksto": "ne", "tipo": "prefikso", "antaŭpovas": [], "postpovas": [], "difino": "ne"},
    {"id": 2, "teksto": "nen", "tipo": "radiko", "antaŭpovas": [], "postpovas": [], "difino": "neniu-"},
    {"id": 3, "teksto": "iu", "tipo": "radiko", "antaŭpovas": [], "postpovas": [], "difino": "iu"},
]


class TestHandleMessage(unittest.TestCase):

    def test_returns_wire_segments(self):
        reply = handle_message({"vorto": "Neniu", "komponentoj": KOMPONENTOJ})

        self.assertEqual(len(reply), 2)
        self.assertEqual(reply[0]["mapado"], {"tekstero": "nen", "tipo": "radiko", "difino": "neniu-"})
        self.assertEqual(reply[0]["komp"]["id"], 2)
        self.assertEqual(reply[1]["mapado"]["tekstero"], "iu")

    def test_reply_is_json_serializable(self):
        reply = handle_message({"vorto": "neniu", "komponentoj": KOMPONENTOJ})
        self.assertEqual(json.loads(json.dumps(reply, ensure_ascii=False)), reply)

    def test_failure_reply_has_no_morpheme(self):
        reply = handle_message({"vorto": "xyz", "komponentoj": KOMPONENTOJ})

        self.assertEqual(reply, [{
            "mapado": {"tekstero": "❌ xyz", "tipo": "???", "difino": "Ne valida sekvo aŭ komponento"},
        }])

    def test_uses_given_config(self):
        config = DecomposerConfig(failure_marker="!! ", failure_gloss="nevalida")
        reply = handle_message({"vorto": "xyz", "komponentoj": KOMPONENTOJ}, config=config)
        self.assertEqual(reply[0]["mapado"]["tekstero"], "!! xyz")
        self.assertEqual(reply[0]["mapado"]["difino"], "nevalida")

    def test_accepts_english_message_keys(self):
        reply = handle_message({"word": "neniu", "morphemes": KOMPONENTOJ})
        self.assertEqual([seg["mapado"]["tekstero"] for seg in reply], ["nen", "iu"])

    def test_does_not_modify_the_message(self):
        message = {"vorto": "neniu", "komponentoj": [dict(k) for k in KOMPONENTOJ]}
        snapshot = json.dumps(message, sort_keys=True)
        handle_message(message)
        self.assertEqual(json.dumps(message, sort_keys=True), snapshot)

    def test_rejects_malformed_messages(self):
        for message in (
            ["neniu"],
            {"komponentoj": KOMPONENTOJ},
            {"vorto": "neniu"},
            {"vorto": "neniu", "komponentoj": [{"id": 1}]},
        ):
            with self.assertRaises(InventoryError):
                handle_message(message)


if __name__ == '__main__':
    unittest.main()
