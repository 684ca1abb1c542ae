"""
Tests for the DecompositionTrace.
"""
import unittest
import json
from dekomponilo.decomposer import Decomposer
from dekomponilo.morphemes import Morpheme
from dekomponilo.trace import DecompositionTrace


def _inventory():
    return [
        Morpheme(1, "ne", "prefikso"),
        Morpheme(2, "nen", "radiko", gloss="negative"),
        Morpheme(3, "iu", "radiko", gloss="someone"),
    ]


class TestDecompositionTrace(unittest.TestCase):

    def test_trace_initialization(self):
        """Tests that the trace is initialized correctly."""
        trace = DecompositionTrace(word="neniu")
        self.assertEqual(trace.word, "neniu")
        self.assertIsNotNone(trace.trace_id)
        self.assertIsNotNone(trace.start_time)
        self.assertIsNone(trace.end_time)
        self.assertEqual(trace.steps, [])
        self.assertIsNone(trace.result)
        self.assertIsNone(trace.error)

    def test_add_step(self):
        trace = DecompositionTrace("neniu")
        trace.add_step(
            "Search",
            inputs={"word": "neniu"},
            outputs={"segments": ["nen", "iu"]},
            description="A test step."
        )
        self.assertEqual(len(trace.steps), 1)
        step = trace.steps[0]
        self.assertEqual(step["step_id"], 1)
        self.assertEqual(step["name"], "Search")
        self.assertEqual(step["inputs"], {"word": "neniu"})
        self.assertEqual(step["outputs"], {"segments": ["nen", "iu"]})
        self.assertEqual(step["description"], "A test step.")
        self.assertIsNotNone(step["timestamp"])

    def test_set_error(self):
        trace = DecompositionTrace("neniu")
        trace.set_error("Ne povis legi inventory.json")
        self.assertEqual(trace.error, "Ne povis legi inventory.json")
        self.assertIsNotNone(trace.end_time)
        self.assertIsNone(trace.result)

    def test_decomposer_records_sort_search_and_correction(self):
        """The decomposer fills the trace with its three stages and the result."""
        trace = DecompositionTrace("Neniu")
        Decomposer(_inventory()).decompose("Neniu", trace=trace)

        names = [step["name"] for step in trace.steps]
        self.assertEqual(names, ["Sort", "Search", "Correction"])
        self.assertEqual(trace.steps[0]["outputs"]["order"], ["iu", "ne", "nen"])
        self.assertEqual(trace.steps[1]["inputs"]["word"], "neniu")
        self.assertIn("calls", trace.steps[1]["outputs"])
        self.assertEqual(
            [seg["mapado"]["tekstero"] for seg in trace.result],
            ["nen", "iu"],
        )
        self.assertIsNotNone(trace.end_time)

    def test_every_scope_has_no_separate_correction_step(self):
        from dekomponilo.config import DecomposerConfig

        trace = DecompositionTrace("neniu")
        Decomposer(_inventory(), DecomposerConfig(correction_scope="every")).decompose("neniu", trace=trace)

        self.assertEqual([step["name"] for step in trace.steps], ["Sort", "Search"])

    def test_to_json(self):
        """Tests serialization to JSON."""
        trace = DecompositionTrace("neniu")
        Decomposer(_inventory()).decompose("neniu", trace=trace)

        data = json.loads(trace.to_json())
        self.assertEqual(data['trace_id'], trace.trace_id)
        self.assertEqual(data['word'], "neniu")
        self.assertEqual(len(data['steps']), 3)
        self.assertEqual(data['result'][0]['komp']['teksto'], "nen")


if __name__ == '__main__':
    unittest.main()
