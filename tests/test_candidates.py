"""
Tests for the candidate filter.
"""
import unittest
from dekomponilo.candidates import is_allowed, iter_candidates, sort_inventory
from dekomponilo.morphemes import Morpheme


class TestSortInventory(unittest.TestCase):

    def test_sorts_by_length_then_alphabetically(self):
        morphemes = [
            Morpheme(1, "mal", "prefikso"),
            Morpheme(2, "o", "sufikso"),
            Morpheme(3, "hund", "radiko"),
            Morpheme(4, "ej", "sufikso"),
            Morpheme(5, "bon", "radiko"),
        ]
        ordered = sort_inventory(morphemes)
        self.assertEqual([m.text for m in ordered], ["o", "ej", "bon", "mal", "hund"])

    def test_does_not_mutate_input(self):
        morphemes = [Morpheme(1, "mal", "prefikso"), Morpheme(2, "o", "sufikso")]
        original = list(morphemes)

        ordered = sort_inventory(morphemes)

        self.assertEqual(morphemes, original)
        self.assertIsInstance(ordered, tuple)

    def test_order_is_independent_of_input_order(self):
        a = [Morpheme(1, "ab", "radiko"), Morpheme(2, "Aa", "radiko"), Morpheme(3, "b", "radiko")]
        self.assertEqual(sort_inventory(a), sort_inventory(reversed(a)))

    def test_homographs_are_ordered_by_id(self):
        first = Morpheme(2, "kat", "radiko", gloss="cat")
        second = Morpheme(1, "kat", "radiko", gloss="cat (homograph)")

        self.assertEqual([m.id for m in sort_inventory([first, second])], [1, 2])
        self.assertEqual([m.id for m in sort_inventory([second, first])], [1, 2])


class TestIsAllowed(unittest.TestCase):

    def setUp(self):
        self.prefix = Morpheme(1, "mal", "prefikso")
        self.root = Morpheme(2, "bon", "radiko")
        self.suffix = Morpheme(3, "ul", "sufikso")
        self.ending = Morpheme(4, "o", "sufikso")

    def test_suffix_cannot_start_a_word(self):
        self.assertFalse(is_allowed(self.suffix, None))
        self.assertTrue(is_allowed(self.prefix, None))
        self.assertTrue(is_allowed(self.root, None))

    def test_no_immediate_repeat_case_insensitive(self):
        upper = Morpheme(5, "BON", "radiko")
        self.assertFalse(is_allowed(upper, self.root))

    def test_prefix_cannot_follow_root(self):
        self.assertFalse(is_allowed(self.prefix, self.root))

    def test_only_suffixes_after_a_suffix(self):
        self.assertFalse(is_allowed(self.root, self.suffix))
        self.assertFalse(is_allowed(self.prefix, self.suffix))
        self.assertTrue(is_allowed(self.ending, self.suffix))

    def test_other_kinds_are_treated_generically(self):
        particle = Morpheme(6, "ĉi", "partiklo")
        self.assertTrue(is_allowed(particle, None))
        self.assertTrue(is_allowed(particle, self.root))
        self.assertTrue(is_allowed(self.prefix, particle))

    def test_allowed_successors_by_kind(self):
        ge = Morpheme(7, "ge", "prefikso", allowed_successors={"radiko"})
        self.assertTrue(is_allowed(self.root, ge))
        self.assertFalse(is_allowed(self.prefix, ge))

    def test_allowed_successors_by_literal_text(self):
        nen = Morpheme(8, "nen", "radiko", allowed_successors={"iu"})
        iu = Morpheme(9, "iu", "radiko")
        io = Morpheme(10, "io", "radiko")
        self.assertTrue(is_allowed(iu, nen))
        self.assertFalse(is_allowed(io, nen))

    def test_allowed_predecessors(self):
        n = Morpheme(11, "n", "sufikso", allowed_predecessors={"o", "j"})
        self.assertTrue(is_allowed(n, self.ending))
        self.assertFalse(is_allowed(n, self.suffix))

    def test_allowed_predecessors_by_kind(self):
        ul = Morpheme(12, "ul", "sufikso", allowed_predecessors={"radiko"})
        self.assertTrue(is_allowed(ul, self.root))
        self.assertFalse(is_allowed(ul, self.ending))

    def test_english_kind_aliases_are_normalized(self):
        ge = Morpheme(13, "ge", "prefix", allowed_successors={"root"})
        patr = Morpheme(14, "patr", "root")
        self.assertEqual(ge.kind, "prefikso")
        self.assertTrue(is_allowed(patr, ge))


class TestIterCandidates(unittest.TestCase):

    def setUp(self):
        self.inventory = sort_inventory([
            Morpheme(1, "ne", "prefikso"),
            Morpheme(2, "nen", "radiko"),
            Morpheme(3, "iu", "radiko"),
            Morpheme(4, "n", "sufikso"),
        ])

    def test_yields_text_prefix_matches_in_inventory_order(self):
        found = list(iter_candidates("neniu", None, self.inventory))
        self.assertEqual([m.text for m in found], ["ne", "nen"])

    def test_matching_is_case_insensitive(self):
        found = list(iter_candidates("NENIU", None, self.inventory))
        self.assertEqual([m.text for m in found], ["ne", "nen"])

    def test_respects_context(self):
        root = self.inventory[-1]  # nen
        found = list(iter_candidates("n", root, self.inventory))
        self.assertEqual([m.text for m in found], ["n"])

    def test_nothing_matches(self):
        self.assertEqual(list(iter_candidates("xyz", None, self.inventory)), [])


if __name__ == '__main__':
    unittest.main()
