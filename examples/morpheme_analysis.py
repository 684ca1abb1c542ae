#!/usr/bin/env python3
"""
Morpheme Analysis Walkthrough

Shows how Dekomponilo splits Esperanto words into the morphemes of the
sample inventory (data/komponentoj.json).
"""
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dekomponilo import Decomposer, load_inventory
from dekomponilo.rendering import format_segments, format_table


def analyze_word(decomposer: Decomposer, word: str, explanation: str = ""):
    """Analyze a word's morphology in detail."""
    print(f"\nWord: '{word}'")
    if explanation:
        print(f"Meaning: {explanation}")

    result = decomposer.decompose(word)
    print(f"  {format_segments(result)}")
    for line in format_table(result).splitlines():
        print(f"    {line}")
    if result.is_failure:
        print("  (no legal segmentation in this inventory)")


def main():
    inventory_path = Path(__file__).parent.parent / "data" / "komponentoj.json"
    decomposer = Decomposer(load_inventory(inventory_path))

    print("=" * 70)
    print("MORPHEME ANALYSIS")
    print("=" * 70)

    analyze_word(decomposer, "malsanulejo", "hospital (opposite-healthy-person-place)")
    analyze_word(decomposer, "gepatroj", "parents (both sexes-father-plural)")
    analyze_word(decomposer, "neniun", "nobody (accusative)")
    analyze_word(decomposer, "resanigi", "to heal again")
    analyze_word(decomposer, "katetojn", "kittens (accusative)")
    analyze_word(decomposer, "bonega", "excellent, but -eg- is missing from the sample inventory")


if __name__ == '__main__':
    main()
