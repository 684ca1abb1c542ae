# This file makes the 'dekomponilo' directory a Python package.

from dekomponilo.morphemes import Morpheme, PREFIX, ROOT, SUFFIX, UNKNOWN
from dekomponilo.segmentation import Segment, Parsed, Failed
from dekomponilo.config import DecomposerConfig
from dekomponilo.decomposer import Decomposer, decompose
from dekomponilo.inventory import InventoryError, load_inventory

__all__ = [
    'Morpheme',
    'PREFIX',
    'ROOT',
    'SUFFIX',
    'UNKNOWN',
    'Segment',
    'Parsed',
    'Failed',
    'DecomposerConfig',
    'Decomposer',
    'decompose',
    'InventoryError',
    'load_inventory',
]
