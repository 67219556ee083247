"""
Passforge - constraint-driven password generation.
"""

from .charsets import CHAR_RANGES, CharCategory
from .derive import derive_options
from .generators import generate
from .options import GenerationOptions

__all__ = ['CHAR_RANGES', 'CharCategory', 'GenerationOptions', 'derive_options', 'generate']
