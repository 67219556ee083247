"""
Password generators for Passforge.

Provides pattern-driven and pronounceable password generation.
"""

from .password import PasswordGenerator, generate
from .pronounceable import PronounceableGenerator

__all__ = ['PasswordGenerator', 'PronounceableGenerator', 'generate']
