"""
passgen
Cryptographically secure password generation from named policies or class toggles.
"""

from .errors import ConfigError, InvalidLength, PassgenError, RngUnavailable
from .generator import generate, randbelow, sample
from .models import AlphabetSpec, CharacterClass, NamedPolicy, ResolvedPolicy
from .policy import resolve
from .rng import RandomSource, RecordedSource, SystemRandomSource

__all__ = [
    "AlphabetSpec",
    "CharacterClass",
    "ConfigError",
    "InvalidLength",
    "NamedPolicy",
    "PassgenError",
    "RandomSource",
    "RecordedSource",
    "ResolvedPolicy",
    "RngUnavailable",
    "SystemRandomSource",
    "generate",
    "randbelow",
    "resolve",
    "sample",
]
