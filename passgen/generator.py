"""
passgen.generator
Secure password sampling from a resolved alphabet.
"""

from typing import Optional

from .models import AlphabetSpec, ResolvedPolicy
from .rng import RandomSource, default_source


# Width of a single draw from the random source.
WORD_BITS = 32
_WORD_RANGE = 1 << WORD_BITS


def randbelow(rng: RandomSource, n: int) -> int:
    """
    Return an integer uniformly distributed over [0, n).

    Draws WORD_BITS at a time and rejects anything at or above the largest
    multiple of n that fits in a word, so every residue is equally likely.
    At most half of the word range is ever rejected.
    """
    if n <= 0 or n > _WORD_RANGE:
        raise ValueError(f"n must be in [1, {_WORD_RANGE}], got {n}")
    limit = (_WORD_RANGE // n) * n
    while True:
        value = rng.getrandbits(WORD_BITS)
        if value < limit:
            return value % n


def sample(spec: AlphabetSpec, length: int, rng: RandomSource) -> str:
    """Draw `length` independent characters from the alphabet of `spec`."""
    alphabet = spec.alphabet()
    n = len(alphabet)
    return "".join(alphabet[randbelow(rng, n)] for _ in range(length))


def generate(policy: ResolvedPolicy, rng: Optional[RandomSource] = None) -> str:
    """
    Generate a cryptographically secure password for a resolved policy.
    Uses the process-wide system source when no rng is given.
    """
    if rng is None:
        rng = default_source()
    return sample(policy.spec, policy.length, rng)
