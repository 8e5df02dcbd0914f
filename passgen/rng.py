"""
passgen.rng
Secure random sources consumed by the sampler.

The sampler only ever asks for "k uniformly random bits"; everything about
entropy collection stays with the operating system via secrets.SystemRandom.
"""

import logging
import os
from itertools import cycle
from secrets import SystemRandom
from typing import Iterable, Optional, Protocol

from .errors import RngUnavailable

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def getrandbits(self, k: int) -> int:
        ...


class SystemRandomSource:
    """
    CSPRNG backed by the operating system entropy pool (os.urandom).

    Construction probes the entropy source once; failure is fatal and is
    raised as RngUnavailable rather than retried.
    """

    def __init__(self):
        try:
            os.urandom(1)
        except (OSError, NotImplementedError) as e:
            raise RngUnavailable(f"system entropy source unavailable: {e}") from e
        self._rand = SystemRandom()
        logger.debug("seeded system random source")

    def getrandbits(self, k: int) -> int:
        return self._rand.getrandbits(k)


_default: Optional[SystemRandomSource] = None


def default_source() -> SystemRandomSource:
    """Process-wide source, created on first use. Not for concurrent callers."""
    global _default
    if _default is None:
        _default = SystemRandomSource()
    return _default


class RecordedSource:
    """
    Replays a fixed list of integers from getrandbits, cycling when exhausted.
    Makes generation fully deterministic.
    """

    def __init__(self, values: Iterable[int]):
        self.values = list(values)
        if not self.values:
            raise ValueError("RecordedSource needs at least one value")
        self._it = cycle(self.values)
        self.calls = 0

    def getrandbits(self, k: int) -> int:
        value = next(self._it)
        if value < 0 or value >= 1 << k:
            raise ValueError(f"recorded value {value} does not fit in {k} bits")
        self.calls += 1
        return value
