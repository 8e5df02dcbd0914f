"""
passgen.policy
Turn a requested length, named policy and class toggles into a ResolvedPolicy.
"""

import logging
from typing import Optional, Union

from .errors import InvalidLength
from .models import (
    AlphabetSpec,
    CharacterClass,
    CUSTOM_POLICY,
    NamedPolicy,
    ResolvedPolicy,
)

logger = logging.getLogger(__name__)

# Upper bound on a single password; anything above fails before allocation.
MAX_LENGTH = 1 << 20

# Always part of a toggle-built alphabet. Only a named policy can drop it.
DEFAULT_CLASSES = frozenset({CharacterClass.LOWERCASE})


def validate_length(length: int, max_length: int = MAX_LENGTH) -> int:
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLength(f"length must be an integer, got {length!r}")
    if length <= 0:
        raise InvalidLength(f"length must be > 0, got {length}")
    if length > max_length:
        raise InvalidLength(f"length must be <= {max_length}, got {length}")
    return length


def spec_from_toggles(numbers: bool = False, symbols: bool = False, capitalized: bool = False) -> AlphabetSpec:
    classes = set(DEFAULT_CLASSES)
    if numbers:
        classes.add(CharacterClass.DIGITS)
    if symbols:
        classes.add(CharacterClass.SYMBOLS)
    if capitalized:
        classes.add(CharacterClass.UPPERCASE)
    return AlphabetSpec(classes)


def resolve(
    length: int,
    named_policy: Optional[Union[NamedPolicy, str]] = None,
    numbers: bool = False,
    symbols: bool = False,
    capitalized: bool = False,
    max_length: int = MAX_LENGTH,
) -> ResolvedPolicy:
    """
    Resolve a generation request.

    A named policy fully determines the alphabet and the toggles are ignored;
    without one the alphabet is lowercase plus whatever the toggles enable.
    Raises InvalidLength before anything else is looked at.
    """
    length = validate_length(length, max_length)

    if named_policy is not None:
        policy = NamedPolicy.parse(named_policy)
        if numbers or symbols or capitalized:
            logger.debug("password type %r set, ignoring character toggles", policy.value)
        return ResolvedPolicy(spec=policy.spec, length=length, name=policy.value)

    spec = spec_from_toggles(numbers=numbers, symbols=symbols, capitalized=capitalized)
    return ResolvedPolicy(spec=spec, length=length, name=CUSTOM_POLICY)
