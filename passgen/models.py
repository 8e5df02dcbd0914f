"""
passgen.models
Character classes, named policies and the resolved alphabet they produce.
"""

import enum
import string
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, Tuple, Union

from .errors import ConfigError


LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
SYMBOLS = string.punctuation


class CharacterClass(enum.Enum):
    # declaration order is the canonical alphabet order
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    DIGITS = "digits"
    SYMBOLS = "symbols"

    @property
    def characters(self) -> str:
        return CHARSETS[self]


CHARSETS: Dict[CharacterClass, str] = {
    CharacterClass.LOWERCASE: LOWERCASE,
    CharacterClass.UPPERCASE: UPPERCASE,
    CharacterClass.DIGITS: DIGITS,
    CharacterClass.SYMBOLS: SYMBOLS,
}

_missing = set(CharacterClass) - set(CHARSETS)
if _missing:
    raise RuntimeError(f"no character set declared for {sorted(c.name for c in _missing)}")

_all_chars = "".join(CHARSETS.values())
if len(set(_all_chars)) != len(_all_chars):
    raise RuntimeError("character sets must be disjoint")
del _missing, _all_chars


class AlphabetSpec:
    """
    Non-empty, immutable set of character classes.

    Iteration and alphabet() always follow the canonical class order, so two
    specs holding the same classes always produce the same alphabet.
    """

    __slots__ = ("_classes",)

    def __init__(self, classes: Iterable[CharacterClass]):
        members = frozenset(classes)
        if not members:
            raise ConfigError("at least one character class must be enabled")
        for c in members:
            if not isinstance(c, CharacterClass):
                raise ConfigError(f"not a character class: {c!r}")
        self._classes: FrozenSet[CharacterClass] = members

    @property
    def classes(self) -> Tuple[CharacterClass, ...]:
        return tuple(c for c in CharacterClass if c in self._classes)

    def alphabet(self) -> str:
        return "".join(c.characters for c in self.classes)

    def __contains__(self, item: object) -> bool:
        return item in self._classes

    def __iter__(self):
        return iter(self.classes)

    def __len__(self) -> int:
        return len(self._classes)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AlphabetSpec):
            return self._classes == other._classes
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._classes)

    def __repr__(self) -> str:
        return f"AlphabetSpec({', '.join(c.name for c in self.classes)})"


ALL_CLASSES = AlphabetSpec(CharacterClass)


class NamedPolicy(enum.Enum):
    RANDOM = "random"
    PIN = "pin"
    MEMORABLE = "memorable"

    @classmethod
    def parse(cls, value: Union["NamedPolicy", str]) -> "NamedPolicy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ConfigError(f"unknown password type {value!r} (choose from {choices})") from None

    @property
    def spec(self) -> AlphabetSpec:
        return POLICY_SPECS[self]


# memorable has no wordlist; it draws from the same classes as random
POLICY_SPECS: Dict[NamedPolicy, AlphabetSpec] = {
    NamedPolicy.RANDOM: ALL_CLASSES,
    NamedPolicy.PIN: AlphabetSpec([CharacterClass.DIGITS]),
    NamedPolicy.MEMORABLE: ALL_CLASSES,
}

if set(POLICY_SPECS) != set(NamedPolicy):
    raise RuntimeError("every named policy needs an alphabet spec")


CUSTOM_POLICY = "custom"


@dataclass(frozen=True)
class ResolvedPolicy:
    spec: AlphabetSpec
    length: int
    name: str = CUSTOM_POLICY
