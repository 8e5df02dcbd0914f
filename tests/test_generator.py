import random
from collections import Counter

import pytest

from passgen.generator import WORD_BITS, generate, randbelow, sample
from passgen.models import ALL_CLASSES, AlphabetSpec, CharacterClass, DIGITS, LOWERCASE, SYMBOLS, UPPERCASE
from passgen.policy import resolve
from passgen.rng import RecordedSource

WORD_TOP = (1 << WORD_BITS) - 1


def _chi_square(counts, n, total):
    expected = total / n
    return sum((counts.get(i, 0) - expected) ** 2 / expected for i in range(n))


def test_length_and_classes():
    pw = generate(resolve(12, "random"))
    assert len(pw) == 12
    allowed = set(LOWERCASE + UPPERCASE + DIGITS + SYMBOLS)
    assert set(pw) <= allowed


def test_length_invariant_across_sizes():
    for length in (1, 2, 7, 64, 255, 1000):
        for cfg in ({"named_policy": "pin"}, {"numbers": True, "symbols": True}, {}):
            assert len(generate(resolve(length, **cfg))) == length


def test_default_is_lowercase_only():
    for _ in range(50):
        pw = generate(resolve(32))
        assert all(c in LOWERCASE for c in pw)


def test_pin_ignores_toggles():
    pw = generate(resolve(64, "pin", symbols=True, capitalized=True, numbers=True))
    assert len(pw) == 64
    assert pw.isdigit()


def test_alphabet_containment_per_toggle():
    pw = generate(resolve(500, numbers=True))
    assert set(pw) <= set(LOWERCASE + DIGITS)
    pw = generate(resolve(500, symbols=True))
    assert set(pw) <= set(LOWERCASE + SYMBOLS)
    pw = generate(resolve(500, capitalized=True))
    assert set(pw) <= set(LOWERCASE + UPPERCASE)


def test_recorded_stream_is_deterministic():
    # indices into the full alphabet: a, A, 0, first symbol, last symbol
    rng = RecordedSource([0, 26, 52, 62, 93])
    assert sample(ALL_CLASSES, 5, rng) == "aA0!~"

    policy = resolve(6, "pin")
    assert generate(policy, RecordedSource([3, 1, 4, 1, 5, 9])) == "314159"
    assert generate(policy, RecordedSource([3, 1, 4, 1, 5, 9])) == "314159"


def test_recorded_values_reduce_modulo_alphabet():
    # 26 wraps to the first lowercase letter
    assert generate(resolve(5), RecordedSource([0, 1, 2, 25, 26])) == "abcza"


def test_repeats_are_allowed():
    assert generate(resolve(8, "pin"), RecordedSource([7])) == "77777777"


def test_randbelow_rejects_top_of_word_range():
    # 2**32 is not a multiple of 3, so the highest word is rejected
    rng = RecordedSource([WORD_TOP, 5])
    assert randbelow(rng, 3) == 2
    assert rng.calls == 2


def test_randbelow_rejection_zone_for_full_alphabet():
    n = len(ALL_CLASSES.alphabet())
    limit = ((1 << WORD_BITS) // n) * n
    rng = RecordedSource([limit, limit + 1, WORD_TOP, limit - 1])
    assert randbelow(rng, n) == (limit - 1) % n
    assert rng.calls == 4


def test_randbelow_power_of_two_never_rejects():
    rng = RecordedSource([WORD_TOP])
    assert randbelow(rng, 16) == 15
    assert rng.calls == 1


def test_randbelow_bounds():
    rng = RecordedSource([0])
    assert randbelow(rng, 1) == 0
    with pytest.raises(ValueError):
        randbelow(rng, 0)
    with pytest.raises(ValueError):
        randbelow(rng, (1 << WORD_BITS) + 1)


def test_uniform_character_frequencies():
    spec = ALL_CLASSES
    alphabet = spec.alphabet()
    n = len(alphabet)
    total = 100_000
    pw = sample(spec, total, random.Random(20240611))
    counts = Counter(pw)
    assert set(counts) == set(alphabet)
    expected = total / n
    for ch in alphabet:
        assert abs(counts[ch] - expected) < 0.15 * expected


def test_no_modulo_bias_chi_square():
    # none of these sizes divide 2**32
    rng = random.Random(99)
    for n in (3, 10, 36, 62, 94):
        total = 60_000
        counts = Counter(randbelow(rng, n) for _ in range(total))
        # df = n - 1; generous bound well past the 0.1% critical value
        assert _chi_square(counts, n, total) < (n - 1) + 6 * (2 * (n - 1)) ** 0.5 + 10


def test_naive_modulo_would_be_biased():
    # reduce a 2-bit source mod 3: residue 0 appears twice as often.
    # randbelow over the same words rejects 3 and stays flat.
    words = [0, 1, 2, 3] * 1000
    naive = Counter(w % 3 for w in words)
    assert naive[0] == 2 * naive[1]

    n = 3
    limit = ((1 << WORD_BITS) // n) * n
    scaled = [limit - 3, limit - 2, limit - 1, limit] * 1000
    rng = RecordedSource(scaled)
    fair = Counter(randbelow(rng, n) for _ in range(3000))
    assert fair[0] == fair[1] == fair[2] == 1000


def test_single_class_spec():
    pw = sample(AlphabetSpec([CharacterClass.UPPERCASE]), 40, random.Random(1))
    assert set(pw) <= set(UPPERCASE)
