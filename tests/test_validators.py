import random

import pytest

from cnpjkit.codec import ALPHANUMERIC_ALPHABET, NUMERIC_ALPHABET, CnpjType, generate, is_valid


@pytest.mark.parametrize("value", [
    "12345678000195",
    "12.345.678/0001-95",
    "11.222.333/0001-81",
    "12ABC34501DE35",
    "12.ABC.345/01DE-35",
    "12.abc.345/01de-35",
])
def test_accepts_valid(value):
    assert is_valid(value)

@pytest.mark.parametrize("value", [
    "123",
    "123456789012345",
    "",
    None,
    "12345678000100",
    "12!345?78/0001-95",
    "12ABC34501DE36",
])
def test_rejects_invalid(value):
    assert not is_valid(value)

def test_rejects_flipped_last_digit():
    good = generate(CnpjType.ALPHANUMERIC, random.Random(11))
    bad = good[:13] + ("1" if good[13] == "0" else "0")
    assert not is_valid(bad)

@pytest.mark.parametrize("kind, alphabet", [
    (CnpjType.NUMERIC, NUMERIC_ALPHABET),
    (CnpjType.ALPHANUMERIC, ALPHANUMERIC_ALPHABET),
])
def test_single_character_mutations_are_mostly_caught(kind, alphabet):
    rng = random.Random(77)
    caught = total = 0
    for _ in range(200):
        good = generate(kind, rng)
        pos = rng.randrange(14)
        pool = NUMERIC_ALPHABET if pos >= 12 else alphabet
        ch = rng.choice([c for c in pool if c != good[pos]])
        total += 1
        caught += not is_valid(good[:pos] + ch + good[pos + 1:])
    assert caught / total > 0.8
