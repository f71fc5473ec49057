"""Vigenère cipher over a mixed printable-ASCII alphabet, with shift headers."""

from __future__ import annotations

import itertools
import random
import re
from collections.abc import Iterator

FIRST_PRINTABLE = 32
LAST_PRINTABLE = 126
SHIFT_LIMIT = 94

_SHIFT_PATTERN = re.compile(r"shift_\w+:\s*(-?\d+)", re.ASCII)


def printable_alphabet() -> str:
    """Return the printable ASCII characters from space to tilde, in order."""
    return "".join(map(chr, range(FIRST_PRINTABLE, LAST_PRINTABLE + 1)))


def shuffled_alphabet(rng: random.Random) -> str:
    """Return the printable alphabet in an order chosen by ``rng``."""
    letters = list(printable_alphabet())
    rng.shuffle(letters)
    return "".join(letters)


def random_key(length: int, alphabet: str, rng: random.Random) -> str:
    """Return a key of ``length`` characters drawn at random from ``alphabet``."""
    if not alphabet:
        raise ValueError("alphabet must not be empty")
    return "".join(rng.choice(alphabet) for _ in range(length))


def random_shift(rng: random.Random) -> int:
    """Return a random shift between -94 and 94 inclusive."""
    return rng.randint(-SHIFT_LIMIT, SHIFT_LIMIT)


def _key_shifts(key: str, cipher_alphabet: str) -> Iterator[int]:
    if not key:
        raise ValueError("key must not be empty")
    try:
        shifts = [cipher_alphabet.index(ch) for ch in key]
    except ValueError:
        raise ValueError("key contains a character outside the cipher alphabet") from None
    return itertools.cycle(shifts)


def encrypt(text: str, key: str, alphabet: str, cipher_alphabet: str) -> str:
    """Encrypt ``text``; characters outside ``alphabet`` pass through unchanged.

    Only enciphered characters advance the position in the key.
    """
    shifts = _key_shifts(key, cipher_alphabet)
    size = len(cipher_alphabet)
    out = []
    for ch in text:
        if ch in alphabet:
            index = cipher_alphabet.find(ch)
            if index < 0:
                raise ValueError(f"character {ch!r} is missing from the cipher alphabet")
            out.append(cipher_alphabet[(index + next(shifts)) % size])
        else:
            out.append(ch)
    return "".join(out)


def decrypt(text: str, key: str, alphabet: str, cipher_alphabet: str) -> str:
    """Reverse :func:`encrypt` with the same key and alphabets."""
    shifts = _key_shifts(key, cipher_alphabet)
    size = len(cipher_alphabet)
    out = []
    for ch in text:
        if ch in cipher_alphabet:
            plain = cipher_alphabet[(cipher_alphabet.index(ch) - next(shifts)) % size]
            if plain not in alphabet:
                raise ValueError(f"character {plain!r} is missing from the alphabet")
            out.append(plain)
        else:
            out.append(ch)
    return "".join(out)


def rotate(text: str, shift: int) -> str:
    """Rotate ``text`` left by ``shift`` positions; negative shifts rotate right."""
    if not text:
        raise ValueError("cannot rotate an empty string")
    offset = shift % len(text)
    return text[offset:] + text[:offset]


def extract_shifts(text: str) -> list[int]:
    """Return the numbers of every ``shift_<name>:<number>`` marker, in order."""
    return [int(number) for number in _SHIFT_PATTERN.findall(text)]


def strip_shifts(text: str) -> str:
    """Remove every ``shift_<name>:<number>`` marker from ``text``."""
    return _SHIFT_PATTERN.sub("", text)