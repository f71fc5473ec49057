"""File encoding and decoding sessions built on the cipher."""

from __future__ import annotations

import os
import random
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Union

from .cipher import (
    decrypt,
    encrypt,
    extract_shifts,
    random_key,
    random_shift,
    rotate,
    shuffled_alphabet,
    strip_shifts,
)

PathLike = Union[str, "os.PathLike[str]"]

ENCRYPTED_NAME = "Encrypted.bin"
DECRYPTED_STEM = "Decrypted"
KEY_LENGTH = 95
_ENCODING = "latin-1"


class EmptyFileError(ValueError):
    """Raised when the file to process has no content."""

    def __init__(self, path: PathLike) -> None:
        super().__init__(f"File is empty: {os.fspath(path)}")
        self.path = path


@dataclass(frozen=True)
class KeyMaterial:
    """The two mixed alphabets and the key that belong to one encoding."""

    alphabet: str
    cipher_alphabet: str
    key: str

    def unshifted(self, shifts: list[int]) -> KeyMaterial:
        """Rotate each field by the matching shift, when three shifts are given."""
        if len(shifts) < 3:
            return self
        return replace(
            self,
            alphabet=rotate(self.alphabet, shifts[0]),
            cipher_alphabet=rotate(self.cipher_alphabet, shifts[1]),
            key=rotate(self.key, shifts[2]),
        )


def read_text(path: PathLike) -> str:
    """Read a file byte for byte; every line, the last included, ends in a newline."""
    data = Path(path).read_bytes().decode(_ENCODING)
    if data and not data.endswith("\n"):
        data += "\n"
    return data


def write_text(path: PathLike, content: str) -> None:
    """Write ``content`` byte for byte, replacing the file."""
    Path(path).write_bytes(content.encode(_ENCODING))


def decrypted_name(source_name: str) -> str:
    """Name of the decrypted file: ``Decrypted`` plus the source's extension."""
    dot = source_name.find(".")
    return DECRYPTED_STEM + (source_name[dot:] if dot >= 0 else "")


def encode_file(
    source: PathLike,
    output_dir: PathLike = ".",
    rng: random.Random | None = None,
) -> KeyMaterial:
    """Encrypt ``source`` into ``Encrypted.bin`` in ``output_dir``.

    Returns the freshly generated alphabets and key needed to decode it.
    """
    rng = rng if rng is not None else random.SystemRandom()
    alphabet = shuffled_alphabet(rng)
    cipher_alphabet = shuffled_alphabet(rng)
    key = random_key(KEY_LENGTH, alphabet, rng)

    message = read_text(source)
    if not message:
        raise EmptyFileError(source)

    header = "".join(f"shift_{n}:{random_shift(rng)}" for n in (1, 2, 3))
    encrypted = encrypt(header + message, key, alphabet, cipher_alphabet)
    write_text(Path(output_dir) / ENCRYPTED_NAME, encrypted)
    return KeyMaterial(alphabet, cipher_alphabet, key)


def decode_file(
    source_name: str,
    keys: KeyMaterial,
    output_dir: PathLike = ".",
) -> tuple[KeyMaterial, str]:
    """Decrypt ``Encrypted.bin`` in ``output_dir`` and write the plain text.

    The output is named after ``source_name``'s extension. Returns the key
    material rotated by the embedded shifts, and the recovered text.
    """
    encrypted_path = Path(output_dir) / ENCRYPTED_NAME
    message = read_text(encrypted_path)
    if not message:
        raise EmptyFileError(encrypted_path)

    message = decrypt(message, keys.key, keys.alphabet, keys.cipher_alphabet)
    shown = keys.unshifted(extract_shifts(message))
    plain = strip_shifts(message)
    write_text(Path(output_dir) / decrypted_name(source_name), plain)
    return shown, plain