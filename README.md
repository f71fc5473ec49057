# vigenshift

`vigenshift` encodes a text file with a Vigenère cipher. The cipher works over the
95 printable ASCII characters, from space to `~`. Each encoding makes fresh key
material:

* two independently shuffled copies of the printable alphabet,
* a random key of 95 characters drawn from the first alphabet,
* three random shift values in the range -94 to 94. These are written as
  `shift_1:`, `shift_2:` and `shift_3:` markers at the front of the plaintext
  before it is encrypted.

Any character outside the printable alphabet, such as a newline, is copied unchanged
and does not move the key forward.

Files are read and written byte for byte (as Latin-1). When a file is read, a final
newline is added if the last line lacks one.

Encoding a file writes `Encrypted.bin`. Decoding reads `Encrypted.bin` back using the
two alphabets and the key, and writes `Decrypted<ext>`. Here `<ext>` is everything
from the first `.` of the original file name onwards, for example `Decrypted.txt`
for `notes.txt`. With no `.` in the name, the output is plain `Decrypted`. The shift
markers are removed from the recovered text. When at least three markers are found,
their values are applied as cyclic rotations to the first alphabet, the second
alphabet and the key. The rotated material is what decoding reports. An empty input
file is reported as an error and nothing is written.

This is a classical cipher and is meant for study. It does not protect real secrets.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Encrypt a file into `Encrypted.bin` in the current directory (or in `--dir`). The
alphabets and key are printed. `--keys-out` also saves them, one per line:

```
vigenshift encode notes.txt --keys-out keys.txt
```

Decrypt `Encrypted.bin` from the current directory (or `--dir`) into `Decrypted.txt`,
using the saved key file:

```
vigenshift decode notes.txt --keys keys.txt
```

You can also give the key material directly. Use `--alphabet`, `--cipher-alphabet`
and `--key` together, each in the `--option=VALUE` form, because the values can
start with `-` and contain spaces. Decoding prints the rotated alphabets and key.

On failure the command prints an error to standard error and exits with status 1.
The failures are an empty file, a file that cannot be opened, and key material that
does not fit the alphabets.

```
vigenshift --help
```

## Library use

The cipher primitives live in `vigenshift.cipher`:

```python
import random

from vigenshift.cipher import decrypt, encrypt, random_key, shuffled_alphabet

rng = random.Random()
alphabet = shuffled_alphabet(rng)
cipher_alphabet = shuffled_alphabet(rng)
key = random_key(95, alphabet, rng)

ciphertext = encrypt("attack at dawn\n", key, alphabet, cipher_alphabet)
assert decrypt(ciphertext, key, alphabet, cipher_alphabet) == "attack at dawn\n"
```

`encrypt` and `decrypt` raise `ValueError` in three cases: the key is empty, the key
holds a character outside the cipher alphabet, or the two alphabets do not hold the
same characters.

Other helpers in `vigenshift.cipher`:

* `printable_alphabet()` returns the 95 printable ASCII characters in order.
* `random_shift(rng)` draws a shift from -94 to 94.
* `rotate(text, shift)` rotates a string left by `shift` places. Negative shifts
  rotate right. An empty string raises `ValueError`.
* `extract_shifts(text)` returns the numbers from all `shift_<name>:<number>`
  markers, in order.
* `strip_shifts(text)` removes those markers.

`vigenshift.session` covers the file workflow:

* `encode_file(source, output_dir=".", rng=None)` encrypts a file and returns a
  `KeyMaterial` holding `alphabet`, `cipher_alphabet` and `key`. Without an `rng` it
  uses the system's random source.
* `decode_file(source_name, keys, output_dir=".")` reverses it. It returns the
  rotated `KeyMaterial` and the recovered text.
* `KeyMaterial.unshifted(shifts)` applies three shifts as rotations.
* `read_text(path)` and `write_text(path, content)` read and write the files.
* `decrypted_name(source_name)` gives the output file name.

`EmptyFileError`, a subclass of `ValueError`, is raised when the input has no content.

## What it does not do

There is no graphical window. The package is used from the command line or as a
library. Key material is not stored anywhere by the package. Keep the printed values,
or the file written with `--keys-out`, to be able to decode later.