"""Command-line front end for encoding and decoding files."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .session import EmptyFileError, KeyMaterial, decode_file, encode_file


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with ``encode`` and ``decode`` commands."""
    parser = argparse.ArgumentParser(
        prog="vigenshift",
        description="Encrypt and decrypt files with a mixed-alphabet Vigenère cipher.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    encode = commands.add_parser("encode", help="encrypt a file into Encrypted.bin")
    encode.add_argument("file", help="file to encrypt, with its extension (e.g. text.txt)")
    encode.add_argument("--dir", default=".", help="directory for Encrypted.bin")
    encode.add_argument(
        "--keys-out", help="write alphabet, cipher alphabet and key to this file, one per line"
    )

    decode = commands.add_parser("decode", help="decrypt Encrypted.bin")
    decode.add_argument("file", help="original file name; its extension names the output")
    decode.add_argument("--dir", default=".", help="directory holding Encrypted.bin")
    decode.add_argument("--keys", help="file written by 'encode --keys-out'")
    decode.add_argument("--alphabet", help="mixed alphabet (use --alphabet=VALUE)")
    decode.add_argument("--cipher-alphabet", help="mixed cipher alphabet (use --cipher-alphabet=VALUE)")
    decode.add_argument("--key", help="random key (use --key=VALUE)")
    return parser


def _show(keys: KeyMaterial) -> None:
    print(f"Mixed ascii alphabet: {keys.alphabet}")
    print(f"Mixed ascii alphabet: {keys.cipher_alphabet}")
    print(f"Random Key: {keys.key}")


def _load_keys(path: str) -> KeyMaterial:
    lines = Path(path).read_text(encoding="latin-1").split("\n")
    if len(lines) < 3:
        raise ValueError(f"key file {path} needs three lines")
    return KeyMaterial(lines[0], lines[1], lines[2])


def _save_keys(path: str, keys: KeyMaterial) -> None:
    content = "\n".join((keys.alphabet, keys.cipher_alphabet, keys.key)) + "\n"
    Path(path).write_text(content, encoding="latin-1", newline="\n")


def main(argv: list[str] | None = None) -> int:
    """Run the command line; returns the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "decode" and args.keys is None:
        if None in (args.alphabet, args.cipher_alphabet, args.key):
            parser.error("decode needs --keys or all of --alphabet, --cipher-alphabet and --key")

    try:
        if args.command == "encode":
            keys = encode_file(args.file, args.dir)
            if args.keys_out:
                _save_keys(args.keys_out, keys)
            _show(keys)
        else:
            if args.keys is not None:
                keys = _load_keys(args.keys)
            else:
                keys = KeyMaterial(args.alphabet, args.cipher_alphabet, args.key)
            shown, _ = decode_file(args.file, keys, args.dir)
            _show(shown)
    except EmptyFileError:
        print("Error: File is empty!", file=sys.stderr)
        return 1
    except OSError as exc:
        name = exc.filename if exc.filename is not None else ""
        print(f'Error: Unable to open file "{name}".', file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())