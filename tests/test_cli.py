import pytest

from vigenshift.cli import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args(["encode", "x.txt"])
    assert args.command == "encode"
    assert args.file == "x.txt"
    assert args.dir == "."
    assert args.keys_out is None


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_encode_then_decode_with_keys_file(tmp_path, capsys):
    source = tmp_path / "text.txt"
    original = "The quick brown fox\njumps over\n"
    source.write_text(original, encoding="latin-1")
    keys_file = tmp_path / "keys.txt"

    assert main(["encode", str(source), "--dir", str(tmp_path), "--keys-out", str(keys_file)]) == 0
    assert "Random Key:" in capsys.readouterr().out
    assert (tmp_path / "Encrypted.bin").exists()

    assert main(["decode", "text.txt", "--dir", str(tmp_path), "--keys", str(keys_file)]) == 0
    assert (tmp_path / "Decrypted.txt").read_text(encoding="latin-1") == original


def test_decode_with_explicit_options(tmp_path):
    source = tmp_path / "note.md"
    source.write_text("# Title\nbody", encoding="latin-1")
    keys_file = tmp_path / "keys.txt"
    assert main(["encode", str(source), "--dir", str(tmp_path), "--keys-out", str(keys_file)]) == 0
    alphabet, cipher_alphabet, key = keys_file.read_text(encoding="latin-1").split("\n")[:3]

    status = main(
        [
            "decode",
            "note.md",
            "--dir",
            str(tmp_path),
            f"--alphabet={alphabet}",
            f"--cipher-alphabet={cipher_alphabet}",
            f"--key={key}",
        ]
    )
    assert status == 0
    assert (tmp_path / "Decrypted.md").read_text(encoding="latin-1") == "# Title\nbody\n"


def test_decode_without_keys_is_usage_error(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["decode", "text.txt", "--dir", str(tmp_path)])
    assert info.value.code == 2


def test_encode_empty_file_fails(tmp_path, capsys):
    source = tmp_path / "empty.txt"
    source.write_bytes(b"")
    assert main(["encode", str(source), "--dir", str(tmp_path)]) == 1
    assert "File is empty!" in capsys.readouterr().err


def test_encode_missing_file_fails(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert main(["encode", str(missing), "--dir", str(tmp_path)]) == 1
    assert "Unable to open file" in capsys.readouterr().err