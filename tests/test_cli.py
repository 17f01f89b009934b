"""Tests for the command-line interface.

WHY: The CLI is the contract shell users see: option names, exit codes
and the exact shape of error messages on stderr.

HOW: Calls main() with explicit argv and in-memory stdin/stdout, and
reads stderr through capsys. The program name depends on how pytest was
launched, so assertions never hard-code it.
"""

import io

import pytest

from basenc import config
from basenc.cli import build_parser, main, program_name
from basenc.core.schemes import Scheme


def run(argv, stdin=b""):
    stdout = io.BytesIO()
    code = main(argv, stdin=io.BytesIO(stdin), stdout=stdout)
    return code, stdout.getvalue()


class TestEncodeDecode:

    def test_encode_stdin(self):
        assert run(["--base64"], b"foobar") == (0, b"Zm9vYmFy\n")

    def test_decode_stdin(self):
        assert run(["--base64", "-d"], b"Zm9vYmFy\n") == (0, b"foobar")

    def test_explicit_dash_reads_stdin(self):
        assert run(["--base32", "-"], b"f") == (0, b"MY======\n")

    def test_file_argument(self, tmp_path):
        path = tmp_path / "input.bin"
        path.write_bytes(b"\x4d\x61\x6e")
        assert run(["--base16", str(path)]) == (0, b"4D616E\n")

    @pytest.mark.parametrize("scheme", list(Scheme))
    def test_round_trip_every_scheme(self, scheme):
        data = bytes(range(64))
        code, encoded = run(["--{}".format(scheme.value)], data)
        assert code == 0
        code, decoded = run(["--{}".format(scheme.value), "--decode"], encoded)
        assert code == 0
        assert decoded == data

    def test_wrap(self):
        assert run(["--base16", "-w", "4"], b"\x00\x01\x02") == (0, b"0001\n02\n")

    def test_wrap_zero(self):
        assert run(["--base16", "--wrap=0"], b"\x00\x01\x02") == (0, b"000102")

    def test_wrap_ignored_when_decoding(self):
        assert run(["--base16", "-d", "-w", "2"], b"00010203") == (0, b"\x00\x01\x02\x03")

    def test_ignore_garbage(self):
        assert run(["--base64", "-d", "-i"], b"Zm9v*YmFy") == (0, b"foobar")

    def test_same_flag_twice(self):
        assert run(["--z85", "--z85"], b"\x86\x4f\xd2\x6f\xb5\x59\xf7\x5b") == (0, b"HelloWorld\n")

    def test_empty_input(self):
        assert run(["--base64"], b"") == (0, b"")


class TestFailures:

    def test_missing_encoding(self, capsys):
        assert run([], b"foo") == (1, b"")
        err = capsys.readouterr().err
        assert ": missing encoding type" in err
        assert "--help' for more information." in err

    def test_invalid_input(self, capsys):
        code, output = run(["--base64", "-d"], b"Zm9v*")
        assert code == 1
        assert output == b"foo"
        assert capsys.readouterr().err.rstrip().endswith(": invalid input")

    def test_z85_misaligned_encode(self, capsys):
        code, _ = run(["--z85"], b"abc")
        assert code == 1
        assert "multiple of 4" in capsys.readouterr().err

    def test_base2_misaligned_decode(self, capsys):
        code, _ = run(["--base2msbf", "-d"], b"0101")
        assert code == 1
        assert "number of bits not a multiple of 8" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        path = tmp_path / "absent.txt"
        code, output = run(["--base64", str(path)])
        assert code == 1
        assert output == b""
        assert str(path) in capsys.readouterr().err

    def test_bad_wrap(self, capsys):
        assert run(["--base64", "-w", "abc"]) == (1, b"")
        assert capsys.readouterr().err.rstrip().endswith(": invalid wrap size: 'abc'")

    def test_negative_wrap(self, capsys):
        assert run(["--base64", "--wrap=-5"]) == (1, b"")
        assert "invalid wrap size: '-5'" in capsys.readouterr().err

    def test_conflicting_encodings(self, capsys):
        assert run(["--base64", "--base32"], b"foo") == (1, b"")
        assert capsys.readouterr().err.rstrip().endswith(": multiple encoding types specified")

    def test_unknown_option(self, capsys):
        assert run(["--base64", "--rot13"]) == (1, b"")
        assert "--rot13" in capsys.readouterr().err

    def test_wrap_without_value(self):
        code, _ = run(["--base64", "-w"])
        assert code == 1


class TestParser:

    def test_defaults(self):
        args = build_parser("basenc").parse_args(["--z85"])
        assert args.scheme is Scheme.Z85
        assert args.decode is False
        assert args.ignore_garbage is False
        assert args.wrap == config.DEFAULT_WRAP_COLUMN
        assert args.file == "-"

    def test_every_scheme_has_a_flag(self):
        parser = build_parser("basenc")
        for scheme in Scheme:
            assert parser.parse_args(["--{}".format(scheme.value)]).scheme is scheme

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            build_parser("basenc").parse_args(["--version"])
        assert excinfo.value.code == 0
        assert capsys.readouterr().out.strip() == "basenc 0.1.0"

    def test_help_mentions_options(self, capsys):
        with pytest.raises(SystemExit):
            build_parser("basenc").parse_args(["--help"])
        out = capsys.readouterr().out
        for option in ("--base64url", "--ignore-garbage", "--wrap", "--z85"):
            assert option in out


class TestProgramName:

    @pytest.mark.parametrize("argv0, expected", [
        ("/usr/bin/basenc", "basenc"),
        ("basenc", "basenc"),
        ("C:\\tools\\basenc.exe", "basenc"),
        ("./mybasenc", "mybasenc"),
        ("/tmp/pkg/basenc/__main__.py", "basenc"),
        ("", "basenc"),
    ])
    def test_program_name(self, argv0, expected):
        assert program_name(argv0) == expected
