"""Command-line interface: ``basenc [OPTION]... [FILE]``.

WHY: The codec engine is most often used from a shell pipeline, the way
the classic coreutils basenc is. The CLI turns flags into a scheme,
direction, wrap column and ignore-garbage setting, opens the input and
hands everything to the stream drivers.

HOW: argparse builds the option set (one flag per scheme, custom actions
for the scheme and wrap checks, error() raising UsageError instead of
exiting 2). main() opens FILE (or standard input for "-"), runs
encode_stream() or decode_stream() against binary standard output, and
maps every BasencError to a "PROG: message" line on stderr and exit
status 1.

RULES:
- Exactly one encoding flag is required; repeating the same one is fine
- FILE defaults to "-" (standard input); I/O is always binary
- -w/--wrap applies to encoding only, -i/--ignore-garbage to decoding only
- Errors go to stderr as "PROG: message"; exit status 1, usage errors included
- Partial decode output already written is left in place on error
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import BinaryIO, List, Optional

from basenc import __version__, config
from basenc.core.errors import BasencError
from basenc.core.schemes import Scheme
from basenc.stream.drivers import decode_stream, encode_stream

logger = logging.getLogger(__name__)

_SCHEME_HELP = {
    Scheme.BASE64: "same as 'base64' program (RFC4648 section 4)",
    Scheme.BASE64URL: "file- and url-safe base64 (RFC4648 section 5)",
    Scheme.BASE32: "same as 'base32' program (RFC4648 section 6)",
    Scheme.BASE32HEX: "extended hex alphabet base32 (RFC4648 section 7)",
    Scheme.BASE16: "hex encoding (RFC4648 section 8)",
    Scheme.BASE2MSBF: "bit string with most significant bit (msb) first",
    Scheme.BASE2LSBF: "bit string with least significant bit (lsb) first",
    Scheme.Z85: "ascii85-like encoding (ZeroMQ spec:32/Z85); when encoding, "
                "input length must be a multiple of 4; when decoding, "
                "input length must be a multiple of 5",
}

_EPILOG = (
    "When decoding, the input may contain newlines in addition to the bytes of "
    "the formal alphabet.  Use --ignore-garbage to attempt to recover from any "
    "other non-alphabet bytes in the encoded stream."
)


def program_name(argv0: Optional[str] = None) -> str:
    """Derive the program name from argv[0]: basename, minus a trailing ``.exe``."""
    name = argv0 if argv0 is not None else (sys.argv[0] if sys.argv else "")
    name = name.replace("\\", "/").rsplit("/", 1)[-1]
    if name.endswith(".exe") and len(name) > 4:
        name = name[:-4]
    if not name or name == "__main__.py":
        return "basenc"
    return name


class UsageError(Exception):
    """Raised instead of argparse's own exit for a bad command line."""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors to main() instead of exiting 2."""

    def error(self, message: str) -> None:
        raise UsageError(message)


class _SchemeAction(argparse.Action):
    """Selects a scheme; repeating the same flag is fine, mixing two is not."""

    def __init__(self, option_strings, dest, **kwargs) -> None:
        super().__init__(option_strings, dest, nargs=0, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None) -> None:
        current = getattr(namespace, self.dest, None)
        if current is not None and current is not self.const:
            parser.error("multiple encoding types specified")
        setattr(namespace, self.dest, self.const)


class _WrapAction(argparse.Action):
    """Parses -w/--wrap COLS as a non-negative decimal integer."""

    def __call__(self, parser, namespace, values, option_string=None) -> None:
        try:
            column = int(values, 10)
        except ValueError:
            column = -1
        if column < 0:
            parser.error("invalid wrap size: '{}'".format(values))
        setattr(namespace, self.dest, column)


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() lets tests inspect
    the option set without running a conversion.
    """
    parser = _ArgumentParser(
        prog=prog or program_name(),
        usage="%(prog)s [OPTION]... [FILE]",
        description="Encode or decode FILE, or standard input, to standard output. "
                    "With no FILE, or when FILE is -, read standard input.",
        epilog=_EPILOG,
    )

    for scheme in Scheme:
        parser.add_argument(
            "--{}".format(scheme.value),
            dest="scheme",
            action=_SchemeAction,
            const=scheme,
            help=_SCHEME_HELP[scheme],
        )

    parser.add_argument(
        "-d", "--decode",
        action="store_true",
        help="decode data",
    )
    parser.add_argument(
        "-i", "--ignore-garbage",
        action="store_true",
        help="when decoding, ignore non-alphabet characters",
    )
    parser.add_argument(
        "-w", "--wrap",
        metavar="COLS",
        action=_WrapAction,
        default=config.DEFAULT_WRAP_COLUMN,
        help="wrap encoded lines after COLS character (default %(default)s). "
             "Use 0 to disable line wrapping",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        metavar="FILE",
        help="input file (default: standard input)",
    )
    return parser


def _error(prog: str, message: str, arg: Optional[str] = None) -> None:
    if arg:
        print("{}: {}: {}".format(prog, arg, message), file=sys.stderr, flush=True)
    else:
        print("{}: {}".format(prog, message), file=sys.stderr, flush=True)


def _run(args: argparse.Namespace, source: BinaryIO, sink: BinaryIO) -> None:
    if args.decode:
        decode_stream(source, sink, args.scheme, ignore_garbage=args.ignore_garbage)
    else:
        encode_stream(source, sink, args.scheme, wrap_column=args.wrap)


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> int:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv[1:] (normal CLI invocation)
    - stdin/stdout default to the binary buffers of the process streams;
      tests pass in-memory streams instead
    - Returns the exit status (0 success, 1 failure); argparse usage
      errors exit with status 2 on their own
    """
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    prog = program_name()
    parser = build_parser(prog)
    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        _error(prog, str(exc))
        return 1

    if args.scheme is None:
        _error(prog, "missing encoding type")
        print("Try '{} --help' for more information.".format(prog), file=sys.stderr)
        return 1

    if stdin is None:
        stdin = sys.stdin.buffer
    if stdout is None:
        stdout = sys.stdout.buffer

    try:
        if args.file == "-":
            _run(args, stdin, stdout)
        else:
            try:
                source = open(args.file, "rb")
            except OSError as exc:
                _error(prog, exc.strerror or str(exc), arg=args.file)
                return 1
            with source:
                _run(args, source, stdout)
    except BasencError as exc:
        logger.debug("Run failed: %r", exc)
        _error(prog, str(exc))
        return 1
    except KeyboardInterrupt:
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
