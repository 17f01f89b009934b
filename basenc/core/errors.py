"""Exception hierarchy for the codec engine.

WHY: Every failure is fatal to a run, but the caller (CLI or library
user) still needs to tell a corrupt input from a broken pipe. Typed
exceptions carry that distinction up the stack instead of exiting.

HOW: BasencError is the common root. I/O failures wrap the underlying
OSError via exception chaining; data errors carry the original tool's
messages.

RULES:
- Codecs and drivers raise, never print or exit
- UnsupportedSchemeError is also a ValueError (it is a configuration error)
- Messages match the classic basenc wording
"""

from __future__ import annotations

INVALID_INPUT = "invalid input"
BITS_NOT_MULTIPLE_OF_8 = "invalid input: number of bits not a multiple of 8"
Z85_ENCODE_LENGTH = "invalid input: Z85 encoding input length must be a multiple of 4"
Z85_DECODE_LENGTH = "invalid input: Z85 decoding input length must be a multiple of 5"


class BasencError(Exception):
    """Base class for every error raised by the codec engine."""


class SourceReadError(BasencError):
    """Raised when reading from the source stream fails."""

    def __init__(self, message: str = "read error") -> None:
        super().__init__(message)


class SinkWriteError(BasencError):
    """Raised when writing to the sink stream fails."""

    def __init__(self, message: str = "write error") -> None:
        super().__init__(message)


class InvalidInputError(BasencError):
    """Raised when decode input holds a symbol outside the alphabet.

    WHY: Without ignore-garbage, any byte that is neither an alphabet
    symbol nor a line break means the input is not what the caller said
    it was.

    RULES:
    - ``symbol`` is the offending byte value, or None when the whole
      group is invalid (e.g. a z85 group above 2**32 - 1)
    - ``decoded`` holds the bytes of the complete groups that preceded
      the offending symbol in the same chunk
    """

    def __init__(
        self,
        symbol: int | None = None,
        message: str = INVALID_INPUT,
        decoded: bytes = b"",
    ) -> None:
        self.symbol = symbol
        self.decoded = decoded
        super().__init__(message)


class MisalignedLengthError(BasencError):
    """Raised when a length is not a whole number of groups.

    Covers base2 leftover bits, a trailing odd base16 digit, z85 decode
    input that is not a multiple of 5 symbols and z85 encode input that
    is not a multiple of 4 bytes.
    """


class UnsupportedSchemeError(BasencError, ValueError):
    """Raised when a scheme name or value has no registered codec."""

    def __init__(self, scheme: object) -> None:
        self.scheme = scheme
        super().__init__("unsupported encoding scheme: {!r}".format(scheme))
