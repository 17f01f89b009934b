"""Alphabet tables for every scheme.

WHY: Encoding maps a group value to a symbol and decoding maps a symbol
back to its value. Both directions must be O(1) and must never change
while a stream is being processed.

HOW: Each Alphabet is a frozen dataclass holding the ordered symbols and
a 256-slot reverse table built in __post_init__. Case-insensitive
alphabets register both cases in the reverse table. ALPHABETS maps each
Scheme to its table; symbol_of() and value_of() are the lookup contract.

RULES:
- Symbols and byte values are ints (0..255); codecs work on bytes
- value_of() returns None for anything outside the alphabet
- base32 family and base16 decode case-insensitively, encode upper case
- base64 family and z85 are case-sensitive
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from basenc.core.errors import UnsupportedSchemeError
from basenc.core.schemes import Scheme

_INVALID = -1


@dataclass(frozen=True)
class Alphabet:
    """An ordered symbol set plus its inverse mapping.

    Attributes:
        symbols: The symbols in value order; ``symbols[v]`` encodes value v.
        case_insensitive: Accept lower-case letters as their upper-case symbol.
    """

    symbols: bytes
    case_insensitive: bool = False
    _reverse: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(set(self.symbols)) != len(self.symbols):
            raise ValueError("alphabet symbols must be unique")
        table = [_INVALID] * 256
        for value, symbol in enumerate(self.symbols):
            table[symbol] = value
            if self.case_insensitive:
                table[ord(chr(symbol).lower())] = value
        object.__setattr__(self, "_reverse", tuple(table))

    def __len__(self) -> int:
        return len(self.symbols)

    @property
    def reverse_table(self) -> Tuple[int, ...]:
        """The 256-slot symbol → value table, -1 marking invalid slots."""
        return self._reverse

    def symbol_of(self, value: int) -> int:
        if not 0 <= value < len(self.symbols):
            raise ValueError(
                "value {} outside alphabet of {} symbols".format(value, len(self.symbols))
            )
        return self.symbols[value]

    def value_of(self, symbol: int) -> Optional[int]:
        value = self._reverse[symbol]
        return None if value == _INVALID else value

    def is_valid(self, symbol: int) -> bool:
        return self._reverse[symbol] != _INVALID


_UPPER = b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_LOWER = b"abcdefghijklmnopqrstuvwxyz"
_DIGITS = b"0123456789"

BASE64 = Alphabet(_UPPER + _LOWER + _DIGITS + b"+/")
BASE64URL = Alphabet(_UPPER + _LOWER + _DIGITS + b"-_")
BASE32 = Alphabet(_UPPER + b"234567", case_insensitive=True)
BASE32HEX = Alphabet(_DIGITS + b"ABCDEFGHIJKLMNOPQRSTUV", case_insensitive=True)
BASE16 = Alphabet(_DIGITS + b"ABCDEF", case_insensitive=True)
BASE2 = Alphabet(b"01")
Z85 = Alphabet(_DIGITS + _LOWER + _UPPER + b".-:+=^!/*?&<>()[]{}@%$#")

ALPHABETS: Dict[Scheme, Alphabet] = {
    Scheme.BASE64: BASE64,
    Scheme.BASE64URL: BASE64URL,
    Scheme.BASE32: BASE32,
    Scheme.BASE32HEX: BASE32HEX,
    Scheme.BASE16: BASE16,
    Scheme.BASE2MSBF: BASE2,
    Scheme.BASE2LSBF: BASE2,
    Scheme.Z85: Z85,
}

# z85 symbols all live in '!'..'}'; this is the classic table indexed by symbol - 33.
Z85_DECODE_TABLE: Tuple[int, ...] = Z85.reverse_table[33:126]

PAD = ord("=")
LINE_BREAKS = frozenset(b"\r\n")


def get_alphabet(scheme: Scheme | str) -> Alphabet:
    """Return the alphabet table for a scheme.

    Raises:
        UnsupportedSchemeError: If the scheme is unknown.
    """
    try:
        return ALPHABETS[Scheme.parse(scheme)]
    except KeyError:
        raise UnsupportedSchemeError(scheme) from None


def symbol_of(scheme: Scheme | str, value: int) -> int:
    """Map a value ``0..N-1`` to its symbol byte in the scheme's alphabet."""
    return get_alphabet(scheme).symbol_of(value)


def value_of(scheme: Scheme | str, symbol: int) -> Optional[int]:
    """Map a symbol byte to its value, or None if it is not in the alphabet."""
    return get_alphabet(scheme).value_of(symbol)
