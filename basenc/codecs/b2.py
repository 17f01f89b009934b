"""Base2 bit-string codecs, most or least significant bit first.

WHY: A literal '0'/'1' rendering of the input is handy for teaching and
for poking at bit-level protocols by hand.

HOW: Each byte becomes 8 symbols. Encoding uses two precomputed
256-entry tables; decoding folds 8 values into a byte, reversing the
order for the lsb-first variant.

RULES:
- No padding; output length is always 8 * input length
- A symbol count that is not a multiple of 8 at end of input is fatal,
  with or without ignore-garbage
"""

from __future__ import annotations

from typing import List, Tuple

from basenc.core import alphabets
from basenc.core.errors import BITS_NOT_MULTIPLE_OF_8, MisalignedLengthError
from basenc.core.schemes import Scheme
from basenc.codecs.base import BaseCodec

_MSB_FIRST: Tuple[bytes, ...] = tuple(format(byte, "08b").encode("ascii") for byte in range(256))
_LSB_FIRST: Tuple[bytes, ...] = tuple(bits[::-1] for bits in _MSB_FIRST)


class Base2MsbfCodec(BaseCodec):
    scheme = Scheme.BASE2MSBF
    alphabet = alphabets.BASE2
    input_group = 1
    output_group = 8
    msb_first = True

    @property
    def name(self) -> str:
        return "Base2 (msb first)"

    def encode(self, data: bytes) -> bytes:
        table = _MSB_FIRST if self.msb_first else _LSB_FIRST
        return b"".join(table[byte] for byte in data)

    def decode_groups(self, values: List[int]) -> bytes:
        out = bytearray()
        for start in range(0, len(values), 8):
            bits = values[start:start + 8]
            if not self.msb_first:
                bits.reverse()
            byte = 0
            for bit in bits:
                byte = (byte << 1) | bit
            out.append(byte)
        return bytes(out)

    def decode_tail(self, values: List[int]) -> bytes:
        raise MisalignedLengthError(BITS_NOT_MULTIPLE_OF_8)


class Base2LsbfCodec(Base2MsbfCodec):
    scheme = Scheme.BASE2LSBF
    msb_first = False

    @property
    def name(self) -> str:
        return "Base2 (lsb first)"
