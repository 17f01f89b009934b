"""Base16 (hex) codec, RFC 4648 section 8."""

from __future__ import annotations

from typing import List

from basenc.core import alphabets
from basenc.core.errors import MisalignedLengthError
from basenc.core.schemes import Scheme
from basenc.codecs.base import BitGroupCodec

BASE16_DECODE_LENGTH = "invalid input: base16 decoding input length must be a multiple of 2"


class Base16Codec(BitGroupCodec):
    """Upper-case hex, two symbols per byte, no padding."""

    scheme = Scheme.BASE16
    alphabet = alphabets.BASE16
    input_group = 1
    output_group = 2
    bits_per_symbol = 4

    @property
    def name(self) -> str:
        return "Base16"

    def decode_tail(self, values: List[int]) -> bytes:
        # A lone trailing digit is half a byte.
        raise MisalignedLengthError(BASE16_DECODE_LENGTH)
