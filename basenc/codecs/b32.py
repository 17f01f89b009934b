"""Base32 and base32hex codecs (RFC 4648 sections 6 and 7).

WHY: Base32 survives case-folding channels (DNS labels, human
transcription); base32hex keeps the sort order of the encoded data.

HOW: BitGroupCodec with 5 bits per symbol: 5 bytes become 8 symbols.
The pad count follows from the tail length:

    tail bytes   symbols   '=' pads
    1            2         6
    2            4         4
    3            5         3
    4            7         1

RULES:
- Output is upper case; decoding accepts either case
- Short final groups are always padded to 8 symbols
"""

from __future__ import annotations

from basenc.core import alphabets
from basenc.core.schemes import Scheme
from basenc.codecs.base import BitGroupCodec


class Base32Codec(BitGroupCodec):
    scheme = Scheme.BASE32
    alphabet = alphabets.BASE32
    input_group = 5
    output_group = 8
    bits_per_symbol = 5
    padded = True

    @property
    def name(self) -> str:
        return "Base32"


class Base32HexCodec(Base32Codec):
    scheme = Scheme.BASE32HEX
    alphabet = alphabets.BASE32HEX

    @property
    def name(self) -> str:
        return "Base32hex"
