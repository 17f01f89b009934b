"""Base64 and base64url codecs (RFC 4648 sections 4 and 5).

WHY: Base64 is the workhorse text encoding for mail, PEM and data URLs;
base64url swaps '+' and '/' for '-' and '_' so the output is safe in
file names and URLs.

HOW: Both are BitGroupCodec instances with 6 bits per symbol: 3 bytes
become 4 symbols. A 1-byte tail encodes as 2 symbols + "==", a 2-byte
tail as 3 symbols + "=".

RULES:
- Both variants pad with '=' to a whole 4-symbol group
- Decoding is case-sensitive
- '=' ends the encoded data; anything after it is not decoded
"""

from __future__ import annotations

from basenc.core import alphabets
from basenc.core.schemes import Scheme
from basenc.codecs.base import BitGroupCodec


class Base64Codec(BitGroupCodec):
    """Standard base64 with the '+/' alphabet."""

    scheme = Scheme.BASE64
    alphabet = alphabets.BASE64
    input_group = 3
    output_group = 4
    bits_per_symbol = 6
    padded = True

    @property
    def name(self) -> str:
        return "Base64"


class Base64UrlCodec(Base64Codec):
    """URL- and filename-safe base64 with the '-_' alphabet."""

    scheme = Scheme.BASE64URL
    alphabet = alphabets.BASE64URL

    @property
    def name(self) -> str:
        return "Base64url"
