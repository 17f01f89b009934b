"""Codec registry — one codec class per Scheme.

WHY: The stream drivers and the CLI need a single lookup from the
selected Scheme to the code that implements it.

HOW: CODECS maps each Scheme to its codec *class*. get_codec() resolves
a Scheme or scheme name and returns an instance; codecs hold no
per-stream state, so instances are cheap and interchangeable.

RULES:
- Every Scheme member has exactly one entry
- Values are BaseCodec subclasses (not instances)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Type

from basenc.codecs.b16 import Base16Codec
from basenc.codecs.b2 import Base2LsbfCodec, Base2MsbfCodec
from basenc.codecs.b32 import Base32Codec, Base32HexCodec
from basenc.codecs.b64 import Base64Codec, Base64UrlCodec
from basenc.codecs.z85 import Z85Codec
from basenc.core.errors import UnsupportedSchemeError
from basenc.core.schemes import Scheme

if TYPE_CHECKING:
    from basenc.codecs.base import BaseCodec

CODECS: Dict[Scheme, Type[BaseCodec]] = {
    Scheme.BASE64: Base64Codec,
    Scheme.BASE64URL: Base64UrlCodec,
    Scheme.BASE32: Base32Codec,
    Scheme.BASE32HEX: Base32HexCodec,
    Scheme.BASE16: Base16Codec,
    Scheme.BASE2MSBF: Base2MsbfCodec,
    Scheme.BASE2LSBF: Base2LsbfCodec,
    Scheme.Z85: Z85Codec,
}


def get_codec(scheme: Scheme | str) -> BaseCodec:
    """Return a codec instance for a Scheme or scheme name.

    Raises:
        UnsupportedSchemeError: If no codec is registered for the scheme.
    """
    try:
        return CODECS[Scheme.parse(scheme)]()
    except KeyError:
        raise UnsupportedSchemeError(scheme) from None
