"""Encoding scheme identifiers.

WHY: A run selects exactly one of eight text encodings. An enum makes
the selection explicit and rules out typos in scheme names.

HOW: Scheme inherits from str so members compare equal to their CLI
names ("base64", "z85", ...) and serialize cleanly.

RULES:
- Values match the long option names of the CLI without the dashes
- parse() is the only place that turns a free-form name into a Scheme
"""

from __future__ import annotations

import enum

from basenc.core.errors import UnsupportedSchemeError


class Scheme(str, enum.Enum):
    """The eight supported binary-to-text encodings.

    RULES:
    - base64, base64url: RFC 4648 sections 4 and 5
    - base32, base32hex: RFC 4648 sections 6 and 7
    - base16: RFC 4648 section 8
    - base2msbf, base2lsbf: bit strings, most/least significant bit first
    - z85: ZeroMQ spec:32/Z85
    """

    BASE64 = "base64"
    BASE64URL = "base64url"
    BASE32 = "base32"
    BASE32HEX = "base32hex"
    BASE16 = "base16"
    BASE2MSBF = "base2msbf"
    BASE2LSBF = "base2lsbf"
    Z85 = "z85"

    @classmethod
    def parse(cls, name: str | Scheme) -> Scheme:
        """Resolve a scheme name (case-insensitive, dashes ignored).

        Raises:
            UnsupportedSchemeError: If the name matches no scheme.
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace("-", "")
        try:
            return cls(key)
        except ValueError:
            raise UnsupportedSchemeError(name) from None
