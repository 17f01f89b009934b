"""basenc — streaming binary-to-text codec engine.

WHY: Binary data regularly has to travel through text-only channels
(mail bodies, config files, URLs, terminals). This package converts an
arbitrary byte stream into one of eight standardized text encodings and
back, without ever holding the whole stream in memory.

HOW: Three layers, leaf to root:
  core     — Scheme enum, alphabet tables, error hierarchy
  codecs   — one pure encode/decode pair per scheme, behind a registry
  stream   — chunked drivers plus the line-wrapping writer

RULES:
- Every codec is selected through the CODECS registry by Scheme
- Drivers are single-pass and never close the caller's streams
- Every failure surfaces as a BasencError subclass; nothing is retried
"""

from basenc.core.errors import (
    BasencError,
    InvalidInputError,
    MisalignedLengthError,
    SinkWriteError,
    SourceReadError,
    UnsupportedSchemeError,
)
from basenc.core.schemes import Scheme
from basenc.stream.drivers import (
    StreamResult,
    decode_bytes,
    decode_stream,
    encode_bytes,
    encode_stream,
)

__version__ = "0.1.0"

__all__ = [
    "BasencError",
    "InvalidInputError",
    "MisalignedLengthError",
    "Scheme",
    "SinkWriteError",
    "SourceReadError",
    "StreamResult",
    "UnsupportedSchemeError",
    "decode_bytes",
    "decode_stream",
    "encode_bytes",
    "encode_stream",
]
