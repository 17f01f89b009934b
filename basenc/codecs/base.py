"""Abstract base codec, the shared bit-group codec and the symbol decoder.

WHY: Eight schemes share one shape: a fixed number of input bytes maps
to a fixed number of output symbols. Encoding is a pure function of a
finite block. Decoding has to cope with line breaks, '=' terminators and
garbage, and (when streaming) with chunks that end mid-group. Putting
that bookkeeping in one place keeps each scheme module down to its
bit arithmetic.

HOW: BaseCodec is an ABC. Subclasses implement encode(), decode_groups()
for whole groups of symbol values and decode_tail() for the final
partial group. SymbolDecoder filters raw text into symbol values, feeds
whole groups to the codec as they complete and carries any remainder
into the next chunk. BitGroupCodec implements the power-of-two radices
(64, 32, 16) once, parameterised by bits per symbol.

RULES:
- encode() sees a whole block; only its tail may be a partial group
- decode_groups() always receives a multiple of output_group values
- Line breaks (\\r, \\n) are never data and never errors
- '=' ends the data for padded codecs: the open group is flushed and
  later alphabet symbols are skipped (garbage is still checked)
- Unknown symbols raise InvalidInputError unless ignore_garbage is set
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from basenc.core.alphabets import LINE_BREAKS, PAD, Alphabet
from basenc.core.errors import InvalidInputError
from basenc.core.schemes import Scheme


class BaseCodec(ABC):
    """Abstract base for all scheme codecs.

    To add a scheme:
    1. Add a member to Scheme and its Alphabet to ALPHABETS
    2. Subclass BaseCodec (or BitGroupCodec) in a new module
    3. Register it in CODECS in codecs/__init__.py

    Attributes:
        scheme: The Scheme this codec implements.
        alphabet: The Alphabet used for both directions.
        input_group: Bytes per encoding group.
        output_group: Symbols per encoding group.
        padded: Whether short final groups are padded with '='.
        strict_length: Whether a misaligned symbol count must be rejected before
            the last chunk's output is released.
    """

    scheme: Scheme
    alphabet: Alphabet
    input_group: int
    output_group: int
    padded: bool = False
    strict_length: bool = False

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable scheme name, e.g. 'Base64 (RFC 4648 §4)'."""

    @abstractmethod
    def encode(self, data: bytes) -> bytes:
        """Encode a finite block of bytes into symbols.

        Raises:
            MisalignedLengthError: If the scheme forbids a partial final group.
        """

    @abstractmethod
    def decode_groups(self, values: List[int]) -> bytes:
        """Decode complete groups of symbol values into bytes."""

    @abstractmethod
    def decode_tail(self, values: List[int]) -> bytes:
        """Decode the final, incomplete group (fewer than output_group values).

        Raises:
            MisalignedLengthError: If the scheme has no partial groups.
        """

    def encoded_length(self, size: int) -> int:
        """Number of symbols encode() produces for ``size`` input bytes."""
        return -(-size // self.input_group) * self.output_group

    def decoder(self, ignore_garbage: bool = False) -> SymbolDecoder:
        """Return a fresh incremental decoder for one stream."""
        return SymbolDecoder(self, ignore_garbage=ignore_garbage)

    def decode(self, text: bytes, ignore_garbage: bool = False) -> bytes:
        """Decode a finite block of encoded text, including end-of-input checks."""
        decoder = self.decoder(ignore_garbage)
        return decoder.feed(text) + decoder.finish()


class SymbolDecoder:
    """Turns raw encoded text into bytes, one chunk at a time.

    WHY: A read chunk rarely ends on a group boundary once line breaks
    and garbage are mixed in. The decoder keeps the values of the
    incomplete trailing group so the next chunk can complete it.

    HOW: feed() maps each byte through the alphabet's reverse table,
    skips line breaks (and garbage when allowed), and decodes every
    complete group collected so far. The first '=' on a padded codec
    flushes the current group as a tail and terminates the data; after
    it only garbage checking continues. finish() decodes whatever is left.

    Codecs with strict_length hold back the output of the latest chunk
    until the next feed() or finish(), so a final chunk that fails the
    length check leaves nothing of itself in the sink. Ignore-garbage
    turns the hold off.

    Attributes:
        symbols: Count of significant symbols accepted so far.
    """

    def __init__(self, codec: BaseCodec, ignore_garbage: bool = False) -> None:
        self._codec = codec
        self._ignore_garbage = ignore_garbage
        self._pending: List[int] = []
        self._terminated = False
        self._hold = codec.strict_length and not ignore_garbage
        self._held = b""
        self.symbols = 0

    @property
    def pending(self) -> int:
        """Number of symbol values waiting for their group to complete."""
        return len(self._pending)

    def feed(self, chunk: bytes) -> bytes:
        codec = self._codec
        table = codec.alphabet.reverse_table
        padded = codec.padded
        pending = self._pending
        out = bytearray()

        for symbol in chunk:
            value = table[symbol]
            if value >= 0:
                if not self._terminated:
                    pending.append(value)
                continue
            if symbol in LINE_BREAKS:
                continue
            if padded and symbol == PAD:
                if not self._terminated:
                    out += self._drain(final=True)
                    self._terminated = True
                continue
            if not self._ignore_garbage:
                out += self._drain(final=False)
                held, self._held = self._held, b""
                raise InvalidInputError(symbol, decoded=held + bytes(out))

        out += self._drain(final=False)
        return self._release(bytes(out))

    def finish(self) -> bytes:
        """Flush the final partial group, applying the scheme's length rules."""
        tail = self._drain(final=True)
        held, self._held = self._held, b""
        return held + tail

    def _release(self, out: bytes) -> bytes:
        if not self._hold:
            return out
        released, self._held = self._held, out
        return released

    def _drain(self, final: bool) -> bytes:
        pending = self._pending
        if not pending:
            return b""
        self.symbols += len(pending)
        whole = len(pending) - len(pending) % self._codec.output_group
        out = self._codec.decode_groups(pending[:whole]) if whole else b""
        tail = pending[whole:]
        pending.clear()
        if tail:
            if final:
                out += self._codec.decode_tail(tail)
            else:
                self.symbols -= len(tail)
                pending.extend(tail)
        return out


class BitGroupCodec(BaseCodec):
    """Codec for power-of-two radices: each symbol carries a fixed bit count.

    HOW: A group of input_group bytes is read as one big-endian integer
    and sliced into output_group symbols of bits_per_symbol bits each,
    most significant slice first. Short final groups are zero-filled for
    the arithmetic; only ceil(8n / bits) symbols are emitted, then '='
    up to a full group when the codec is padded.

    RULES:
    - input_group * 8 == output_group * bits_per_symbol
    - A partial decode group of k symbols yields floor(k * bits / 8) bytes
    """

    bits_per_symbol: int

    def encode(self, data: bytes) -> bytes:
        group = self.input_group
        whole = len(data) - len(data) % group
        symbols = self.alphabet.symbols
        bits = self.bits_per_symbol
        mask = (1 << bits) - 1
        shifts = range((self.output_group - 1) * bits, -1, -bits)

        out = bytearray()
        for start in range(0, whole, group):
            value = int.from_bytes(data[start:start + group], "big")
            out.extend(symbols[(value >> shift) & mask] for shift in shifts)

        tail = data[whole:]
        if tail:
            value = int.from_bytes(tail.ljust(group, b"\0"), "big")
            count = -(-len(tail) * 8 // bits)
            out.extend(symbols[(value >> shift) & mask] for shift in shifts[:count])
            if self.padded:
                out.extend(b"=" * (self.output_group - count))
        return bytes(out)

    def decode_groups(self, values: List[int]) -> bytes:
        width = self.output_group
        group = self.input_group
        bits = self.bits_per_symbol
        out = bytearray()
        for start in range(0, len(values), width):
            value = 0
            for symbol_value in values[start:start + width]:
                value = (value << bits) | symbol_value
            out += value.to_bytes(group, "big")
        return bytes(out)

    def decode_tail(self, values: List[int]) -> bytes:
        bits = self.bits_per_symbol
        value = 0
        for symbol_value in values:
            value = (value << bits) | symbol_value
        value <<= (self.output_group - len(values)) * bits
        return value.to_bytes(self.input_group, "big")[:len(values) * bits // 8]
