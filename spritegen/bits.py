"""Deterministic bit sources.

A :class:`BitSource` is the only source of randomness in the generator. It
yields a sequence of boolean decisions (one per ambiguous mask cell) plus a
derived integer used to seed the renderer's continuous-valued RNG.

Three implementations are provided:

* :class:`SeededBitSource`: backed by ``random.Random`` seeded with an int.
* :class:`BytesBitSource`: walks the bits of a caller supplied byte buffer,
  least-significant bit first, wrapping around when exhausted.
* :class:`RandomBitSource`: a byte-backed source that refills itself from
  ``secrets`` instead of wrapping. This is the default source.

Sources are mutable and not thread-safe; share one between threads only
with external serialization.

Examples
--------
>>> bits = BytesBitSource(bytes([0, 0, 0, 0, 0, 0, 0, 0b101]))
>>> [bits.next() for _ in range(4)]
[True, False, True, True]
"""

import logging
import random
import secrets
from typing import Protocol

from spritegen.errors import InsufficientSeedMaterialError

logger = logging.getLogger(__name__)

DEFAULT_RANDOM_BYTES = 32
SEED_VALUE_BYTES = 8


class BitSource(Protocol):
    """Capability set consumed by the resolver and renderer."""

    def next(self) -> bool:
        """Return the next decision, advancing exactly one position."""
        ...

    def seed_value(self) -> int:
        """Return a signed 64-bit integer suitable for seeding a secondary RNG."""
        ...


class SeededBitSource:
    """Bit source driven by ``random.Random(seed)``."""

    def __init__(self, seed: int):
        self.seed = seed
        self._rng = random.Random(seed)

    def next(self) -> bool:
        return self._rng.random() > 0.5

    def seed_value(self) -> int:
        # non-negative 63-bit draw, always fits a signed int64
        return self._rng.getrandbits(63)


class BytesBitSource:
    """Bit source over the bits of an arbitrary-precision integer.

    The integer is built big-endian from ``data``. Bits are consumed from the
    least-significant end; once ``bit_length()`` bits have been read the
    position wraps back to bit 0. An all-zero buffer therefore yields
    ``False`` forever.

    Arguments:
        data: Seed material. At least 8 bytes are needed for
            :meth:`seed_value`; shorter buffers are accepted and only fail
            when the derived seed is first requested.
    """

    def __init__(self, data: bytes):
        self._load(data)

    def _load(self, data: bytes) -> None:
        self.data = bytes(data)
        self._value = int.from_bytes(self.data, "big")
        self._bit_len = self._value.bit_length()
        self.position = 0

    @property
    def bit_length(self) -> int:
        """Number of bits consumed before the sequence wraps or refills."""
        return self._bit_len

    def _exhausted(self) -> bool:
        return self.position >= self._bit_len

    def next(self) -> bool:
        if self._exhausted():
            self.position = 0
        result = (self._value >> self.position) & 1 == 1
        self.position += 1
        return result

    def seed_value(self) -> int:
        if len(self.data) < SEED_VALUE_BYTES:
            raise InsufficientSeedMaterialError(
                f"Need at least {SEED_VALUE_BYTES} bytes to derive a seed value, "
                f"got {len(self.data)}"
            )
        return int.from_bytes(self.data[:SEED_VALUE_BYTES], "big", signed=True)


def random_bytes(n: int) -> bytes:
    """Return ``n`` cryptographically random bytes."""
    return secrets.token_bytes(n)


class RandomBitSource(BytesBitSource):
    """Self-reseeding byte-backed source.

    Starts from ``size`` random bytes and, instead of wrapping, replaces its
    buffer with fresh random bytes whenever every bit has been consumed.
    """

    def __init__(self, size: int = DEFAULT_RANDOM_BYTES):
        self.size = size
        super().__init__(random_bytes(size))

    def next(self) -> bool:
        if self._exhausted():
            logger.debug("Bit source exhausted after %d bits, reseeding", self.position)
            self._load(random_bytes(self.size))
        return super().next()
