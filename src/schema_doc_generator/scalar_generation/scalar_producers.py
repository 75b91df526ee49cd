"""Random scalar producers.

Every producer takes the random source explicitly so that a caller owns
the generator state. One source is created per generated document; no
producer touches the module-level `random` state.
"""

from __future__ import annotations

import random
import string
import struct

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
STRING_LENGTH = 10
ALPHANUMERIC = string.ascii_letters + string.digits


def new_random_source(seed: int | None = None) -> random.Random:
    """Build a fresh generator, seeded from OS entropy when `seed` is None."""
    return random.Random(seed)


def derive_document_seeds(seed: int, count: int) -> list[int]:
    """Derive one independent seed per document from a run seed."""
    master = random.Random(seed)
    return [master.getrandbits(64) for _ in range(count)]


def generate_integer(rng: random.Random) -> int:
    return rng.randint(INT32_MIN, INT32_MAX)


def generate_boolean(rng: random.Random) -> bool:
    return rng.getrandbits(1) == 1


def generate_string(rng: random.Random) -> str:
    return "".join(rng.choices(ALPHANUMERIC, k=STRING_LENGTH))


def generate_number(rng: random.Random) -> float:
    """Return a unit float32 sample scaled by an int32 sample.

    The product is rounded to float32 precision. Its magnitude is usually
    far beyond the 24-bit mantissa, so most values come out without a
    fractional part, and the distribution is not uniform. Both properties
    are accepted as-is.
    """
    unit = _to_float32(rng.random())
    scale = generate_integer(rng)
    return _to_float32(unit * scale)


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]
