# SecureRandomizer, SeededRandomizer
# (sources of uniformly distributed integers)
#

import random
import threading

from . import backend


class SecureRandomizer:

    """Cryptographically secure source of uniform integers.

    Random bytes come from the `randombytes` backend (libsodium or OS).
    Integers are mapped to the requested range by rejection sampling,
    so there is no modulo bias.

    Calls are serialized by an internal lock, one instance can be shared
    between threads.

    """

    def __init__(self, randombytes=None):
        self._randombytes = randombytes or backend.randombytes
        self._lock = threading.Lock()

    def randint(self, low: int, high: int) -> int:
        """Return uniformly distributed integer N such that `low` <= N <= `high`."""
        if low > high:
            raise ValueError(f"empty range for randint({low}, {high})")
        span = high - low + 1
        if span == 1:
            return low
        nbits = (span - 1).bit_length()
        nbytes = (nbits + 7) // 8
        mask = (1 << nbits) - 1
        with self._lock:
            while True:
                value = int.from_bytes(self._randombytes(nbytes), 'big') & mask
                if value < span:
                    return low + value


class SeededRandomizer:

    """Deterministic source of uniform integers.

    Same seed gives same sequence. Use for tests or reproducible output,
    never for real passphrases. Not thread-safe.

    """

    def __init__(self, seed):
        self._random = random.Random(seed)

    def randint(self, low: int, high: int) -> int:
        if low > high:
            raise ValueError(f"empty range for randint({low}, {high})")
        return self._random.randint(low, high)
