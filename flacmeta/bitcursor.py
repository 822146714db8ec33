from construct import *
from construct.lib import bits2bytes, bytes2bits
from .base import TruncatedRead


class BitCursor:
    """Sequential reader over one block's payload.

    Positions are counted in bits and need not be byte aligned. Integers are
    big-endian unless the cursor is ``swapped``, in which case multi-byte
    integers are read little-endian (whole bytes only).
    """

    def __init__(self, data, swapped=False):
        self.data = bytes(data)
        self.swapped = swapped
        self._pos = 0

    def _bits(self, start, n_bits):
        # Only the bytes covering [start, start + n_bits) are expanded.
        first = start // 8
        bits = bytes2bits(self.data[first:(start + n_bits + 7) // 8])
        offset = start - first * 8
        return bits[offset:offset + n_bits]

    def tell(self):
        return self._pos

    def remaining(self):
        return len(self.data) * 8 - self._pos

    def consumed_all(self):
        return self.remaining() == 0

    def _take(self, n_bits):
        if n_bits < 0:
            raise ValueError(f'cannot read {n_bits} bits')
        if n_bits > self.remaining():
            raise TruncatedRead(f'need {n_bits} bits at bit {self._pos}, '
                                f'only {self.remaining()} left')
        start = self._pos
        self._pos += n_bits
        return start

    def read_uint(self, n_bits):
        if not 1 <= n_bits <= 64:
            raise ValueError(f'integer width must be 1..64 bits, got {n_bits}')
        if self.swapped and n_bits % 8:
            raise ValueError(f'little-endian reads must be whole bytes, got {n_bits} bits')
        start = self._take(n_bits)
        return BitsInteger(n_bits, swapped=self.swapped).parse(self._bits(start, n_bits))

    def read_bytes(self, n_bits):
        start = self._take(n_bits)
        if not start % 8 and not n_bits % 8:
            return self.data[start // 8:(start + n_bits) // 8]

        # Unaligned runs are left-justified and zero-filled to a whole byte.
        bits = self._bits(start, n_bits)
        return bits2bytes(bits + b'\x00' * (-n_bits % 8))

    def read_text(self, n_bits):
        return self.read_bytes(n_bits).decode('utf-8', 'surrogateescape')

    def skip(self, n_bits):
        self._take(n_bits)
