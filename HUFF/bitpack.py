EOF = -1  # returned by BitReader.read_bits when the stream runs out

MAX_BITS = 64


def _check_width(n: int):
    if not (1 <= n <= MAX_BITS):
        raise ValueError(f"bit width out of range (1..{MAX_BITS}): {n}")


class BitWriter:
    def __init__(self, f, close_file: bool = False):
        self.f = f
        self.close_file = close_file
        self.closed = False
        self.bits_written = 0
        self._cur = 0
        self._nbits = 0  # bits currently in _cur (0..7 between calls)

    def write_bits(self, n: int, value: int):
        """Write the low 'n' bits of value (MSB-first)."""
        _check_width(n)
        if self.closed:
            raise ValueError("write to closed BitWriter")
        self._cur = (self._cur << n) | (value & ((1 << n) - 1))
        self._nbits += n
        self.bits_written += n
        if self._nbits >= 8:
            nbytes = self._nbits // 8
            self._nbits -= nbytes * 8
            self.f.write((self._cur >> self._nbits).to_bytes(nbytes, "big"))
            self._cur &= (1 << self._nbits) - 1

    def close(self):
        """Pad remaining bits with zeros, flush, and release the file if we own it."""
        if self.closed:
            return
        if self._nbits > 0:
            self.f.write(bytes([self._cur << (8 - self._nbits)]))
            self._cur = 0
            self._nbits = 0
        self.f.flush()
        if self.close_file:
            self.f.close()
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


class BitReader:
    def __init__(self, f, close_file: bool = False):
        self.f = f
        self.close_file = close_file
        self.bits_read = 0
        self._cur = 0
        self._nbits = 0  # unread bits held in _cur

    def read_bits(self, n: int) -> int:
        """Read 'n' bits MSB-first; EOF if fewer than 'n' bits remain."""
        _check_width(n)
        while self._nbits < n:
            b = self.f.read(1)
            if not b:
                return EOF
            self._cur = (self._cur << 8) | b[0]
            self._nbits += 8
        self._nbits -= n
        val = self._cur >> self._nbits
        self._cur &= (1 << self._nbits) - 1
        self.bits_read += n
        return val

    def reset(self):
        """Rewind to the first bit of the underlying file."""
        self.f.seek(0)
        self._cur = 0
        self._nbits = 0
        self.bits_read = 0

    def close(self):
        if self.close_file:
            self.f.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


def open_bit_reader(path) -> BitReader:
    return BitReader(open(path, "rb"), close_file=True)


def open_bit_writer(path) -> BitWriter:
    return BitWriter(open(path, "wb"), close_file=True)
