"""Bit-by-bit wire protocol between client and server.

Each byte travels most significant bit first; a one bit is carried by
SIGUSR1 and a zero bit by SIGUSR2. The server acknowledges every bit.
In the bonus protocol the message is closed by a zero byte, which the
server answers with a completion reply instead of an acknowledgement.
"""

from collections.abc import Iterable, Iterator
from enum import Enum

BITS_PER_BYTE = 8
TOP_BIT = 1 << (BITS_PER_BYTE - 1)


class Reply(Enum):
    """Server answer to one received bit."""

    ACK = "ack"  # carried by SIGUSR1
    DONE = "done"  # carried by SIGUSR2


def encode_byte(value: int) -> tuple[int, ...]:
    """Return the eight bits of ``value``, most significant first.

    Signed byte values (-128..-1) are accepted and taken as their
    two's-complement byte.
    """
    if not -128 <= value <= 255:
        raise ValueError(f"{value} does not fit in a byte")
    value &= 0xFF
    return tuple((value >> shift) & 1 for shift in range(BITS_PER_BYTE - 1, -1, -1))


def encode_message(data: bytes | str, terminate: bool = False) -> Iterator[int]:
    """Yield the bits of ``data``, followed by a zero byte if ``terminate``."""
    payload: Iterable[int] = data.encode() if isinstance(data, str) else data
    for byte in payload:
        yield from encode_byte(byte)
    if terminate:
        yield from encode_byte(0)


class Decoder:
    """Rebuilds bytes from bits; a bit from a new sender drops any partial byte."""

    def __init__(self) -> None:
        self.sender: int | None = None
        self.value = 0
        self.weight = TOP_BIT

    def _track(self, sender: int) -> None:
        if self.sender is None:
            self.sender = sender
        if sender != self.sender:
            self.value = 0
            self.weight = TOP_BIT
            self.sender = sender

    def _finish_byte(self) -> int:
        byte = self.value
        self.value = 0
        self.weight = TOP_BIT
        return byte

    def feed(self, sender: int, bit: int) -> tuple[Reply, int | None]:
        """Take one bit from ``sender``; return the reply and a completed byte or None."""
        self._track(sender)
        if bit:
            self.value += self.weight
        self.weight //= 2
        if self.weight == 0:
            return Reply.ACK, self._finish_byte()
        return Reply.ACK, None


class BonusDecoder(Decoder):
    """Decoder that recognises the terminating zero byte.

    Zero bits are counted within the current byte; eight of them end the
    message with :attr:`Reply.DONE` and no byte is produced. The count is
    kept when the sender changes.
    """

    def __init__(self) -> None:
        super().__init__()
        self.zero_bits = 0

    def _finish_byte(self) -> int:
        self.zero_bits = 0
        return super()._finish_byte()

    def feed(self, sender: int, bit: int) -> tuple[Reply, int | None]:
        self._track(sender)
        if bit:
            self.value += self.weight & 0xFF
        else:
            self.zero_bits += 1
        self.weight //= 2
        if self.zero_bits == BITS_PER_BYTE:
            self.zero_bits = 0
            return Reply.DONE, None
        if self.weight == 0:
            return Reply.ACK, self._finish_byte()
        return Reply.ACK, None