"""Server that rebuilds messages from signals and acknowledges each bit."""

import contextlib
import os
import signal
import sys
import time
from collections.abc import Callable, Sequence
from typing import BinaryIO

from .formatting import printf
from .protocol import BonusDecoder, Decoder, Reply

_REPLY_DELAY = 0.0001
_SIGNALS = {signal.SIGUSR1, signal.SIGUSR2}


class Server:
    """Decodes incoming bits and answers every sender."""

    def __init__(
        self,
        bonus: bool = False,
        output: BinaryIO | None = None,
        notify: Callable[[int, int], None] | None = None,
    ) -> None:
        self.decoder: Decoder = BonusDecoder() if bonus else Decoder()
        self.output = sys.stdout.buffer if output is None else output
        self.notify = os.kill if notify is None else notify

    def handle(self, signum: int, sender: int) -> Reply:
        """Take one bit carried by ``signum`` from ``sender`` and reply to it."""
        if signum not in _SIGNALS:
            raise ValueError(f"unexpected signal {signum}")
        reply, byte = self.decoder.feed(sender, 1 if signum == signal.SIGUSR1 else 0)
        if byte is not None:
            self.output.write(bytes([byte]))
            self.output.flush()
        time.sleep(_REPLY_DELAY)
        answer = signal.SIGUSR1 if reply is Reply.ACK else signal.SIGUSR2
        with contextlib.suppress(OSError):
            self.notify(sender, answer)
        return reply

    def serve_forever(self) -> None:
        """Wait for signals and handle each one until interrupted."""
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)
        try:
            while True:
                info = signal.sigwaitinfo(_SIGNALS)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def _run(bonus: bool) -> int:
    server = Server(bonus=bonus)
    printf("this is pid of the server : %d \n", os.getpid())
    sys.stdout.flush()
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        sys.stderr.write(f"error in the server!: {exc}\n")
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the server for the plain protocol."""
    return _run(bonus=False)


def bonus_main(argv: Sequence[str] | None = None) -> int:
    """Run the server for the zero-terminated protocol."""
    return _run(bonus=True)


if __name__ == "__main__":
    sys.exit(main())