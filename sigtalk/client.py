"""Client that sends a message to a server one bit per signal."""

import os
import signal
import sys
from collections.abc import Sequence

from .numbers import atoi
from .protocol import encode_message

CONFIRMATION = "the message was delivered to the server"


class ClientError(Exception):
    """Raised when a message cannot be sent."""


def parse_pid(text: str) -> int:
    """Read a process id from ``text``; it must come out positive."""
    pid = atoi(text)
    if pid <= 0:
        raise ClientError("invalid pid")
    return pid


def send_message(pid: int, message: str | bytes, bonus: bool = False) -> bool:
    """Send ``message`` to the server at ``pid``, waiting for an ack after each bit.

    In bonus mode the message is closed with a zero byte and the call
    returns True once the server confirms completion with SIGUSR2.
    Otherwise it returns False after the last bit is acknowledged.
    """
    if pid <= 0:
        raise ClientError("invalid pid")
    data = os.fsencode(message) if isinstance(message, str) else message
    awaited = {signal.SIGUSR1, signal.SIGUSR2} if bonus else {signal.SIGUSR1}
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, awaited)
    try:
        for bit in encode_message(data, terminate=bonus):
            signum = signal.SIGUSR1 if bit else signal.SIGUSR2
            try:
                os.kill(pid, signum)
            except OSError as exc:
                raise ClientError("error") from exc
            if signal.sigwait(awaited) == signal.SIGUSR2:
                return True
        return False
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def _run(argv: Sequence[str] | None, bonus: bool) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        sys.stderr.write("wrong argument number\n")
        return 1
    pid_text, message = args
    try:
        pid = parse_pid(pid_text)
        confirmed = send_message(pid, message, bonus=bonus)
    except ClientError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    if confirmed:
        print(CONFIRMATION)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Send a message with acknowledgement of every bit."""
    return _run(argv, bonus=False)


def bonus_main(argv: Sequence[str] | None = None) -> int:
    """Send a zero-terminated message and report the server's confirmation."""
    return _run(argv, bonus=True)


if __name__ == "__main__":
    sys.exit(main())