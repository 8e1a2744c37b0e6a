# sigtalk

sigtalk sends a text message from one process to another using only the
POSIX signals `SIGUSR1` and `SIGUSR2`. Each byte goes out as eight bits,
most significant bit first. `SIGUSR1` carries a 1 and `SIGUSR2` carries a 0.
The server acknowledges each bit with `SIGUSR1`. The client waits for that
acknowledgement before it sends the next bit.

The client needs a POSIX system with `signal.pthread_sigmask` and
`signal.sigwait`. The server also needs `signal.sigwaitinfo`, which Python
offers on Linux but not on macOS.

## Installation

```
pip install .
```

## Usage

Start the server. It prints its process id. After that it writes each byte
it receives straight to standard output:

```
sigtalk-server
this is pid of the server : 4242 
```

From another terminal, send a message to that pid:

```
sigtalk-client 4242 "hello there"
```

The client reads the pid leniently. It skips leading whitespace, accepts an
optional sign and reads digits up to the first non-digit. The result must
come out positive.

If a bit from a different process arrives while a byte is still incomplete,
the server drops the partial byte and starts afresh for the new sender.

### Confirmed delivery

The bonus pair ends every message with a NUL byte. On a byte made of eight
zero bits, the server writes nothing and answers with `SIGUSR2` instead of
an acknowledgement. The client then prints
`the message was delivered to the server`:

```
sigtalk-server-bonus
sigtalk-client-bonus 4242 "hello there"
```

The client writes a message to standard error and exits with status 1 in
these cases:

* the number of arguments is wrong (`wrong argument number`);
* the pid is not a positive number (`invalid pid`);
* a signal cannot be delivered (`error`).

Either server runs until it is interrupted with Ctrl-C, and then exits with
status 0.

## Library use

You can use the wire format without sending any signals:

```python
from sigtalk.protocol import Decoder, Reply, encode_message

bits = list(encode_message(b"hi", terminate=False))
decoder = Decoder()
received = [decoder.feed(sender=1, bit=b) for b in bits]
data = bytes(byte for reply, byte in received if byte is not None)
assert data == b"hi"
```

The library has these parts:

* `sigtalk.protocol`
  * `encode_byte` and `encode_message` produce the bits.
  * `Decoder` and `BonusDecoder` turn bits back into bytes. Their `feed`
    returns a `Reply` (`ACK` or `DONE`) together with the completed byte,
    or `None` if the byte is not complete yet.
* `sigtalk.client`
  * `send_message(pid, message, bonus=False)` sends a message to a running
    server. In bonus mode it returns `True` once the server confirms
    completion.
  * `parse_pid` reads a pid.
  * Both raise `ClientError` on failure.
* `sigtalk.server`
  * `Server(bonus=False, output=None, notify=None)` is the receiving side.
  * `Server.handle(signum, sender)` processes one bit. It writes any
    completed byte to `output`, sends the reply through `notify` (which
    defaults to `os.kill`) and returns the `Reply`.
  * `Server.serve_forever()` waits for signals and handles them.
* `sigtalk.formatting`
  * `render` and `printf` are a small printf-style formatter. It supports
    `%c %s %d %i %u %x %X %p %%`. An unknown conversion is written out
    unchanged.
  * They raise `FormatError` when the format string ends in a lone `%` or
    when an argument is missing.
  * `format_base`, `format_signed` and `format_address` are the number
    helpers behind them.
* `sigtalk.numbers.atoi` is the lenient integer parser the client uses. It
  wraps its result like a signed 32-bit integer.

## Limitations

* The server keeps no message boundaries. It writes no newline or separator
  between messages, and it does not store what it receives.
* Each server handles one bit at a time. If two clients send at the same
  time, their bytes interfere with each other.

## Tests

```
pip install ".[test]"
pytest
```