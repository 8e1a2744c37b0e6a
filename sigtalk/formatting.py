"""A small printf-style formatter supporting %c %s %d %i %u %x %X %p %%."""

import sys
from collections.abc import Iterator
from typing import Any, TextIO

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_MISSING = object()


class FormatError(ValueError):
    """Raised when a format string cannot be rendered."""


def _digits(value: int, digits: str) -> str:
    radix = len(digits)
    if radix < 2:
        raise ValueError("a digit set needs at least two symbols")
    out = []
    while True:
        value, remainder = divmod(value, radix)
        out.append(digits[remainder])
        if value == 0:
            break
    return "".join(reversed(out))


def format_base(number: int, digits: str) -> str:
    """Write ``number`` as an unsigned 32-bit value using ``digits`` as its base."""
    return _digits(number & _MASK32, digits)


def format_signed(number: int) -> str:
    """Write ``number`` as a signed 32-bit decimal."""
    value = (number + (1 << 31)) % (1 << 32) - (1 << 31)
    if value < 0:
        return "-" + format_base(-value, DECIMAL)
    return format_base(value, DECIMAL)


def format_address(address: int | None) -> str:
    """Write a pointer-sized value as ``0x...``, or ``(nil)`` for null."""
    if not address:
        return "(nil)"
    return "0x" + _digits(address & _MASK64, HEX_LOWER)


def _as_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise FormatError("%c needs a single character")
        return arg
    return chr(int(arg) & 0xFF)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "scdiuxXp":
        return "%" + spec
    arg = next(args, _MISSING)
    if arg is _MISSING:
        raise FormatError(f"missing argument for %{spec}")
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec == "c":
        return _as_char(arg)
    if spec in "di":
        return format_signed(int(arg))
    if spec == "u":
        return format_base(int(arg), DECIMAL)
    if spec == "x":
        return format_base(int(arg), HEX_LOWER)
    if spec == "X":
        return format_base(int(arg), HEX_UPPER)
    return format_address(None if arg is None else int(arg))


def _pieces(fmt: str | None, args: tuple[Any, ...]) -> Iterator[str]:
    if fmt is None:
        raise FormatError("no format string")
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("format string ends with a lone '%'")
        yield _convert(spec, remaining)


def render(fmt: str | None, *args: Any) -> str:
    """Return ``fmt`` with its conversions filled in from ``args``."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str | None, *args: Any, stream: TextIO | None = None) -> int:
    """Write the rendered format to ``stream`` and return the characters written.

    Output produced before a formatting error has already been written when
    :class:`FormatError` is raised.
    """
    out = sys.stdout if stream is None else stream
    count = 0
    for piece in _pieces(fmt, args):
        out.write(piece)
        count += len(piece)
    return count