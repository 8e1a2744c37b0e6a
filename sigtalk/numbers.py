"""Lenient integer parsing for command-line arguments."""

_WHITESPACE = " \t\n\v\f\r"
_INT_SPAN = 1 << 32
_INT_HALF = 1 << 31


def _wrap32(value: int) -> int:
    """Wrap ``value`` into the signed 32-bit range."""
    return (value + _INT_HALF) % _INT_SPAN - _INT_HALF


def atoi(text: str | None) -> int:
    """Parse a leading decimal integer the way a C-style ``atoi`` does.

    Leading whitespace is skipped, a single ``+`` or ``-`` is honoured and
    digits are read until the first non-digit. Anything unparsable gives 0.
    The result wraps around like a signed 32-bit integer.
    """
    if text is None:
        return 0
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        result = _wrap32(result * 10 + ord(char) - ord("0"))
    return _wrap32(result * sign)