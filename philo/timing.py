"""Millisecond clock, busy-wait sleep and lenient integer parsing."""

import time

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def now_ms() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def precise_sleep(duration_ms: int) -> None:
    """Sleep in short slices until at least ``duration_ms`` milliseconds pass."""
    start = now_ms()
    while now_ms() - start < duration_ms:
        time.sleep(0.0005)


def parse_leading_int(text: str) -> int:
    """Parse the integer at the start of ``text`` the lenient way.

    Leading whitespace is skipped, one optional sign is read, then as many
    decimal digits as follow. Anything else ends the number; no digits give 0.
    The result wraps to a signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]

    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    value = sign * int("".join(digits)) if digits else 0

    modulus = 1 << _INT_BITS
    value %= modulus
    if value >= modulus // 2:
        value -= modulus
    return value