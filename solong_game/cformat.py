"""A small printf-style formatter with the game's C-flavoured conversions.

Supported conversions are ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``.

Integers are wrapped to 32 bits the way a C ``int`` or ``unsigned int``
argument would be. An unknown conversion produces no output. A ``%``
followed by a space stops formatting at once. In that case ``c_printf``
reports zero characters, although the text before it has been written.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator

__all__ = ["c_format", "c_printf"]

_UINT32 = 1 << 32
_INT32_SIGN = 1 << 31


def _as_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{conversion} requires an integer, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value %= _UINT32
    return value - _UINT32 if value >= _INT32_SIGN else value


def _to_uint32(value: int) -> int:
    return value % _UINT32


def _convert_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _convert_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s requires a string, got {type(value).__name__}")
    return value


def _convert_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) and not isinstance(value, bool) else id(value)
    if address == 0:
        return "(nil)"
    return f"0x{address % (1 << 64):x}"


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    if conversion not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None
    if conversion == "c":
        return _convert_char(value)
    if conversion == "s":
        return _convert_string(value)
    if conversion == "p":
        return _convert_pointer(value)
    if conversion in "di":
        return str(_to_int32(_as_int(value, conversion)))
    number = _to_uint32(_as_int(value, conversion))
    if conversion == "u":
        return str(number)
    if conversion == "x":
        return f"{number:x}"
    return f"{number:X}"


def _render(fmt: str, args: tuple[Any, ...]) -> tuple[str, bool]:
    """Return the produced text and whether formatting was cut short."""
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        conversion = next(chars, None)
        if conversion is None:
            break
        if conversion == " ":
            return "".join(pieces), True
        pieces.append(_convert(conversion, remaining))
    return "".join(pieces), False


def c_format(fmt: str, *args: Any) -> str:
    """Format ``fmt`` with ``args`` and return the resulting text."""
    text, _ = _render(fmt, args)
    return text


def c_printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length.

    Returns 0 when formatting stopped at a ``%`` followed by a space.
    """
    text, aborted = _render(fmt, args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return 0 if aborted else len(text)