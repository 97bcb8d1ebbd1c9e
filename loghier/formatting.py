"""printf-style formatting with the portable snprintf conversion rules.

Supported conversions are ``s c d u o x X p`` (plus the synonyms ``i``,
``D``, ``U`` and ``O``) with the flags ``- + space # 0``, field width and
precision, either literal or taken from the arguments with ``*``. An
unrecognised conversion is replaced by its conversion character alone.
Integer arguments wrap to the width of the C type the length modifier
names: 32 bits by default, 16 bits for ``h`` and 64 bits for ``l``.
"""

from __future__ import annotations

import operator
from typing import Any, Iterator

from .printfspec import ConversionSpec, Literal, parse_format

__all__ = ["sprintf", "snprintf"]

_MASK16 = 0xFFFF
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

_UNSIGNED_STYLE = {"u": "d", "o": "o", "x": "x", "X": "X"}


def _wrap_signed(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _as_int(value: Any, spec: ConversionSpec) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"%{spec.conversion} format requires an integer, not {type(value).__name__}"
        ) from None


def _pointer_value(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, int):
        return value & _MASK64
    return id(value) & _MASK64


def _string_arg(value: Any, precision: int | None) -> str:
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        text = bytes(value).decode("latin-1")
    else:
        text = str(value)
    end = text.find("\0")
    if end >= 0:
        text = text[:end]
    if precision is not None:
        text = text[:precision]
    return text


def _char_arg(value: Any) -> str:
    if isinstance(value, str):
        if not value:
            raise TypeError("%c requires a single character")
        return value[0]
    if isinstance(value, (bytes, bytearray)):
        if not value:
            raise TypeError("%c requires a single character")
        return chr(value[0])
    return chr(operator.index(value) & 0xFF)


def _numeric_value(spec: ConversionSpec, value: Any) -> tuple[int, str]:
    """Return the argument's sign and its plain digits as sprintf prints them."""
    conversion = spec.conversion
    length = spec.length_modifier
    if conversion == "p":
        pointer = _pointer_value(value)
        return (1 if pointer else 0), (f"0x{pointer:x}" if pointer else "(nil)")

    number = _as_int(value, spec)
    if conversion == "d":
        if length == "l":
            wrapped = _wrap_signed(number, 64)
            shown = wrapped
        else:
            wrapped = _wrap_signed(number, 32)
            shown = _wrap_signed(wrapped, 16) if length == "h" else wrapped
        sign = (wrapped > 0) - (wrapped < 0)
        return sign, str(shown)

    wrapped = number & (_MASK64 if length == "l" else _MASK32)
    shown = wrapped & _MASK16 if length == "h" else wrapped
    return (1 if wrapped else 0), format(shown, _UNSIGNED_STYLE[conversion])


def _render(spec: ConversionSpec, args: Iterator[Any]) -> str:
    justify_left = spec.justify_left
    zero_padding = spec.zero_padding
    force_sign = spec.sign != ""
    space_for_positive = spec.sign == " "

    width = spec.width or 0
    if spec.width_from_arg:
        requested = _wrap_signed(_as_int(_next_arg(args), spec), 32)
        if requested >= 0:
            width = requested
        else:
            width = -requested
            justify_left = True

    precision: int | None = spec.precision
    if spec.precision_from_arg:
        requested = _wrap_signed(_as_int(_next_arg(args), spec), 32)
        precision = requested if requested >= 0 else None

    zeros = 0
    split_at = 0
    conversion = spec.conversion

    if conversion in ("%", "c", "s"):
        zero_padding = False
        if conversion == "%":
            body = "%"
        elif conversion == "c":
            body = _char_arg(_next_arg(args))
        else:
            body = _string_arg(_next_arg(args), precision)
    elif spec.is_numeric:
        arg_sign, digits = _numeric_value(spec, _next_arg(args))
        precision_specified = precision is not None
        if precision_specified:
            zero_padding = False

        body = ""
        if conversion == "d":
            if force_sign and arg_sign >= 0:
                body += " " if space_for_positive else "+"
        elif spec.alternate_form and arg_sign != 0 and conversion in ("x", "X"):
            body += "0" + conversion
        split_at = len(body)

        if not precision_specified:
            precision = 1
        if not (precision == 0 and arg_sign == 0):
            body += digits
            if split_at < len(body) and body[split_at] == "-":
                split_at += 1
            if (
                split_at + 1 < len(body)
                and body[split_at] == "0"
                and body[split_at + 1] in ("x", "X")
            ):
                split_at += 2

        digit_count = len(body) - split_at
        if (
            spec.alternate_form
            and conversion == "o"
            and not (split_at < len(body) and body[split_at] == "0")
        ):
            if not precision_specified or precision < digit_count + 1:
                precision = digit_count + 1
        assert precision is not None
        if digit_count < precision:
            zeros = precision - digit_count
        if not justify_left and zero_padding:
            zeros += max(0, width - (len(body) + zeros))
    else:
        zero_padding = False
        justify_left = True
        width = 0
        body = conversion

    pieces: list[str] = []
    padding = max(0, width - (len(body) + zeros))
    if not justify_left and padding:
        pieces.append(("0" if zero_padding else " ") * padding)
    if zeros > 0:
        pieces.append(body[:split_at])
        pieces.append("0" * zeros)
        pieces.append(body[split_at:])
    else:
        pieces.append(body)
    if justify_left and padding:
        pieces.append(" " * padding)
    return "".join(pieces)


def sprintf(fmt: str | None, *args: Any) -> str:
    """Format ``args`` according to the printf-style ``fmt``.

    Raises ``TypeError`` when the arguments run out or have the wrong type.
    Surplus arguments are ignored.
    """
    remaining = iter(args)
    out: list[str] = []
    for token in parse_format(fmt):
        if isinstance(token, Literal):
            out.append(token.text)
        else:
            out.append(_render(token, remaining))
    return "".join(out)


def snprintf(size: int, fmt: str | None, *args: Any) -> tuple[str, int]:
    """Format like ``sprintf`` into a buffer of ``size`` characters.

    Returns the text that fits (at most ``size - 1`` characters, leaving
    room for the terminator) and the length the full output would have.
    """
    size = operator.index(size)
    if size < 0:
        raise ValueError("size must not be negative")
    full = sprintf(fmt, *args)
    text = full[: size - 1] if size > 0 else ""
    return text, len(full)