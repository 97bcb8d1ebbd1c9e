"""Parsing of printf-style format strings into literal runs and conversions.

The grammar follows the portable snprintf rules: flags ``- + space # 0 '``,
a field width given as digits or ``*``, an optional precision, the length
modifiers ``h``, ``l`` and ``ll`` (the latter treated as ``l``), and the
conversion specifiers ``s c d u o x X p`` together with the synonyms
``i`` (for ``d``), ``D``, ``U`` and ``O`` (for ``ld``, ``lu`` and ``lo``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

__all__ = ["ConversionSpec", "Literal", "parse_format"]

_UINT_MASK = 0xFFFFFFFF

_STRING_CONVERSIONS = frozenset("%cs")
_NUMERIC_CONVERSIONS = frozenset("duoxXp")
_VALUE_CONVERSIONS = frozenset("csduoxXp")

# Synonym -> (canonical specifier, forced length modifier or None).
_SYNONYMS = {
    "i": ("d", None),
    "D": ("d", "l"),
    "U": ("u", "l"),
    "O": ("o", "l"),
}

_SPEC_PATTERN = re.compile(
    r"""
    (?P<literal>[^%]+)
    |
    %
    (?P<flags>[-+ \#0']*)
    (?P<width>\*|[0-9]+)?
    (?:\.(?P<precision>\*|[0-9]*))?
    (?P<length>ll|h|l)?
    (?P<conversion>.?)
    """,
    re.VERBOSE | re.DOTALL,
)


@dataclass(frozen=True)
class Literal:
    """A run of format text that is copied to the output unchanged."""

    text: str

    @property
    def raw(self) -> str:
        return self.text


@dataclass(frozen=True)
class ConversionSpec:
    """One ``%`` conversion of a format string.

    ``conversion`` is the canonical specifier (synonyms resolved), the
    unrecognised character as written, or ``""`` when the format ended
    right after the conversion's flags, width or precision.
    ``width`` and ``precision`` are ``None`` when absent or when taken
    from an argument (see ``width_from_arg`` and ``precision_from_arg``).
    ``sign`` is ``"+"`` when the plus flag is present, otherwise ``" "``
    when the space flag is present, otherwise ``""``.
    """

    raw: str
    conversion: str
    justify_left: bool = False
    zero_padding: bool = False
    sign: str = ""
    alternate_form: bool = False
    width: int | None = None
    width_from_arg: bool = False
    precision: int | None = None
    precision_from_arg: bool = False
    length_modifier: str = ""

    @property
    def recognized(self) -> bool:
        """True when the specifier is one the formatter knows."""
        return self.conversion in _STRING_CONVERSIONS or self.conversion in _NUMERIC_CONVERSIONS

    @property
    def is_numeric(self) -> bool:
        return self.conversion in _NUMERIC_CONVERSIONS

    @property
    def takes_value(self) -> bool:
        """True when the conversion consumes a value argument."""
        return self.conversion in _VALUE_CONVERSIONS

    @property
    def arg_count(self) -> int:
        """Number of arguments consumed, counting ``*`` width and precision."""
        return int(self.width_from_arg) + int(self.precision_from_arg) + int(self.takes_value)


FormatItem = Union[Literal, ConversionSpec]


def _parse_number(digits: str) -> int:
    # Digits accumulate into an unsigned int, wrapping like the C parser.
    return int(digits) & _UINT_MASK


def _build_spec(match: re.Match[str]) -> ConversionSpec:
    flags = match.group("flags")
    width_text = match.group("width")
    precision_text = match.group("precision")
    length = match.group("length") or ""
    conversion = match.group("conversion")

    if length == "ll":
        length = "l"

    if conversion in _SYNONYMS:
        conversion, forced_length = _SYNONYMS[conversion]
        if forced_length is not None:
            length = forced_length

    if "+" in flags:
        sign = "+"
    elif " " in flags:
        sign = " "
    else:
        sign = ""

    width: int | None = None
    width_from_arg = False
    if width_text == "*":
        width_from_arg = True
    elif width_text:
        width = _parse_number(width_text)

    precision: int | None = None
    precision_from_arg = False
    if precision_text == "*":
        precision_from_arg = True
    elif precision_text is not None:
        precision = _parse_number(precision_text) if precision_text else 0

    return ConversionSpec(
        raw=match.group(0),
        conversion=conversion,
        justify_left="-" in flags,
        zero_padding="0" in flags,
        sign=sign,
        alternate_form="#" in flags,
        width=width,
        width_from_arg=width_from_arg,
        precision=precision,
        precision_from_arg=precision_from_arg,
        length_modifier=length,
    )


def parse_format(fmt: str | None) -> list[FormatItem]:
    """Split a printf-style format into ``Literal`` and ``ConversionSpec`` items.

    A ``None`` format is treated as the empty string. Joining the ``raw``
    text of every item gives back the original format.
    """
    if fmt is None:
        return []
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, not {type(fmt).__name__}")

    items: list[FormatItem] = []
    for match in _SPEC_PATTERN.finditer(fmt):
        literal = match.group("literal")
        if literal is not None:
            items.append(Literal(literal))
        else:
            items.append(_build_spec(match))
    return items