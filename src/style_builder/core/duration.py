"""
Duration table - symbolic duration codes to note lengths.

Lengths are in seconds at the 60 BPM reference tempo, so a quarter note
is exactly 1. Fractions keep dotted values exact.
"""

from __future__ import annotations

from fractions import Fraction
from types import MappingProxyType

from style_builder.errors import UnknownDurationError

QUARTER = Fraction(1)

# Dotted entries are 3/2 of their undotted counterpart. New codes must keep
# that ratio.
DURATION_TABLE: MappingProxyType[str, Fraction] = MappingProxyType(
    {
        "2": QUARTER * 2,
        "4": QUARTER,
        "4.": QUARTER / 2 * 3,
        "8": QUARTER / 2,
        "8.": QUARTER / 4 * 3,
        "16": QUARTER / 4,
    }
)


def duration_code(value: object) -> str:
    """
    Normalize a duration code as it comes out of YAML.

    Integers (``4``) and strings (``"4."``) map to the table's string keys.
    An unquoted ``4.`` parses as the float 4.0 and becomes ``"4.0"``, which
    is not a valid code.
    """
    if isinstance(value, bool):
        return repr(value)
    return str(value)


def lookup_duration(code: object) -> Fraction:
    """
    Get the length of a duration code.

    Raises:
        UnknownDurationError: if the code is not in the table
    """
    try:
        return DURATION_TABLE[duration_code(code)]
    except KeyError:
        raise UnknownDurationError(code) from None
