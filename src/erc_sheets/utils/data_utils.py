"""
Utility functions for converting ERC worksheet cell values.

Raw values are what the Sheets API returns for a cell: str, int, float, bool
or None. Parsed values are str (TEXT), float (NUMBER, PERCENTAGE) or bool
(BOOLEAN). Formatted values are strings written with USER_ENTERED input, so
the sheet re-interprets them exactly as if they were typed in.

Conventions:
- TEXT is stripped of surrounding whitespace. It is written with a leading
  apostrophe so the sheet keeps it as literal text (no formulas, dates or
  dropped leading zeros); one leading apostrophe is removed when reading.
- NUMBER accepts one leading '$', thousands separators in groups of three and
  accounting parentheses ('(1,234.50)' is -1234.5). Integers that a float
  cannot hold exactly are rejected on write.
- BOOLEAN accepts TRUE/FALSE and YES/NO in any case, plus native booleans.
- PERCENTAGE is always held as a fraction (0.0625). Bare numbers are
  fractions; strings ending in '%' are divided by 100. It is written back as
  a percent string ('6.25%').
"""
import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, Union

from erc_sheets.models.template import DataType

RawValue = Union[str, int, float, bool, None]
CellValue = Union[str, float, bool]

NUMBER_PATTERN = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$')

# Optional sign, one optional '$', then grouped or plain digits
AMOUNT_PATTERN = re.compile(
    r'^([+-]?)\s*\$?\s*'
    r'(\d{1,3}(?:,\d{3})+(?:\.\d*)?|\d+(?:\.\d*)?(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?)$'
)

# Sheets treats a leading apostrophe as "keep as text"
TEXT_PREFIX = "'"

TRUE_VALUES = frozenset(['true', 'yes'])
FALSE_VALUES = frozenset(['false', 'no'])


def is_empty(raw: RawValue) -> bool:
    """Check whether a raw cell value means 'no value'."""
    if raw is None:
        return True
    return isinstance(raw, str) and not raw.strip()


def _is_real_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _to_float(value: Any) -> float:
    try:
        return float(value)
    except OverflowError as e:
        raise ValueError(f"Number {value!r} is out of range") from e


def _finite(num: float, raw: Any) -> float:
    if not math.isfinite(num):
        raise ValueError(f"Cannot use non-finite value {raw!r}")
    return num


def _exact_float(value: Any) -> float:
    num = _finite(_to_float(value), value)
    if isinstance(value, int) and num != value:
        raise ValueError(f"Integer {value!r} cannot be stored exactly in a sheet cell")
    return num


def _parse_text(raw: RawValue) -> str:
    if isinstance(raw, bool):
        return 'TRUE' if raw else 'FALSE'
    if _is_real_number(raw):
        return _format_number(raw)
    if isinstance(raw, str):
        v = raw.strip()
        if v.startswith(TEXT_PREFIX):
            v = v[len(TEXT_PREFIX):]
        return v
    raise ValueError(f"Cannot read {type(raw).__name__} value {raw!r} as text")


def _parse_number(raw: RawValue) -> float:
    if isinstance(raw, bool):
        raise ValueError(f"Cannot parse boolean {raw!r} as number")
    if _is_real_number(raw):
        return _finite(_to_float(raw), raw)
    if not isinstance(raw, str):
        raise ValueError(f"Cannot parse {type(raw).__name__} value {raw!r} as number")

    v = raw.strip()
    negative = False
    # Parentheses mark an accounting-style negative
    if v.startswith('(') and v.endswith(')'):
        negative = True
        v = v[1:-1].strip()
    match = AMOUNT_PATTERN.match(v)
    if not match or (negative and match.group(1)):
        raise ValueError(f"Cannot parse {raw!r} as number")
    num = float(match.group(2).replace(',', ''))
    if negative or match.group(1) == '-':
        num = -num
    return _finite(num, raw)


def _parse_boolean(raw: RawValue) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        v = raw.strip().lower()
        if v in TRUE_VALUES:
            return True
        if v in FALSE_VALUES:
            return False
    raise ValueError(f"Cannot parse {raw!r} as boolean (expected TRUE/FALSE or YES/NO)")


def _parse_percentage(raw: RawValue) -> float:
    if isinstance(raw, bool):
        raise ValueError(f"Cannot parse boolean {raw!r} as percentage")
    if _is_real_number(raw):
        return _finite(_to_float(raw), raw)
    if not isinstance(raw, str):
        raise ValueError(f"Cannot parse {type(raw).__name__} value {raw!r} as percentage")

    v = raw.strip()
    if not v.endswith('%'):
        if not NUMBER_PATTERN.match(v):
            raise ValueError(f"Cannot parse {raw!r} as percentage")
        return _finite(float(v), raw)

    number_part = v[:-1].rstrip()
    if not NUMBER_PATTERN.match(number_part):
        raise ValueError(f"Cannot parse {raw!r} as percentage")
    try:
        fraction = Decimal(number_part) / 100
    except InvalidOperation as e:
        raise ValueError(f"Cannot parse {raw!r} as percentage") from e
    return _finite(float(fraction), raw)


def _format_text(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Expected text, got {type(value).__name__}")
    v = value.strip()
    return TEXT_PREFIX + v if v else v


def _format_number(value: Any) -> str:
    if not _is_real_number(value):
        raise TypeError(f"Expected a number, got {type(value).__name__}")
    num = _exact_float(value)
    if num.is_integer():
        return str(int(num))
    return repr(num)


def _format_boolean(value: Any) -> str:
    if not isinstance(value, bool):
        raise TypeError(f"Expected a boolean, got {type(value).__name__}")
    return 'TRUE' if value else 'FALSE'


def _format_percentage(value: Any) -> str:
    if not _is_real_number(value):
        raise TypeError(f"Expected a fraction, got {type(value).__name__}")
    num = _exact_float(value)
    percent = (Decimal(repr(num)) * 100).normalize()
    return f"{percent:f}%"


PARSERS: Dict[DataType, Callable[[RawValue], CellValue]] = {
    DataType.TEXT: _parse_text,
    DataType.NUMBER: _parse_number,
    DataType.BOOLEAN: _parse_boolean,
    DataType.PERCENTAGE: _parse_percentage,
}

FORMATTERS: Dict[DataType, Callable[[Any], str]] = {
    DataType.TEXT: _format_text,
    DataType.NUMBER: _format_number,
    DataType.BOOLEAN: _format_boolean,
    DataType.PERCENTAGE: _format_percentage,
}


def parse_cell_value(raw: RawValue, data_type: DataType) -> CellValue:
    """
    Parse a non-empty raw cell value according to its data type.

    Raises:
        ValueError: if the value cannot be read as ``data_type``.
    """
    return PARSERS[data_type](raw)


def format_cell_value(value: Any, data_type: DataType) -> str:
    """
    Format a typed value as the string to write into a cell.

    Raises:
        TypeError: if the value has the wrong Python type for ``data_type``.
        ValueError: if a numeric value is not finite.
    """
    return FORMATTERS[data_type](value)


def matches_data_type(value: Any, data_type: DataType) -> bool:
    """Check that a parsed value has the Python type used for ``data_type``."""
    if data_type is DataType.TEXT:
        return isinstance(value, str)
    if data_type is DataType.BOOLEAN:
        return isinstance(value, bool)
    if isinstance(value, float):
        return math.isfinite(value)
    return _is_real_number(value)
