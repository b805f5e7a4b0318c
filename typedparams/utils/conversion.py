import math
from typing import assert_never

from typedparams.constants import (
    INT32_MAX,
    INT32_MIN,
    ParameterType,
    get_type_enumeration,
)

ParameterKind = bool | int | float | str
"""Python types a parameter value can hold."""


def kind_of(value: object) -> ParameterType | None:
    """
    Return the parameter type matching the runtime type of a value.

    ``bool`` is checked before ``int`` because it is a subclass of it.

    Parameters
    ----------
    value : object
        Any Python object.

    Returns
    -------
    ParameterType | None
        The matching type, or None if the value is of an unsupported kind.
    """
    if isinstance(value, bool):
        return ParameterType.BOOLEAN
    if isinstance(value, int):
        return ParameterType.INTEGER
    if isinstance(value, float):
        return ParameterType.DOUBLE
    if isinstance(value, str):
        return ParameterType.STRING
    return None


def is_int32(value: int) -> bool:
    return INT32_MIN <= value <= INT32_MAX


def matches_type(value: object, parameter_type: ParameterType | str) -> bool:
    """
    Strictly check that a value can be stored for the given parameter type.

    No coercion is applied: an ``int`` does not match DOUBLE and a ``bool`` does
    not match INTEGER. Integers must fit in 32 bits.
    """
    if kind_of(value) is not get_type_enumeration(parameter_type):
        return False
    if isinstance(value, int) and not isinstance(value, bool):
        return is_int32(value)
    return True


def truncate_to_int32(number: float) -> int:
    """
    Truncate a float toward zero into the 32-bit signed range.

    NaN maps to 0 and values outside the range saturate at its bounds.
    """
    if math.isnan(number):
        return 0
    if number >= INT32_MAX:
        return INT32_MAX
    if number <= INT32_MIN:
        return INT32_MIN
    return int(number)


def format_value(value: ParameterKind) -> str:
    """
    Render a parameter value as text.

    Booleans render as "true"/"false", floats use their shortest round-trip
    representation (e.g. "2.0", "3.5") and strings pass through unchanged.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    return str(value)


def convert_value(value: object, parameter_type: ParameterType | str) -> ParameterKind:
    """
    Coerce an arbitrary value into the given parameter type.

    Parameters
    ----------
    value : object
        The raw input (e.g. a number, a bool or text read from a file).
    parameter_type : ParameterType | str
        The target type.

    Returns
    -------
    ParameterKind
        The coerced value, of the Python type matching ``parameter_type``.

    Raises
    ------
    TypeError
        If the input kind cannot be coerced into the target type.
    ValueError
        If a text input cannot be parsed, or an integer does not fit in 32 bits.

    Notes
    -----
    Text is parsed without digit separators ("1_000" is rejected). Doubles
    accept the special spellings "nan", "inf" and "infinity" (any case, with an
    optional sign); integers accept only base-10 digits with an optional sign.
    """
    target = get_type_enumeration(parameter_type)
    if target is ParameterType.DOUBLE:
        return _to_double(value)
    elif target is ParameterType.INTEGER:
        return _to_integer(value)
    elif target is ParameterType.BOOLEAN:
        return _to_boolean(value)
    elif target is ParameterType.STRING:
        return _to_string(value)
    else:
        assert_never(target)


def _to_double(value: object) -> float:
    if isinstance(value, bool):
        raise TypeError(f"Cannot convert boolean {value!r} to double")
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        _reject_digit_separators(value, "double")
        try:
            return float(value.strip())
        except ValueError:
            raise ValueError(f"Cannot parse '{value}' as double") from None
    raise TypeError(f"Cannot convert {type(value).__name__} to double")


def _to_integer(value: object) -> int:
    if isinstance(value, bool):
        raise TypeError(f"Cannot convert boolean {value!r} to integer")
    if isinstance(value, int):
        result = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"Cannot convert {value!r} to integer")
        result = int(value)
    elif isinstance(value, str):
        _reject_digit_separators(value, "integer")
        try:
            result = int(value.strip(), 10)
        except ValueError:
            raise ValueError(f"Cannot parse '{value}' as integer") from None
    else:
        raise TypeError(f"Cannot convert {type(value).__name__} to integer")

    if not is_int32(result):
        raise ValueError(
            f"Value {result} is outside the 32-bit integer range "
            f"[{INT32_MIN}, {INT32_MAX}]"
        )
    return result


def _reject_digit_separators(text: str, target: str) -> None:
    if "_" in text:
        raise ValueError(f"Cannot parse '{text}' as {target}")


def _to_boolean(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"


def _to_string(value: object) -> str:
    if isinstance(value, ParameterKind):
        return format_value(value)
    return str(value)
