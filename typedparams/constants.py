from enum import StrEnum, unique
from typing import Final


@unique
class ParameterType(StrEnum):
    DOUBLE = "double"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    STRING = "string"


@unique
class ParameterRole(StrEnum):
    INPUT = "input"
    OBSERVATION = "observation"


# Alternative spellings accepted when looking up a type by name
_TYPE_ALIASES: Final = {
    "float": ParameterType.DOUBLE,
    "int": ParameterType.INTEGER,
    "bool": ParameterType.BOOLEAN,
    "str": ParameterType.STRING,
}

# Two doubles closer than this compare as equal
DOUBLE_TOLERANCE: Final = 1e-16

# Bounds of a 32-bit signed integer
INT32_MIN: Final = -(2**31)
INT32_MAX: Final = 2**31 - 1


def get_type_enumeration(type_name: "str | ParameterType") -> ParameterType:
    """
    Resolve a type name to its ParameterType.

    The lookup is case-insensitive and ignores surrounding whitespace, so
    "Double", "DOUBLE" and " double " all resolve to ParameterType.DOUBLE.

    Parameters
    ----------
    type_name : str | ParameterType
        The type name to resolve.

    Returns
    -------
    ParameterType
        The matching type enumeration.

    Raises
    ------
    ValueError
        If the name does not denote a supported type.
    """
    if isinstance(type_name, ParameterType):
        return type_name
    normalized = type_name.strip().lower()
    if normalized in _TYPE_ALIASES:
        return _TYPE_ALIASES[normalized]
    try:
        return ParameterType(normalized)
    except ValueError:
        supported = ", ".join(t.value for t in ParameterType)
        raise ValueError(
            f"Unknown parameter type '{type_name}'. Supported types: {supported}"
        ) from None
