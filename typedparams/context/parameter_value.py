import logging
from typing import Any, Self, assert_never

from typing_extensions import override

from pydantic import BaseModel, Field, model_validator

from typedparams.constants import DOUBLE_TOLERANCE, ParameterType
from typedparams.context.parameter import ParameterDefinition
from typedparams.errors import (
    InvalidValueTypeError,
    UnsupportedComparisonError,
    UnsupportedConversionError,
)
from typedparams.utils.conversion import (
    ParameterKind,
    convert_value,
    format_value,
    kind_of,
    matches_type,
    truncate_to_int32,
)

logger = logging.getLogger(__name__)


class ParameterValue(BaseModel):
    """
    A value associated to a particular parameter definition.

    The value's Python type always matches the type declared by the definition:
    ``float`` for DOUBLE, ``int`` (32-bit) for INTEGER, ``bool`` for BOOLEAN and
    ``str`` for STRING. Construction checks this strictly, while ``set_value``
    coerces its input into the declared type.

    Two parameter values are equal when they refer to the very same definition
    instance and hold equal values. Ordering through ``compare_to`` and the
    comparison operators is only defined between values of the same type.

    Attributes
    ----------
    definition : ParameterDefinition
        The parameter this value belongs to.
    value : bool | int | float | str
        The stored value. Direct assignment is rejected, use ``set_value``.

    Examples
    --------
    >>> threads = ParameterDefinition(name="threads", type="integer")
    >>> value = ParameterValue(definition=threads, value=4)
    >>> value.get_value_as_double()
    4.0
    >>> value.set_value("8")
    >>> value.get_value()
    8
    """

    definition: ParameterDefinition = Field(
        default=..., frozen=True, description="The parameter this value belongs to."
    )
    value: ParameterKind = Field(
        default=...,
        frozen=True,
        description="The stored value, replaced only through set_value.",
    )

    @model_validator(mode="before")
    @classmethod
    def validate_value_type(cls, data: Any) -> Any:
        """Check that the value's type matches the type declared by the definition."""
        if not isinstance(data, dict) or "value" not in data:
            return data

        definition = data.get("definition")
        if isinstance(definition, dict):
            definition = ParameterDefinition.model_validate(definition)
            data = {**data, "definition": definition}
        if not isinstance(definition, ParameterDefinition):
            return data

        value = data["value"]
        if not matches_type(value, definition.type):
            actual = kind_of(value)
            raise InvalidValueTypeError(
                (
                    f"Invalid value type for parameter '{definition.full_name}': "
                    f"expected {definition.type}, got "
                    f"{actual if actual is not None else type(value).__name__} "
                    f"({value!r})"
                )
            )
        return data

    @property
    def kind(self) -> ParameterType:
        """The type of the stored value."""
        return self.definition.type

    def get_parameter(self) -> ParameterDefinition:
        return self.definition

    def get_value(self) -> ParameterKind:
        return self.value

    def set_value(self, value: object) -> None:
        """
        Replace the stored value, coercing it into the declared type.

        Unlike construction, the input does not need to be of the declared type
        already: ``"5"`` set on an integer parameter is stored as ``5``. Errors
        raised by the conversion propagate unchanged and leave the stored value
        untouched.

        Parameters
        ----------
        value : object
            The raw input to coerce.

        Raises
        ------
        TypeError
            If the input kind cannot be coerced into the declared type.
        ValueError
            If the input cannot be parsed into the declared type.
        """
        converted = convert_value(value, self.definition.type)
        logger.debug(
            f"Set value of '{self.definition.full_name}': {self.value!r} -> "
            f"{converted!r}"
        )
        object.__setattr__(self, "value", converted)

    def compare_to(self, other: object) -> int:
        """
        Compare this value with another value of the same type.

        Doubles closer than ``DOUBLE_TOLERANCE`` are considered equal, booleans
        order false before true and strings order lexicographically.

        Parameters
        ----------
        other : object
            The value to compare with, normally another ParameterValue.

        Returns
        -------
        int
            -1, 0 or 1 if this value is lower than, equal to or greater than
            ``other``.

        Raises
        ------
        UnsupportedComparisonError
            If ``other`` is not a parameter value of the same type.
        """
        kind = self.kind
        if not isinstance(other, ParameterValue):
            raise UnsupportedComparisonError(
                (
                    f"Cannot compare value of '{self.definition.full_name}' "
                    f"(type {kind}) with {type(other).__name__} {other!r}"
                )
            )
        if kind is not other.kind:
            raise UnsupportedComparisonError(
                (
                    "Comparison is supported only between double, integer, boolean "
                    "or string parameter values of the same type, but value of "
                    f"'{self.definition.full_name}' is of type {kind} and "
                    f"value of '{other.definition.full_name}' is of type "
                    f"{other.kind}"
                )
            )

        if kind is ParameterType.DOUBLE:
            a, b = float(self.value), float(other.value)
            if abs(a - b) < DOUBLE_TOLERANCE:
                return 0
            return -1 if a < b else 1
        elif (
            kind is ParameterType.INTEGER
            or kind is ParameterType.BOOLEAN
            or kind is ParameterType.STRING
        ):
            if self.value == other.value:
                return 0
            return -1 if self.value < other.value else 1  # type: ignore[operator]
        else:
            assert_never(kind)

    def get_value_as_string(self) -> str:
        """
        Render the value as text.

        Booleans render as "true"/"false" and doubles keep their decimal point
        (``2.0`` renders as "2.0").
        """
        return format_value(self.value)

    def get_value_as_double(self) -> float:
        if self.kind is ParameterType.DOUBLE or self.kind is ParameterType.INTEGER:
            return float(self.value)
        raise self._unsupported_conversion(
            "get_value_as_double", "double and integer"
        )

    def get_value_as_boolean(self) -> bool:
        if self.kind is ParameterType.BOOLEAN:
            return bool(self.value)
        raise self._unsupported_conversion("get_value_as_boolean", "boolean")

    def get_value_as_integer(self) -> int:
        """
        Return the value as a 32-bit integer.

        Doubles are truncated toward zero (3.9 gives 3, -3.9 gives -3) and
        saturate at the bounds of the 32-bit range; NaN gives 0.

        Raises
        ------
        UnsupportedConversionError
            If the value is a boolean or a string.
        """
        if self.kind is ParameterType.INTEGER:
            return int(self.value)
        if self.kind is ParameterType.DOUBLE:
            return truncate_to_int32(float(self.value))
        raise self._unsupported_conversion(
            "get_value_as_integer", "double and integer"
        )

    @override
    def copy(self, **options: Any) -> Self:  # type: ignore[override]
        """
        Return a new value for the same definition holding the same value.

        This replaces pydantic's deprecated ``BaseModel.copy``; its options
        (``include``, ``exclude``, ``update``, ``deep``) are not supported, use
        ``model_copy`` for those.

        Raises
        ------
        TypeError
            If any option is passed.
        """
        if options:
            raise TypeError(
                (
                    f"ParameterValue.copy() takes no options, got "
                    f"{sorted(options)}; use model_copy() instead"
                )
            )
        return type(self)(definition=self.definition, value=self.value)

    def _unsupported_conversion(
        self, function: str, supported: str
    ) -> UnsupportedConversionError:
        return UnsupportedConversionError(
            (
                f"The function {function} is supported only by {supported} "
                f"parameter values, but value of '{self.definition.full_name}' "
                f"is of type {self.kind}"
            )
        )

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterValue):
            return NotImplemented
        return self.definition is other.definition and self.value == other.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ParameterValue):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ParameterValue):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ParameterValue):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ParameterValue):
            return NotImplemented
        return self.compare_to(other) >= 0

    @override
    def __str__(self) -> str:
        return f"{self.definition.full_name}={self.get_value_as_string()}"
