import logging
from collections.abc import Iterable

from typedparams.context.parameter import ParameterDefinition
from typedparams.context.parameter_value import ParameterValue
from typedparams.utils.conversion import convert_value

logger = logging.getLogger(__name__)


def create_parameter_value(
    definition: ParameterDefinition, value: object
) -> ParameterValue:
    """
    Create a parameter value, coercing the input into the declared type.

    Parameters
    ----------
    definition : ParameterDefinition
        The parameter the value belongs to.
    value : object
        The raw input, e.g. ``"0.5"`` for a double parameter.

    Returns
    -------
    ParameterValue
        A value holding the coerced input.

    Raises
    ------
    TypeError
        If the input kind cannot be coerced into the declared type.
    ValueError
        If the input cannot be parsed into the declared type.
    """
    converted = convert_value(value, definition.type)
    logger.debug(
        f"Created value for '{definition.full_name}' ({definition.type}): "
        f"{value!r} -> {converted!r}"
    )
    return ParameterValue(definition=definition, value=converted)


def create_parameter_values(
    definition: ParameterDefinition, values: Iterable[object]
) -> list[ParameterValue]:
    """Create one parameter value per input, all bound to the same definition."""
    return [create_parameter_value(definition, value) for value in values]
