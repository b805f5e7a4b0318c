import logging
from typing import TextIO

from typedparams import constants
from typedparams.api import (
    ParameterDefinitionBuilder,
    create_parameter_value,
    create_parameter_values,
)
from typedparams.constants import ParameterRole, ParameterType, get_type_enumeration
from typedparams.context import ParameterDefinition, ParameterNamespace, ParameterValue
from typedparams.errors import (
    InvalidValueTypeError,
    ParameterValueError,
    UnsupportedComparisonError,
    UnsupportedConversionError,
)
from typedparams.utils.conversion import convert_value

logging.getLogger(__name__).addHandler(logging.NullHandler())


def add_stderr_logger(level: int = logging.INFO) -> logging.StreamHandler[TextIO]:
    logger = logging.getLogger(__name__)
    handler: logging.StreamHandler[TextIO] = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return handler


__all__ = [
    "constants",
    "convert_value",
    "create_parameter_value",
    "create_parameter_values",
    "get_type_enumeration",
    "InvalidValueTypeError",
    "ParameterDefinition",
    "ParameterDefinitionBuilder",
    "ParameterNamespace",
    "ParameterRole",
    "ParameterType",
    "ParameterValue",
    "ParameterValueError",
    "UnsupportedComparisonError",
    "UnsupportedConversionError",
]
