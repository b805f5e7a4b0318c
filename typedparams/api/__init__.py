from .definition_builder import ParameterDefinitionBuilder
from .parameter_value_factory import create_parameter_value, create_parameter_values

__all__ = [
    "ParameterDefinitionBuilder",
    "create_parameter_value",
    "create_parameter_values",
]
