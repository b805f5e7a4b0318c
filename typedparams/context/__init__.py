from typedparams.context.namespace import ParameterNamespace
from typedparams.context.parameter import ParameterDefinition
from typedparams.context.parameter_value import ParameterValue

__all__ = [
    "ParameterDefinition",
    "ParameterNamespace",
    "ParameterValue",
]
