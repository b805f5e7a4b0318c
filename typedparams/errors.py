class ParameterValueError(Exception):
    """Base class for errors raised by parameter values."""

    pass


class InvalidValueTypeError(ParameterValueError, TypeError):
    """Raised when a value does not match the type declared by its parameter."""

    pass


class UnsupportedComparisonError(ParameterValueError, TypeError):
    """Raised when two parameter values of different kinds are compared."""

    pass


class UnsupportedConversionError(ParameterValueError, TypeError):
    """Raised when a parameter value cannot be represented in the requested type."""

    pass
