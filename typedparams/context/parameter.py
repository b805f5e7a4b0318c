from typing import Any

from typing_extensions import override

from pydantic import BaseModel, ConfigDict, Field, field_validator

from typedparams.constants import ParameterRole, ParameterType, get_type_enumeration
from typedparams.context.namespace import ParameterNamespace


class ParameterDefinition(BaseModel):
    """
    Defines a named, typed parameter.

    Attributes
    ----------
    name : str
        The name of the parameter, unique within its namespace.
    type : ParameterType
        The declared type of the parameter's values. Type names such as
        "Double" or "INTEGER" are accepted and resolved case-insensitively.
    role : ParameterRole
        Whether the parameter is an input or an observation.
    namespace : ParameterNamespace | None
        The namespace holding the parameter, if any.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default=..., min_length=1, description="Name of the parameter.")
    type: ParameterType = Field(
        default=..., description="Declared type of the parameter's values."
    )
    role: ParameterRole = Field(
        default=ParameterRole.INPUT, description="Role of the parameter."
    )
    namespace: ParameterNamespace | None = Field(
        default=None, description="Namespace holding the parameter."
    )

    @field_validator("type", mode="before")
    @classmethod
    def resolve_type_name(cls, value: Any) -> ParameterType:
        """Resolve a type name to its ParameterType."""
        if not isinstance(value, str):
            raise ValueError(f"Parameter type must be given by name, got {value!r}")
        return get_type_enumeration(value)

    @field_validator("role", mode="before")
    @classmethod
    def normalize_role_name(cls, value: Any) -> Any:
        """Accept role names regardless of case."""
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @property
    def full_name(self) -> str:
        """
        Name of the parameter qualified by its namespace path.

        Returns just ``name`` when there is no namespace or the namespace path is
        empty.
        """
        if self.namespace is None or not self.namespace.full_name:
            return self.name
        return f"{self.namespace.full_name}.{self.name}"

    @override
    def __str__(self) -> str:
        return f"{self.full_name} ({self.type})"
