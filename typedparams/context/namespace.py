from typing_extensions import override

from pydantic import BaseModel, ConfigDict, Field


class ParameterNamespace(BaseModel):
    """
    A node in the hierarchy that groups parameter definitions.

    Attributes
    ----------
    name : str
        Name of the namespace. A root namespace may have an empty name.
    parent : ParameterNamespace | None
        The enclosing namespace, or None for a root namespace.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Name of the namespace.")
    parent: "ParameterNamespace | None" = Field(
        default=None, description="Enclosing namespace, None for a root namespace."
    )

    @property
    def full_name(self) -> str:
        """Dotted path of the non-empty namespace names from the root down."""
        names: list[str] = []
        namespace: ParameterNamespace | None = self
        while namespace is not None:
            if namespace.name:
                names.append(namespace.name)
            namespace = namespace.parent
        return ".".join(reversed(names))

    def child(self, name: str) -> "ParameterNamespace":
        return ParameterNamespace(name=name, parent=self)

    @override
    def __str__(self) -> str:
        return self.full_name
