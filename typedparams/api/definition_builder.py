import logging
from typing import Self

from typedparams.constants import ParameterRole, ParameterType
from typedparams.context.namespace import ParameterNamespace
from typedparams.context.parameter import ParameterDefinition

logger = logging.getLogger(__name__)


class ParameterDefinitionBuilder:
    """
    A programmatic interface for declaring namespaced parameter definitions.

    Namespaces are addressed by dotted paths relative to the root namespace and
    are created on first use, so ``add_parameter("threads", "integer",
    namespace="server.pool")`` yields a definition whose full name is
    ``server.pool.threads``.

    Attributes
    ----------
    _root : ParameterNamespace
        The root namespace.
    _namespaces : dict[str, ParameterNamespace]
        Namespaces created so far, keyed by their path relative to the root.
    _definitions : dict[str, ParameterDefinition]
        Definitions added so far, keyed by full name.
    """

    def __init__(self, root_name: str = ""):
        """
        Initialize the ParameterDefinitionBuilder.

        Parameters
        ----------
        root_name : str, default=""
            Name of the root namespace. With an empty root name, full names
            start at the first namespace below the root.
        """
        self._root: ParameterNamespace = ParameterNamespace(name=root_name)
        self._namespaces: dict[str, ParameterNamespace] = {"": self._root}
        self._definitions: dict[str, ParameterDefinition] = {}

        logger.info(
            f"Initialized ParameterDefinitionBuilder: root='{root_name or 'N/A'}'"
        )

    def add_namespace(self, path: str) -> Self:
        """
        Add a namespace, creating any missing intermediate namespaces.

        Parameters
        ----------
        path : str
            Dotted path of the namespace relative to the root, e.g. "server.pool".

        Returns
        -------
        ParameterDefinitionBuilder
            Self for method chaining.
        """
        self._get_namespace(path)
        return self

    def add_parameter(
        self,
        name: str,
        type: ParameterType | str,
        namespace: str | None = None,
        role: ParameterRole | str = ParameterRole.INPUT,
    ) -> Self:
        """
        Add a parameter definition.

        Parameters
        ----------
        name : str
            Name of the parameter.
        type : ParameterType | str
            Declared type, either a ParameterType or a type name such as "Double".
        namespace : str | None, default=None
            Dotted path of the namespace holding the parameter. None places it in
            the root namespace.
        role : ParameterRole | str, default=ParameterRole.INPUT
            Role of the parameter.

        Returns
        -------
        ParameterDefinitionBuilder
            Self for method chaining.

        Raises
        ------
        ValueError
            If a parameter with the same full name has already been added.
        """
        definition = ParameterDefinition(
            name=name,
            type=type,
            role=role,
            namespace=self._get_namespace(namespace or ""),
        )
        if definition.full_name in self._definitions:
            raise ValueError(f"Duplicate parameter '{definition.full_name}'")

        self._definitions[definition.full_name] = definition
        logger.info(
            f"Added parameter: name='{definition.full_name}', "
            f"type='{definition.type}', role='{definition.role}'"
        )
        return self

    def build(self) -> dict[str, ParameterDefinition]:
        """
        Return the definitions added so far, keyed by full name.

        Returns
        -------
        dict[str, ParameterDefinition]
            The parameter definitions.
        """
        logger.info(f"Built {len(self._definitions)} parameter definitions")
        return dict(self._definitions)

    def _get_namespace(self, path: str) -> ParameterNamespace:
        """Return the namespace at a dotted path, creating it if needed."""
        if path in self._namespaces:
            return self._namespaces[path]

        parts = path.split(".")
        if any(not part for part in parts):
            raise ValueError(f"Invalid namespace path '{path}'")

        namespace = self._root
        for depth in range(1, len(parts) + 1):
            prefix = ".".join(parts[:depth])
            if prefix not in self._namespaces:
                self._namespaces[prefix] = namespace.child(parts[depth - 1])
                logger.info(f"Added namespace: path='{prefix}'")
            namespace = self._namespaces[prefix]
        return namespace
