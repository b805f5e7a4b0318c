import logging

import pytest

from typedparams import (
    ParameterDefinition,
    ParameterDefinitionBuilder,
    ParameterRole,
    ParameterType,
    ParameterValue,
    create_parameter_value,
    create_parameter_values,
)


class TestParameterDefinitionBuilder:
    def test_build_definitions(self):
        """
        Test that definitions get full names from their namespace paths.
        """
        definitions = (
            ParameterDefinitionBuilder()
            .add_namespace("server")
            .add_parameter("threads", "Integer", namespace="server.pool")
            .add_parameter("timeout", ParameterType.DOUBLE, namespace="server")
            .add_parameter("latency", "double", role=ParameterRole.OBSERVATION)
            .build()
        )

        assert list(definitions) == ["server.pool.threads", "server.timeout", "latency"]
        assert definitions["server.pool.threads"].type is ParameterType.INTEGER
        assert definitions["latency"].role is ParameterRole.OBSERVATION

    def test_namespaces_are_shared(self):
        definitions = (
            ParameterDefinitionBuilder()
            .add_parameter("a", "string", namespace="x.y")
            .add_parameter("b", "string", namespace="x.y")
            .add_parameter("c", "string", namespace="x")
            .build()
        )

        a_namespace = definitions["x.y.a"].namespace
        assert a_namespace is definitions["x.y.b"].namespace
        assert a_namespace is not None
        assert a_namespace.parent is definitions["x.c"].namespace

    def test_named_root(self):
        definitions = (
            ParameterDefinitionBuilder(root_name="experiment")
            .add_parameter("runs", "integer")
            .build()
        )
        assert list(definitions) == ["experiment.runs"]

    def test_duplicate_parameter_is_rejected(self):
        builder = ParameterDefinitionBuilder().add_parameter("a", "string", "ns")

        with pytest.raises(ValueError, match="Duplicate parameter 'ns.a'"):
            builder.add_parameter("a", "double", "ns")

    def test_invalid_namespace_path_is_rejected(self):
        with pytest.raises(ValueError, match="Invalid namespace path"):
            ParameterDefinitionBuilder().add_namespace("a..b")

    def test_steps_are_logged(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.INFO, logger="typedparams"):
            ParameterDefinitionBuilder().add_parameter("a", "string", "ns").build()

        assert "Added namespace: path='ns'" in caplog.text
        assert "Added parameter: name='ns.a'" in caplog.text


class TestParameterValueFactory:
    @pytest.fixture(scope="class")
    def definitions(self) -> dict[str, ParameterDefinition]:
        return (
            ParameterDefinitionBuilder()
            .add_parameter("ratio", "double", "load")
            .add_parameter("users", "integer", "load")
            .add_parameter("cached", "boolean", "load")
            .build()
        )

    def test_create_coerces_input(self, definitions: dict[str, ParameterDefinition]):
        ratio = create_parameter_value(definitions["load.ratio"], "0.75")
        users = create_parameter_value(definitions["load.users"], 10.6)
        cached = create_parameter_value(definitions["load.cached"], "True")

        assert isinstance(ratio, ParameterValue)
        assert ratio.get_value() == 0.75
        assert users.get_value() == 10
        assert cached.get_value() is True
        assert ratio.definition is definitions["load.ratio"]

    def test_create_many(self, definitions: dict[str, ParameterDefinition]):
        values = create_parameter_values(definitions["load.users"], ["3", 1, 2.0])

        assert [v.get_value() for v in sorted(values)] == [1, 2, 3]

    def test_conversion_errors_propagate(
        self, definitions: dict[str, ParameterDefinition]
    ):
        with pytest.raises(ValueError, match="as integer"):
            create_parameter_value(definitions["load.users"], "many")
