"""BDD step definitions for EMF document features."""

import json
from dataclasses import dataclass, field
from typing import Any

import pytest
from pytest_bdd import given, parsers, then, when

from emfpy.core.context import MetricsContext
from emfpy.core.models import DimensionSet


@dataclass
class DocumentScenarioContext:
    """Shared state between steps in a document scenario."""

    context: MetricsContext = field(default_factory=MetricsContext)
    output: str = ""

    @property
    def parsed(self) -> dict[str, Any]:
        return json.loads(self.output)

    @property
    def directive(self) -> dict[str, Any]:
        return self.parsed["_aws"]["CloudWatchMetrics"][0]


@pytest.fixture
def ctx() -> DocumentScenarioContext:
    """Fresh scenario context for each test."""
    return DocumentScenarioContext()


# === Given ===
@given(parsers.parse('a document with namespace "{namespace}"'))
def step_namespace(ctx: DocumentScenarioContext, namespace: str) -> None:
    ctx.context.set_namespace(namespace)


@given(parsers.parse('the dimension set "{key}" = "{value}"'))
def step_dimension_set(ctx: DocumentScenarioContext, key: str, value: str) -> None:
    ctx.context.put_dimensions(DimensionSet({key: value}))


@given(parsers.parse('the default dimension "{key}" = "{value}"'))
def step_default_dimension(ctx: DocumentScenarioContext, key: str, value: str) -> None:
    ctx.context.set_default_dimensions(DimensionSet({key: value}))


@given(parsers.parse('the dimensions are overridden with "{key}" = "{value}"'))
def step_override(ctx: DocumentScenarioContext, key: str, value: str) -> None:
    ctx.context.set_dimensions(DimensionSet({key: value}))


@given(parsers.parse('the property "{key}" = "{value}"'))
def step_property(ctx: DocumentScenarioContext, key: str, value: str) -> None:
    ctx.context.put_property(key, value)


# === When ===
@when(parsers.parse('the metric "{name}" is recorded with value {value:d}'))
def step_metric(ctx: DocumentScenarioContext, name: str, value: int) -> None:
    ctx.context.put_metric(name, value)


@when("the document is serialized")
def step_serialize(ctx: DocumentScenarioContext) -> None:
    ctx.output = ctx.context.serialize()


# === Then ===
@then(parsers.parse('the directive namespace is "{namespace}"'))
def check_namespace(ctx: DocumentScenarioContext, namespace: str) -> None:
    assert ctx.directive["Namespace"] == namespace


@then(parsers.parse('the directive dimensions are "{keys}"'))
def check_dimensions(ctx: DocumentScenarioContext, keys: str) -> None:
    assert ctx.directive["Dimensions"] == [keys.split(",")]


@then(parsers.parse('the directive metrics are "{name}" with unit "{unit}"'))
def check_metrics(ctx: DocumentScenarioContext, name: str, unit: str) -> None:
    assert ctx.directive["Metrics"] == [{"Name": name, "Unit": unit}]


@then(parsers.parse('the field "{key}" is "{value}"'))
def check_string_field(ctx: DocumentScenarioContext, key: str, value: str) -> None:
    assert ctx.parsed[key] == value


@then(parsers.parse('the field "{key}" is the number {value:d}'))
def check_number_field(ctx: DocumentScenarioContext, key: str, value: int) -> None:
    assert ctx.parsed[key] == value


@then(parsers.parse('the field "{key}" is the list {values}'))
def check_list_field(ctx: DocumentScenarioContext, key: str, values: str) -> None:
    assert ctx.parsed[key] == [int(v) for v in values.split(",")]


@then(parsers.parse('the field "{key}" is absent'))
def check_absent(ctx: DocumentScenarioContext, key: str) -> None:
    assert key not in ctx.parsed


@then("serializing twice gives identical output")
def check_idempotent(ctx: DocumentScenarioContext) -> None:
    assert ctx.context.serialize() == ctx.context.serialize()
