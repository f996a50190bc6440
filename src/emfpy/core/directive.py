"""Metric directive: the ``_aws.CloudWatchMetrics`` entry of a document."""

from dataclasses import dataclass, field

from emfpy.core.models import DimensionSet, MetricDefinition, Unit

DEFAULT_NAMESPACE = "aws-embedded-metrics"


@dataclass(frozen=True)
class DefaultsMerged:
    """Custom dimension sets that get the default set prepended."""

    custom_sets: tuple[DimensionSet, ...] = ()


@dataclass(frozen=True)
class ExplicitOverride:
    """Custom dimension sets emitted verbatim, defaults suppressed."""

    custom_sets: tuple[DimensionSet, ...] = ()


DimensionMode = DefaultsMerged | ExplicitOverride


@dataclass
class MetricDirective:
    """Namespace, metric definitions and dimension sets of one directive.

    Attributes:
        namespace: CloudWatch namespace the metrics are published under.
        metrics: Metric name to definition, in first-write order.
        default_dimensions: Set prepended to every custom set while the
            directive is in DefaultsMerged mode.
        dimension_mode: How custom sets combine with the default set.
    """

    namespace: str = DEFAULT_NAMESPACE
    metrics: dict[str, MetricDefinition] = field(default_factory=dict)
    default_dimensions: DimensionSet = field(default_factory=DimensionSet)
    dimension_mode: DimensionMode = field(default_factory=DefaultsMerged)

    @property
    def uses_default_dimensions(self) -> bool:
        return isinstance(self.dimension_mode, DefaultsMerged)

    @property
    def custom_dimensions(self) -> list[DimensionSet]:
        return list(self.dimension_mode.custom_sets)

    def put_metric(
        self, key: str, value: float, unit: Unit | str = Unit.NONE
    ) -> None:
        """Record a value for ``key``.

        Repeated keys accumulate values; the unit of the first write is kept
        and later units are ignored.
        """
        existing = self.metrics.get(key)
        if existing is not None:
            existing.add_value(value)
            return
        self.metrics[key] = MetricDefinition(
            name=key, unit=Unit.parse(unit), values=[value]
        )

    def put_dimension_set(self, dimension_set: DimensionSet) -> None:
        """Append a custom dimension set without changing the mode."""
        mode = self.dimension_mode
        self.dimension_mode = type(mode)(mode.custom_sets + (dimension_set,))

    def set_dimensions(self, dimension_sets: list[DimensionSet]) -> None:
        """Replace all custom sets and stop merging in the default set.

        Once called, later ``put_dimension_set`` calls keep the override.
        """
        self.dimension_mode = ExplicitOverride(tuple(dimension_sets))

    def set_default_dimensions(self, dimension_set: DimensionSet) -> None:
        self.default_dimensions = dimension_set

    def resolve_dimensions(self) -> list[DimensionSet]:
        """Return the dimension sets this directive emits."""
        mode = self.dimension_mode
        if isinstance(mode, ExplicitOverride):
            return list(mode.custom_sets)
        if not mode.custom_sets:
            return [self.default_dimensions]
        return [self.default_dimensions.merge(s) for s in mode.custom_sets]

    def get_all_metrics(self) -> list[MetricDefinition]:
        return list(self.metrics.values())

    def get_all_dimension_keys(self) -> list[list[str]]:
        return [s.dimension_keys() for s in self.resolve_dimensions()]

    def has_no_metrics(self) -> bool:
        return not self.metrics

    def to_dict(self) -> dict[str, object]:
        """Directive entry as it appears under ``CloudWatchMetrics``."""
        return {
            "Namespace": self.namespace,
            "Dimensions": self.get_all_dimension_keys(),
            "Metrics": [m.to_directive_entry() for m in self.get_all_metrics()],
        }
