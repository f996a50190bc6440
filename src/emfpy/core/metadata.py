"""Document metadata: the ``_aws`` member of an EMF document."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from emfpy.core.directive import MetricDirective

# Keys owned by the EMF schema inside _aws
RESERVED_METADATA_KEYS = frozenset({"Timestamp", "CloudWatchMetrics"})


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass
class Metadata:
    """Timestamp, directives and custom fields of one document.

    Attributes:
        timestamp: Time the metrics were recorded (UTC).
        cloud_watch_metrics: Directives in emission order.
        custom_fields: Extra members serialized inside ``_aws``.
    """

    timestamp: datetime = field(default_factory=_utcnow)
    cloud_watch_metrics: list[MetricDirective] = field(default_factory=list)
    custom_fields: dict[str, Any] = field(default_factory=dict)

    def get_cloud_watch_metrics(self) -> list[MetricDirective]:
        return self.cloud_watch_metrics

    def create_directive(self, namespace: str | None = None) -> MetricDirective:
        """Append a new directive and return it."""
        directive = MetricDirective()
        if namespace is not None:
            directive.namespace = namespace
        self.cloud_watch_metrics.append(directive)
        return directive

    def put_metadata(self, key: str, value: Any) -> None:
        """Add a custom field to ``_aws``.

        Raises:
            ValueError: If key is one of the schema's own members.
        """
        if key in RESERVED_METADATA_KEYS:
            raise ValueError(f"metadata key is reserved: {key}")
        self.custom_fields[key] = value

    def epoch_millis(self) -> int:
        return int(self.timestamp.timestamp() * 1000)

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.custom_fields,
            "Timestamp": self.epoch_millis(),
            "CloudWatchMetrics": [d.to_dict() for d in self.cloud_watch_metrics],
        }
