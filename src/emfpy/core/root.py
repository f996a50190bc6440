"""Document root and the flattening serializer."""

from typing import Any

from emfpy.core.encoding.emf import encode_document, prune_empty
from emfpy.core.metadata import Metadata
from emfpy.core.ports import MetadataSource


class RootNode:
    """Root of an EMF document.

    Properties, resolved dimension values and metric values are flattened
    into top-level fields next to the ``_aws`` metadata member. On a name
    collision metrics win over dimensions and dimensions win over properties.

    Example:
        ```python
        root = RootNode()
        directive = root.aws.create_directive("Test")
        directive.put_metric("Time", 100)
        root.put_metric("Time", 100)
        root.serialize()
        ```
    """

    def __init__(self, aws: MetadataSource | None = None) -> None:
        self._aws = aws if aws is not None else Metadata()
        self._properties: dict[str, Any] = {}
        self._metrics: dict[str, list[float]] = {}

    @property
    def aws(self) -> MetadataSource:
        return self._aws

    def put_property(self, key: str, value: Any) -> None:
        self._properties[key] = value

    def put_metric(self, key: str, value: float) -> None:
        """Add a metric value.

        Multiple calls with the same key are emitted as an array.
        """
        self._metrics.setdefault(key, []).append(value)

    def get_properties(self) -> dict[str, Any]:
        return dict(self._properties)

    def get_metrics(self) -> dict[str, list[float]]:
        return {key: list(values) for key, values in self._metrics.items()}

    def get_dimensions(self) -> dict[str, str]:
        """Union of the dimension values of every directive's resolved sets."""
        dimensions: dict[str, str] = {}
        for directive in self._aws.get_cloud_watch_metrics():
            for dimension_set in directive.resolve_dimensions():
                dimensions.update(dimension_set.dimension_records())
        return dimensions

    def get_target_members(self) -> dict[str, Any]:
        """Flatten properties, then dimensions, then metrics into one mapping."""
        members: dict[str, Any] = dict(self._properties)
        members.update(self.get_dimensions())
        for key, values in self._metrics.items():
            members[key] = values[0] if len(values) == 1 else list(values)
        return members

    def to_dict(self) -> dict[str, Any]:
        """Document ready for encoding, empty containers removed."""
        return {"_aws": self._aws.to_dict(), **prune_empty(self.get_target_members())}

    def serialize(self) -> str:
        """Encode the document as a JSON string.

        Raises:
            EncodingFailure: If a property or metric value cannot be encoded.
        """
        return encode_document(self.to_dict())
