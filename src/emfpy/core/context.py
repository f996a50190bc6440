"""Metrics context: one document with a single directive kept in sync."""

import logging
from datetime import datetime
from typing import Any

from emfpy.config import EmfConfig
from emfpy.core.metadata import Metadata
from emfpy.core.models import DimensionSet, Unit
from emfpy.core.root import RootNode

logger = logging.getLogger(__name__)


class MetricsContext:
    """Builds one EMF document for a unit of work.

    Every metric is written both to the directive, which describes it under
    ``_aws``, and to the document-level store, which holds the values.

    Example:
        ```python
        context = MetricsContext(namespace="Checkout")
        context.put_dimensions(DimensionSet({"Service": "Cart"}))
        context.put_metric("Latency", 12.5, Unit.MILLISECONDS)
        print(context.serialize())
        ```
    """

    def __init__(
        self,
        namespace: str | None = None,
        default_dimensions: DimensionSet | None = None,
    ) -> None:
        self._metadata = Metadata()
        self._directive = self._metadata.create_directive(namespace)
        if default_dimensions is not None:
            self._directive.set_default_dimensions(default_dimensions)
        self._root = RootNode(self._metadata)

    @classmethod
    def from_config(cls, config: EmfConfig) -> "MetricsContext":
        return cls(
            namespace=config.namespace,
            default_dimensions=config.default_dimensions(),
        )

    @property
    def root(self) -> RootNode:
        return self._root

    @property
    def metadata(self) -> Metadata:
        return self._metadata

    @property
    def namespace(self) -> str:
        return self._directive.namespace

    def set_namespace(self, namespace: str) -> None:
        self._directive.namespace = namespace

    def set_timestamp(self, timestamp: datetime) -> None:
        self._metadata.timestamp = timestamp

    def put_metric(self, key: str, value: float, unit: Unit | str = Unit.NONE) -> None:
        self._directive.put_metric(key, value, unit)
        self._root.put_metric(key, value)

    def put_property(self, key: str, value: Any) -> None:
        self._root.put_property(key, value)

    def put_metadata(self, key: str, value: Any) -> None:
        self._metadata.put_metadata(key, value)

    def put_dimensions(self, dimension_set: DimensionSet) -> None:
        self._directive.put_dimension_set(dimension_set)

    def set_dimensions(self, *dimension_sets: DimensionSet) -> None:
        """Replace all dimension sets; default dimensions are no longer added."""
        if self._directive.uses_default_dimensions and len(
            self._directive.default_dimensions
        ):
            logger.debug(
                "Default dimensions %s disabled by explicit dimension override",
                self._directive.default_dimensions.dimension_keys(),
            )
        self._directive.set_dimensions(list(dimension_sets))

    def set_default_dimensions(self, dimension_set: DimensionSet) -> None:
        self._directive.set_default_dimensions(dimension_set)

    def has_no_metrics(self) -> bool:
        return self._directive.has_no_metrics()

    def serialize(self) -> str:
        return self._root.serialize()
