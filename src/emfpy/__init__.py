"""emfpy: build and serialize Embedded Metric Format documents."""

from emfpy.adapters.logging import EmfFormatter
from emfpy.config import EmfConfig
from emfpy.core.context import MetricsContext
from emfpy.core.directive import DefaultsMerged, ExplicitOverride, MetricDirective
from emfpy.core.errors import EncodingFailure
from emfpy.core.metadata import Metadata
from emfpy.core.models import DimensionSet, MetricDefinition, Unit
from emfpy.core.root import RootNode

__all__ = [
    "DefaultsMerged",
    "DimensionSet",
    "EmfConfig",
    "EmfFormatter",
    "EncodingFailure",
    "ExplicitOverride",
    "Metadata",
    "MetricDefinition",
    "MetricDirective",
    "MetricsContext",
    "RootNode",
    "Unit",
]
