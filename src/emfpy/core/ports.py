"""Port interfaces for the collaborators a document reads from.

RootNode depends only on these protocols. Metadata and MetricDirective are
the concrete implementations shipped with the library.
"""

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from emfpy.core.models import DimensionSet


@runtime_checkable
class DirectiveSource(Protocol):
    """Port for a single metric directive."""

    def resolve_dimensions(self) -> list[DimensionSet]:
        """Return the dimension sets the directive emits."""
        ...

    def to_dict(self) -> dict[str, Any]:
        """Return the directive entry for ``CloudWatchMetrics``."""
        ...


@runtime_checkable
class MetadataSource(Protocol):
    """Port for the ``_aws`` metadata of a document.

    Supplies the ordered directives of the document and their encoded form,
    including the timestamp.
    """

    def get_cloud_watch_metrics(self) -> Sequence[DirectiveSource]:
        """Return the directives in emission order."""
        ...

    def to_dict(self) -> dict[str, Any]:
        """Return the ``_aws`` member."""
        ...
