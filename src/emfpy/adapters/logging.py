"""Python logging formatter adapter for emfpy.

This adapter renders standard library log records as EMF documents, so a
regular logging handler writes lines a log-based metrics pipeline can read.
"""

import logging
import traceback
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from emfpy.config import EmfConfig
from emfpy.core.context import MetricsContext
from emfpy.core.models import DimensionSet

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)

# Extra fields carrying metrics and dimensions instead of properties
METRICS_EXTRA = "emf_metrics"
DIMENSIONS_EXTRA = "emf_dimensions"

# Default attributes to extract from LogRecord
_DEFAULT_INCLUDE_ATTRS = ["module", "funcName", "lineno"]


class EmfFormatter(logging.Formatter):
    """Logging formatter that renders records as EMF documents.

    Example:
        ```python
        handler = logging.StreamHandler()
        handler.setFormatter(EmfFormatter(EmfConfig(namespace="Checkout")))
        logger.addHandler(handler)
        logger.info(
            "order placed",
            extra={"emf_metrics": {"Orders": (1, "Count")},
                   "emf_dimensions": {"Service": "Cart"}},
        )
        ```
    """

    def __init__(
        self,
        config: EmfConfig | None = None,
        include_attrs: list[str] | None = None,
    ) -> None:
        """Initialize the formatter.

        Args:
            config: Namespace and default dimensions. Defaults to
                ``EmfConfig.from_env()``.
            include_attrs: List of LogRecord attributes to include. Defaults to
                ["module", "funcName", "lineno"].
        """
        super().__init__()
        self._config = config if config is not None else EmfConfig.from_env()
        self._include_attrs = (
            include_attrs if include_attrs is not None else _DEFAULT_INCLUDE_ATTRS
        )

    def format(self, record: logging.LogRecord) -> str:
        """Render a log record as one EMF JSON line.

        Raises:
            EncodingFailure: If an extra value cannot be encoded.
        """
        context = MetricsContext.from_config(self._config)
        context.set_timestamp(datetime.fromtimestamp(record.created, UTC))
        context.put_property("message", record.getMessage())
        context.put_property("level", record.levelname)

        # Map of attribute names to their values from LogRecord
        attr_mapping: dict[str, str | int | float | bool] = {
            "module": record.name,
            "funcName": record.funcName or "",
            "lineno": record.lineno,
            "pathname": record.pathname,
        }
        for key in self._include_attrs:
            if key in attr_mapping:
                context.put_property(key, attr_mapping[key])

        # Add any extra attributes passed via logging call
        for key, value in record.__dict__.items():
            if key in _STANDARD_LOGRECORD_ATTRS or key in (
                METRICS_EXTRA,
                DIMENSIONS_EXTRA,
            ):
                continue
            if isinstance(value, (str, int, float, bool)):
                context.put_property(key, value)

        dimensions = getattr(record, DIMENSIONS_EXTRA, None)
        if dimensions:
            context.put_dimensions(DimensionSet(dict(dimensions)))

        metrics: Mapping[str, Any] = getattr(record, METRICS_EXTRA, None) or {}
        for name, measurement in metrics.items():
            if isinstance(measurement, tuple):
                value, unit = measurement
                context.put_metric(name, value, unit)
            else:
                context.put_metric(name, measurement)

        # Extract exception info if present
        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            if exc_type is not None:
                context.put_property("exc_type", exc_type.__name__)
            if exc_value is not None:
                context.put_property("exc_message", str(exc_value))
            if exc_tb is not None:
                context.put_property(
                    "exc_traceback",
                    "".join(traceback.format_exception(exc_type, exc_value, exc_tb)),
                )

        return context.serialize()
