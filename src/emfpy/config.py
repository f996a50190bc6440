"""Environment-driven configuration for EMF documents."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from emfpy.core.directive import DEFAULT_NAMESPACE
from emfpy.core.models import DimensionSet

NAMESPACE_ENV_VAR = "AWS_EMF_NAMESPACE"
SERVICE_NAME_ENV_VAR = "AWS_EMF_SERVICE_NAME"
SERVICE_TYPE_ENV_VAR = "AWS_EMF_SERVICE_TYPE"


def _get_optional(environ: Mapping[str, str], env_var: str) -> str | None:
    value = environ.get(env_var, "").strip()
    return value or None


@dataclass(frozen=True)
class EmfConfig:
    """Settings applied to every new metrics context.

    Attributes:
        namespace: Namespace for new directives.
        service_name: Emitted as the ServiceName default dimension when set.
        service_type: Emitted as the ServiceType default dimension when set.
    """

    namespace: str = DEFAULT_NAMESPACE
    service_name: str | None = None
    service_type: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "EmfConfig":
        """Build a config from AWS_EMF_* environment variables.

        Args:
            environ: Variables to read. Defaults to ``os.environ``.
                Blank values are treated as unset.
        """
        env = os.environ if environ is None else environ
        return cls(
            namespace=_get_optional(env, NAMESPACE_ENV_VAR) or DEFAULT_NAMESPACE,
            service_name=_get_optional(env, SERVICE_NAME_ENV_VAR),
            service_type=_get_optional(env, SERVICE_TYPE_ENV_VAR),
        )

    def default_dimensions(self) -> DimensionSet:
        dimensions = DimensionSet()
        if self.service_name:
            dimensions.add_dimension("ServiceName", self.service_name)
        if self.service_type:
            dimensions.add_dimension("ServiceType", self.service_type)
        return dimensions
