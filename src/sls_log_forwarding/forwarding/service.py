"""Host-side view of a Serverless service description."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from sls_log_forwarding.forwarding.errors import ServiceFileError

# Serverless framework defaults
DEFAULT_STAGE = "dev"
DEFAULT_REGION = "us-east-1"


@dataclass(frozen=True)
class FunctionDefinition:
    """A function from the service's functions block."""

    key: str  # Name under functions: in serverless.yml
    name: str  # Deployed Lambda function name


@dataclass
class ProviderSettings:
    """The parts of the provider block we care about."""

    stage: str = DEFAULT_STAGE
    region: str | None = None


@dataclass
class ServiceDescription:
    """
    A Serverless service as handed to the plugin.

    `resources` is the host-owned template block; the plugin extends
    `resources["Resources"]` in place.
    """

    service: str
    provider: ProviderSettings = field(default_factory=ProviderSettings)
    custom: dict[str, Any] = field(default_factory=dict)
    functions: dict[str, dict[str, Any]] = field(default_factory=dict)
    resources: dict[str, Any] | None = None

    def get_function(self, key: str, stage: str) -> FunctionDefinition:
        """Look up a function, defaulting its name to <service>-<stage>-<key>."""
        if key not in self.functions:
            raise KeyError(f"Function '{key}' is not defined in service '{self.service}'")

        definition = self.functions[key] or {}
        name = definition.get("name") or f"{self.service}-{stage}-{key}"
        return FunctionDefinition(key=key, name=str(name))

    def function_catalog(self, stage: str) -> dict[str, FunctionDefinition]:
        """All functions in declaration order."""
        return {key: self.get_function(key, stage) for key in self.functions}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ServiceDescription":
        """Build a description from a parsed serverless.yml document."""
        service = data.get("service", "")
        # Long-form `service: {name: ...}` is still accepted by the framework
        if isinstance(service, Mapping):
            service = service.get("name", "")

        provider = _block(data, "provider")
        functions = _block(data, "functions")
        for key, definition in functions.items():
            if definition is not None and not isinstance(definition, Mapping):
                raise ServiceFileError(f"functions.{key} must be a mapping")

        resources = data.get("resources")
        if resources is not None:
            if not isinstance(resources, Mapping):
                raise ServiceFileError("resources must be a mapping")
            if not isinstance(resources.get("Resources") or {}, Mapping):
                raise ServiceFileError("resources.Resources must be a mapping")

        return cls(
            service=str(service),
            provider=ProviderSettings(
                stage=provider.get("stage") or DEFAULT_STAGE,
                region=provider.get("region"),
            ),
            custom=dict(_block(data, "custom")),
            functions=dict(functions),
            resources=dict(resources) if resources is not None else None,
        )


def _block(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    """A top-level block that must be a mapping when present."""
    block = data.get(key)
    if block is None:
        return {}
    if not isinstance(block, Mapping):
        raise ServiceFileError(f"{key} must be a mapping, got {type(block).__name__}")
    return block
