"""Shared types for log forwarding resource generation."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from sls_log_forwarding.forwarding.errors import ConfigError

# Fixed logical ID of the single invoke permission
PERMISSION_LOGICAL_ID = "LogForwardingLambdaPermission"

# Prefix for per-function subscription filter logical IDs
SUBSCRIPTION_FILTER_PREFIX = "SubscriptionFilter"

ResourceKind = Literal["Permission", "SubscriptionFilter"]

# Map resource kind -> CloudFormation resource type
RESOURCE_TYPES: dict[str, str] = {
    "Permission": "AWS::Lambda::Permission",
    "SubscriptionFilter": "AWS::Logs::SubscriptionFilter",
}


@dataclass(frozen=True)
class ForwardingConfig:
    """The custom.logForwarding block of a service."""

    destination_arn: str | None = None
    destination_function_name: str | None = None
    filter_pattern: str = ""
    stages: frozenset[str] | None = None

    @classmethod
    def from_mapping(cls, conf: Mapping[str, Any] | None) -> "ForwardingConfig":
        """Build a config from the raw serverless.yml block (keys as users write them)."""
        if not conf:
            return cls()
        if not isinstance(conf, Mapping):
            raise ConfigError(
                f"custom.logForwarding must be a mapping, got {type(conf).__name__}"
            )

        stages = conf.get("stages")
        if stages is not None:
            # A bare string is a single stage, not a collection of characters
            if isinstance(stages, str):
                stages = [stages]
            elif not isinstance(stages, (list, tuple, set, frozenset)):
                raise ConfigError("custom.logForwarding.stages must be a list of stage names")
            stages = frozenset(str(s) for s in stages)

        return cls(
            destination_arn=conf.get("destinationARN"),
            destination_function_name=conf.get("destinationFn"),
            filter_pattern=conf.get("filterPattern") or "",
            stages=stages,
        )

    @property
    def destination(self) -> str | None:
        """Resolved destination; an ARN wins over a function name."""
        return self.destination_arn or self.destination_function_name

    @property
    def is_internal_destination(self) -> bool:
        return bool(self.destination_function_name)


@dataclass(frozen=True)
class ResourceDeclaration:
    """A single CloudFormation resource produced by the synthesizer."""

    logical_id: str
    kind: ResourceKind
    properties: dict[str, Any]
    depends_on: tuple[str, ...] = field(default=())

    def to_template(self) -> dict[str, Any]:
        """Render the CloudFormation template form of this resource."""
        template: dict[str, Any] = {
            "Type": RESOURCE_TYPES[self.kind],
            # Unset properties are left out of the rendered template
            "Properties": {k: v for k, v in self.properties.items() if v is not None},
        }
        if self.depends_on:
            template["DependsOn"] = list(self.depends_on)
        return template
