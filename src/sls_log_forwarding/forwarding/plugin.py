"""Serverless integration: stage gate and merge into the service template."""

from collections.abc import Callable
from typing import Any

from sls_log_forwarding.forwarding.naming import AwsNaming, NamingProvider
from sls_log_forwarding.forwarding.pipeline import create_resources
from sls_log_forwarding.forwarding.service import DEFAULT_REGION, ServiceDescription
from sls_log_forwarding.forwarding.types import ForwardingConfig, ResourceDeclaration
from sls_log_forwarding.forwarding.utils.console import info, success, warning

# Key of our block under custom: in serverless.yml
CONFIG_KEY = "logForwarding"


class LogForwardingPlugin:
    """Adds log forwarding resources to a service when it is packaged."""

    def __init__(
        self,
        service: ServiceDescription,
        options: dict[str, Any] | None = None,
        naming: NamingProvider | None = None,
    ):
        self.service = service
        self.options = options or {}
        self.naming = naming or AwsNaming()

        self.hooks: dict[str, Callable[[], dict[str, ResourceDeclaration]]] = {
            "package:initialize": self.update_resources,
        }

    def load_config(self) -> ForwardingConfig:
        """Parse the custom.logForwarding block."""
        return ForwardingConfig.from_mapping(self.service.custom.get(CONFIG_KEY))

    @property
    def stage(self) -> str:
        """Stage from the command line options, falling back to the provider."""
        stage = self.options.get("stage")
        if stage:
            return str(stage)
        return self.service.provider.stage

    @property
    def region(self) -> str:
        """Region the framework deploys to; AWS profile settings are not consulted."""
        region = self.options.get("region") or self.service.provider.region
        if region:
            return str(region)
        return DEFAULT_REGION

    def create_resources(self, conf: ForwardingConfig) -> dict[str, ResourceDeclaration]:
        """Build the log forwarding resources without touching the service."""
        return create_resources(
            conf,
            self.service.function_catalog(self.stage),
            self.naming,
            self.region,
        )

    def update_resources(self) -> dict[str, ResourceDeclaration]:
        """
        Merge log forwarding resources into the service's resources.Resources.

        Returns the merged declarations, or an empty dict when the current
        stage is excluded. Errors propagate before anything is merged.
        """
        conf = self.load_config()
        stage = self.stage
        if conf.stages is not None and stage not in conf.stages:
            info(f"Log Forwarding is ignored for {stage} stage")
            return {}

        info("Updating Log Forwarding Resources...")
        resources = self.create_resources(conf)

        if conf.destination_function_name and conf.destination_arn is None:
            warning(
                "destinationFn is set without destinationARN: subscription filters "
                "will have no DestinationArn"
            )

        if self.service.resources is None:
            self.service.resources = {"Resources": {}}
        elif self.service.resources.get("Resources") is None:
            self.service.resources["Resources"] = {}

        self.service.resources["Resources"].update(
            {logical_id: resource.to_template() for logical_id, resource in resources.items()}
        )
        success("Log Forwarding Resources Updated")
        return resources

    def run_hook(self, event: str) -> dict[str, ResourceDeclaration]:
        """Dispatch a lifecycle event the way the framework would."""
        return self.hooks[event]()
