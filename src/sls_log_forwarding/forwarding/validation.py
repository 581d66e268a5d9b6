"""Forwarding configuration validation."""

from sls_log_forwarding.forwarding.errors import ConfigError
from sls_log_forwarding.forwarding.types import ForwardingConfig


def validate_config(config: ForwardingConfig) -> None:
    """
    Check that a destination is configured.

    Filter pattern and ARN syntax are passed through as-is; CloudFormation
    reports those at deploy time.
    """
    if config.destination_arn is None and config.destination_function_name is None:
        raise ConfigError(
            "missing destination: set custom.logForwarding.destinationARN "
            "or custom.logForwarding.destinationFn"
        )
