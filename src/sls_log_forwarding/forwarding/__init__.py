"""
Serverless Log Forwarding Module.

Builds the CloudFormation permission and subscription filters that forward
every function's CloudWatch Logs to a single destination.
"""

from .errors import ConfigError, LogForwardingError, ResourceKeyCollisionError, ServiceFileError
from .naming import AwsNaming, NamingProvider
from .pipeline import create_resources
from .plugin import LogForwardingPlugin
from .service import FunctionDefinition, ProviderSettings, ServiceDescription
from .synthesizer import synthesize
from .targets import enumerate_targets
from .types import PERMISSION_LOGICAL_ID, ForwardingConfig, ResourceDeclaration
from .validation import validate_config

# Re-export public API
__all__ = [
    "PERMISSION_LOGICAL_ID",
    "AwsNaming",
    "ConfigError",
    "ForwardingConfig",
    "FunctionDefinition",
    "LogForwardingError",
    "LogForwardingPlugin",
    "NamingProvider",
    "ProviderSettings",
    "ResourceDeclaration",
    "ResourceKeyCollisionError",
    "ServiceDescription",
    "ServiceFileError",
    "create_resources",
    "enumerate_targets",
    "synthesize",
    "validate_config",
]
