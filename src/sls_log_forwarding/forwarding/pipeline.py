"""Validate -> enumerate -> synthesize."""

from collections.abc import Mapping

from sls_log_forwarding.forwarding.naming import NamingProvider
from sls_log_forwarding.forwarding.service import FunctionDefinition
from sls_log_forwarding.forwarding.synthesizer import synthesize
from sls_log_forwarding.forwarding.targets import enumerate_targets
from sls_log_forwarding.forwarding.types import ForwardingConfig, ResourceDeclaration
from sls_log_forwarding.forwarding.validation import validate_config


def create_resources(
    config: ForwardingConfig,
    catalog: Mapping[str, FunctionDefinition],
    naming: NamingProvider,
    region: str,
) -> dict[str, ResourceDeclaration]:
    """
    Create the log forwarding resources for a function catalog.

    This is a pure function: nothing is merged anywhere, callers decide what
    to do with the returned declarations.
    """
    validate_config(config)
    targets = enumerate_targets(catalog.keys(), config.destination_function_name)
    return synthesize(config, targets, catalog, naming, region)
