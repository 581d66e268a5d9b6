"""CloudFormation resource synthesis for log forwarding."""

from collections.abc import Iterable, Mapping

from sls_log_forwarding.forwarding.errors import ResourceKeyCollisionError
from sls_log_forwarding.forwarding.naming import NamingProvider
from sls_log_forwarding.forwarding.service import FunctionDefinition
from sls_log_forwarding.forwarding.types import (
    PERMISSION_LOGICAL_ID,
    SUBSCRIPTION_FILTER_PREFIX,
    ForwardingConfig,
    ResourceDeclaration,
)

INVOKE_ACTION = "lambda:InvokeFunction"


def logs_principal(region: str) -> str:
    """CloudWatch Logs service principal for a region."""
    return f"logs.{region}.amazonaws.com"


def make_permission(
    config: ForwardingConfig, naming: NamingProvider, region: str
) -> ResourceDeclaration:
    """Build the single permission letting CloudWatch Logs invoke the destination."""
    depends_on: tuple[str, ...] = ()
    if config.destination_function_name:
        # The permission can only be granted once the destination function exists
        depends_on = (naming.lambda_logical_id(config.destination_function_name),)

    return ResourceDeclaration(
        logical_id=PERMISSION_LOGICAL_ID,
        kind="Permission",
        properties={
            "FunctionName": config.destination,
            "Action": INVOKE_ACTION,
            "Principal": logs_principal(region),
        },
        depends_on=depends_on,
    )


def make_subscription_filter(
    config: ForwardingConfig, function: FunctionDefinition, naming: NamingProvider
) -> ResourceDeclaration:
    """Build the subscription filter for one function's log group."""
    logical_id = f"{SUBSCRIPTION_FILTER_PREFIX}{naming.normalized_function_name(function.key)}"

    return ResourceDeclaration(
        logical_id=logical_id,
        kind="SubscriptionFilter",
        properties={
            # Only the literal ARN is used here; with destinationFn alone this is None
            "DestinationArn": config.destination_arn,
            "FilterPattern": config.filter_pattern,
            "LogGroupName": naming.log_group_name(function),
        },
        depends_on=(PERMISSION_LOGICAL_ID, naming.log_group_logical_id(function.key)),
    )


def synthesize(
    config: ForwardingConfig,
    targets: Iterable[str],
    catalog: Mapping[str, FunctionDefinition],
    naming: NamingProvider,
    region: str,
) -> dict[str, ResourceDeclaration]:
    """
    Build all log forwarding resources.

    Args:
        config: Validated forwarding configuration
        targets: Function keys to subscribe, in output order
        catalog: Function definitions by key
        naming: Naming rules for logical IDs and log groups
        region: Deployment region, used for the logs service principal

    Returns:
        Dict mapping logical ID to ResourceDeclaration. The permission comes
        first, followed by one subscription filter per target.

    Raises:
        ResourceKeyCollisionError: Two targets map to the same logical ID.
    """
    permission = make_permission(config, naming, region)
    resources: dict[str, ResourceDeclaration] = {permission.logical_id: permission}

    owners: dict[str, str] = {}
    for key in targets:
        subscription_filter = make_subscription_filter(config, catalog[key], naming)
        logical_id = subscription_filter.logical_id
        if logical_id in owners:
            raise ResourceKeyCollisionError(logical_id, owners[logical_id], key)
        owners[logical_id] = key
        resources[logical_id] = subscription_filter

    return resources
