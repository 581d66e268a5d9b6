"""Reading serverless.yml and rendering resource templates."""

import json
import re
from pathlib import Path
from typing import Any

import yaml

from sls_log_forwarding.forwarding.errors import ServiceFileError
from sls_log_forwarding.forwarding.service import DEFAULT_STAGE, ServiceDescription
from sls_log_forwarding.forwarding.utils.console import warning

# Matches an unresolved Serverless variable such as ${opt:stage, 'dev'}
VARIABLE_PATTERN = re.compile(r"\$\{[^}]*\}")


class ServiceFileLoader(yaml.SafeLoader):
    """Safe loader that keeps dates as strings and understands CloudFormation tags."""


# Parse date strings as strings, not date objects
ServiceFileLoader.yaml_implicit_resolvers = {
    k: [r for r in v if r[0] != "tag:yaml.org,2002:timestamp"]
    for k, v in ServiceFileLoader.yaml_implicit_resolvers.items()
}


def _cloudformation_tag(loader: yaml.Loader, tag_suffix: str, node: yaml.Node) -> dict[str, Any]:
    """Turn short-form intrinsics (!Ref, !GetAtt, !Sub, ...) into their long form."""
    if isinstance(node, yaml.ScalarNode):
        value: Any = loader.construct_scalar(node)
    elif isinstance(node, yaml.SequenceNode):
        value = loader.construct_sequence(node, deep=True)
    else:
        value = loader.construct_mapping(node, deep=True)

    if tag_suffix == "Ref":
        return {"Ref": value}
    if tag_suffix == "GetAtt" and isinstance(value, str):
        # !GetAtt Resource.Attribute
        value = value.split(".", 1)
    return {f"Fn::{tag_suffix}": value}


ServiceFileLoader.add_multi_constructor("!", _cloudformation_tag)


def is_unresolved(value: Any) -> bool:
    """Check whether a value still contains a Serverless variable."""
    return isinstance(value, str) and bool(VARIABLE_PATTERN.search(value))


def parse_service(text: str) -> ServiceDescription:
    """Parse serverless.yml content into a ServiceDescription."""
    try:
        data = yaml.load(text, Loader=ServiceFileLoader)
    except yaml.YAMLError as e:
        raise ServiceFileError(f"Invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ServiceFileError("Service file must contain a mapping at the top level")

    service = ServiceDescription.from_mapping(data)

    # Variables are resolved by the framework, not here; treat them as unset
    if is_unresolved(service.provider.stage):
        warning(f"Ignoring unresolved provider.stage {service.provider.stage!r}")
        service.provider.stage = DEFAULT_STAGE
    if is_unresolved(service.provider.region):
        warning(f"Ignoring unresolved provider.region {service.provider.region!r}")
        service.provider.region = None

    return service


def load_service_file(path: Path) -> ServiceDescription:
    """Load a ServiceDescription from a serverless.yml file."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ServiceFileError(f"Could not read {path}: {e}") from e
    return parse_service(text)


def render_resources(resources: dict[str, Any], output_format: str = "yaml") -> str:
    """Render a resources block (with its Resources key) as YAML or JSON."""
    if output_format == "json":
        return json.dumps(resources, indent=2) + "\n"
    return yaml.safe_dump(resources, default_flow_style=False, sort_keys=False)
