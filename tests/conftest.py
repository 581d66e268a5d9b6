"""Pytest configuration and fixtures."""

import pytest

from sls_log_forwarding.forwarding.service import FunctionDefinition, ServiceDescription


class StubNaming:
    """Naming collaborator with easily recognizable outputs."""

    def log_group_name(self, function: FunctionDefinition) -> str:
        return f"/logs/{function.name}"

    def log_group_logical_id(self, function_name: str) -> str:
        return f"{function_name}-log-group"

    def normalized_function_name(self, function_name: str) -> str:
        return function_name.upper()

    def lambda_logical_id(self, function_name: str) -> str:
        return f"{function_name}-lambda"


@pytest.fixture
def stub_naming() -> StubNaming:
    """Stub naming collaborator."""
    return StubNaming()


@pytest.fixture
def catalog() -> dict[str, FunctionDefinition]:
    """Two-function catalog in declaration order."""
    return {
        "fnA": FunctionDefinition(key="fnA", name="svc-dev-fnA"),
        "fnB": FunctionDefinition(key="fnB", name="svc-dev-fnB"),
    }


@pytest.fixture
def sample_service() -> ServiceDescription:
    """Service forwarding to an in-service function, limited to prod."""
    return ServiceDescription.from_mapping(
        {
            "service": "orders",
            "provider": {"name": "aws", "stage": "prod", "region": "eu-west-1"},
            "custom": {
                "logForwarding": {
                    "destinationFn": "logShipper",
                    "filterPattern": "ERROR",
                    "stages": ["prod"],
                }
            },
            "functions": {
                "createOrder": {"handler": "handler.create"},
                "logShipper": {"handler": "handler.ship"},
                "get-order": {"handler": "handler.get", "name": "orders-reader"},
            },
        }
    )


@pytest.fixture
def serverless_yml() -> str:
    """A serverless.yml forwarding to an external ARN."""
    return """\
service: billing

provider:
  name: aws
  stage: dev
  region: us-west-2

custom:
  logForwarding:
    destinationARN: arn:aws:lambda:us-west-2:123456789012:function:shipper

functions:
  charge:
    handler: handler.charge
  refund_payment:
    handler: handler.refund

resources:
  Resources:
    InvoiceBucket:
      Type: AWS::S3::Bucket
      Properties:
        BucketName: !Sub "${AWS::StackName}-invoices"
  Outputs:
    InvoiceBucketArn:
      Value: !GetAtt InvoiceBucket.Arn
"""
