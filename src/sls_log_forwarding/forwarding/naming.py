"""Logical ID and log group naming."""

from typing import Protocol

from sls_log_forwarding.forwarding.service import FunctionDefinition


class NamingProvider(Protocol):
    """Platform-specific identifiers derived from function names."""

    def log_group_name(self, function: FunctionDefinition) -> str: ...

    def log_group_logical_id(self, function_name: str) -> str: ...

    def normalized_function_name(self, function_name: str) -> str: ...

    def lambda_logical_id(self, function_name: str) -> str: ...


class AwsNaming:
    """Naming rules used by the Serverless framework's AWS provider."""

    def normalize_name(self, name: str) -> str:
        return name[:1].upper() + name[1:]

    def normalized_function_name(self, function_name: str) -> str:
        """
        Normalize a function key for use in logical IDs.

        Examples:
        - hello -> Hello
        - my-func -> MyDashfunc
        - my_func -> MyUnderscorefunc
        """
        return self.normalize_name(
            function_name.replace("-", "Dash").replace("_", "Underscore")
        )

    def log_group_logical_id(self, function_name: str) -> str:
        return f"{self.normalized_function_name(function_name)}LogGroup"

    def lambda_logical_id(self, function_name: str) -> str:
        return f"{self.normalized_function_name(function_name)}LambdaFunction"

    def log_group_name(self, function: FunctionDefinition) -> str:
        return f"/aws/lambda/{function.name}"
