"""Exceptions raised while generating log forwarding resources."""


class LogForwardingError(Exception):
    """Base class for all log forwarding errors."""


class ConfigError(LogForwardingError):
    """The custom.logForwarding block is not usable."""


class ResourceKeyCollisionError(LogForwardingError):
    """Two functions normalize to the same subscription filter logical ID."""

    def __init__(self, logical_id: str, first: str, second: str):
        super().__init__(
            f"Functions '{first}' and '{second}' both map to logical ID '{logical_id}'"
        )
        self.logical_id = logical_id
        self.first = first
        self.second = second


class ServiceFileError(LogForwardingError):
    """The service description could not be read."""
