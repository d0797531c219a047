"""Core exceptions for Docker API schema operations."""

from typing import Any


class DockerSchemaError(Exception):
    """Base exception for Docker API schema operations."""


class ConfigurationError(DockerSchemaError):
    """Configuration validation or loading failed."""


class UnknownModelError(DockerSchemaError):
    """No model is registered under the requested name."""


class PayloadDecodeError(DockerSchemaError):
    """Payload could not be read or parsed."""


class PayloadValidationError(DockerSchemaError):
    """Payload does not match the model's shape."""

    def __init__(self, model_name: str, errors: list[dict[str, Any]]):
        self.model_name = model_name
        self.errors = errors
        super().__init__(f"Invalid {model_name} payload: {len(errors)} validation error(s)")
