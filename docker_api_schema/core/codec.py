"""Encoding and decoding of Engine API payloads."""

import json
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from ..models import (
    BindOptions,
    ContainerCreate,
    ContainerCreateResponse,
    DriverConfig,
    EndpointIPAMConfig,
    EndpointSettings,
    HealthConfig,
    HostConfig,
    HostMount,
    ListContainer,
    Mount,
    Network,
    NetworkSettings,
    Port,
    PortBinding,
    TmpfsOptions,
    VolumeOptions,
)
from . import settings as settings_module
from .exceptions import PayloadDecodeError, PayloadValidationError, UnknownModelError
from .logging_config import get_logger

logger = get_logger()

ModelT = TypeVar("ModelT", bound=BaseModel)

MODELS: dict[str, type[BaseModel]] = {
    model.__name__: model
    for model in (
        BindOptions,
        ContainerCreate,
        ContainerCreateResponse,
        DriverConfig,
        EndpointIPAMConfig,
        EndpointSettings,
        HealthConfig,
        HostConfig,
        HostMount,
        ListContainer,
        Mount,
        Network,
        NetworkSettings,
        Port,
        PortBinding,
        TmpfsOptions,
        VolumeOptions,
    )
}

PAYLOAD_SUFFIXES = {".json", ".yml", ".yaml"}


def resolve_model(name: str) -> type[BaseModel]:
    """Look up a registered model by name, ignoring case."""
    wanted = name.strip().lower()
    for model_name, model in MODELS.items():
        if model_name.lower() == wanted:
            return model
    raise UnknownModelError(f"Unknown model '{name}'. Available: {', '.join(sorted(MODELS))}")


def encode(model: BaseModel) -> Any:
    """Convert a model to JSON-compatible data using wire names and set fields only."""
    return model.model_dump(mode="json", by_alias=True, exclude_unset=True)


def encode_json(model: BaseModel, indent: int | None = None) -> str:
    return model.model_dump_json(by_alias=True, exclude_unset=True, indent=indent)


def _strict(strict: bool | None) -> bool:
    if strict is None:
        return settings_module.settings.strict_validation
    return strict


def _invalid(model_cls: type[BaseModel], error: ValidationError) -> PayloadValidationError:
    errors = error.errors(include_url=False)
    logger.warning(
        "Payload validation failed",
        model=model_cls.__name__,
        error_count=len(errors),
        first_error=errors[0]["msg"] if errors else None,
    )
    return PayloadValidationError(model_cls.__name__, errors)


def decode(model_cls: type[ModelT], payload: Any, strict: bool | None = None) -> ModelT:
    """Validate already-parsed data (normally a mapping) against ``model_cls``.

    Strict decoding is done through the JSON validator so that enum fields
    still accept their string values while scalar coercion is disabled.
    """
    if isinstance(payload, BaseModel):
        payload = encode(payload)
    try:
        if _strict(strict):
            return model_cls.model_validate_json(json.dumps(payload, default=str), strict=True)
        return model_cls.model_validate(payload)
    except ValidationError as e:
        raise _invalid(model_cls, e) from e


def decode_json(model_cls: type[ModelT], data: str | bytes, strict: bool | None = None) -> ModelT:
    """Validate a JSON document against ``model_cls``."""
    try:
        return model_cls.model_validate_json(data, strict=_strict(strict))
    except ValidationError as e:
        raise _invalid(model_cls, e) from e


def load_payload(path: Path | str) -> Any:
    """Read a JSON or YAML payload file."""
    path = Path(path)
    if path.suffix.lower() not in PAYLOAD_SUFFIXES:
        raise PayloadDecodeError(
            f"Unsupported payload file type '{path.suffix}' (expected .json, .yml or .yaml)"
        )

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise PayloadDecodeError(f"Cannot read payload file {path}: {e}") from e

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise PayloadDecodeError(f"Cannot parse payload file {path}: {e}") from e

    logger.debug("Payload loaded", path=str(path), kind=type(data).__name__)
    return data


def json_schema(model_cls: type[BaseModel]) -> dict[str, Any]:
    """JSON Schema of ``model_cls`` using wire names."""
    return model_cls.model_json_schema(by_alias=True)
