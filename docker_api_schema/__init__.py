"""Docker Engine API request/response models."""

import logging

from .core.codec import decode, decode_json, encode, encode_json  # noqa: F401
from .core.exceptions import (  # noqa: F401
    DockerSchemaError,
    PayloadDecodeError,
    PayloadValidationError,
)
from .core.logging_config import LOGGER_NAME
from .models import *  # noqa: F401,F403
from .models import __all__ as _model_names

__version__ = "0.1.0"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

__all__ = [
    "DockerSchemaError",
    "PayloadDecodeError",
    "PayloadValidationError",
    "decode",
    "decode_json",
    "encode",
    "encode_json",
    *_model_names,
]
