"""Error taxonomy public surface.

Re-exports the one-class-per-file implementations under
``modelbridge.base.errors_parts`` so callers have one stable import path.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .errors_parts.base_error import ModelBridgeError
from .errors_parts.classification import classify_exception, error_kind, is_error_kind
from .errors_parts.configuration_error import ConfigurationError
from .errors_parts.error_code import ErrorCode
from .errors_parts.error_kind import ErrorKind
from .errors_parts.invalid_prompt_error import InvalidPromptError
from .errors_parts.provider_error import ProviderError
from .errors_parts.schema_validation_error import SchemaValidationError
from .errors_parts.tool_invocation_error import ToolInvocationError

__all__ = [
    "ErrorKind",
    "ErrorCode",
    "ModelBridgeError",
    "InvalidPromptError",
    "ConfigurationError",
    "ToolInvocationError",
    "SchemaValidationError",
    "CancelledError",
    "ProviderError",
    "classify_exception",
    "error_kind",
    "is_error_kind",
]
