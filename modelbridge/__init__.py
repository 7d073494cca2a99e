"""modelbridge package

Provider-agnostic client layer for language models.

Purpose:
    Give applications one calling convention for text generation, streaming
    and structured (typed) output, independent of which vendor adapter sits
    underneath. Adapters implement ``LanguageModel`` and are resolved through
    an explicit ``ProviderRegistry``; cross-cutting behavior is added with
    middleware.

Public API (re-exported):
    - Facade: ``generate_text``, ``stream_text``, ``generate_object``,
      ``stream_object``
    - Options: ``GenerateTextOptions``, ``GenerateObjectOptions``,
      ``StreamObjectOptions``
    - Registry: ``ProviderRegistry``, ``CallableProviderFactory``
    - Middleware: ``LanguageModelMiddleware``, ``MiddlewareLanguageModel``,
      ``with_middleware``, ``LoggingMiddleware``, ``CachingMiddleware``
    - Errors: ``ErrorKind`` and the exception types
    - Cancellation: ``CancellationToken``, ``CancelledError``
"""

from .base.cancellation import CancellationToken, CancelledError
from .base.dto import GenerateObjectOptions, GenerateTextOptions, StreamObjectOptions, ToolResult
from .base.errors import (
    ConfigurationError,
    ErrorCode,
    ErrorKind,
    InvalidPromptError,
    ModelBridgeError,
    ProviderError,
    SchemaValidationError,
    ToolInvocationError,
    error_kind,
    is_error_kind,
)
from .base.interfaces import EmbeddingModel, LanguageModel, ProviderFactory, ToolExecutor
from .base.models import (
    ChunkType,
    FinishReason,
    GenerateObjectResult,
    GenerateResult,
    LanguageModelCallOptions,
    Message,
    ObjectChunk,
    Role,
    StreamChunk,
    ToolCall,
    ToolDefinition,
    Usage,
)
from .base.utils.ids import generate_id, generate_simple_id
from .client import generate_object, generate_text, stream_object, stream_text
from .middleware import (
    CachingMiddleware,
    LanguageModelMiddleware,
    LoggingMiddleware,
    MiddlewareLanguageModel,
    with_middleware,
)
from .registry import CallableProviderFactory, ProviderRegistry

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "generate_text",
    "stream_text",
    "generate_object",
    "stream_object",
    "GenerateTextOptions",
    "GenerateObjectOptions",
    "StreamObjectOptions",
    "ToolResult",
    "ProviderRegistry",
    "CallableProviderFactory",
    "LanguageModelMiddleware",
    "MiddlewareLanguageModel",
    "with_middleware",
    "LoggingMiddleware",
    "CachingMiddleware",
    "LanguageModel",
    "EmbeddingModel",
    "ProviderFactory",
    "ToolExecutor",
    "Role",
    "Message",
    "ToolDefinition",
    "ToolCall",
    "Usage",
    "FinishReason",
    "LanguageModelCallOptions",
    "GenerateResult",
    "ChunkType",
    "StreamChunk",
    "GenerateObjectResult",
    "ObjectChunk",
    "ErrorKind",
    "ErrorCode",
    "ModelBridgeError",
    "InvalidPromptError",
    "ConfigurationError",
    "ToolInvocationError",
    "SchemaValidationError",
    "ProviderError",
    "error_kind",
    "is_error_kind",
    "CancellationToken",
    "CancelledError",
    "generate_id",
    "generate_simple_id",
]
