"""Built-in defaults for the client layer.

These are the bottom layer of the configuration merge performed by
``modelbridge.config.get_settings``.
"""

DEFAULT_OBJECT_MODE = "json"

# Appended to the caller's system text in JSON structured-output mode,
# followed by the serialized schema.
SCHEMA_INSTRUCTION = "\n\nYou must respond with valid JSON matching this schema:\n"

# Tool-mode description when the caller supplies none; formatted with the type name.
OBJECT_TOOL_DESCRIPTION = "Generated {type_name} object"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_JSON_LOGS = True

DEFAULT_CACHE_TTL_SECONDS = 3600.0
DEFAULT_CACHE_MAX_ENTRIES = 1024
CACHE_KEY_PREFIX = "modelbridge:cache:"

DEFAULT_ID_PREFIX = "aitxt"
DEFAULT_ID_SIZE = 24

SPECIFICATION_VERSION = "v3"
