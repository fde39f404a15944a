"""Memory plugin configuration.

Validates a raw config mapping into a frozen ``MemoryConfig``:
- Strict key allowlists per section
- Provider-specific model defaults
- Model → vector dimension checks
- ``${NAME}`` expansion for the API key
- Default database path discovery
"""

from .dimensions import (
    DEFAULT_LOCAL_MODEL,
    DEFAULT_MODEL,
    EMBEDDING_DIMENSIONS,
    supported_models,
    vector_dims_for_model,
)
from .env import resolve_env_vars
from .errors import (
    ConfigError,
    InvalidRootError,
    MissingApiKeyError,
    MissingEmbeddingError,
    MissingEnvVarError,
    UnknownKeyError,
    UnsupportedModelError,
)
from .hints import UI_HINTS
from .paths import LEGACY_STATE_DIRS, resolve_default_db_path
from .schema import (
    EmbeddingConfig,
    MemoryConfig,
    MemoryConfigSchema,
    memory_config_schema,
    parse_memory_config,
)

__all__ = [
    "DEFAULT_LOCAL_MODEL",
    "DEFAULT_MODEL",
    "EMBEDDING_DIMENSIONS",
    "LEGACY_STATE_DIRS",
    "UI_HINTS",
    "ConfigError",
    "EmbeddingConfig",
    "InvalidRootError",
    "MemoryConfig",
    "MemoryConfigSchema",
    "MissingApiKeyError",
    "MissingEmbeddingError",
    "MissingEnvVarError",
    "UnknownKeyError",
    "UnsupportedModelError",
    "memory_config_schema",
    "parse_memory_config",
    "resolve_default_db_path",
    "resolve_env_vars",
    "supported_models",
    "vector_dims_for_model",
]
