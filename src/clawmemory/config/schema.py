"""Memory config validation and normalization.

``parse_memory_config`` turns an untrusted mapping (usually loaded from
YAML/JSON) into a frozen ``MemoryConfig``. It either returns a complete
config or raises a ``ConfigError``; nothing partial escapes.

Raw input keys are camelCase:

    embedding:
      provider: openai            # anything but "local" means openai
      apiKey: ${OPENAI_API_KEY}   # required for openai
      model: text-embedding-3-small
      modelPath: /path/to/model.gguf
    dbPath: ~/.openclaw/memory/lancedb
    autoCapture: true             # only a literal false turns it off
    autoRecall: true
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Literal, Mapping, Optional, Union

import yaml

from .dimensions import DEFAULT_LOCAL_MODEL, DEFAULT_MODEL, vector_dims_for_model
from .env import resolve_env_vars
from .errors import (
    InvalidRootError,
    MissingApiKeyError,
    MissingEmbeddingError,
    UnknownKeyError,
)
from .hints import UI_HINTS
from .paths import resolve_default_db_path

logger = logging.getLogger(__name__)

ROOT_KEYS = ("embedding", "dbPath", "autoCapture", "autoRecall")
EMBEDDING_KEYS = ("provider", "apiKey", "model", "modelPath")

CONFIG_ENV_VAR = "CLAWMEMORY_CONFIG"
DEFAULT_CONFIG_PATH = "~/.openclaw/memory/config.yaml"

EmbeddingProvider = Literal["openai", "local"]


@dataclass(frozen=True)
class EmbeddingConfig:
    """Resolved embedding settings.

    Attributes:
        provider: "openai" or "local"
        model: Registered model identifier
        model_path: Optional path to a local GGUF file
        api_key: API key with ``${NAME}`` placeholders already expanded
    """
    provider: EmbeddingProvider
    model: str
    model_path: Optional[str] = None
    api_key: Optional[str] = None

    def __repr__(self) -> str:
        """Safe repr that masks API key to prevent accidental logging."""
        key = "***" if self.api_key is not None else None
        return (
            f"EmbeddingConfig(provider={self.provider!r}, model={self.model!r}, "
            f"model_path={self.model_path!r}, api_key={key})"
        )


@dataclass(frozen=True)
class MemoryConfig:
    """Validated memory plugin configuration.

    Attributes:
        embedding: Embedding provider settings
        db_path: LanceDB directory (configured or discovered, never empty)
        auto_capture: Capture important information from conversations
        auto_recall: Inject relevant memories into context
    """
    embedding: EmbeddingConfig
    db_path: str
    auto_capture: bool = True
    auto_recall: bool = True

    @property
    def vector_dims(self) -> int:
        """Vector width of the configured embedding model."""
        return vector_dims_for_model(self.embedding.model)

    def to_dict(self) -> dict:
        """Serialize back to the raw (camelCase) input shape."""
        embedding: dict = {
            "provider": self.embedding.provider,
            "model": self.embedding.model,
        }
        if self.embedding.model_path is not None:
            embedding["modelPath"] = self.embedding.model_path
        if self.embedding.api_key is not None:
            embedding["apiKey"] = self.embedding.api_key
        return {
            "embedding": embedding,
            "dbPath": self.db_path,
            "autoCapture": self.auto_capture,
            "autoRecall": self.auto_recall,
        }

    @classmethod
    def from_dict(cls, data: Any, **kwargs) -> "MemoryConfig":
        """Create configuration from a raw mapping (see ``parse_memory_config``)."""
        return parse_memory_config(data, **kwargs)

    @classmethod
    def from_file(cls, path: Union[str, Path], **kwargs) -> "MemoryConfig":
        """Load configuration from a YAML or JSON file.

        ``.json`` files go through ``json``; anything else through PyYAML.
        """
        path = Path(path).expanduser()
        with open(path) as f:
            if path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
        return parse_memory_config(data, **kwargs)

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        **kwargs,
    ) -> "MemoryConfig":
        """Load configuration from the file named by ``CLAWMEMORY_CONFIG``."""
        env = os.environ if environ is None else environ
        config_path = env.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
        return cls.from_file(config_path, environ=environ, **kwargs)


def _assert_allowed_keys(value: Mapping, allowed: Iterable[str], label: str) -> None:
    unknown = [str(key) for key in value if key not in allowed]
    if unknown:
        raise UnknownKeyError(label, unknown)


def _resolve_embedding_model(embedding: Mapping, provider: str) -> str:
    model = embedding.get("model")
    if not isinstance(model, str):
        model = DEFAULT_LOCAL_MODEL if provider == "local" else DEFAULT_MODEL
    # Defaults are checked too: a bad default is a config bug, not a warning
    vector_dims_for_model(model)
    return model


def parse_memory_config(
    raw: Any,
    *,
    environ: Optional[Mapping[str, str]] = None,
    home: Optional[Union[str, Path]] = None,
    exists: Optional[Callable[[str], bool]] = None,
) -> MemoryConfig:
    """Validate ``raw`` and return a normalized ``MemoryConfig``.

    Args:
        raw: Untrusted config value.
        environ: Variable lookup for ``${NAME}`` in the API key
            (defaults to ``os.environ``).
        home: Home directory used for default path discovery.
        exists: Existence check used for default path discovery.

    Raises:
        InvalidRootError: ``raw`` is not a mapping.
        UnknownKeyError: A section has keys outside its allowlist.
        MissingEmbeddingError: ``embedding`` is absent or not a mapping.
        MissingApiKeyError: openai provider without a string ``apiKey``.
        UnsupportedModelError: The model has no registered dimension.
        MissingEnvVarError: A placeholder names an unset/empty variable.
    """
    if not isinstance(raw, Mapping):
        raise InvalidRootError()
    _assert_allowed_keys(raw, ROOT_KEYS, "memory config")

    embedding = raw.get("embedding")
    if not isinstance(embedding, Mapping):
        raise MissingEmbeddingError()
    _assert_allowed_keys(embedding, EMBEDDING_KEYS, "embedding config")

    provider: EmbeddingProvider = "local" if embedding.get("provider") == "local" else "openai"

    api_key = embedding.get("apiKey")
    if provider == "openai" and not isinstance(api_key, str):
        raise MissingApiKeyError(provider)

    model = _resolve_embedding_model(embedding, provider)

    resolved_key = resolve_env_vars(api_key, environ) if isinstance(api_key, str) else None

    model_path = embedding.get("modelPath")

    db_path = raw.get("dbPath")
    if not isinstance(db_path, str) or not db_path:
        db_path = resolve_default_db_path(home=home, exists=exists)

    config = MemoryConfig(
        embedding=EmbeddingConfig(
            provider=provider,
            model=model,
            model_path=model_path if isinstance(model_path, str) else None,
            api_key=resolved_key,
        ),
        db_path=db_path,
        auto_capture=raw.get("autoCapture") is not False,
        auto_recall=raw.get("autoRecall") is not False,
    )
    logger.info(
        f"Resolved memory config (provider: {provider}, model: {model}, db: {db_path})"
    )
    return config


class MemoryConfigSchema:
    """Parser plus the UI hint metadata that ships with it."""

    ui_hints = UI_HINTS

    def parse(self, value: Any, **kwargs) -> MemoryConfig:
        """Validate ``value``; see ``parse_memory_config``."""
        return parse_memory_config(value, **kwargs)


memory_config_schema = MemoryConfigSchema()
