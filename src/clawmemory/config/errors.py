"""Configuration errors.

Every failure raised while parsing a memory config derives from
``ConfigError`` so callers can catch the whole family at once. It is a
``ValueError`` subclass, matching how the rest of the config layer reports
bad values.
"""

from typing import Iterable


class ConfigError(ValueError):
    """Base class for memory config validation failures."""


class InvalidRootError(ConfigError):
    """Raised when the config is missing or is not a mapping."""

    def __init__(self, message: str = "memory config required"):
        super().__init__(message)


class UnknownKeyError(ConfigError):
    """Raised when a config section contains keys outside its allowlist.

    Attributes:
        label: Human-readable name of the offending section.
        keys: Every unrecognized key, in input order.
    """

    def __init__(self, label: str, keys: Iterable[str]):
        self.label = label
        self.keys = list(keys)
        super().__init__(f"{label} has unknown keys: {', '.join(self.keys)}")


class MissingEmbeddingError(ConfigError):
    """Raised when the ``embedding`` section is absent."""

    def __init__(self, message: str = "embedding config is required"):
        super().__init__(message)


class MissingApiKeyError(ConfigError):
    """Raised when the openai provider has no string ``apiKey``."""

    def __init__(self, provider: str = "openai"):
        self.provider = provider
        super().__init__(f"embedding.apiKey is required for {provider} provider")


class UnsupportedModelError(ConfigError):
    """Raised when an embedding model has no registered vector dimension."""

    def __init__(self, model: str):
        self.model = model
        super().__init__(f"Unsupported embedding model: {model}")


class MissingEnvVarError(ConfigError):
    """Raised when a ``${NAME}`` placeholder names an unset or empty variable."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Environment variable {name} is not set")
