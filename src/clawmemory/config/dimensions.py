"""Embedding model → vector dimension registry.

The storage layer fixes its vector column width when the table is created,
so only models with a known output width are accepted.
"""

from types import MappingProxyType

from .errors import UnsupportedModelError

DEFAULT_MODEL = "text-embedding-3-small"
DEFAULT_LOCAL_MODEL = "bge-base-en-v1.5-q4_k_m.gguf"

# Model name → output dimensions
EMBEDDING_DIMENSIONS = MappingProxyType({
    "text-embedding-3-small": 1536,
    "text-embedding-3-large": 3072,
    DEFAULT_LOCAL_MODEL: 768,
})


def vector_dims_for_model(model: str) -> int:
    """Return the vector width produced by ``model``.

    Raises:
        UnsupportedModelError: If the model is not registered.
    """
    if model not in EMBEDDING_DIMENSIONS:
        raise UnsupportedModelError(model)
    return EMBEDDING_DIMENSIONS[model]


def supported_models() -> list[str]:
    """List registered model identifiers in registration order."""
    return list(EMBEDDING_DIMENSIONS)
