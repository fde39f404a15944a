"""Presentation hints for rendering a memory config form.

Static data keyed by field path. Nothing in the validator reads it.
"""

from types import MappingProxyType

from .dimensions import DEFAULT_MODEL

_HINTS: dict[str, dict] = {
    "embedding.provider": {
        "label": "Provider",
        "options": ["openai", "local"],
        "default": "openai",
    },
    "embedding.apiKey": {
        "label": "OpenAI API Key",
        "sensitive": True,
        "placeholder": "sk-proj-...",
        "help": "API key for OpenAI embeddings (required for openai provider)",
    },
    "embedding.model": {
        "label": "Embedding Model",
        "placeholder": DEFAULT_MODEL,
        "help": "Model name (e.g. text-embedding-3-small or bge-base...)",
    },
    "embedding.modelPath": {
        "label": "Local Model Path",
        "placeholder": "/path/to/model.gguf",
        "help": "Path to GGUF model file (required for local provider if not using default)",
        "advanced": True,
    },
    "dbPath": {
        "label": "Database Path",
        "placeholder": "~/.openclaw/memory/lancedb",
        "advanced": True,
    },
    "autoCapture": {
        "label": "Auto-Capture",
        "help": "Automatically capture important information from conversations",
    },
    "autoRecall": {
        "label": "Auto-Recall",
        "help": "Automatically inject relevant memories into context",
    },
}

# Read-only view, shared process-wide
UI_HINTS = MappingProxyType({
    path: MappingProxyType(hint) for path, hint in _HINTS.items()
})
