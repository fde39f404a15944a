"""Memory categories used to classify captured facts."""

from enum import Enum


class MemoryCategory(Enum):
    """Kind of fact a captured memory records."""
    PREFERENCE = "preference"  # User likes/dislikes, style choices
    FACT = "fact"
    DECISION = "decision"      # Something agreed on or chosen
    ENTITY = "entity"          # People, projects, tools
    OTHER = "other"


MEMORY_CATEGORIES: tuple[str, ...] = tuple(c.value for c in MemoryCategory)
