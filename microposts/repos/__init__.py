from .relation_store import Relation, RelationStore
from .memory_store import InMemoryRelationStore

__all__ = ["Relation", "RelationStore", "InMemoryRelationStore"]
