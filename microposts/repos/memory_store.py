"""In-memory RelationStore, used in unit tests and as a reference backend."""

from typing import Dict, List, Tuple

from microposts.exceptions import DuplicateEdge
from microposts.repos.relation_store import Relation, RelationStore


class InMemoryRelationStore(RelationStore):
    """Keep edges as insertion-ordered (owner, target) pairs per relation."""

    def __init__(self) -> None:
        self._edges: Dict[Relation, Dict[Tuple[int, int], None]] = {
            relation: {} for relation in Relation
        }

    def exists(self, owner_id: int, target_id: int, relation: Relation) -> bool:
        return (owner_id, target_id) in self._edges[relation]

    def add(self, owner_id: int, target_id: int, relation: Relation) -> None:
        if self.exists(owner_id, target_id, relation):
            raise DuplicateEdge(owner_id, target_id, relation)
        self._edges[relation][(owner_id, target_id)] = None

    def remove(self, owner_id: int, target_id: int, relation: Relation) -> int:
        edges = self._edges[relation]
        if (owner_id, target_id) not in edges:
            return 0
        del edges[(owner_id, target_id)]
        return 1

    def list_targets(self, owner_id: int, relation: Relation) -> List[int]:
        return [target for owner, target in self._edges[relation] if owner == owner_id]

    def list_owners(self, target_id: int, relation: Relation) -> List[int]:
        return [owner for owner, target in self._edges[relation] if target == target_id]
