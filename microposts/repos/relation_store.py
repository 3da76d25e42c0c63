"""Abstract storage interface for follow and favorite edges."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List


class Relation(Enum):
    """Relations that can be stored as (owner, target) edges."""
    FOLLOWINGS = "followings"   # user -> user
    FAVORITES = "favorites"     # user -> micropost

    def __str__(self) -> str:
        return self.value


class RelationStore(ABC):
    """
    Persistence primitives for many-to-many edges keyed by (owner, target).

    Implementations may be backed by the relational database, an embedded
    key-value store, or an in-memory set. The follow and favorite services
    only talk to this interface.
    """

    @abstractmethod
    def exists(self, owner_id: int, target_id: int, relation: Relation) -> bool:
        """Return True if the edge (owner_id, target_id) is present."""

    @abstractmethod
    def add(self, owner_id: int, target_id: int, relation: Relation) -> None:
        """
        Insert the edge (owner_id, target_id).

        Raises DuplicateEdge when the pair is already present, and
        NotFoundReference when target_id is unknown to the store.
        """

    @abstractmethod
    def remove(self, owner_id: int, target_id: int, relation: Relation) -> int:
        """Delete the edge; return the number of rows removed (0 or 1)."""

    @abstractmethod
    def list_targets(self, owner_id: int, relation: Relation) -> List[int]:
        """Return target ids of owner_id's edges, oldest edge first."""

    @abstractmethod
    def list_owners(self, target_id: int, relation: Relation) -> List[int]:
        """Return owner ids of edges pointing at target_id, oldest edge first."""

    def count_targets(self, owner_id: int, relation: Relation) -> int:
        """Return the number of outgoing edges for owner_id."""
        return len(self.list_targets(owner_id, relation))

    def count_owners(self, target_id: int, relation: Relation) -> int:
        """Return the number of incoming edges for target_id."""
        return len(self.list_owners(target_id, relation))
