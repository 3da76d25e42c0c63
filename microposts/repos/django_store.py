"""RelationStore backed by the Django ORM join tables."""

from typing import Dict, List, Optional

from microposts.repos.join_table_repo import FavoriteRepo, JoinTableRepo, UserFollowRepo
from microposts.repos.relation_store import Relation, RelationStore


class DjangoRelationStore(RelationStore):
    """Dispatch each relation to the repository for its join table."""

    def __init__(self, repos: Optional[Dict[Relation, JoinTableRepo]] = None) -> None:
        self.repos = repos or {
            Relation.FOLLOWINGS: UserFollowRepo(),
            Relation.FAVORITES: FavoriteRepo(),
        }

    def _repo(self, relation: Relation) -> JoinTableRepo:
        return self.repos[relation]

    def exists(self, owner_id: int, target_id: int, relation: Relation) -> bool:
        return self._repo(relation).has_edge(owner_id=owner_id, target_id=target_id)

    def add(self, owner_id: int, target_id: int, relation: Relation) -> None:
        self._repo(relation).add_edge(owner_id=owner_id, target_id=target_id)

    def remove(self, owner_id: int, target_id: int, relation: Relation) -> int:
        return self._repo(relation).remove_edge(owner_id=owner_id, target_id=target_id)

    def list_targets(self, owner_id: int, relation: Relation) -> List[int]:
        return self._repo(relation).target_ids(owner_id=owner_id)

    def list_owners(self, target_id: int, relation: Relation) -> List[int]:
        return self._repo(relation).owner_ids(target_id=target_id)

    def count_targets(self, owner_id: int, relation: Relation) -> int:
        return self._repo(relation).target_count(owner_id=owner_id)

    def count_owners(self, target_id: int, relation: Relation) -> int:
        return self._repo(relation).owner_count(target_id=target_id)
