"""Repository helpers for (owner, target) join tables."""

import logging
from typing import List

from django.db import IntegrityError, transaction

from microposts.db_accessor import DB_Accessor
from microposts.exceptions import DuplicateEdge, NotFoundReference
from microposts.models import Favorite, Micropost, User, UserFollow
from microposts.repos.relation_store import Relation

logger = logging.getLogger(__name__)


class JoinTableRepo(DB_Accessor):
    """Repository wrapper for a join model with an owner and a target column."""
    relation: Relation
    owner_field = "user"
    target_field: str
    target_model = None

    @property
    def _owner_column(self) -> str:
        return f"{self.owner_field}_id"

    @property
    def _target_column(self) -> str:
        return f"{self.target_field}_id"

    def _edge(self, owner_id, target_id):
        return {self._owner_column: owner_id, self._target_column: target_id}

    def has_edge(self, *, owner_id: int, target_id: int) -> bool:
        """Return True if owner_id has an edge to target_id."""
        return self.exists(**self._edge(owner_id, target_id))

    def add_edge(self, *, owner_id: int, target_id: int):
        """
        Create the edge row.

        The insert runs in its own savepoint so a constraint failure does not
        break the caller's transaction. A failure that leaves the pair present
        was a duplicate insert; anything else is re-raised.
        """
        if not self.target_model.objects.filter(pk=target_id).exists():
            raise NotFoundReference(owner_id, target_id, self.relation)
        try:
            with transaction.atomic():
                return self.create(**self._edge(owner_id, target_id))
        except IntegrityError:
            if self.has_edge(owner_id=owner_id, target_id=target_id):
                logger.warning(
                    "Duplicate %s edge (%s, %s) rejected by unique constraint",
                    self.relation, owner_id, target_id,
                )
                raise DuplicateEdge(owner_id, target_id, self.relation)
            raise

    def remove_edge(self, *, owner_id: int, target_id: int) -> int:
        """Remove the edge row; return count deleted."""
        return self.delete(**self._edge(owner_id, target_id))

    def target_ids(self, *, owner_id: int) -> List[int]:
        """Return target ids for owner_id, oldest edge first."""
        return self.values(self._target_column, order_by=("created_at", "id"), **{self._owner_column: owner_id})

    def owner_ids(self, *, target_id: int) -> List[int]:
        """Return owner ids pointing at target_id, oldest edge first."""
        return self.values(self._owner_column, order_by=("created_at", "id"), **{self._target_column: target_id})

    def target_count(self, *, owner_id: int) -> int:
        """Return the number of edges owned by owner_id."""
        return self.count(**{self._owner_column: owner_id})

    def owner_count(self, *, target_id: int) -> int:
        """Return the number of edges pointing at target_id."""
        return self.count(**{self._target_column: target_id})


class UserFollowRepo(JoinTableRepo):
    """Follow edges stored in ``user_follow(user_id, follow_id)``."""
    relation = Relation.FOLLOWINGS
    target_field = "follow"
    target_model = User

    def __init__(self) -> None:
        """Initialise with the UserFollow model."""
        super().__init__(UserFollow)


class FavoriteRepo(JoinTableRepo):
    """Favorite edges stored in ``favorites(user_id, micropost_id)``."""
    relation = Relation.FAVORITES
    target_field = "micropost"
    target_model = Micropost

    def __init__(self) -> None:
        """Initialise with the Favorite model."""
        super().__init__(Favorite)
