"""Favorite microposts of a user."""

import logging
from typing import Optional, Set

from microposts.exceptions import DuplicateEdge
from microposts.repos.django_store import DjangoRelationStore
from microposts.repos.relation_store import Relation, RelationStore

logger = logging.getLogger(__name__)


class FavoriteSet:
    """Idempotent favorite/unfavorite of microposts on top of a RelationStore."""

    relation = Relation.FAVORITES

    def __init__(self, store: Optional[RelationStore] = None) -> None:
        self.store = store or DjangoRelationStore()

    def is_favorite(self, user_id: int, micropost_id: int) -> bool:
        """Return True if user_id has favorited micropost_id."""
        return self.store.exists(user_id, micropost_id, self.relation)

    def favorite(self, user_id: int, micropost_id: int) -> bool:
        """Add micropost_id to the user's favorites; False if already there."""
        if self.is_favorite(user_id, micropost_id):
            logger.debug("favorite(%s, %s) is a no-op", user_id, micropost_id)
            return False

        try:
            self.store.add(user_id, micropost_id, self.relation)
        except DuplicateEdge:
            logger.info("favorite(%s, %s) lost a concurrent insert", user_id, micropost_id)
            return False
        logger.info("User %s favorited micropost %s", user_id, micropost_id)
        return True

    def unfavorite(self, user_id: int, micropost_id: int) -> bool:
        """Remove micropost_id from the user's favorites; False if not there."""
        if not self.is_favorite(user_id, micropost_id):
            logger.debug("unfavorite(%s, %s) is a no-op", user_id, micropost_id)
            return False

        if not self.store.remove(user_id, micropost_id, self.relation):
            logger.info("unfavorite(%s, %s) found the edge already removed", user_id, micropost_id)
            return False
        logger.info("User %s unfavorited micropost %s", user_id, micropost_id)
        return True

    def favorite_ids(self, user_id: int) -> Set[int]:
        """Return ids of the microposts user_id has favorited."""
        return set(self.store.list_targets(user_id, self.relation))

    def favorites_count(self, user_id: int) -> int:
        return self.store.count_targets(user_id, self.relation)
