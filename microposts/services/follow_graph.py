"""Directed follow edges between users and the author set of a user's feed."""

import logging
from typing import Optional, Set

from microposts.exceptions import DuplicateEdge
from microposts.repos.django_store import DjangoRelationStore
from microposts.repos.relation_store import Relation, RelationStore

logger = logging.getLogger(__name__)


class FollowGraph:
    """
    Idempotent follow/unfollow on top of a RelationStore.

    Every operation takes the acting user's id explicitly. Toggles return
    True when they changed state and False when the call was a no-op;
    a self-follow is never created and never removed.
    """

    relation = Relation.FOLLOWINGS

    def __init__(self, store: Optional[RelationStore] = None) -> None:
        self.store = store or DjangoRelationStore()

    def is_following(self, actor_id: int, target_id: int) -> bool:
        """Return True if actor_id follows target_id."""
        return self.store.exists(actor_id, target_id, self.relation)

    def follow(self, actor_id: int, target_id: int) -> bool:
        """Follow target_id; False if already following or target is the actor."""
        exists = self.is_following(actor_id, target_id)
        its_me = actor_id == target_id

        if exists or its_me:
            logger.debug("follow(%s, %s) is a no-op", actor_id, target_id)
            return False

        try:
            self.store.add(actor_id, target_id, self.relation)
        except DuplicateEdge:
            logger.info("follow(%s, %s) lost a concurrent insert", actor_id, target_id)
            return False
        logger.info("User %s followed user %s", actor_id, target_id)
        return True

    def unfollow(self, actor_id: int, target_id: int) -> bool:
        """Unfollow target_id; False if not following or target is the actor."""
        exists = self.is_following(actor_id, target_id)
        its_me = actor_id == target_id

        if not exists or its_me:
            logger.debug("unfollow(%s, %s) is a no-op", actor_id, target_id)
            return False

        if not self.store.remove(actor_id, target_id, self.relation):
            logger.info("unfollow(%s, %s) found the edge already removed", actor_id, target_id)
            return False
        logger.info("User %s unfollowed user %s", actor_id, target_id)
        return True

    def following_ids(self, actor_id: int) -> Set[int]:
        """Return ids of the users actor_id follows."""
        return set(self.store.list_targets(actor_id, self.relation))

    def follower_ids(self, user_id: int) -> Set[int]:
        """Return ids of the users following user_id."""
        return set(self.store.list_owners(user_id, self.relation))

    def feed_author_ids(self, actor_id: int) -> Set[int]:
        """Return the authors whose posts appear in actor_id's feed, self included."""
        author_ids = self.following_ids(actor_id)
        author_ids.add(actor_id)
        return author_ids

    def followings_count(self, user_id: int) -> int:
        return self.store.count_targets(user_id, self.relation)

    def followers_count(self, user_id: int) -> int:
        return self.store.count_owners(user_id, self.relation)
