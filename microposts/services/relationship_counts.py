"""Counts shown in a user's profile summary."""

from dataclasses import dataclass
from typing import Optional

from microposts.models import Micropost
from .follow_graph import FollowGraph
from .favorite_set import FavoriteSet


@dataclass(frozen=True)
class RelationshipCounts:
    microposts: int
    followings: int
    followers: int
    favorites: int


class RelationshipCountsService:
    """Load micropost, following, follower and favorite counts for a user."""

    def __init__(
        self,
        *,
        follow_graph: Optional[FollowGraph] = None,
        favorite_set: Optional[FavoriteSet] = None,
    ) -> None:
        self.follow_graph = follow_graph or FollowGraph()
        self.favorite_set = favorite_set or FavoriteSet()

    def for_user(self, user_id: int) -> RelationshipCounts:
        return RelationshipCounts(
            microposts=Micropost.objects.filter(user_id=user_id).count(),
            followings=self.follow_graph.followings_count(user_id),
            followers=self.follow_graph.followers_count(user_id),
            favorites=self.favorite_set.favorites_count(user_id),
        )
