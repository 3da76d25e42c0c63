from .follow_graph import FollowGraph
from .favorite_set import FavoriteSet
from .feed import FeedService
from .relationship_counts import RelationshipCounts, RelationshipCountsService

__all__ = [
    "FollowGraph",
    "FavoriteSet",
    "FeedService",
    "RelationshipCounts",
    "RelationshipCountsService",
]
